"""End-to-end tests for the morse-wav and morse-wav-check command-line tools."""
import os

import numpy as np
import pytest
import soundfile as sf

from MCSE import morse_wav
from MCSE.SGM.wav_export import read_wav
from MCSE.SVM import wav_check


@pytest.fixture(autouse=True)
def restore_logging():
    import logging
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_render_message_default_callsign():
    samples, segments, unit = morse_wav.render_message("KD9KJV")
    assert unit == 2646
    assert samples.dtype == np.uint8
    assert len(samples) == sum(s.duration for s in segments)


def test_main_writes_wav(tmp_path, capsys):
    out = str(tmp_path / "cq.wav")
    assert morse_wav.main(["CQ TEST", "-o", out, "--wpm", "25"]) == 0

    info = sf.info(out)
    assert info.channels == 1
    assert info.subtype == "PCM_U8"
    assert info.samplerate == 44100
    assert "Wrote" in capsys.readouterr().out


def test_main_default_message(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert morse_wav.main([]) == 0
    samples, sr = read_wav("output.wav")
    expected, _, _ = morse_wav.render_message("KD9KJV")
    assert sr == 44100
    assert np.array_equal(samples, expected)


def test_main_unknown_character_writes_nothing(tmp_path, capsys):
    out = str(tmp_path / "bad.wav")
    assert morse_wav.main(["HELLO@WORLD", "-o", out]) == 2
    assert not os.path.exists(out)
    assert "'@'" in capsys.readouterr().err


def test_main_zero_wpm_is_config_error(tmp_path, capsys):
    out = str(tmp_path / "zero.wav")
    assert morse_wav.main(["SOS", "-o", out, "--wpm", "0"]) == 2
    assert not os.path.exists(out)
    assert "wpm" in capsys.readouterr().err


def test_main_bad_frequency_is_config_error(tmp_path):
    out = str(tmp_path / "f.wav")
    assert morse_wav.main(["SOS", "-o", out, "--frequency", "30000"]) == 2
    assert not os.path.exists(out)


def test_main_log_file(tmp_path):
    out = str(tmp_path / "e.wav")
    log = tmp_path / "logs" / "morse.log"
    assert morse_wav.main(["E", "-o", out, "--log-file", str(log), "-v"]) == 0
    assert log.exists()
    assert "unit = 2646" in log.read_text(encoding="utf-8")


def test_wav_check_pass(tmp_path, capsys):
    out = str(tmp_path / "msg.wav")
    assert morse_wav.main(["CQ DE KD9KJV", "-o", out]) == 0
    assert wav_check.main([out, "--expect", "cq de kd9kjv"]) == 0
    assert "VERDICT: PASS" in capsys.readouterr().out


def test_wav_check_with_wpm(tmp_path):
    out = str(tmp_path / "msg.wav")
    assert morse_wav.main(["SOS", "-o", out, "-w", "15"]) == 0
    assert wav_check.main([out, "--wpm", "15", "--expect", "SOS", "--dump-segments"]) == 0


def test_wav_check_mismatch_fails(tmp_path, capsys):
    out = str(tmp_path / "msg.wav")
    assert morse_wav.main(["SOS", "-o", out]) == 0
    assert wav_check.main([out, "--expect", "OSO"]) == 1
    assert "VERDICT: FAIL" in capsys.readouterr().out


def test_wav_check_dash_only_needs_wpm(tmp_path, capsys):
    out = str(tmp_path / "t.wav")
    assert morse_wav.main(["T", "-o", out]) == 0
    capsys.readouterr()

    assert wav_check.main([out, "--expect", "T"]) == 1
    report = capsys.readouterr().out
    assert "VERDICT: FAIL" in report
    assert "pass --wpm" in report

    assert wav_check.main([out, "--wpm", "20", "--expect", "T"]) == 0
    assert "VERDICT: PASS" in capsys.readouterr().out


def test_wav_check_estimates_dash_heavy_text(tmp_path, capsys):
    out = str(tmp_path / "mom.wav")
    assert morse_wav.main(["MOM", "-o", out]) == 0
    assert wav_check.main([out, "--expect", "MOM"]) == 0
    assert "Unit              : 2646 samp" in capsys.readouterr().out


def test_wav_check_missing_file(tmp_path):
    assert wav_check.main([str(tmp_path / "nope.wav")]) == 1


def test_wav_check_bad_wpm(tmp_path):
    out = str(tmp_path / "msg.wav")
    assert morse_wav.main(["E", "-o", out]) == 0
    assert wav_check.main([out, "--wpm", "0"]) == 2
