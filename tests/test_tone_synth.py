"""Unit tests for the sine synthesizer and fade envelope (MCSE.SGM.tone_synth)."""
import numpy as np
import pytest

from MCSE.config import make_params
from MCSE.SGM.scheduler import SignalState, TimedSegment, schedule_message, total_samples
from MCSE.SGM.tone_synth import ToneSynthesizer, clamp, fade_ranges

ON = SignalState.ACTIVE
OFF = SignalState.SILENT


@pytest.fixture
def synth():
    return ToneSynthesizer(make_params())


# ── clamp ────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("center,range_,n,expected", [
    (127, 27, 0, 100),
    (127, 27, 155, 154),
    (127, 27, 120, 120),
    (127, 0, 225, 127),
    (128, 10, 128, 128),
])
def test_clamp(center, range_, n, expected):
    assert clamp(center, range_, n) == expected


def test_clamp_elementwise():
    out = clamp(128, np.array([0.0, 10.0, 127.0]), np.array([200.0, 100.0, 60.0]))
    assert np.array_equal(out, [128.0, 118.0, 60.0])


def test_render_tone_stays_inside_fade_ranges(synth):
    tone = synth.render_tone(600)
    limit = fade_ranges(600, synth.params.fade_samples, 127.0)
    deviation = np.abs(tone.astype(np.float64) - 128.0)
    assert np.all(deviation <= limit + 1.0)


# ── fade_ranges ──────────────────────────────────────────────────────────────

def test_fade_ranges_shape():
    r = fade_ranges(1000, 100, 127.0)
    assert len(r) == 1000
    assert r[0] == 0.0
    assert r[-1] == 0.0
    assert r[100] == 127.0
    assert r[500] == 127.0
    assert np.all(np.diff(r[:101]) > 0)
    assert np.all(np.diff(r[-101:]) < 0)


def test_fade_ranges_clamped_to_short_segment():
    r = fade_ranges(10, 256, 127.0)
    assert len(r) == 10
    assert r[0] == 0.0 and r[-1] == 0.0
    assert np.all(r >= 0.0) and np.all(r <= 127.0)


@pytest.mark.parametrize("duration", [0, 1])
def test_fade_ranges_degenerate(duration):
    r = fade_ranges(duration, 256, 127.0)
    assert len(r) == duration


def test_fade_ranges_disabled():
    assert np.all(fade_ranges(50, 0, 100.0) == 100.0)


# ── render ───────────────────────────────────────────────────────────────────

def test_render_length_is_sum_of_durations(synth):
    segments = schedule_message(2646, "KD9KJV")
    out = synth.render(segments)
    assert out.dtype == np.uint8
    assert len(out) == total_samples(segments)


def test_render_empty_schedule(synth):
    out = synth.render([])
    assert out.dtype == np.uint8
    assert len(out) == 0


def test_silent_segment_is_zeros(synth):
    out = synth.render([TimedSegment(OFF, 500)])
    assert np.all(out == 0)


def test_tone_never_touches_zero(synth):
    out = synth.render([TimedSegment(ON, 44100)])
    assert out.min() >= 1
    assert out.max() <= 255


def test_tone_reaches_full_swing(synth):
    tone = synth.render_tone(44100)
    assert tone.max() >= 250
    assert tone.min() <= 6


def test_tone_starts_and_ends_on_center(synth):
    tone = synth.render_tone(2646)
    assert tone[0] == 128
    assert tone[-1] == 128


def test_fade_bounds_edges(synth):
    tone = synth.render_tone(2646).astype(int)
    fade = synth.params.fade_samples
    for i in range(fade):
        limit = 127 * i / fade
        assert abs(tone[i] - 128) <= limit + 1
        assert abs(tone[-1 - i] - 128) <= limit + 1


def test_middle_of_tone_is_unshaped():
    p = make_params(fade_samples=256)
    shaped = ToneSynthesizer(p).render_tone(4000)
    raw = ToneSynthesizer(make_params(fade_samples=0)).render_tone(4000)
    assert np.array_equal(shaped[256:-256], raw[256:-256])
    assert not np.array_equal(shaped[:256], raw[:256])


@pytest.mark.parametrize("duration", [0, 1, 2, 3, 100, 511, 512, 513])
def test_short_segments_do_not_fail(synth, duration):
    out = synth.render([TimedSegment(ON, duration), TimedSegment(OFF, 3)])
    assert len(out) == duration + 3
    if duration:
        assert out[0] == 128
        assert out[duration - 1] == 128


def test_amplitude_scales_swing():
    tone = ToneSynthesizer(make_params(amplitude=0.5)).render_tone(44100).astype(int)
    assert np.max(np.abs(tone - 128)) <= 64


def test_frequency_zero_crossings():
    p = make_params(frequency=600.0, fade_samples=0)
    tone = ToneSynthesizer(p).render_tone(44100).astype(int) - 128
    signs = np.sign(tone)
    signs = signs[signs != 0]
    crossings = np.count_nonzero(np.diff(signs) != 0)
    assert crossings == pytest.approx(1200, abs=4)


def test_segments_rendered_in_order(synth):
    out = synth.render([TimedSegment(OFF, 10), TimedSegment(ON, 20), TimedSegment(OFF, 10)])
    assert np.all(out[:10] == 0)
    assert np.all(out[10:30] >= 1)
    assert np.all(out[30:] == 0)


def test_render_is_deterministic(synth):
    segments = schedule_message(500, "SOS")
    assert np.array_equal(synth.render(segments), ToneSynthesizer(make_params()).render(segments))


def test_cached_tone_is_read_only(synth):
    tone = synth.render_tone(300)
    with pytest.raises(ValueError):
        tone[0] = 0
