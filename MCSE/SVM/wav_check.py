#!/usr/bin/env python3
# =============================================================================
# wav_check.py — Rendered WAV Verifier
# =============================================================================
#
# Reads a Morse WAV file, decodes it and reports whether it carries the
# expected message.
#
# Usage:
#   python -m MCSE.SVM.wav_check <path_to_wav>
#   python -m MCSE.SVM.wav_check <path_to_wav> --wpm 20
#   python -m MCSE.SVM.wav_check <path_to_wav> --expect "CQ TEST"
#   python -m MCSE.SVM.wav_check <path_to_wav> --dump-segments
#
# Output sections:
#   [1] File info      — sample rate, channels, duration, subtype
#   [2] Decode report  — unit, segment count, symbol errors
#   [3] VERDICT        — PASS / FAIL with reason
#
# =============================================================================

from __future__ import annotations

import argparse
import logging
import os
import sys

import soundfile as sf

from MCSE.errors import MorseError
from MCSE.logging_setup import setup_logging
from MCSE.SGM.scheduler import SignalState
from MCSE.SGM.timing import samples_per_unit
from MCSE.SGM.wav_export import read_wav, WAV_SUBTYPE
from MCSE.SMM.constants import CHANNELS
from MCSE.SVM.morse_decoder import MorseDecoder

logger = logging.getLogger(__name__)

DIVIDER = "=" * 68


def run_check(
    wav_path: str,
    wpm: int | None = None,
    expect: str | None = None,
    dump_segments: bool = False,
) -> bool:
    """
    Decode one WAV file and print a report.
    Returns True if the file is a valid Morse rendering (and matches
    `expect`, when given), False otherwise.
    """
    verdict_pass = True
    reasons: list[str] = []

    # -----------------------------------------------------------------------
    # [1] File info
    # -----------------------------------------------------------------------
    print(f"\n{DIVIDER}")
    print("  Morse WAV Verifier")
    print(DIVIDER)

    if not os.path.exists(wav_path):
        print(f"  [!!] File not found: {wav_path}")
        return False

    info = sf.info(wav_path)
    print(f"  File     : {os.path.basename(wav_path)}")
    print(f"  Rate     : {info.samplerate} Hz")
    print(f"  Channels : {info.channels}")
    print(f"  Duration : {info.frames / info.samplerate:.2f} s  ({info.frames:,} frames)")
    print(f"  Format   : {info.subtype}")

    if info.channels != CHANNELS:
        verdict_pass = False
        reasons.append(f"expected {CHANNELS} channel, got {info.channels}")
    if info.subtype != WAV_SUBTYPE:
        verdict_pass = False
        reasons.append(f"expected subtype {WAV_SUBTYPE}, got {info.subtype}")

    samples, sr = read_wav(wav_path)

    # -----------------------------------------------------------------------
    # [2] Decode
    # -----------------------------------------------------------------------
    print("\n  -- Decode Report --")
    unit = samples_per_unit(sr, wpm) if wpm is not None else None
    result = MorseDecoder(sr, unit).decode(samples)

    has_tone = any(s.state is SignalState.ACTIVE for s in result.segments)

    if result.unit is None and not has_tone:
        verdict_pass = False
        reasons.append("no tone found")
        print("  [FAIL] No tone segments — file is silent")
    elif result.unit is None:
        verdict_pass = False
        reasons.append("cannot estimate the unit from dashes alone, pass --wpm")
        print("  [FAIL] Dots and dashes are indistinguishable — pass --wpm")
    else:
        est_wpm = (sr * 60) / (result.unit * 50)
        print(f"  Unit              : {result.unit} samp  (~{est_wpm:.1f} wpm)")
        print(f"  Segments          : {len(result.segments):,}")
        print(f"  Symbol errors     : {len(result.errors)}")
        print(f"  Decoded text      : {result.text!r}")

        for e in result.errors[:5]:
            print(f"    t={e.sample_pos / sr:.4f}s  code={e.code}  {e.reason}")
        if result.errors:
            verdict_pass = False
            reasons.append(f"{len(result.errors)} undecodable character(s)")

    if expect is not None:
        expected = " ".join(expect.upper().split())
        if result.text == expected:
            print(f"  [PASS] Text matches {expected!r}")
        else:
            verdict_pass = False
            reasons.append(f"decoded {result.text!r}, expected {expected!r}")
            print("  [FAIL] Text mismatch")

    if dump_segments:
        print("\n  -- Segment Dump (first 20) --")
        for seg in result.segments[:20]:
            units = seg.duration / result.unit if result.unit else 0.0
            print(f"  {seg.state.value:<7} {seg.duration:>8}  ({units:.2f} u)")

    # -----------------------------------------------------------------------
    # [3] Verdict
    # -----------------------------------------------------------------------
    print(f"\n{DIVIDER}")
    if verdict_pass:
        print("  VERDICT: PASS")
    else:
        print("  VERDICT: FAIL")
        for r in reasons:
            print(f"    - {r}")
    print(f"{DIVIDER}\n")

    return verdict_pass


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------
def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Decode and verify a Morse WAV file")
    parser.add_argument("wav", help="Path to a mono PCM_U8 WAV file")
    parser.add_argument(
        "--wpm", type=int, default=None,
        help="Words per minute the file was rendered at (default: estimate)",
    )
    parser.add_argument("--expect", default=None, help="Text the file should decode to")
    parser.add_argument(
        "--dump-segments", action="store_true",
        help="Print the first 20 decoded segments",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        ok = run_check(
            wav_path=args.wav,
            wpm=args.wpm,
            expect=args.expect,
            dump_segments=args.dump_segments,
        )
    except MorseError as exc:
        logger.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
