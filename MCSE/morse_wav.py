#!/usr/bin/env python3
# =============================================================================
# morse_wav.py — Text → Morse WAV
# =============================================================================
#
# Usage:
#   python -m MCSE.morse_wav                       # "KD9KJV" → output.wav
#   python -m MCSE.morse_wav "CQ TEST" -o cq.wav
#   python -m MCSE.morse_wav "SOS" --wpm 25 --frequency 700
#
# Pipeline (fail fast, no partial output):
#   1. validate configuration   (ConfigError  → exit 2, nothing written)
#   2. schedule the message     (UnknownSymbolError → exit 2, nothing written)
#   3. synthesize the buffer
#   4. write the WAV container
#
# =============================================================================

from __future__ import annotations

import argparse
import logging
import sys

from MCSE.config import make_params
from MCSE.errors import MorseError
from MCSE.logging_setup import setup_logging
from MCSE.SGM.scheduler import schedule_message, segments_duration_seconds
from MCSE.SGM.timing import samples_per_unit
from MCSE.SGM.tone_synth import ToneSynthesizer
from MCSE.SGM.wav_export import write_wav
from MCSE.SMM.constants import (
    SAMPLE_RATE, DEFAULT_WPM, DEFAULT_FREQUENCY, DEFAULT_AMPLITUDE,
    DEFAULT_MESSAGE, DEFAULT_OUTPUT, FADE_SAMPLES,
)

logger = logging.getLogger(__name__)


def render_message(
    text: str,
    wpm: int = DEFAULT_WPM,
    frequency: float = DEFAULT_FREQUENCY,
    amplitude: float = DEFAULT_AMPLITUDE,
    fade_samples: int = FADE_SAMPLES,
    sample_rate: int = SAMPLE_RATE,
):
    """
    Render text to a uint8 sample buffer.

    Returns:
        (samples, segments, unit)

    Raises:
        ConfigError, UnknownSymbolError — before any samples are generated.
    """
    params = make_params(sample_rate, frequency, amplitude, fade_samples)
    unit = samples_per_unit(params.sample_rate, wpm)
    segments = schedule_message(unit, text)
    samples = ToneSynthesizer(params).render(segments)
    return samples, segments, unit


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="morse-wav",
        description="Your Morse code command line buddy.",
    )
    parser.add_argument(
        "text", nargs="?", default=DEFAULT_MESSAGE,
        help=f"Message to send, default {DEFAULT_MESSAGE}",
    )
    parser.add_argument(
        "-w", "--wpm", type=int, default=DEFAULT_WPM,
        help=f"Words per minute (PARIS), default {DEFAULT_WPM}",
    )
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT,
        help=f"Output WAV path, default {DEFAULT_OUTPUT}",
    )
    parser.add_argument(
        "-f", "--frequency", type=float, default=DEFAULT_FREQUENCY,
        help=f"Tone frequency in Hz, default {DEFAULT_FREQUENCY:g}",
    )
    parser.add_argument(
        "-a", "--amplitude", type=float, default=DEFAULT_AMPLITUDE,
        help=f"Tone amplitude (0, 1], default {DEFAULT_AMPLITUDE:g}",
    )
    parser.add_argument(
        "--fade", type=int, default=FADE_SAMPLES,
        help=f"Fade-in/out window in samples (0 = off), default {FADE_SAMPLES}",
    )
    parser.add_argument(
        "--sample-rate", type=int, default=SAMPLE_RATE,
        help=f"Output sample rate in Hz, default {SAMPLE_RATE}",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", default=None, help="Also log to this file (rotated daily)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        samples, segments, unit = render_message(
            args.text,
            wpm=args.wpm,
            frequency=args.frequency,
            amplitude=args.amplitude,
            fade_samples=args.fade,
            sample_rate=args.sample_rate,
        )
    except MorseError as exc:
        logger.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    write_wav(args.output, samples, args.sample_rate)

    duration = segments_duration_seconds(segments, args.sample_rate)
    print(
        f"Wrote {args.output} | {args.wpm} wpm (unit={unit} samp) | "
        f"{args.frequency:g} Hz | {duration:.2f} s"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
