# =============================================================================
# scheduler.py — Morse Timing Scheduler
# =============================================================================
#
# Converts text into an ordered list of TimedSegments: (state, duration),
# duration in samples.  Pure and deterministic — no audio is touched here,
# so every schedule can be checked exactly in unit tests.
#
# CHARACTER SPACING  ("R" = .-.  with unit u):
#
#     dit  gap  dah  gap  dit  gap
#      u    u   3u    u    u   3u     ← last gap widened to the char gap
#
# WORD SPACING:
#   The schedules of all characters are concatenated and the very last
#   segment (a trailing character gap) is widened to the 7u word gap.
#
# The trailing-gap fix-up replaces the last segment instead of appending a
# new one, and is skipped entirely for an empty schedule.

from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple

from MCSE.errors import UnknownSymbolError
from MCSE.SMM.constants import (
    MORSE_TABLE,
    DOT_UNITS, DASH_UNITS,
    SYMBOL_GAP_UNITS, CHAR_GAP_UNITS, WORD_GAP_UNITS,
)

logger = logging.getLogger(__name__)


class SignalState(Enum):
    ACTIVE = "active"   # tone playing
    SILENT = "silent"


class TimedSegment(NamedTuple):
    state:    SignalState
    duration: int        # samples


# ── Symbol lookup ────────────────────────────────────────────────────────────

def lookup(char: str) -> str:
    """
    Return the dot/dash code for one character (case-insensitive).

    Raises:
        UnknownSymbolError: char is not one of the 40 table entries.
    """
    code = MORSE_TABLE.get(char.upper())
    if code is None:
        raise UnknownSymbolError(char)
    return code


# ── Schedulers ───────────────────────────────────────────────────────────────

def _replace_last_duration(out: list[TimedSegment], duration: int) -> None:
    if out:
        out[-1] = TimedSegment(SignalState.SILENT, duration)


def schedule_character(unit: int, code: str) -> list[TimedSegment]:
    """
    Schedule one character's code, ending with the 3-unit character gap.

    Args:
        unit: Samples per dot.
        code: String over {'.', '-'}; empty yields [].
    """
    out: list[TimedSegment] = []
    for symbol in code:
        if symbol == ".":
            out.append(TimedSegment(SignalState.ACTIVE, DOT_UNITS * unit))
        elif symbol == "-":
            out.append(TimedSegment(SignalState.ACTIVE, DASH_UNITS * unit))
        else:
            raise ValueError(f"Invalid code symbol {symbol!r} in {code!r}")
        out.append(TimedSegment(SignalState.SILENT, SYMBOL_GAP_UNITS * unit))
    _replace_last_duration(out, CHAR_GAP_UNITS * unit)
    return out


def schedule_word(unit: int, text: str) -> list[TimedSegment]:
    """
    Schedule a single word, ending with the 7-unit word gap.

    Every character must be in the symbol table; a space is NOT a symbol,
    use schedule_message() for multi-word text.
    """
    out: list[TimedSegment] = []
    for char in text:
        out.extend(schedule_character(unit, lookup(char)))
    _replace_last_duration(out, WORD_GAP_UNITS * unit)
    return out


def schedule_message(unit: int, text: str) -> list[TimedSegment]:
    """
    Schedule whitespace-separated words back to back.

    Each word already ends in a word gap, so words are simply concatenated.
    Leading, trailing and repeated whitespace is ignored.  All words are
    looked up before anything is returned: one bad character anywhere
    aborts the whole message.
    """
    out: list[TimedSegment] = []
    words = text.split()
    for word in words:
        out.extend(schedule_word(unit, word))
    logger.debug(
        "scheduled %d word(s) -> %d segments, %d samples",
        len(words), len(out), total_samples(out),
    )
    return out


# ── Helpers ──────────────────────────────────────────────────────────────────

def total_samples(segments: list[TimedSegment]) -> int:
    """Total sample count of a schedule (= synthesizer output length)."""
    return sum(seg.duration for seg in segments)


def segments_duration_seconds(segments: list[TimedSegment], sample_rate: int) -> float:
    return total_samples(segments) / sample_rate
