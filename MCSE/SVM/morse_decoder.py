#!/usr/bin/env python3
# =============================================================================
# morse_decoder.py — Rendered-audio Morse Decoder
# =============================================================================
#
# Inverse of scheduler + tone_synth.  Accepts a uint8 sample buffer and
# returns the decoded text, the recovered (state, duration) segments and any
# symbol errors.
#
# Decoder model:
#   - Tone samples are always in [1, 255]; silence is exactly 0.  A run of
#     zeros is therefore a SILENT segment and a run of non-zeros is ACTIVE.
#   - The unit is either supplied (from wpm) or estimated as the shortest
#     run, ignoring leading and trailing silence.  The estimate is only
#     accepted when some run (trailing word gap included) is at least
#     UNIT_PROOF_RATIO times longer: legal runs are 1u, 3u and 7u, while a
#     text of dashes and character gaps only has runs of 3u and 7u, which
#     look like 1u and 2.33u from the shortest.  Such text ("T", "TT") is
#     indistinguishable from scaled-up dots and yields no unit.
#   - Run lengths are classified against midpoints between nominal lengths:
#
#       ACTIVE : < 2u → '.'              else '-'
#       SILENT : < 2u → symbol gap       < 5u → char gap     else word gap
#
#   - A code that is not in the symbol table becomes a SymbolError and a
#     '*' placeholder in the text.  Decoding never raises on bad audio.
#
# =============================================================================

from __future__ import annotations

import logging
from typing import NamedTuple

import numpy as np

from MCSE.SGM.scheduler import SignalState, TimedSegment
from MCSE.SMM.constants import CODE_TO_CHAR, SILENCE_LEVEL

logger = logging.getLogger(__name__)

UNKNOWN_PLACEHOLDER = "*"

DASH_THRESHOLD      = 2    # units — ACTIVE runs at or above are dashes
CHAR_GAP_THRESHOLD  = 2    # units — SILENT runs at or above end a character
WORD_GAP_THRESHOLD  = 5    # units — SILENT runs at or above end a word

# A run this many times the shortest one proves the shortest is a single
# unit (3u or 7u); a 3u-based estimate never exceeds 7/3.
UNIT_PROOF_RATIO    = 8 / 3


class SymbolError(NamedTuple):
    sample_pos: int
    code:       str
    reason:     str


class DecodeResult(NamedTuple):
    text:     str
    segments: list[TimedSegment]
    unit:     int | None
    errors:   list[SymbolError]


def segments_from_samples(samples) -> list[TimedSegment]:
    """
    Split a uint8 buffer into alternating ACTIVE / SILENT run-length segments.
    """
    samples = np.asarray(samples)
    n = len(samples)
    if n == 0:
        return []

    active = samples != SILENCE_LEVEL
    edges = np.flatnonzero(np.diff(active.view(np.uint8))) + 1
    starts = np.concatenate(([0], edges))
    ends = np.concatenate((edges, [n]))

    return [
        TimedSegment(
            SignalState.ACTIVE if active[s] else SignalState.SILENT,
            int(e - s),
        )
        for s, e in zip(starts, ends)
    ]


class MorseDecoder:
    """
    Parameters
    ----------
    sample_rate : int
        Sample rate of the buffer (informational; reported in summaries).
    unit : int | None
        Samples per dot.  None = estimate from the shortest run.
    """

    def __init__(self, sample_rate: int, unit: int | None = None) -> None:
        self.sample_rate = sample_rate
        self.unit = unit

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def decode(self, samples) -> DecodeResult:
        segments = segments_from_samples(samples)
        unit = self.unit if self.unit else self._estimate_unit(segments)
        if not unit:
            return DecodeResult("", segments, None, [])

        text, errors = self._segments_to_text(segments, unit)
        logger.debug("decoded %d segments at unit=%d -> %r", len(segments), unit, text)
        return DecodeResult(text, segments, unit, errors)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _estimate_unit(segments: list[TimedSegment]) -> int | None:
        """
        Shortest run between the first and last tone, or None when no run
        proves that it is one unit long (no tone, or dash-only text).
        """
        active_idx = [i for i, s in enumerate(segments) if s.state is SignalState.ACTIVE]
        if not active_idx:
            return None

        first, last = active_idx[0], active_idx[-1]
        runs = [s.duration for s in segments[first:last + 1]]
        shortest = min(runs)

        # the trailing word gap may carry the only 7u evidence ("E", "I")
        if last + 1 < len(segments):
            runs.append(segments[last + 1].duration)

        if max(runs) < UNIT_PROOF_RATIO * shortest:
            logger.debug("unit ambiguous: shortest run %d, longest %d", shortest, max(runs))
            return None
        return shortest

    def _segments_to_text(
        self, segments: list[TimedSegment], unit: int
    ) -> tuple[str, list[SymbolError]]:
        words:  list[str]         = []
        chars:  list[str]         = []
        code:   list[str]         = []
        errors: list[SymbolError] = []
        pos = 0
        code_start = 0

        def flush_char() -> None:
            if not code:
                return
            key = "".join(code)
            char = CODE_TO_CHAR.get(key)
            if char is None:
                errors.append(SymbolError(code_start, key, f"code {key!r} not in symbol table"))
                char = UNKNOWN_PLACEHOLDER
            chars.append(char)
            code.clear()

        def flush_word() -> None:
            flush_char()
            if chars:
                words.append("".join(chars))
                chars.clear()

        for seg in segments:
            units = seg.duration / unit
            if seg.state is SignalState.ACTIVE:
                if not code:
                    code_start = pos
                code.append("." if units < DASH_THRESHOLD else "-")
            elif units >= WORD_GAP_THRESHOLD:
                flush_word()
            elif units >= CHAR_GAP_THRESHOLD:
                flush_char()
            pos += seg.duration

        flush_word()
        return " ".join(words), errors
