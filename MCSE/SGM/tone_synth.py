# =============================================================================
# tone_synth.py — Sine Tone Synthesizer with Symmetric Fade
# =============================================================================
#
# Fills each ACTIVE segment with a sine tone and each SILENT segment with
# zeros, producing one flat uint8 buffer.
#
# WAVEFORM (per ACTIVE segment, i = sample index within the segment):
#
#     raw(i) = 128 + 127 * amplitude * sin(2π * f * i / sample_rate)
#
#   Phase restarts at 0 for every segment, so every tone starts on the
#   DC center.  Peak swing is 127, so tone samples stay in [1, 255] and
#   the value 0 is left to SILENT samples only.
#
# ENVELOPE (symmetric fade-in / fade-out):
#
#     W    = min(fade_samples, D // 2)          ← clamped to the segment
#     r(i) = 127 * amplitude * min(1, i / W, (D - 1 - i) / W)
#     out  = floor(clamp(128, r(i), raw(i)))
#
#   The first and last W samples have their deviation from the center
#   bounded by a linearly growing / shrinking range; the middle of the
#   segment is untouched.  Sample 0 and sample D-1 are exactly 128.
#   Any D >= 0 is safe — including D < 2 * fade_samples and D = 0.
#
# OUTPUT LENGTH:
#   len(render(segments)) == sum(seg.duration for seg in segments), always.

from __future__ import annotations

import logging

import numpy as np

from MCSE.config import SynthParams, make_params
from MCSE.SGM.scheduler import SignalState, TimedSegment, total_samples
from MCSE.SMM.constants import U8_CENTER, U8_MAX_SWING, SILENCE_LEVEL

logger = logging.getLogger(__name__)


def clamp(center, range_, n):
    """
    Clamp n into [center - range_, center + range_].

    Works element-wise on numpy arrays (range_ and n may both be arrays),
    which is how render_tone bounds a whole segment at once.

        clamp(127, 27, 0)   -> 100
        clamp(127, 27, 155) -> 154
        clamp(127, 27, 120) -> 120
        clamp(127, 0, 225)  -> 127
    """
    return np.minimum(np.maximum(n, center - range_), center + range_)


def fade_ranges(duration: int, fade_samples: int, swing: float) -> np.ndarray:
    """
    Allowed deviation from center for each sample of a segment.

    Returns a float array of length `duration`.  With a zero-width window
    the full swing is allowed everywhere.
    """
    window = min(fade_samples, duration // 2)
    if window <= 0:
        return np.full(duration, swing, dtype=np.float64)

    i = np.arange(duration, dtype=np.float64)
    rising  = i / window
    falling = (duration - 1 - i) / window
    return swing * np.minimum(1.0, np.minimum(rising, falling))


class ToneSynthesizer:
    """
    Renders a TimedSegment schedule into an 8-bit unsigned sample buffer.

    Usage:
        synth = ToneSynthesizer(make_params(frequency=600.0))
        samples = synth.render(schedule_message(unit, "CQ"))
    """

    def __init__(self, params: SynthParams | None = None) -> None:
        self.params = params if params is not None else make_params()
        self._swing = U8_MAX_SWING * self.params.amplitude
        # Tone shape depends only on the segment length; dots, dashes and
        # the gaps between them repeat a handful of lengths, so cache them.
        self._tone_cache: dict[int, np.ndarray] = {}

    # ── Per-segment rendering ────────────────────────────────────────────────

    def render_tone(self, duration: int) -> np.ndarray:
        """Render one faded ACTIVE segment of `duration` samples (uint8)."""
        cached = self._tone_cache.get(duration)
        if cached is not None:
            return cached

        p = self.params
        i = np.arange(duration, dtype=np.float64)
        raw = U8_CENTER + self._swing * np.sin(2.0 * np.pi * p.frequency * i / p.sample_rate)

        limit = fade_ranges(duration, p.fade_samples, self._swing)
        shaped = clamp(U8_CENTER, limit, raw)

        tone = np.floor(shaped).astype(np.uint8)
        tone.setflags(write=False)
        self._tone_cache[duration] = tone
        return tone

    # ── Full schedule ────────────────────────────────────────────────────────

    def render(self, segments: list[TimedSegment]) -> np.ndarray:
        """
        Render a full schedule into one flat uint8 buffer.

        The buffer is preallocated from the schedule's total length and
        filled segment by segment in playback order.
        """
        n_total = total_samples(segments)
        out = np.empty(n_total, dtype=np.uint8)

        pos = 0
        for seg in segments:
            end = pos + seg.duration
            if seg.state is SignalState.ACTIVE:
                out[pos:end] = self.render_tone(seg.duration)
            else:
                out[pos:end] = SILENCE_LEVEL
            pos = end

        logger.debug(
            "rendered %d segments -> %d samples (%.2f s)",
            len(segments), n_total, n_total / self.params.sample_rate,
        )
        return out
