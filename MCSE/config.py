"""
Validated synthesis parameters.

SynthParams is the only configuration object the synthesizer accepts; build
it with make_params() so every field is checked once, up front, before any
samples are generated.
"""
from __future__ import annotations

import logging
import math
import numbers
from typing import NamedTuple

from MCSE.errors import ConfigError
from MCSE.SMM.constants import (
    SAMPLE_RATE,
    DEFAULT_FREQUENCY,
    DEFAULT_AMPLITUDE,
    FADE_SAMPLES,
)

logger = logging.getLogger(__name__)


class SynthParams(NamedTuple):
    sample_rate:  int      # samples per second
    frequency:    float    # tone frequency, Hz
    amplitude:    float    # 0 < amplitude <= 1, fraction of full 8-bit swing
    fade_samples: int      # fade window at each tone edge (0 = unshaped)


def make_params(
    sample_rate: int = SAMPLE_RATE,
    frequency: float = DEFAULT_FREQUENCY,
    amplitude: float = DEFAULT_AMPLITUDE,
    fade_samples: int = FADE_SAMPLES,
) -> SynthParams:
    """
    Validate and build SynthParams.

    Raises:
        ConfigError: on a non-positive sample rate, a frequency outside
                     (0, Nyquist), an amplitude outside (0, 1] or a
                     negative fade window.
    """
    if isinstance(sample_rate, bool) or not isinstance(sample_rate, numbers.Integral) or sample_rate <= 0:
        raise ConfigError(f"sample_rate must be a positive integer, got {sample_rate!r}")

    frequency = float(frequency)
    nyquist = sample_rate / 2
    if not math.isfinite(frequency) or not 0 < frequency < nyquist:
        raise ConfigError(
            f"frequency must be in (0, {nyquist:g}) Hz at {sample_rate} Hz, got {frequency!r}"
        )

    amplitude = float(amplitude)
    if not math.isfinite(amplitude) or not 0 < amplitude <= 1:
        raise ConfigError(f"amplitude must be in (0, 1], got {amplitude!r}")

    if isinstance(fade_samples, bool) or not isinstance(fade_samples, numbers.Integral) or fade_samples < 0:
        raise ConfigError(f"fade_samples must be a non-negative integer, got {fade_samples!r}")

    params = SynthParams(int(sample_rate), frequency, amplitude, int(fade_samples))
    logger.debug("synth params: %s", params)
    return params
