# =============================================================================
# timing.py — Samples-per-unit Calculator
# =============================================================================
#
# One "unit" is the length of a dot.  On the PARIS standard a word is 50
# units, so at W words per minute:
#
#     units per second = W * 50 / 60
#     samples per unit = sample_rate / (W * 50 / 60)
#
# The division is done in floating point and TRUNCATED to a whole sample
# count (int(), never round()).  Every duration in a schedule is an integer
# multiple of this value, so no fractional error accumulates across a message.
#
# At 44,100 Hz and 20 wpm the result is exact: 2646 samples.

import logging
import numbers

from MCSE.errors import ConfigError
from MCSE.SMM.constants import (
    ELEMENTS_PER_WORD, SECONDS_PER_MINUTE,
    REFERENCE_WPM, REFERENCE_UNIT, SAMPLE_RATE,
)

logger = logging.getLogger(__name__)


def _check_wpm(wpm) -> None:
    if isinstance(wpm, bool) or not isinstance(wpm, numbers.Integral):
        raise ConfigError(f"wpm must be an integer, got {wpm!r}")
    if wpm <= 0:
        raise ConfigError(f"wpm must be positive, got {wpm}")


def samples_per_unit(sample_rate: int, wpm: int) -> int:
    """
    Number of samples representing one Morse unit (one dot).

    Args:
        sample_rate: Output sample rate in Hz (> 0).
        wpm:         Words per minute (positive integer).

    Returns:
        int(sample_rate / (wpm * 50 / 60))

    Raises:
        ConfigError: wpm or sample_rate is not positive.  wpm = 0 is never
                     defaulted — it would be a division by zero.
    """
    _check_wpm(wpm)
    if isinstance(sample_rate, bool) or not isinstance(sample_rate, numbers.Integral) or sample_rate <= 0:
        raise ConfigError(f"sample_rate must be a positive integer, got {sample_rate!r}")

    sample_rate, wpm = int(sample_rate), int(wpm)

    # sample_rate / (wpm * 50 / 60), with the multiplication hoisted so the
    # single float division only happens once
    unit = int((sample_rate * SECONDS_PER_MINUTE) / (wpm * ELEMENTS_PER_WORD))

    if sample_rate == SAMPLE_RATE and wpm == REFERENCE_WPM:
        # in this case the answer is exact
        assert unit == REFERENCE_UNIT, unit

    logger.debug("unit = %d samples (%d Hz, %d wpm)", unit, sample_rate, wpm)
    return unit


def unit_seconds(wpm: int) -> float:
    """Duration of one unit in seconds (1.2 / wpm)."""
    _check_wpm(wpm)
    return SECONDS_PER_MINUTE / (wpm * ELEMENTS_PER_WORD)
