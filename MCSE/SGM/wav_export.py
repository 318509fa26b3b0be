# =============================================================================
# wav_export.py — Mono 8-bit Unsigned PCM WAV Container
# =============================================================================
#
# Thin glue between the synthesizer's uint8 buffer and a WAV file on disk.
# The container is always: 1 channel, 8-bit unsigned PCM (PCM_U8).
#
# libsndfile has no uint8 write path, so the buffer is widened to int16:
#
#     s16 = (u8 - 128) << 8
#
# libsndfile's short → unsigned-char conversion is (s16 >> 8) + 128, which
# gives back the original byte exactly.  Reading with dtype='int16' applies
# the inverse, so write → read is lossless.

from __future__ import annotations

import logging

import numpy as np
import soundfile as sf

from MCSE.SMM.constants import CHANNELS, U8_CENTER

logger = logging.getLogger(__name__)

WAV_FORMAT  = "WAV"
WAV_SUBTYPE = "PCM_U8"


def _check_u8(samples: np.ndarray) -> np.ndarray:
    samples = np.asarray(samples)
    if samples.dtype != np.uint8:
        raise ValueError(f"expected a uint8 sample buffer, got dtype {samples.dtype}")
    if samples.ndim != 1:
        raise ValueError(f"expected a mono (1-D) buffer, got shape {samples.shape}")
    return samples


def u8_to_int16(samples: np.ndarray) -> np.ndarray:
    return (samples.astype(np.int16) - U8_CENTER) << 8


def int16_to_u8(samples: np.ndarray) -> np.ndarray:
    return ((samples.astype(np.int32) >> 8) + U8_CENTER).astype(np.uint8)


def write_wav(path, samples: np.ndarray, sample_rate: int) -> None:
    """
    Write a uint8 buffer as a mono PCM_U8 WAV file.

    Args:
        path:        Output path (str or Path).
        samples:     1-D numpy array, dtype uint8.
        sample_rate: Sample rate in Hz.
    """
    samples = _check_u8(samples)
    sf.write(
        path,
        u8_to_int16(samples),
        sample_rate,
        subtype=WAV_SUBTYPE,
        format=WAV_FORMAT,
    )
    logger.info(
        "wrote %s: %d samples, %d Hz, %d ch, %s",
        path, len(samples), sample_rate, CHANNELS, WAV_SUBTYPE,
    )


def read_wav(path) -> tuple[np.ndarray, int]:
    """
    Read the first channel of a WAV file back as uint8 samples.

    Returns:
        (samples, sample_rate)
    """
    data, sr = sf.read(path, dtype="int16", always_2d=True)
    return int16_to_u8(data[:, 0]), sr


def to_raw_bytes(samples: np.ndarray) -> bytes:
    """Raw PCM_U8 payload (one byte per sample), as stored in the data chunk."""
    return _check_u8(samples).tobytes()
