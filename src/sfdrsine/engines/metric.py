from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..core.types import N_SAMPLES
from .waveform import ideal_values

_RMS_SCALE = 0.5 * math.sqrt(2.0)


def db_error(samples, ideal, gains) -> np.ndarray:
    """
    20*log10 of the root-sum-of-squares error relative to the RMS of the ideal sine.

    gains == 0 is outside the domain and gives inf/nan; zero error gives -inf.
    """
    d = np.asarray(samples, dtype=np.float64) - ideal
    # left-to-right sum over the sample axis; np.sum would sum pairwise
    acc = d[..., 0] * d[..., 0]
    for i in range(1, N_SAMPLES):
        acc = acc + d[..., i] * d[..., i]
    error = np.sqrt(acc)
    with np.errstate(divide="ignore", invalid="ignore"):
        return 20.0 * np.log10(error / (_RMS_SCALE * np.asarray(gains, dtype=np.float64)))


def sfdr_values(samples, gains, phases) -> np.ndarray:
    return db_error(samples, ideal_values(gains, phases), gains)


def sfdr(samples: Sequence[int], amplitude: float, phase: float) -> float:
    """
    SFDR-style metric (dB) of `samples` against a sine of frequency 1/16 with the
    given gain and phase in radians. Lower is better.
    """
    if len(samples) != N_SAMPLES:
        raise ValueError(f"expected {N_SAMPLES} samples, got {len(samples)}")
    return float(sfdr_values(samples, amplitude, phase))
