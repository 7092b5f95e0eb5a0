from __future__ import annotations

from typing import Tuple

import numpy as np

from ..core.types import N_SAMPLES, TAU

_INDEX = np.arange(N_SAMPLES, dtype=np.float64)
_STEP = TAU / float(N_SAMPLES)


def ideal_values(gains, phases) -> np.ndarray:
    """
    Continuous sine samples gain * sin(2*pi/16 * i + phase), i = 0..15.

    `gains` and `phases` broadcast against each other; the sample index is
    appended as a trailing axis of length 16.
    """
    gains = np.asarray(gains, dtype=np.float64)
    phases = np.asarray(phases, dtype=np.float64)
    angles = _STEP * _INDEX + phases[..., None]
    return gains[..., None] * np.sin(angles)


def round_half_away(values) -> np.ndarray:
    """
    Round to nearest, ties away from zero (2.5 -> 3, -2.5 -> -3).

    np.rint rounds ties to even, so exact halves are patched from the
    truncated value. x - trunc(x) is exact in binary floating point.
    """
    values = np.asarray(values, dtype=np.float64)
    t = np.trunc(values)
    return np.where(np.abs(values - t) == 0.5, t + np.sign(values), np.rint(values))


def generate(amplitude: float, phase: float) -> Tuple[int, ...]:
    """Quantized 16-sample sine table for the given gain and phase (radians)."""
    q = round_half_away(ideal_values(amplitude, phase))
    return tuple(int(v) for v in q)
