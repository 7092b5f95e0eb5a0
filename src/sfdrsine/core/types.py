from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Tuple

from .errors import GridError

TAU = 2.0 * math.pi
N_SAMPLES = 16  # one period per table, frequency index 1
SAMPLE_BITS = 14
# signed range of a table sample; generate() does not clip to it
SAMPLE_MIN = -(1 << (SAMPLE_BITS - 1))
SAMPLE_MAX = (1 << (SAMPLE_BITS - 1)) - 1

@dataclass(frozen=True)
class Candidate:
    """One scored grid point: (metric in dB, quantized table, gain, phase)."""
    metric: float
    samples: Tuple[int, ...]
    gain: float
    phase: float

    def key(self) -> Tuple[float, float, float]:
        # equal metrics fall back to the smaller (gain, phase) pair
        return (self.metric, self.gain, self.phase)

@dataclass(frozen=True)
class SearchGrid:
    """
    Cartesian grid of candidate (gain, phase) pairs.

    Gains:  gain_min + gain_span * gi / gain_steps, gi = 0..gain_steps (inclusive)
    Phases: phase_span * pi / phase_steps,          pi = 0..phase_steps-1
    """
    gain_min: float = 4096.0
    gain_span: float = 4096.0
    gain_steps: int = 4096 * 256
    phase_span: float = TAU / 32.0
    phase_steps: int = 256

    def __post_init__(self) -> None:
        for name in ("gain_min", "gain_span", "phase_span"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise GridError(f"{name} must be finite, got {value}")
        # gain_min > 0 keeps the metric away from its 0/0 singularity
        if not self.gain_min > 0.0:
            raise GridError(f"gain_min must be positive, got {self.gain_min}")
        if self.gain_span < 0.0:
            raise GridError(f"gain_span must be non-negative, got {self.gain_span}")
        if self.phase_span < 0.0:
            raise GridError(f"phase_span must be non-negative, got {self.phase_span}")
        if self.gain_steps < 1 or self.phase_steps < 1:
            raise GridError("gain_steps and phase_steps must be at least 1")

    @property
    def n_gains(self) -> int:
        return self.gain_steps + 1

    @property
    def n_phases(self) -> int:
        return self.phase_steps

    @property
    def size(self) -> int:
        return self.n_gains * self.n_phases

    def gain_at(self, gi: int) -> float:
        return self.gain_min + self.gain_span * float(gi) / float(self.gain_steps)

    def phase_at(self, pi: int) -> float:
        return self.phase_span * float(pi) / float(self.phase_steps)

DEFAULT_GRID = SearchGrid()
