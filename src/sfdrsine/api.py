from __future__ import annotations

from typing import Optional

import numpy as np

from .core.types import Candidate, DEFAULT_GRID, SearchGrid
from .engines.metric import sfdr
from .engines.search import DEFAULT_CHUNK_ROWS, ProgressFn, search
from .engines.waveform import generate


def evaluate(gain: float, phase: float = 0.0) -> Candidate:
    """Generate and score a single (gain, phase) point."""
    samples = generate(gain, phase)
    return Candidate(metric=sfdr(samples, gain, phase), samples=samples, gain=float(gain), phase=float(phase))


def search_min_sine(
    grid: Optional[SearchGrid] = None,
    *,
    workers: Optional[int] = None,
    chunk_rows: int = DEFAULT_CHUNK_ROWS,
    progress: Optional[ProgressFn] = None,
) -> Candidate:
    """Run the exhaustive search (DEFAULT_GRID unless `grid` is given)."""
    return search(grid or DEFAULT_GRID, workers=workers, chunk_rows=chunk_rows, progress=progress)


def _decimal(x: float) -> str:
    # shortest round-trip digits, never in exponent form (1e-05 -> 0.00001)
    return np.format_float_positional(x, unique=True, trim="-")


def format_result(c: Candidate) -> str:
    """Two report lines: 'metric, gain, phase' and the sample list."""
    nums = ", ".join(_decimal(x) for x in (c.metric, c.gain, c.phase))
    return f"{nums}\n{list(c.samples)}"
