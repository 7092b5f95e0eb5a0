from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from functools import reduce
from typing import Callable, Iterable, Iterator, Optional, Tuple

import numpy as np

from ..core.errors import GridError, SearchError
from ..core.types import Candidate, SearchGrid
from .metric import db_error
from .waveform import ideal_values, round_half_away

DEFAULT_CHUNK_ROWS = 64

ProgressFn = Callable[[int, int], None]


def gain_axis(grid: SearchGrid, start: int, stop: int) -> np.ndarray:
    gi = np.arange(start, stop, dtype=np.float64)
    return grid.gain_min + grid.gain_span * gi / float(grid.gain_steps)


def phase_axis(grid: SearchGrid) -> np.ndarray:
    pi = np.arange(grid.phase_steps, dtype=np.float64)
    return grid.phase_span * pi / float(grid.phase_steps)


def iter_chunks(grid: SearchGrid, chunk_rows: int = DEFAULT_CHUNK_ROWS) -> Iterator[Tuple[int, int]]:
    """Static partition of the gain indices 0..=gain_steps into [start, stop) ranges."""
    if chunk_rows < 1:
        raise GridError("chunk_rows must be at least 1")
    n = grid.n_gains
    for start in range(0, n, chunk_rows):
        yield start, min(start + chunk_rows, n)


def evaluate_block(
    grid: SearchGrid, start: int, stop: int
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Score every (gain, phase) pair of gain rows [start, stop).

    Returns (gains[G], phases[P], samples[G, P, 16], metric[G, P]).
    """
    gains = gain_axis(grid, start, stop)
    phases = phase_axis(grid)
    g = gains[:, None]
    ideal = ideal_values(g, phases[None, :])
    samples = round_half_away(ideal)
    metric = db_error(samples, ideal, g)
    return gains, phases, samples, metric


def evaluate_chunk(grid: SearchGrid, start: int, stop: int) -> Candidate:
    """Local minimum of one chunk; the lowest (gain, phase) index wins ties."""
    gains, phases, samples, metric = evaluate_block(grid, start, stop)
    gi, pi = np.unravel_index(int(np.argmin(metric)), metric.shape)
    return Candidate(
        metric=float(metric[gi, pi]),
        samples=tuple(int(v) for v in samples[gi, pi]),
        gain=float(gains[gi]),
        phase=float(phases[pi]),
    )


def pick_better(a: Optional[Candidate], b: Optional[Candidate]) -> Optional[Candidate]:
    """
    Associative, commutative minimum over candidates with None as identity.

    Ordered by (metric, gain, phase) so equal metrics resolve the same way
    however the grid was partitioned.
    """
    if a is None:
        return b
    if b is None:
        return a
    return b if b.key() < a.key() else a


def reduce_candidates(candidates: Iterable[Optional[Candidate]]) -> Optional[Candidate]:
    return reduce(pick_better, candidates, None)


def search(
    grid: SearchGrid,
    *,
    workers: Optional[int] = None,
    chunk_rows: int = DEFAULT_CHUNK_ROWS,
    progress: Optional[ProgressFn] = None,
) -> Candidate:
    """
    Exhaustive grid search for the candidate with the lowest metric.

    Chunks are scored on a thread pool (numpy releases the GIL inside the
    kernels); each chunk keeps its own local minimum and the main thread
    folds them with pick_better as they complete.
    """
    chunks = list(iter_chunks(grid, chunk_rows))
    total = len(chunks)
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError("workers must be at least 1")

    best: Optional[Candidate] = None
    done = 0
    if workers == 1:
        for start, stop in chunks:
            best = pick_better(best, evaluate_chunk(grid, start, stop))
            done += 1
            if progress is not None:
                progress(done, total)
    else:
        with ThreadPoolExecutor(max_workers=workers) as ex:
            futures = [ex.submit(evaluate_chunk, grid, start, stop) for start, stop in chunks]
            for fut in as_completed(futures):
                best = pick_better(best, fut.result())
                done += 1
                if progress is not None:
                    progress(done, total)

    if best is None:
        raise SearchError("search grid produced no candidates")
    return best
