#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import numpy as np

from ..core.errors import GridError
from ..core.types import SearchGrid
from ..design.sine_search import add_grid_arguments, grid_from_args
from ..engines.search import evaluate_block, iter_chunks

# coarse enough to render in a few seconds
LANDSCAPE_GRID = SearchGrid(gain_steps=4096, phase_steps=32)


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "sfdrsine[diagnostics]"') from e


def row_minima(grid: SearchGrid, chunk_rows: int = 256):
    """
    For each gain on the grid, the best metric over all phases and the phase
    that achieves it. Returns (gains, best_metric, best_phase) arrays.
    """
    gains_out, metric_out, phase_out = [], [], []
    for start, stop in iter_chunks(grid, chunk_rows):
        gains, phases, _, metric = evaluate_block(grid, start, stop)
        pi = np.argmin(metric, axis=1)
        gains_out.append(gains)
        metric_out.append(metric[np.arange(len(gains)), pi])
        phase_out.append(phases[pi])
    return np.concatenate(gains_out), np.concatenate(metric_out), np.concatenate(phase_out)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot the best SFDR per gain across the phase band.")
    add_grid_arguments(p, LANDSCAPE_GRID)
    p.add_argument("--out-png", default="sfdr_landscape.png")
    args = p.parse_args(argv)

    try:
        grid = grid_from_args(args)
    except GridError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    plt = _need_matplotlib()

    print(f"Scoring {grid.size} grid points...")
    gains, best_metric, best_phase = row_minima(grid)

    k = int(np.argmin(best_metric))
    print(f"Best: {best_metric[k]:.4f} dB at gain {gains[k]:.6f}, phase {best_phase[k]:.6e}")
    print(f"Rows with best phase 0: {int(np.sum(best_phase == 0.0))}/{len(gains)}")

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)
    ax1.plot(gains, best_metric, lw=0.6)
    ax1.set_ylabel("best SFDR over phase [dB]")
    ax1.grid(True, alpha=0.3)

    ax2.plot(gains, best_phase, ".", ms=1.5)
    ax2.set_xlabel("gain (peak amplitude)")
    ax2.set_ylabel("argmin phase [rad]")
    ax2.grid(True, alpha=0.3)

    fig.suptitle("16-sample sine quantization error landscape")
    fig.tight_layout()
    fig.savefig(args.out_png, dpi=150)
    print(f"Saved {args.out_png}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
