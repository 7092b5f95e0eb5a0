# design/sine_search.py

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..api import format_result, search_min_sine
from ..core.errors import GridError
from ..core.types import DEFAULT_GRID, SearchGrid
from ..engines.search import DEFAULT_CHUNK_ROWS


def add_grid_arguments(p: argparse.ArgumentParser, defaults: SearchGrid = DEFAULT_GRID) -> None:
    p.add_argument("--gain-min", type=float, default=defaults.gain_min,
                   help=f"Lowest peak amplitude searched (default: {defaults.gain_min:g}).")
    p.add_argument("--gain-span", type=float, default=defaults.gain_span,
                   help=f"Width of the amplitude range (default: {defaults.gain_span:g}).")
    p.add_argument("--gain-steps", type=int, default=defaults.gain_steps,
                   help=f"Amplitude intervals; both ends are searched (default: {defaults.gain_steps}).")
    p.add_argument("--phase-span", type=float, default=defaults.phase_span,
                   help="Width of the phase band in radians, end excluded (default: pi/16).")
    p.add_argument("--phase-steps", type=int, default=defaults.phase_steps,
                   help=f"Phase intervals (default: {defaults.phase_steps}).")


def grid_from_args(args: argparse.Namespace) -> SearchGrid:
    return SearchGrid(
        gain_min=args.gain_min,
        gain_span=args.gain_span,
        gain_steps=args.gain_steps,
        phase_span=args.phase_span,
        phase_steps=args.phase_steps,
    )


def _print_progress(done: int, total: int) -> None:
    step = max(1, total // 100)
    if done == total or done % step == 0:
        print(f"\r{done}/{total} chunks", end="\n" if done == total else "", file=sys.stderr, flush=True)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Search gain/phase for the 16-sample 14-bit sine table with the lowest SFDR.")
    add_grid_arguments(p)
    p.add_argument("--workers", type=int, default=None, help="Worker threads (default: CPU count).")
    p.add_argument("--chunk-rows", type=int, default=DEFAULT_CHUNK_ROWS,
                   help=f"Gain rows per work unit (default: {DEFAULT_CHUNK_ROWS}).")
    p.add_argument("--progress", action="store_true", help="Report finished chunks on stderr.")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    if args.workers is not None and args.workers < 1:
        print("Error: Number of workers must be at least 1.", file=sys.stderr)
        return 1
    if args.chunk_rows < 1:
        print("Error: Chunk rows must be at least 1.", file=sys.stderr)
        return 1
    try:
        grid = grid_from_args(args)
    except GridError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    best = search_min_sine(
        grid,
        workers=args.workers,
        chunk_rows=args.chunk_rows,
        progress=_print_progress if args.progress else None,
    )
    full_output = format_result(best)

    print(full_output)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(full_output + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
