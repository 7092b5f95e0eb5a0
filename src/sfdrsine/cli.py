from __future__ import annotations

import argparse
import sys
import importlib
import inspect


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_eval(argv: list[str]) -> int:
    import sfdrsine

    p = argparse.ArgumentParser(prog="sfdrsine eval", description="Score the quantized table of a single gain/phase.")
    p.add_argument("--gain", type=float, required=True, help="Peak amplitude (must be positive)")
    p.add_argument("--phase", type=float, default=0.0, help="Phase in radians (default: 0)")
    args = p.parse_args(argv)

    if not args.gain > 0.0:
        print("Error: Gain must be positive.", file=sys.stderr)
        return 1

    print(sfdrsine.format_result(sfdrsine.evaluate(args.gain, args.phase)))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="sfdrsine", description="Low-SFDR 16-sample sine table search.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("search", help="Exhaustive gain/phase search for the lowest-SFDR table.")
    sub.add_parser("eval", help="Score the table generated from one gain/phase.")
    sub.add_parser("landscape", help="Plot best SFDR per gain (diagnostics, needs matplotlib).")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "search":
        return _run_module_main("sfdrsine.design.sine_search", rest)

    if args.cmd == "eval":
        return cmd_eval(rest)

    if args.cmd == "landscape":
        return _run_module_main("sfdrsine.diagnostics.landscape", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
