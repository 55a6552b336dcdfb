"""Classical vs. Horner polynomial evaluation CLI.

Usage:
    python -m floatlab.cli.horner                       # (x-1)^3 at 1.001
    python -m floatlab.cli.horner --coeffs "1,0,-2" --x 1.5
    python -m floatlab.cli.horner --interactive --degree 3

Coefficients are given in ascending order (constant term first).
"""

from __future__ import annotations

import argparse


def add_horner_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--coeffs", type=str, default=None, help='Ascending coefficients, e.g. "-1,3,-3,1"')
    parser.add_argument("--x", type=float, default=None, help="Evaluation point")
    parser.add_argument("--exact", type=float, default=None, help="Known exact value of p(x)")
    parser.add_argument(
        "--precision", type=str, default=None, choices=["single", "double"], help="Working precision"
    )
    parser.add_argument("--interactive", action="store_true", help="Read coefficients from stdin")
    parser.add_argument("--degree", type=int, default=3, help="Degree for --interactive")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")


def main(argv: list[str] | None = None) -> int:
    """Compare the two evaluation methods on one polynomial.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success, 2 = bad input).
    """
    parser = argparse.ArgumentParser(description="Compare classical and Horner polynomial evaluation")
    add_horner_args(parser)
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--log-level", type=str, default=None, choices=["DEBUG", "INFO", "WARN", "ERROR"])
    args = parser.parse_args(argv)

    if args.interactive and args.degree < 0:
        parser.error("--degree must be >= 0")

    from .workflows import run_horner_workflow

    return run_horner_workflow(args)


if __name__ == "__main__":
    import sys

    sys.exit(main())
