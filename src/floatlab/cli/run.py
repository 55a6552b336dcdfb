"""floatlab unified CLI.

Usage:
    floatlab epsilon     --precision all
    floatlab info
    floatlab horner      --coeffs=-1,3,-3,1 --x 1.001
    floatlab conclusions
"""

from __future__ import annotations

import argparse
import sys

from floatlab.cli.epsilon import add_epsilon_args
from floatlab.cli.horner import add_horner_args
from floatlab.cli.workflows import (
    run_conclusions_workflow,
    run_epsilon_workflow,
    run_horner_workflow,
    run_info_workflow,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="floatlab: floating-point precision demonstrations")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--log-level", type=str, default=None, choices=["DEBUG", "INFO", "WARN", "ERROR"])
    subparsers = parser.add_subparsers(dest="run_type", required=True, help="Run type")

    # --- Epsilon ---
    eps = subparsers.add_parser("epsilon", help="Machine epsilon by repeated halving")
    add_epsilon_args(eps)

    # --- Representation ---
    info = subparsers.add_parser("info", help="IEEE 754 layout of float and double")
    info.add_argument("--json", action="store_true")

    # --- Horner ---
    hr = subparsers.add_parser("horner", help="Classical vs Horner polynomial evaluation")
    add_horner_args(hr)

    # --- Conclusions ---
    subparsers.add_parser("conclusions", help="Summary of the epsilon findings")

    args = parser.parse_args(argv)

    if args.run_type == "horner" and args.interactive and args.degree < 0:
        parser.error("--degree must be >= 0")

    dispatch = {
        "epsilon": run_epsilon_workflow,
        "info": run_info_workflow,
        "horner": run_horner_workflow,
        "conclusions": run_conclusions_workflow,
    }

    fn = dispatch.get(args.run_type)
    if fn is None:
        parser.print_help()
        return 1

    return fn(args)


if __name__ == "__main__":
    sys.exit(main())
