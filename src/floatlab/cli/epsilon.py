"""Machine epsilon CLI.

Usage:
    python -m floatlab.cli.epsilon --precision all
    python -m floatlab.cli.epsilon --precision single --json
"""

from __future__ import annotations

import argparse


def add_epsilon_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--precision",
        type=str,
        default=None,
        choices=["single", "double", "all"],
        help="Precision to probe (default: from config, both)",
    )
    parser.add_argument("--trace-head", type=int, default=None, help="Always show iterations below this")
    parser.add_argument("--trace-every", type=int, default=None, help="Then show every N-th iteration")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of tables")


def main(argv: list[str] | None = None) -> int:
    """Probe machine epsilon.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success).
    """
    parser = argparse.ArgumentParser(description="Determine machine epsilon by repeated halving")
    add_epsilon_args(parser)
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--log-level", type=str, default=None, choices=["DEBUG", "INFO", "WARN", "ERROR"])
    args = parser.parse_args(argv)

    from .workflows import run_epsilon_workflow

    return run_epsilon_workflow(args)


if __name__ == "__main__":
    import sys

    sys.exit(main())
