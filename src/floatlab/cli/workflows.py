"""Workflows behind the floatlab commands.

Each workflow takes the parsed ``argparse.Namespace`` and returns an exit
code. Command-line flags override values from the YAML config.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from floatlab.core.config import FloatLabConfig, default_config, load_config, merge_config
from floatlab.core.errors import CoefficientParseError
from floatlab.core.logging import get_logger, set_log_level
from floatlab.core.types import PrecisionKind
from floatlab.epsilon import all_representation_info, probe_all
from floatlab.poly import compare_methods
from floatlab.report import (
    parse_coefficients,
    read_coefficients,
    render_comparison,
    render_conclusions,
    render_epsilon,
    render_representation_table,
)

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 2


def resolve_config(args: argparse.Namespace) -> FloatLabConfig:
    """Load ``--config`` (or defaults) and apply the command-line overrides."""
    path = getattr(args, "config", None)
    cfg = load_config(path) if path else default_config()

    overrides: dict[str, Any] = {}
    if getattr(args, "json", False):
        overrides.setdefault("output", {})["json"] = True
    if getattr(args, "log_level", None):
        overrides.setdefault("output", {})["log_level"] = args.log_level.upper()
    if overrides:
        cfg = merge_config(cfg, overrides)

    set_log_level(cfg.output.log_level)
    return cfg


def _emit_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


# ---------------------------------------------------------------------------
# Epsilon
# ---------------------------------------------------------------------------


def _precisions_from_args(args: argparse.Namespace, cfg: FloatLabConfig) -> list[PrecisionKind]:
    choice = getattr(args, "precision", None)
    if choice is None:
        return list(cfg.epsilon.precisions)
    if choice == "all":
        return [PrecisionKind.SINGLE, PrecisionKind.DOUBLE]
    return [PrecisionKind.parse(choice)]


def run_epsilon_workflow(args: argparse.Namespace) -> int:
    """Probe machine epsilon and print the iteration tables."""
    cfg = resolve_config(args)
    precisions = _precisions_from_args(args, cfg)

    with logger.timer("probe_epsilon"):
        results = probe_all(precisions)

    for r in results:
        logger.info("epsilon probed", precision=r.precision.value, epsilon=r.epsilon, mantissa_bits=r.mantissa_bits)

    if cfg.output.json_output:
        _emit_json([r.to_dict() for r in results])
        return EXIT_OK

    head = args.trace_head if getattr(args, "trace_head", None) is not None else cfg.epsilon.trace_head
    every = args.trace_every if getattr(args, "trace_every", None) is not None else cfg.epsilon.trace_every
    print("\n\n".join(render_epsilon(r, head=head, every=every) for r in results))
    return EXIT_OK


def run_info_workflow(args: argparse.Namespace) -> int:
    """Print the IEEE 754 layout of both precisions."""
    cfg = resolve_config(args)
    infos = all_representation_info()

    if cfg.output.json_output:
        _emit_json([i.to_dict() for i in infos])
    else:
        print(render_representation_table(infos))
    return EXIT_OK


def run_conclusions_workflow(args: argparse.Namespace) -> int:
    """Print the summary block, using freshly probed epsilons."""
    cfg = resolve_config(args)
    results = probe_all(cfg.epsilon.precisions)
    print(render_conclusions(results))
    return EXIT_OK


# ---------------------------------------------------------------------------
# Horner
# ---------------------------------------------------------------------------


def run_horner_workflow(args: argparse.Namespace) -> int:
    """Compare classical and Horner evaluation of one polynomial."""
    cfg = resolve_config(args)
    poly = cfg.polynomial

    coeffs: list[float] = list(poly.coefficients)
    x = poly.x if args.x is None else args.x
    exact = poly.exact
    precision = poly.precision if args.precision is None else PrecisionKind.parse(args.precision)

    try:
        if args.interactive:
            coeffs = read_coefficients(args.degree, sys.stdin, sys.stdout)
            exact = None
        elif args.coeffs is not None:
            coeffs = parse_coefficients(args.coeffs)
            exact = None
    except CoefficientParseError as exc:
        logger.error("could not read coefficients", raw=exc.raw, index=exc.index)
        print(f"Invalid value: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    # The configured exact value belongs to the configured point only
    if args.x is not None and args.x != poly.x:
        exact = None
    if args.exact is not None:
        exact = args.exact

    try:
        with logger.timer("compare_methods"):
            result = compare_methods(coeffs, x, exact=exact, precision=precision)
    except ValueError as exc:
        logger.error("invalid polynomial", error=str(exc), kind=type(exc).__name__)
        print(f"Invalid polynomial: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    logger.info(
        "polynomial compared",
        degree=result.degree,
        precision=result.precision.value,
        classical_abs_error=result.classical.abs_error,
        horner_abs_error=result.horner.abs_error,
    )

    if cfg.output.json_output:
        _emit_json(result.to_dict())
    else:
        print(render_comparison(result))
    return EXIT_OK
