"""Configuration management with pydantic and YAML support."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from .constants import (
    TRACE_EVERY,
    TRACE_HEAD,
    TRIPLE_ROOT_COEFFS,
    TRIPLE_ROOT_EXACT,
    TRIPLE_ROOT_X,
)
from .types import PrecisionKind


class EpsilonConfig(BaseModel):
    """Machine epsilon probe settings."""

    precisions: list[PrecisionKind] = Field(
        default_factory=lambda: [PrecisionKind.SINGLE, PrecisionKind.DOUBLE], min_length=1
    )
    trace_head: int = Field(default=TRACE_HEAD, ge=0)
    trace_every: int = Field(default=TRACE_EVERY, ge=1)

    @field_validator("precisions", mode="before")
    @classmethod
    def _parse_precisions(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [PrecisionKind.parse(v) for v in value]
        return value


class PolynomialConfig(BaseModel):
    """Polynomial comparison settings."""

    coefficients: list[float] = Field(default_factory=lambda: list(TRIPLE_ROOT_COEFFS), min_length=1)
    x: float = TRIPLE_ROOT_X
    exact: float | None = TRIPLE_ROOT_EXACT
    precision: PrecisionKind = PrecisionKind.SINGLE

    @field_validator("precision", mode="before")
    @classmethod
    def _parse_precision(cls, value: Any) -> Any:
        if isinstance(value, str):
            return PrecisionKind.parse(value)
        return value

    @field_validator("coefficients")
    @classmethod
    def _finite_coefficients(cls, value: list[float]) -> list[float]:
        if not all(math.isfinite(c) for c in value):
            raise ValueError("coefficients must be finite")
        return value


class OutputConfig(BaseModel):
    """Report output settings."""

    json_output: bool = Field(default=False, alias="json")
    log_level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = "INFO"

    model_config = {"populate_by_name": True}


class FloatLabConfig(BaseModel):
    """Root configuration object."""

    epsilon: EpsilonConfig = Field(default_factory=EpsilonConfig)
    polynomial: PolynomialConfig = Field(default_factory=PolynomialConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: str | Path) -> FloatLabConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Parsed FloatLabConfig object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return FloatLabConfig.model_validate(data or {})


def save_config(config: FloatLabConfig, path: str | Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save.
        path: Output path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json", by_alias=True), f, default_flow_style=False)


def default_config() -> FloatLabConfig:
    """Return default configuration."""
    return FloatLabConfig()


def merge_config(base: FloatLabConfig, overrides: dict[str, Any]) -> FloatLabConfig:
    """Merge overrides into base configuration.

    Args:
        base: Base configuration.
        overrides: Dictionary of override values.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.model_dump(mode="json", by_alias=True)

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    merged = deep_merge(base_dict, overrides)
    return FloatLabConfig.model_validate(merged)
