"""Test YAML/pydantic configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from floatlab.core.config import (
    FloatLabConfig,
    default_config,
    load_config,
    merge_config,
    save_config,
)
from floatlab.core.constants import TRIPLE_ROOT_COEFFS, TRIPLE_ROOT_EXACT, TRIPLE_ROOT_X
from floatlab.core.types import PrecisionKind

REPO_ROOT = Path(__file__).resolve().parent.parent


def test_defaults_describe_triple_root_case():
    cfg = default_config()
    assert cfg.polynomial.coefficients == list(TRIPLE_ROOT_COEFFS)
    assert cfg.polynomial.x == TRIPLE_ROOT_X
    assert cfg.polynomial.exact == TRIPLE_ROOT_EXACT
    assert cfg.polynomial.precision is PrecisionKind.SINGLE
    assert cfg.epsilon.precisions == [PrecisionKind.SINGLE, PrecisionKind.DOUBLE]
    assert cfg.output.json_output is False
    assert cfg.output.log_level == "INFO"


def test_shipped_config_matches_defaults():
    cfg = load_config(REPO_ROOT / "configs" / "default.yml")
    assert cfg == default_config()


def test_save_load_roundtrip(tmp_path):
    cfg = merge_config(default_config(), {"output": {"json": True}, "polynomial": {"precision": "double"}})
    path = tmp_path / "nested" / "cfg.yml"

    save_config(cfg, path)
    loaded = load_config(path)

    assert loaded == cfg
    assert loaded.output.json_output is True
    assert loaded.polynomial.precision is PrecisionKind.DOUBLE


def test_merge_is_deep():
    cfg = merge_config(default_config(), {"epsilon": {"trace_every": 2}})
    assert cfg.epsilon.trace_every == 2
    assert cfg.epsilon.trace_head == default_config().epsilon.trace_head


def test_precision_aliases():
    cfg = FloatLabConfig.model_validate(
        {"epsilon": {"precisions": ["float64"]}, "polynomial": {"precision": "float32"}}
    )
    assert cfg.epsilon.precisions == [PrecisionKind.DOUBLE]
    assert cfg.polynomial.precision is PrecisionKind.SINGLE


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_config(path) == default_config()


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_config("/nonexistent/floatlab.yml")


@pytest.mark.parametrize(
    "overrides",
    [
        {"polynomial": {"coefficients": []}},
        {"polynomial": {"coefficients": [1.0, float("inf")]}},
        {"epsilon": {"trace_every": 0}},
        {"epsilon": {"precisions": []}},
        {"output": {"log_level": "TRACE"}},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValidationError):
        merge_config(default_config(), overrides)
