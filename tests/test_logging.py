"""Test structured logging."""

import io
import json

import pytest

from floatlab.core.logging import StructuredLogger, get_logger, set_log_level


def test_records_are_json_lines():
    out = io.StringIO()
    log = StructuredLogger("floatlab.test", output=out)
    log.info("probed", epsilon=2.0**-23)

    record = json.loads(out.getvalue())
    assert record["level"] == "INFO"
    assert record["message"] == "probed"
    assert record["logger"] == "floatlab.test"
    assert record["epsilon"] == 2.0**-23


def test_level_filtering():
    out = io.StringIO()
    log = StructuredLogger("floatlab.test", output=out, min_level="WARN")
    log.info("hidden")
    log.warn("shown")
    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["level"] == "WARN"


def test_timer_logs_at_debug():
    out = io.StringIO()
    log = StructuredLogger("floatlab.test", output=out, min_level="DEBUG")
    with log.timer("work"):
        pass
    record = json.loads(out.getvalue())
    assert record["message"] == "work completed"
    assert record["elapsed_ms"] >= 0.0


def test_get_logger_is_cached_and_follows_global_level():
    a = get_logger("floatlab.cached")
    assert get_logger("floatlab.cached") is a
    set_log_level("debug")
    assert a.level == "DEBUG"
    assert get_logger("floatlab.created_later").level == "DEBUG"


def test_unknown_level_rejected():
    with pytest.raises(ValueError, match="Unknown log level"):
        set_log_level("TRACE")
