"""Pytest configuration for floatlab.

CLI workflows change the global log level; restore it after every test so
tests do not depend on execution order.
"""

from __future__ import annotations

import pytest

from floatlab.core.logging import set_log_level


@pytest.fixture(autouse=True)
def _reset_log_level():
    yield
    set_log_level("INFO")
