"""Machine epsilon probing and floating-point representation facts."""

from .probe import probe_all, probe_epsilon
from .representation import all_representation_info, representation_info

__all__ = [
    "probe_epsilon",
    "probe_all",
    "representation_info",
    "all_representation_info",
]
