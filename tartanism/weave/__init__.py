"""
Weave structure engine: the fixed weave catalog and intersection lookup.
"""

from tartanism.weave.intersection import (
    Threads,
    get_intersection_color,
    is_warp_on_top,
    iter_rows,
)
from tartanism.weave.registry import WEAVE_PATTERNS, WeaveRegistry, get_weave_registry
from tartanism.weave.types import WeavePattern, WeaveType

__all__ = [
    # types
    "WeaveType",
    "WeavePattern",
    "Threads",
    # registry
    "WEAVE_PATTERNS",
    "WeaveRegistry",
    "get_weave_registry",
    # intersection
    "is_warp_on_top",
    "get_intersection_color",
    "iter_rows",
]
