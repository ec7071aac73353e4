"""
Shared utilities: gauge type, unit conversion, and YAML table loading.
"""

from .conversion import (
    CM_PER_INCH,
    INCHES_PER_YARD,
    METERS_PER_YARD,
    inches_to_cm,
    inches_to_yards,
    sett_width_inches,
    warp_ends_for_width,
    weft_picks_for_length,
    yards_to_meters,
)
from .data import load_yaml
from .types import Gauge

__all__ = [
    # types
    "Gauge",
    # conversion
    "CM_PER_INCH",
    "INCHES_PER_YARD",
    "METERS_PER_YARD",
    "inches_to_cm",
    "inches_to_yards",
    "yards_to_meters",
    "warp_ends_for_width",
    "weft_picks_for_length",
    "sett_width_inches",
    # data
    "load_yaml",
]
