"""
Unit conversion between physical dimensions, thread counts, and yarn lengths.

Product dimensions are in inches and yarn lengths in yards unless otherwise
noted. All functions are pure.
"""

from __future__ import annotations

import math

from .types import Gauge

CM_PER_INCH: float = 2.54
INCHES_PER_YARD: float = 36.0
METERS_PER_YARD: float = 0.9144


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * CM_PER_INCH


def inches_to_yards(inches: float) -> float:
    """Convert inches to yards."""
    return inches / INCHES_PER_YARD


def yards_to_meters(yards: float) -> float:
    """Convert yards to meters."""
    return yards * METERS_PER_YARD


def warp_ends_for_width(width_in: float, gauge: Gauge) -> int:
    """Number of warp ends needed to fill *width_in* at *gauge*, rounded up."""
    return math.ceil(width_in * gauge.ends_per_inch)


def weft_picks_for_length(length_in: float, gauge: Gauge) -> int:
    """Number of weft picks needed to fill *length_in* at *gauge*, rounded up."""
    return math.ceil(length_in * gauge.picks_per_inch)


def sett_width_inches(thread_count: int, threads_per_inch: float) -> float:
    """Physical width in inches of *thread_count* threads at a given density."""
    return thread_count / threads_per_inch
