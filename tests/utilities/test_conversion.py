"""Tests for unit conversion functions."""

import pytest

from tartanism.utilities.conversion import (
    CM_PER_INCH,
    inches_to_cm,
    inches_to_yards,
    sett_width_inches,
    warp_ends_for_width,
    weft_picks_for_length,
    yards_to_meters,
)
from tartanism.utilities.types import Gauge


@pytest.fixture(scope="module")
def kilt_gauge():
    """Typical kilt-weight cloth: 28 ends and 26 picks per inch."""
    return Gauge(ends_per_inch=28.0, picks_per_inch=26.0)


class TestInchesCentimeters:
    def test_inches_to_cm_one_inch(self):
        assert inches_to_cm(1.0) == CM_PER_INCH

    def test_scarf_width(self):
        assert inches_to_cm(18.0) == pytest.approx(45.72)


class TestYards:
    def test_inches_to_yards(self):
        assert inches_to_yards(72.0) == 2.0

    def test_yards_to_meters(self):
        assert yards_to_meters(1.0) == pytest.approx(0.9144)


class TestThreadCounts:
    def test_warp_ends_exact(self, kilt_gauge):
        assert warp_ends_for_width(10.0, kilt_gauge) == 280

    def test_warp_ends_rounded_up(self, kilt_gauge):
        assert warp_ends_for_width(10.01, kilt_gauge) == 281

    def test_weft_uses_picks(self, kilt_gauge):
        assert weft_picks_for_length(10.0, kilt_gauge) == 260

    def test_sett_width(self):
        assert sett_width_inches(182, 24.0) == pytest.approx(7.5833, rel=1e-4)
