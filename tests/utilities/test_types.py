"""Tests for the Gauge value type."""

import pytest

from tartanism.errors import ArithmeticPreconditionError
from tartanism.utilities.types import Gauge


class TestGauge:
    def test_construction(self):
        gauge = Gauge(ends_per_inch=24.0, picks_per_inch=22.0)
        assert gauge.ends_per_inch == 24.0
        assert gauge.picks_per_inch == 22.0

    def test_square(self):
        assert Gauge.square(24) == Gauge(24, 24)

    @pytest.mark.parametrize("ends,picks", [(0, 24), (24, 0), (-1, 24), (24, -0.5)])
    def test_rejects_non_positive(self, ends, picks):
        with pytest.raises(ArithmeticPreconditionError):
            Gauge(ends, picks)

    def test_is_frozen(self):
        gauge = Gauge.square(24)
        with pytest.raises(AttributeError):
            gauge.ends_per_inch = 12  # type: ignore[misc]
