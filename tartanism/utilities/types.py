"""
Core type definitions for the shared utilities layer.

All types are frozen dataclasses with fail-fast validation in __post_init__.
"""

from __future__ import annotations

from dataclasses import dataclass

from tartanism.errors import ArithmeticPreconditionError


@dataclass(frozen=True)
class Gauge:
    """
    Weaving gauge: warp ends and weft picks per inch.

    Both values must be strictly positive. A balanced tartan has equal
    ends and picks; use :meth:`square` to build one from a single number.
    """

    ends_per_inch: float
    picks_per_inch: float

    def __post_init__(self) -> None:
        if self.ends_per_inch <= 0:
            raise ArithmeticPreconditionError(
                f"ends_per_inch must be positive, got {self.ends_per_inch}"
            )
        if self.picks_per_inch <= 0:
            raise ArithmeticPreconditionError(
                f"picks_per_inch must be positive, got {self.picks_per_inch}"
            )

    @classmethod
    def square(cls, threads_per_inch: float) -> Gauge:
        """Return a balanced gauge with the same density on both axes."""
        return cls(ends_per_inch=threads_per_inch, picks_per_inch=threads_per_inch)
