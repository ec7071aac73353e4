"""
Weave structure types.

WeaveType is the closed vocabulary of weave families; WeavePattern is the
data record for one family (tie-up, threading, treadling).  Patterns are
loaded from ``data/weaves.yaml`` and frozen after startup.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WeaveType(str, Enum):
    """Weave families in the catalog."""

    PLAIN = "plain"
    TWILL_2_2 = "twill-2-2"
    TWILL_3_1 = "twill-3-1"
    HERRINGBONE = "herringbone"
    HOUNDSTOOTH = "houndstooth"
    BASKET = "basket"


@dataclass(frozen=True)
class WeavePattern:
    """
    Loom setup for one weave.

    Attributes:
        id: Catalog identifier (a WeaveType value for catalog entries).
        name: Display name.
        tie_up: ``tie_up[treadle][shaft]`` is True when that treadle raises
            that shaft, i.e. the warp is on top at the crossing.
        threading: Shaft index per warp thread, cycled.
        treadling: Treadle index per weft pick, cycled.
        description: Free text.
    """

    id: str
    name: str
    tie_up: tuple[tuple[bool, ...], ...]
    threading: tuple[int, ...]
    treadling: tuple[int, ...]
    description: str = ""

    @property
    def treadle_count(self) -> int:
        return len(self.tie_up)

    @property
    def shaft_count(self) -> int:
        return len(self.tie_up[0]) if self.tie_up else 0

    def index_errors(self) -> list[str]:
        """Every structural problem with this pattern; empty when it is usable."""
        errors: list[str] = []
        if not self.tie_up or not self.tie_up[0]:
            errors.append(f"weave {self.id!r}: tie_up is empty")
            return errors
        shafts = self.shaft_count
        for t, row in enumerate(self.tie_up):
            if len(row) != shafts:
                errors.append(
                    f"weave {self.id!r}: tie_up row {t} has {len(row)} shafts, expected {shafts}"
                )
        if not self.threading:
            errors.append(f"weave {self.id!r}: threading is empty")
        if not self.treadling:
            errors.append(f"weave {self.id!r}: treadling is empty")
        for i, shaft in enumerate(self.threading):
            if not 0 <= shaft < shafts:
                errors.append(f"weave {self.id!r}: threading[{i}]={shaft} is not a shaft index")
        for i, treadle in enumerate(self.treadling):
            if not 0 <= treadle < self.treadle_count:
                errors.append(
                    f"weave {self.id!r}: treadling[{i}]={treadle} is not a treadle index"
                )
        return errors
