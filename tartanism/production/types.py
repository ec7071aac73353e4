"""
Production types: yarn profiles, product templates, and calculation results.

All types are frozen dataclasses.  Lengths are in yards, weights in grams,
and dimensions in inches.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tartanism.errors import ArithmeticPreconditionError
from tartanism.utilities.types import Gauge


class YarnWeight(str, Enum):
    """Standard yarn weight classes, finest first."""

    LACE = "lace"
    FINGERING = "fingering"
    SPORT = "sport"
    DK = "dk"
    WORSTED = "worsted"
    ARAN = "aran"
    BULKY = "bulky"


@dataclass(frozen=True)
class YarnProfile:
    """
    Physical properties of one yarn weight class.

    Attributes:
        weight_class: Which class this profile describes.
        wpi: Wraps per inch.
        yards_per_100g: Length of 100 g of yarn.
        skein_grams: Weight of one skein as sold.
    """

    weight_class: YarnWeight
    wpi: int
    yards_per_100g: float
    skein_grams: float = 100.0

    def __post_init__(self) -> None:
        if self.yards_per_100g <= 0:
            raise ArithmeticPreconditionError(
                f"yards_per_100g must be positive, got {self.yards_per_100g}"
            )
        if self.skein_grams <= 0:
            raise ArithmeticPreconditionError(
                f"skein_grams must be positive, got {self.skein_grams}"
            )

    @property
    def yards_per_skein(self) -> float:
        return self.yards_per_100g * self.skein_grams / 100.0


@dataclass(frozen=True)
class ProductTemplate:
    """
    A finished product the calculator can plan yarn for.

    Attributes:
        key: Registry key, e.g. ``"scarf-wide"``.
        name: Display name.
        description: Free text.
        width_in: Finished width; sets the number of warp ends.
        length_in: Finished length; sets the number of weft picks.
        yarn_weight: Default yarn weight class.
        gauge: Default ends and picks per inch.
        waste_multiplier: Loom waste and take-up allowance (> 1.0).
    """

    key: str
    name: str
    description: str
    width_in: float
    length_in: float
    yarn_weight: YarnWeight
    gauge: Gauge
    waste_multiplier: float = 1.15

    def __post_init__(self) -> None:
        if self.width_in <= 0 or self.length_in <= 0:
            raise ArithmeticPreconditionError(
                f"product {self.key!r}: dimensions must be positive, "
                f"got {self.width_in} x {self.length_in}"
            )
        if self.waste_multiplier <= 1.0:
            raise ArithmeticPreconditionError(
                f"product {self.key!r}: waste_multiplier must be > 1.0, "
                f"got {self.waste_multiplier}"
            )


@dataclass(frozen=True)
class YarnOptions:
    """
    Per-call overrides for a product template.  ``None`` keeps the template value.

    ``gauge`` may be a :class:`Gauge` or a single threads-per-inch number.
    """

    gauge: Gauge | float | None = None
    yarn_weight: YarnWeight | None = None
    waste_multiplier: float | None = None

    def __post_init__(self) -> None:
        if self.gauge is not None and not isinstance(self.gauge, Gauge):
            object.__setattr__(self, "gauge", Gauge.square(self.gauge))
        if self.yarn_weight is not None:
            object.__setattr__(self, "yarn_weight", YarnWeight(self.yarn_weight))
        if self.waste_multiplier is not None and self.waste_multiplier <= 1.0:
            raise ArithmeticPreconditionError(
                f"waste_multiplier must be > 1.0, got {self.waste_multiplier}"
            )


@dataclass(frozen=True)
class ColorRequirement:
    """Yarn needed for one color.  Yardage is unrounded; skeins are whole."""

    color: str
    color_name: str
    hex: str
    warp_yards: float
    weft_yards: float
    total_yards: float
    skeins: int
    weight_grams: float


@dataclass(frozen=True)
class YarnCalculation:
    """
    Full yarn plan for one sett woven as one product.

    Attributes:
        product: Template the plan was made for.
        yarn_profile: Yarn weight actually used.
        gauge: Gauge actually used.
        waste_multiplier: Waste allowance actually applied.
        warp_ends: Physical warp threads across the width.
        weft_picks: Physical weft threads along the length.
        requirements: One entry per sett color, in first-appearance order.
        total_yards: Grand total computed from the thread counts directly,
            not by summing ``requirements``.
        total_skeins: Sum of the per-color whole skeins.
        total_weight_grams: Weight of ``total_yards`` of this yarn.
        repeat_width_in: Width of one sett repeat across the warp at this gauge.
    """

    product: ProductTemplate
    yarn_profile: YarnProfile
    gauge: Gauge
    waste_multiplier: float
    warp_ends: int
    weft_picks: int
    requirements: tuple[ColorRequirement, ...]
    total_yards: float
    total_skeins: int
    total_weight_grams: float
    repeat_width_in: float = 0.0


@dataclass(frozen=True)
class ColorCost:
    color: str
    skeins: int
    cost: float


@dataclass(frozen=True)
class CostEstimate:
    """Yarn cost at a flat price per skein."""

    cost_per_skein: float
    color_costs: tuple[ColorCost, ...]
    total_yarn_cost: float
