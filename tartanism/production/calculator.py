"""
Yarn calculator: yardage, skeins, weight, and cost for a sett woven as a product.

Method
------
1. Warp ends = ceil(width x ends_per_inch); weft picks = ceil(length x picks_per_inch).
2. Every warp end runs the product length and every pick runs its width, so
   the raw yardage per axis is ``threads x span / 36``, times the waste
   multiplier.
3. Each color gets the share of that yardage equal to its share of the
   expanded sett's threads.  Shares are kept as floats so the per-color
   totals add up to the grand total.
4. Grams follow from the yarn profile's yards per 100 g; skeins are rounded
   up per color.
"""

from __future__ import annotations

import logging
import math

from tartanism.errors import ArithmeticPreconditionError
from tartanism.palette import Palette, get_palette
from tartanism.production.registry import get_production_registry
from tartanism.production.types import (
    ColorCost,
    ColorRequirement,
    CostEstimate,
    ProductTemplate,
    YarnCalculation,
    YarnOptions,
)
from tartanism.sett.expansion import expand_sett
from tartanism.sett.types import Sett
from tartanism.utilities.conversion import (
    inches_to_cm,
    inches_to_yards,
    sett_width_inches,
    warp_ends_for_width,
    weft_picks_for_length,
    yards_to_meters,
)
from tartanism.utilities.types import Gauge

logger = logging.getLogger(__name__)

DEFAULT_COST_PER_SKEIN = 12.0


def calculate(
    sett: Sett,
    template: ProductTemplate,
    options: YarnOptions | None = None,
    palette: Palette | None = None,
) -> YarnCalculation:
    """Plan the yarn needed to weave *template* in *sett*.

    Raises:
        ArithmeticPreconditionError: If the sett has no threads.  A zero or
            negative gauge is rejected when the Gauge is built.
    """
    if not sett.stripes or sett.total_threads == 0:
        raise ArithmeticPreconditionError("cannot plan yarn for a sett with no threads")

    options = options or YarnOptions()
    palette = palette or get_palette()
    gauge = options.gauge if isinstance(options.gauge, Gauge) else template.gauge
    profile = get_production_registry().profile(options.yarn_weight or template.yarn_weight)
    waste = options.waste_multiplier or template.waste_multiplier

    threads = expand_sett(sett)
    counts = threads.color_counts()
    unit = len(threads)

    warp_ends = warp_ends_for_width(template.width_in, gauge)
    weft_picks = weft_picks_for_length(template.length_in, gauge)
    warp_total = warp_ends * inches_to_yards(template.length_in) * waste
    weft_total = weft_picks * inches_to_yards(template.width_in) * waste
    grand_total = warp_total + weft_total

    requirements = []
    for code, count in counts.items():
        share = count / unit
        warp_yards = warp_total * share
        weft_yards = weft_total * share
        total = warp_yards + weft_yards
        color = palette.lookup(code)
        requirements.append(
            ColorRequirement(
                color=code,
                color_name=color.name if color else code,
                hex=color.hex if color else "",
                warp_yards=warp_yards,
                weft_yards=weft_yards,
                total_yards=total,
                skeins=math.ceil(total / profile.yards_per_skein),
                weight_grams=total / profile.yards_per_100g * 100.0,
            )
        )

    calculation = YarnCalculation(
        product=template,
        yarn_profile=profile,
        gauge=gauge,
        waste_multiplier=waste,
        warp_ends=warp_ends,
        weft_picks=weft_picks,
        requirements=tuple(requirements),
        total_yards=grand_total,
        total_skeins=sum(r.skeins for r in requirements),
        total_weight_grams=grand_total / profile.yards_per_100g * 100.0,
        repeat_width_in=sett_width_inches(unit, gauge.ends_per_inch),
    )
    logger.info(
        "Yarn plan for %s: %d ends x %d picks, %.0f yd, %d skeins",
        template.key,
        warp_ends,
        weft_picks,
        grand_total,
        calculation.total_skeins,
    )
    return calculation


def calculate_for_product(
    sett: Sett,
    product_key: str,
    options: YarnOptions | None = None,
    palette: Palette | None = None,
) -> YarnCalculation:
    """:func:`calculate` for the registered product *product_key*.

    Raises:
        KeyError: If no product template has that key.
    """
    template = get_production_registry().product(product_key)
    return calculate(sett, template, options, palette)


def estimate_cost(
    calculation: YarnCalculation, cost_per_skein: float = DEFAULT_COST_PER_SKEIN
) -> CostEstimate:
    """Price every color's skeins at *cost_per_skein*."""
    if cost_per_skein < 0:
        raise ValueError(f"cost_per_skein must be >= 0, got {cost_per_skein}")
    color_costs = tuple(
        ColorCost(color=r.color, skeins=r.skeins, cost=r.skeins * cost_per_skein)
        for r in calculation.requirements
    )
    return CostEstimate(
        cost_per_skein=cost_per_skein,
        color_costs=color_costs,
        total_yarn_cost=sum(c.cost for c in color_costs),
    )


def format_materials_summary(calculation: YarnCalculation) -> str:
    """Plain-text materials block for a production spec sheet."""
    product = calculation.product
    profile = calculation.yarn_profile
    gauge = calculation.gauge
    lines = [
        "MATERIALS",
        "---------",
        f'Product: {product.name} ({product.width_in:g}" x {product.length_in:g}", '
        f"{inches_to_cm(product.width_in):.0f} x {inches_to_cm(product.length_in):.0f} cm)",
        f"Yarn: {profile.weight_class.value} ({profile.wpi} WPI, "
        f"{profile.yards_per_100g:g} yd/100g, {profile.skein_grams:g} g skeins)",
        f"Gauge: {gauge.ends_per_inch:g} ends/in x {gauge.picks_per_inch:g} picks/in",
        f"Warp: {calculation.warp_ends} ends | Weft: {calculation.weft_picks} picks",
        f'Sett repeat: {calculation.repeat_width_in:.2f}" across the warp',
        f"Waste allowance: {(calculation.waste_multiplier - 1) * 100:.0f}%",
        "",
    ]
    for r in calculation.requirements:
        lines.append(
            f"  {r.color:<4} {r.color_name:<20} {r.total_yards:>8.0f} yd "
            f"{r.skeins:>3} skeins {r.weight_grams:>7.0f} g"
        )
    lines += [
        "",
        f"Total: {calculation.total_yards:.0f} yd ({yards_to_meters(calculation.total_yards):.0f} m), "
        f"{calculation.total_skeins} skeins, "
        f"{calculation.total_weight_grams:.0f} g",
    ]
    return "\n".join(lines)
