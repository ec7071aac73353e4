"""
Production planning: yarn profiles, product templates, yardage and cost.
"""

from tartanism.production.calculator import (
    DEFAULT_COST_PER_SKEIN,
    calculate,
    calculate_for_product,
    estimate_cost,
    format_materials_summary,
)
from tartanism.production.registry import (
    PRODUCT_TEMPLATES,
    YARN_PROFILES,
    ProductionRegistry,
    get_production_registry,
)
from tartanism.production.types import (
    ColorCost,
    ColorRequirement,
    CostEstimate,
    ProductTemplate,
    YarnCalculation,
    YarnOptions,
    YarnProfile,
    YarnWeight,
)

__all__ = [
    # types
    "YarnWeight",
    "YarnProfile",
    "ProductTemplate",
    "YarnOptions",
    "ColorRequirement",
    "YarnCalculation",
    "ColorCost",
    "CostEstimate",
    # registry
    "ProductionRegistry",
    "PRODUCT_TEMPLATES",
    "YARN_PROFILES",
    "get_production_registry",
    # calculator
    "calculate",
    "calculate_for_product",
    "estimate_cost",
    "format_materials_summary",
    "DEFAULT_COST_PER_SKEIN",
]
