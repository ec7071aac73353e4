"""
Tartanism: procedural tartan design.

Threadcount notation, sett expansion, the weave intersection engine, a
seeded constraint-driven generator, WIF loom-draft export, and yarn
planning for woven products.
"""

import logging

from tartanism.errors import (
    ArithmeticPreconditionError,
    ConstraintError,
    ExportPreconditionError,
    NotationError,
    NotationErrorKind,
    StructuralError,
    TartanismError,
    WifReadError,
)
from tartanism.export import LoomDraft, WifDraft, WifMetadata, generate_wif, read_wif
from tartanism.generator import (
    DEFAULT_CONSTRAINTS,
    BreedingStrategy,
    GeneratorConstraints,
    GeneratorResult,
    IntRange,
    Signature,
    Symmetry,
    breed,
    compute_signature,
    generate_batch,
    generate_tartan,
    mutate,
)
from tartanism.palette import RGB, ColorPreset, Palette, PaletteColor, get_palette
from tartanism.production import (
    PRODUCT_TEMPLATES,
    YARN_PROFILES,
    ColorRequirement,
    CostEstimate,
    ProductTemplate,
    YarnCalculation,
    YarnOptions,
    YarnProfile,
    YarnWeight,
    calculate,
    calculate_for_product,
    estimate_cost,
    format_materials_summary,
    get_production_registry,
)
from tartanism.sett import (
    ExpandedSett,
    Sett,
    TartanCategory,
    TartanRecord,
    ThreadStripe,
    expand_sett,
    get_tartan_library,
    parse,
    parse_threadcount,
    serialize,
)
from tartanism.utilities import Gauge
from tartanism.weave import (
    WEAVE_PATTERNS,
    WeavePattern,
    WeaveType,
    get_intersection_color,
    get_weave_registry,
    iter_rows,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # errors
    "TartanismError",
    "NotationError",
    "NotationErrorKind",
    "ConstraintError",
    "StructuralError",
    "ExportPreconditionError",
    "ArithmeticPreconditionError",
    "WifReadError",
    # sett
    "ThreadStripe",
    "Sett",
    "ExpandedSett",
    "parse",
    "parse_threadcount",
    "serialize",
    "expand_sett",
    "TartanCategory",
    "TartanRecord",
    "get_tartan_library",
    # palette
    "RGB",
    "PaletteColor",
    "ColorPreset",
    "Palette",
    "get_palette",
    # weave
    "WeaveType",
    "WeavePattern",
    "WEAVE_PATTERNS",
    "get_weave_registry",
    "get_intersection_color",
    "iter_rows",
    # generator
    "IntRange",
    "Symmetry",
    "GeneratorConstraints",
    "DEFAULT_CONSTRAINTS",
    "Signature",
    "GeneratorResult",
    "BreedingStrategy",
    "generate_tartan",
    "generate_batch",
    "compute_signature",
    "mutate",
    "breed",
    # export
    "WifMetadata",
    "WifDraft",
    "LoomDraft",
    "generate_wif",
    "read_wif",
    # production
    "Gauge",
    "YarnWeight",
    "YarnProfile",
    "ProductTemplate",
    "YarnOptions",
    "ColorRequirement",
    "YarnCalculation",
    "CostEstimate",
    "PRODUCT_TEMPLATES",
    "YARN_PROFILES",
    "get_production_registry",
    "calculate",
    "calculate_for_product",
    "estimate_cost",
    "format_materials_summary",
]
