"""
Generator: seeded sett synthesis, batches, mutation, and breeding.
"""

from tartanism.generator.evolution import BREEDING_STRATEGIES, BreedingStrategy, breed, mutate
from tartanism.generator.generator import (
    MAX_BATCH_ATTEMPTS,
    MAX_SYNTHESIS_ATTEMPTS,
    generate_batch,
    generate_tartan,
    resolve_allowed_colors,
    synthesize_sett,
)
from tartanism.generator.signature import compute_signature
from tartanism.generator.types import (
    DEFAULT_CONSTRAINTS,
    GeneratorConstraints,
    GeneratorResult,
    IntRange,
    Signature,
    Symmetry,
)

__all__ = [
    # types
    "IntRange",
    "Symmetry",
    "GeneratorConstraints",
    "DEFAULT_CONSTRAINTS",
    "Signature",
    "GeneratorResult",
    # synthesis
    "generate_tartan",
    "generate_batch",
    "synthesize_sett",
    "resolve_allowed_colors",
    "compute_signature",
    "MAX_SYNTHESIS_ATTEMPTS",
    "MAX_BATCH_ATTEMPTS",
    # evolution
    "mutate",
    "breed",
    "BreedingStrategy",
    "BREEDING_STRATEGIES",
]
