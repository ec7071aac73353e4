"""
Evolution: mutate a result into variants, breed two results into children.

Both operations are deterministic in their seeds.  Children and variants
record the seeds they came from in ``GeneratorResult.parents``.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import replace
from enum import Enum

from tartanism.errors import StructuralError
from tartanism.generator.generator import generate_tartan
from tartanism.generator.signature import compute_signature
from tartanism.generator.types import GeneratorResult
from tartanism.palette import Palette
from tartanism.sett.types import Sett, ThreadStripe

logger = logging.getLogger(__name__)

MUTATION_SEED_OFFSET = 1000
MUTATION_KEEP_PROBABILITY = 0.5
RANDOM_MIX_SUBSTITUTION_PROBABILITY = 0.3


# ── Mutation ───────────────────────────────────────────────────────────────────


def mutate(
    base: GeneratorResult,
    n: int = 4,
    palette: Palette | None = None,
) -> list[GeneratorResult]:
    """Return *n* variants of *base*.

    Variant *i* is a fresh sett generated under ``base.constraints`` with seed
    ``base.seed + 1000 + i``.  Each stripe position it shares with *base* then
    takes the base color with probability 0.5, unless that would make the
    stripe match a neighbour.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    base_stripes = base.sett.stripes
    variants: list[GeneratorResult] = []
    for i in range(n):
        seed = base.seed + MUTATION_SEED_OFFSET + i
        fresh = generate_tartan(base.constraints, seed, palette)
        # Separate stream from the one generate_tartan consumed for this seed.
        rng = random.Random(f"mutate-{seed}")
        stripes = list(fresh.sett.stripes)
        for idx in range(min(len(stripes), len(base_stripes))):
            if rng.random() >= MUTATION_KEEP_PROBABILITY:
                continue
            code = base_stripes[idx].color_code
            prev_code = stripes[idx - 1].color_code if idx > 0 else None
            next_code = stripes[idx + 1].color_code if idx + 1 < len(stripes) else None
            if code != prev_code and code != next_code:
                stripes[idx] = replace(stripes[idx], color_code=code)
        sett = Sett(tuple(stripes))
        variants.append(
            GeneratorResult(
                sett=sett,
                seed=seed,
                constraints=base.constraints,
                signature=compute_signature(sett),
                best_effort=fresh.best_effort,
                parents=(base.seed,),
                origin="mutate",
            )
        )
    logger.debug("Mutated seed %d into %d variants", base.seed, n)
    return variants


# ── Breeding ───────────────────────────────────────────────────────────────────


class BreedingStrategy(str, Enum):
    INTERLEAVE = "interleave"
    STRUCTURE_A_COLORS_B = "structure-a-colors-b"
    STRUCTURE_B_COLORS_A = "structure-b-colors-a"
    RANDOM_MIX = "random-mix"


StripeRecipe = Callable[[Sett, Sett, random.Random, Sequence[str]], list[ThreadStripe]]


def _interleave(a: Sett, b: Sett, rng: random.Random, union: Sequence[str]) -> list[ThreadStripe]:
    # Even positions from a, odd from b; the longer parent fills the tail.
    out = []
    for j in range(max(len(a.stripes), len(b.stripes))):
        if j % 2 == 0:
            donor = a if j < len(a.stripes) else b
        else:
            donor = b if j < len(b.stripes) else a
        out.append(donor.stripes[j])
    return out


def _recolor(structure: Sett, colors: Sett) -> list[ThreadStripe]:
    palette = colors.colors
    return [
        ThreadStripe(palette[i % len(palette)], s.count) for i, s in enumerate(structure.stripes)
    ]


def _structure_a_colors_b(
    a: Sett, b: Sett, rng: random.Random, union: Sequence[str]
) -> list[ThreadStripe]:
    return _recolor(a, b)


def _structure_b_colors_a(
    a: Sett, b: Sett, rng: random.Random, union: Sequence[str]
) -> list[ThreadStripe]:
    return _recolor(b, a)


def _random_mix(a: Sett, b: Sett, rng: random.Random, union: Sequence[str]) -> list[ThreadStripe]:
    out = []
    for j in range(max(len(a.stripes), len(b.stripes))):
        donor = a if rng.random() < 0.5 else b
        stripe = donor.stripes[j % len(donor.stripes)]
        code = stripe.color_code
        if rng.random() < RANDOM_MIX_SUBSTITUTION_PROBABILITY:
            code = rng.choice(union)
        out.append(ThreadStripe(code, stripe.count))
    return out


BREEDING_STRATEGIES: tuple[tuple[BreedingStrategy, StripeRecipe], ...] = (
    (BreedingStrategy.INTERLEAVE, _interleave),
    (BreedingStrategy.STRUCTURE_A_COLORS_B, _structure_a_colors_b),
    (BreedingStrategy.STRUCTURE_B_COLORS_A, _structure_b_colors_a),
    (BreedingStrategy.RANDOM_MIX, _random_mix),
)


def _pivot_ends(stripes: list[ThreadStripe]) -> list[ThreadStripe]:
    last = len(stripes) - 1
    return [replace(s, is_pivot=i in (0, last)) for i, s in enumerate(stripes)]


def _separate_adjacent(
    stripes: list[ThreadStripe], union: Sequence[str], rng: random.Random
) -> tuple[list[ThreadStripe], bool]:
    """Recolor stripes that repeat their predecessor. False if one could not be fixed."""
    out = list(stripes)
    clean = True
    for i in range(1, len(out)):
        prev_code = out[i - 1].color_code
        if out[i].color_code != prev_code:
            continue
        next_code = out[i + 1].color_code if i + 1 < len(out) else None
        options = [c for c in union if c != prev_code and c != next_code]
        if not options:
            options = [c for c in union if c != prev_code]
        if not options:
            clean = False
            continue
        out[i] = replace(out[i], color_code=rng.choice(options))
    return out, clean


def breed(
    parent_a: GeneratorResult,
    parent_b: GeneratorResult,
    seed: int | None = None,
) -> list[GeneratorResult]:
    """Cross two results into one child per breeding strategy.

    Child *i* uses seed ``seed + i``; *seed* defaults to the sum of the
    parents' seeds.  Every child is pivoted at both ends and has no two
    adjacent stripes of the same color, unless the parents share only one
    color between them, in which case the child is marked ``best_effort``.

    Raises:
        StructuralError: If either parent has no stripes.
    """
    a, b = parent_a.sett, parent_b.sett
    if not a.stripes or not b.stripes:
        raise StructuralError("cannot breed a sett with no stripes")
    if seed is None:
        seed = parent_a.seed + parent_b.seed
    union = tuple(dict.fromkeys(a.colors + b.colors))

    children: list[GeneratorResult] = []
    for i, (strategy, recipe) in enumerate(BREEDING_STRATEGIES):
        child_seed = seed + i
        rng = random.Random(child_seed)
        stripes = _pivot_ends(recipe(a, b, rng, union))
        stripes, clean = _separate_adjacent(stripes, union, rng)
        if not clean:
            logger.warning(
                "Breeding %s: parents share a single color, child has adjacent repeats",
                strategy.value,
            )
        sett = Sett(tuple(stripes))
        children.append(
            GeneratorResult(
                sett=sett,
                seed=child_seed,
                constraints=parent_a.constraints,
                signature=compute_signature(sett),
                best_effort=not clean,
                parents=(parent_a.seed, parent_b.seed),
                origin=strategy.value,
            )
        )
    return children
