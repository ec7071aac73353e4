"""
Seeded sett synthesis.

Every random draw goes through an explicit ``random.Random`` instance, so a
given (constraints, seed, palette) triple always yields the same sett.
Retry loops are bounded: when one runs out the result is accepted anyway,
flagged ``best_effort``, and a warning is logged.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace

from tartanism.errors import ConstraintError
from tartanism.generator.signature import compute_signature
from tartanism.generator.types import (
    DEFAULT_CONSTRAINTS,
    GeneratorConstraints,
    GeneratorResult,
    Symmetry,
)
from tartanism.palette import Palette, get_palette
from tartanism.sett.types import Sett, ThreadStripe

logger = logging.getLogger(__name__)

# Raw (stripe count, widths) draws before falling back to width repair.
MAX_SYNTHESIS_ATTEMPTS = 50
# Candidates per batch slot before accepting a duplicate structure.
MAX_BATCH_ATTEMPTS = 20


def resolve_allowed_colors(
    constraints: GeneratorConstraints, palette: Palette | None = None
) -> tuple[str, ...]:
    """Color codes synthesis may draw from.

    Raises:
        ConstraintError: If a code is not in *palette*, or there are too few
            colors for the requested color count or for adjacent stripes
            to differ.
    """
    palette = palette or get_palette()
    if constraints.allowed_colors:
        unknown = [c for c in constraints.allowed_colors if c not in palette]
        if unknown:
            raise ConstraintError("allowed_colors", f"unknown color codes {unknown}")
        colors = constraints.allowed_colors
    else:
        colors = palette.all_codes()

    if len(colors) < constraints.color_count.min:
        raise ConstraintError(
            "allowed_colors",
            f"{len(colors)} colors available but color_count.min is {constraints.color_count.min}",
        )
    if constraints.feasible_stripe_counts().max > 1:
        if len(colors) < 2:
            raise ConstraintError(
                "allowed_colors", "at least two colors are needed so adjacent stripes differ"
            )
        if constraints.color_count.max < 2:
            raise ConstraintError(
                "color_count", "max must be at least 2 when more than one stripe is possible"
            )
    return colors


def _choose_symmetric(symmetry: Symmetry, rng: random.Random) -> bool:
    if symmetry is Symmetry.EITHER:
        return rng.random() < 0.5
    return symmetry is Symmetry.SYMMETRIC


def _repair_widths(widths: list[int], constraints: GeneratorConstraints) -> list[int]:
    """Nudge *widths* into the total-thread range without leaving the per-stripe range.

    Deterministic: grows (or shrinks) stripes front to back.  Always succeeds
    when ``len(widths)`` is a feasible stripe count.
    """
    lo, hi = constraints.thread_count.min, constraints.thread_count.max
    repaired = list(widths)
    deficit = constraints.total_threads.min - sum(repaired)
    for i, w in enumerate(repaired):
        if deficit <= 0:
            break
        step = min(hi - w, deficit)
        repaired[i] += step
        deficit -= step
    excess = sum(repaired) - constraints.total_threads.max
    for i, w in enumerate(repaired):
        if excess <= 0:
            break
        step = min(w - lo, excess)
        repaired[i] -= step
        excess -= step
    return repaired


def _draw_widths(constraints: GeneratorConstraints, rng: random.Random) -> tuple[list[int], bool]:
    feasible = constraints.feasible_stripe_counts()
    lo, hi = constraints.thread_count.min, constraints.thread_count.max
    widths: list[int] = []
    for _ in range(MAX_SYNTHESIS_ATTEMPTS):
        n = rng.randint(max(feasible.min, constraints.color_count.min), feasible.max)
        widths = [rng.randint(lo, hi) for _ in range(n)]
        if sum(widths) in constraints.total_threads:
            return widths, False
    return _repair_widths(widths, constraints), True


def _draw_colors(n: int, subset: list[str], rng: random.Random) -> list[str]:
    """Color *n* stripes so every *subset* color is used and no neighbours match.

    Starts from the subset in its sampled order, then inserts each remaining
    stripe at a random slot whose neighbours leave some color free.  The two
    ends always qualify when the subset holds two or more colors.
    """
    colors = list(subset)
    while len(colors) < n:
        slots = []
        for i in range(len(colors) + 1):
            neighbours = {colors[i - 1] if i > 0 else None, colors[i] if i < len(colors) else None}
            free = [c for c in subset if c not in neighbours]
            if free:
                slots.append((i, free))
        i, free = rng.choice(slots)
        colors.insert(i, rng.choice(free))
    return colors


def synthesize_sett(
    constraints: GeneratorConstraints,
    rng: random.Random,
    palette: Palette | None = None,
) -> tuple[Sett, bool]:
    """Draw one sett from *rng*.

    Returns:
        The sett and whether any bounded retry ran out (``best_effort``).
    """
    available = resolve_allowed_colors(constraints, palette)
    symmetric = _choose_symmetric(constraints.symmetry, rng)

    widths, widths_repaired = _draw_widths(constraints, rng)
    n = len(widths)

    k_lo = max(constraints.color_count.min, 2 if n > 1 else 1)
    k_hi = min(constraints.color_count.max, len(available), n)
    subset = rng.sample(list(available), rng.randint(k_lo, k_hi))
    colors = _draw_colors(n, subset, rng)

    last = n - 1
    stripes = tuple(
        ThreadStripe(code, count, is_pivot=symmetric and i in (0, last))
        for i, (code, count) in enumerate(zip(colors, widths))
    )
    return Sett(stripes), widths_repaired


def generate_tartan(
    constraints: GeneratorConstraints = DEFAULT_CONSTRAINTS,
    seed: int = 0,
    palette: Palette | None = None,
) -> GeneratorResult:
    """Synthesize one sett from *seed*.

    Identical (constraints, seed, palette) always produce an identical result.

    Raises:
        ConstraintError: If the constraints cannot be satisfied at all.
    """
    sett, best_effort = synthesize_sett(constraints, random.Random(seed), palette)
    if best_effort:
        logger.warning("Seed %d: retries exhausted, accepting best-effort sett %s", seed, sett.threadcount)
    else:
        logger.debug("Seed %d: generated %s", seed, sett.threadcount)
    return GeneratorResult(
        sett=sett,
        seed=seed,
        constraints=constraints,
        signature=compute_signature(sett),
        best_effort=best_effort,
    )


def generate_batch(
    n: int,
    constraints: GeneratorConstraints = DEFAULT_CONSTRAINTS,
    seed: int | None = None,
    palette: Palette | None = None,
    max_attempts: int = MAX_BATCH_ATTEMPTS,
) -> list[GeneratorResult]:
    """Generate *n* setts with pairwise-distinct structure signatures.

    Seeds advance by one per candidate starting at *seed* (one draw from the
    process RNG when None).  If a slot sees only duplicate structures for
    *max_attempts* candidates, its first candidate is kept with
    ``best_effort`` set.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
    resolve_allowed_colors(constraints, palette)

    start = seed if seed is not None else random.randrange(2**31)
    next_seed = start
    seen: set[str] = set()
    results: list[GeneratorResult] = []

    for slot in range(n):
        candidates: list[GeneratorResult] = []
        for _ in range(max_attempts):
            candidate = generate_tartan(constraints, next_seed, palette)
            next_seed += 1
            if candidate.signature.structure not in seen:
                accepted = candidate
                break
            candidates.append(candidate)
        else:
            accepted = replace(candidates[0], best_effort=True)
            logger.warning(
                "Batch slot %d: no new structure after %d attempts, keeping duplicate seed %d",
                slot,
                max_attempts,
                accepted.seed,
            )
        seen.add(accepted.signature.structure)
        results.append(accepted)

    logger.info("Generated %d setts from seeds %d..%d", len(results), start, next_seed - 1)
    return results
