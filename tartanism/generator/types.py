"""
Generator schema: constraint ranges, symmetry mode, signatures, and results.

GeneratorConstraints validates itself on construction, so an impossible
request fails with ConstraintError before any synthesis is attempted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from tartanism.errors import ConstraintError
from tartanism.sett.types import Sett


class Symmetry(str, Enum):
    SYMMETRIC = "symmetric"
    ASYMMETRIC = "asymmetric"
    EITHER = "either"


@dataclass(frozen=True)
class IntRange:
    """Inclusive integer range. Checked by the GeneratorConstraints that owns it."""

    min: int
    max: int

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.min <= value <= self.max


def _as_range(value: IntRange | tuple[int, int]) -> IntRange:
    if isinstance(value, IntRange):
        return value
    lo, hi = value
    return IntRange(lo, hi)


@dataclass(frozen=True)
class GeneratorConstraints:
    """
    Numeric and structural limits for sett synthesis.

    Attributes:
        color_count: How many distinct colors a generated sett uses.
        stripe_count: Number of stripes in the threadcount (the half sett
            when symmetric).
        thread_count: Threads per stripe.
        total_threads: Sum of all stripe counts in the threadcount.
        symmetry: Symmetric, asymmetric, or a per-seed coin flip.
        allowed_colors: Color codes to draw from; None or empty means the
            whole palette.
    """

    color_count: IntRange = IntRange(3, 6)
    stripe_count: IntRange = IntRange(4, 12)
    thread_count: IntRange = IntRange(4, 48)
    total_threads: IntRange = IntRange(60, 180)
    symmetry: Symmetry = Symmetry.SYMMETRIC
    allowed_colors: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        for name in ("color_count", "stripe_count", "thread_count", "total_threads"):
            rng = _as_range(getattr(self, name))
            object.__setattr__(self, name, rng)
            if rng.min < 1:
                raise ConstraintError(name, f"min must be >= 1, got {rng.min}")
            if rng.min > rng.max:
                raise ConstraintError(name, f"min ({rng.min}) must not exceed max ({rng.max})")

        object.__setattr__(self, "symmetry", Symmetry(self.symmetry))

        if self.allowed_colors is not None:
            codes = tuple(self.allowed_colors)
            bad = [
                c for c in codes if not isinstance(c, str) or not (c.isascii() and c.isalpha())
            ]
            if bad:
                raise ConstraintError("allowed_colors", f"invalid color codes {bad}")
            # Empty collapses to None: fall back to the whole palette.
            deduped = tuple(dict.fromkeys(c.upper() for c in codes))
            object.__setattr__(self, "allowed_colors", deduped or None)

        feasible = self.feasible_stripe_counts()
        if self.color_count.min > feasible.max:
            raise ConstraintError(
                "color_count",
                f"min ({self.color_count.min}) exceeds the most stripes that fit ({feasible.max})",
            )

    def feasible_stripe_counts(self) -> IntRange:
        """Stripe counts for which some choice of widths lands in total_threads.

        Raises:
            ConstraintError: If no stripe count in range can reach the total.
        """
        lo = max(self.stripe_count.min, math.ceil(self.total_threads.min / self.thread_count.max))
        hi = min(self.stripe_count.max, self.total_threads.max // self.thread_count.min)
        if lo > hi:
            raise ConstraintError(
                "total_threads",
                f"[{self.total_threads.min}, {self.total_threads.max}] cannot be reached with "
                f"{self.stripe_count.min}-{self.stripe_count.max} stripes of "
                f"{self.thread_count.min}-{self.thread_count.max} threads",
            )
        return IntRange(lo, hi)


DEFAULT_CONSTRAINTS = GeneratorConstraints()


@dataclass(frozen=True)
class Signature:
    """
    Normalized fingerprints of a sett, used only for deduplication.

    Attributes:
        full: The exact threadcount.
        structure: Stripe counts and pivots with colors replaced by roles
            (first color seen is ``A``), so recolorings collide.
        proportion: Roles with widths as percentages of the total, rounded
            to 5 %, so rescalings collide.
    """

    full: str
    structure: str
    proportion: str


@dataclass(frozen=True)
class GeneratorResult:
    """
    A synthesized sett and how it was produced.

    Attributes:
        sett: The generated sett.
        seed: Seed that reproduces this result.
        constraints: Constraints in force when it was produced.
        signature: Dedup fingerprints.
        best_effort: True when a bounded retry loop ran out and the result
            was accepted anyway.
        parents: Seeds of the result(s) this one was derived from.
        origin: ``"generate"``, ``"mutate"``, or the breeding strategy name.
    """

    sett: Sett
    seed: int
    constraints: GeneratorConstraints
    signature: Signature
    best_effort: bool = False
    parents: tuple[int, ...] = ()
    origin: str = "generate"
