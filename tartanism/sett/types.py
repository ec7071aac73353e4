"""
Sett value objects: ThreadStripe, Sett, and ExpandedSett.

A Sett is the compact stripe list written in threadcount notation; an
ExpandedSett is one full physical repeat of thread colors derived from it.
Both are immutable; edits produce new objects.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from tartanism.errors import NotationError, NotationErrorKind


@dataclass(frozen=True)
class ThreadStripe:
    """
    A run of *count* threads of one color.

    Attributes:
        color_code: Color identifier of ASCII letters, stored upper-case.
        count: Number of threads in the stripe (>= 1).
        is_pivot: True if the sett mirrors about this stripe.
    """

    color_code: str
    count: int
    is_pivot: bool = False

    def __post_init__(self) -> None:
        code = self.color_code
        if not isinstance(code, str) or not (code.isascii() and code.isalpha()):
            raise NotationError(
                NotationErrorKind.MISSING_COLOR,
                f"color_code must be a non-empty string of ASCII letters, got {self.color_code!r}",
                token=str(self.color_code),
            )
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 1:
            raise NotationError(
                NotationErrorKind.INVALID_COUNT,
                f"count must be a positive integer, got {self.count!r}",
                token=f"{self.color_code}{self.count}",
            )
        object.__setattr__(self, "color_code", self.color_code.upper())

    @property
    def token(self) -> str:
        """Canonical notation token, e.g. ``"B/24"`` or ``"W4"``."""
        return f"{self.color_code}{'/' if self.is_pivot else ''}{self.count}"


@dataclass(frozen=True)
class Sett:
    """
    The repeating stripe sequence that defines a tartan.

    ``name`` is descriptive only and is excluded from equality, so a parsed
    threadcount compares equal to the named sett it was serialized from.
    """

    stripes: tuple[ThreadStripe, ...]
    name: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # Accept lists at construction sites and promote to a tuple.
        if not isinstance(self.stripes, tuple):
            object.__setattr__(self, "stripes", tuple(self.stripes))

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, int]],
        symmetric: bool = False,
        name: str | None = None,
    ) -> Sett:
        """Build a sett from ``(color_code, count)`` pairs.

        When *symmetric* is True the first and last stripes are marked as pivots.
        """
        items = list(pairs)
        last = len(items) - 1
        stripes = tuple(
            ThreadStripe(code, count, is_pivot=symmetric and i in (0, last))
            for i, (code, count) in enumerate(items)
        )
        return cls(stripes=stripes, name=name)

    @property
    def colors(self) -> tuple[str, ...]:
        """Distinct color codes in order of first appearance."""
        return tuple(dict.fromkeys(s.color_code for s in self.stripes))

    @property
    def threadcount(self) -> str:
        """Canonical threadcount notation for this sett."""
        return " ".join(s.token for s in self.stripes)

    @property
    def total_threads(self) -> int:
        return sum(s.count for s in self.stripes)

    @property
    def is_symmetric(self) -> bool:
        """True when the sett mirrors: at least two stripes, pivots at both ends."""
        return (
            len(self.stripes) >= 2 and self.stripes[0].is_pivot and self.stripes[-1].is_pivot
        )

    def with_name(self, name: str | None) -> Sett:
        """Return a copy of this sett carrying *name*."""
        return replace(self, name=name)

    def adjacent_repeats(self) -> tuple[int, ...]:
        """Indices *i* where stripe *i* has the same color as stripe *i - 1*."""
        return tuple(
            i
            for i in range(1, len(self.stripes))
            if self.stripes[i].color_code == self.stripes[i - 1].color_code
        )


@dataclass(frozen=True)
class ExpandedSett:
    """One full physical repeat of thread colors, in weaving order."""

    threads: tuple[str, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.threads, tuple):
            object.__setattr__(self, "threads", tuple(self.threads))

    @property
    def length(self) -> int:
        return len(self.threads)

    def __len__(self) -> int:
        return len(self.threads)

    def __getitem__(self, index: int) -> str:
        return self.threads[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.threads)

    def color_counts(self) -> MappingProxyType[str, int]:
        """Number of threads of each color in the repeat, in first-appearance order."""
        return MappingProxyType(dict(Counter(self.threads)))
