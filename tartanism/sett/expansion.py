"""
Sett expansion: stripe list → one full repeat of thread colors.

Pivot convention
----------------
A sett is symmetric when it has at least two stripes and both its first and
last stripes are pivots.  Its threadcount then describes half of the repeat
(Scottish Register "half sett"), and the full repeat is::

    P0, s1 … sn, P1, sn … s1

Each pivot contributes its full count exactly once at its axis of symmetry;
interior stripes appear twice.  The repeat therefore has
``total_threads + sum(interior counts)`` threads.  When the repeat is tiled,
the next copy starts again at ``P0``, which is the second mirror axis.

Every other sett is flattened directly.
"""

from __future__ import annotations

from tartanism.errors import StructuralError
from tartanism.sett.types import ExpandedSett, Sett, ThreadStripe


def _flatten(stripes: tuple[ThreadStripe, ...]) -> list[str]:
    threads: list[str] = []
    for stripe in stripes:
        threads.extend([stripe.color_code] * stripe.count)
    return threads


def expand_sett(sett: Sett) -> ExpandedSett:
    """Expand *sett* into one physical repeat.

    Raises:
        StructuralError: If the sett has no stripes.
    """
    if not sett.stripes:
        raise StructuralError("cannot expand a sett with no stripes")

    if not sett.is_symmetric:
        return ExpandedSett(threads=tuple(_flatten(sett.stripes)))

    interior = sett.stripes[1:-1]
    threads = _flatten(sett.stripes) + _flatten(tuple(reversed(interior)))
    return ExpandedSett(threads=tuple(threads))


def expanded_length(sett: Sett) -> int:
    """Length of ``expand_sett(sett)`` without building it."""
    if not sett.is_symmetric:
        return sett.total_threads
    return sett.total_threads + sum(s.count for s in sett.stripes[1:-1])
