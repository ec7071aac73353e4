"""
Intersection engine: which thread shows at each warp/weft crossing.

For a crossing at warp index ``x`` and weft index ``y``::

    shaft      = threading[x mod len(threading)]
    treadle    = treadling[y mod len(treadling)]
    warp_shows = tie_up[treadle][shaft]
    color      = warp[x mod len(warp)] if warp_shows else weft[y mod len(weft)]

Every renderer and the loom-draft exporter go through this one function.
Warp and weft are normally the same ExpandedSett; passing different
sequences gives independent warp and weft color orders.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Union

from tartanism.errors import StructuralError
from tartanism.sett.types import ExpandedSett
from tartanism.weave.types import WeavePattern

Threads = Union[ExpandedSett, Sequence[str]]


def is_warp_on_top(weave: WeavePattern, x: int, y: int) -> bool:
    """True when the warp thread covers the weft at crossing (*x*, *y*).

    Raises:
        StructuralError: If the weave's threading or treadling is empty or
            points outside its tie-up.
    """
    if not weave.threading or not weave.treadling:
        raise StructuralError(f"weave {weave.id!r} has an empty threading or treadling")
    shaft = weave.threading[x % len(weave.threading)]
    treadle = weave.treadling[y % len(weave.treadling)]
    if not 0 <= treadle < weave.treadle_count:
        raise StructuralError(f"weave {weave.id!r}: treadle {treadle} is not in the tie-up")
    row = weave.tie_up[treadle]
    if not 0 <= shaft < len(row):
        raise StructuralError(f"weave {weave.id!r}: shaft {shaft} is not in the tie-up")
    return row[shaft]


def get_intersection_color(
    warp: Threads,
    weft: Threads,
    weave: WeavePattern,
    x: int,
    y: int,
) -> str:
    """Color code visible at crossing (*x*, *y*).

    Raises:
        StructuralError: If *warp* or *weft* is empty, or the weave is malformed.
    """
    if len(warp) == 0 or len(weft) == 0:
        raise StructuralError("warp and weft must each contain at least one thread")
    if is_warp_on_top(weave, x, y):
        return warp[x % len(warp)]
    return weft[y % len(weft)]


def iter_rows(
    warp: Threads,
    weft: Threads,
    weave: WeavePattern,
    width: int | None = None,
    height: int | None = None,
) -> Iterator[tuple[str, ...]]:
    """Yield the cloth one weft row at a time.

    *width* and *height* default to one warp and one weft repeat.  Only the
    current row is held in memory, so callers can stream very large renders
    and stop between rows.

    Raises:
        StructuralError: Up front, before the first row, if the inputs are
            empty or the weave is malformed.
    """
    if len(warp) == 0 or len(weft) == 0:
        raise StructuralError("warp and weft must each contain at least one thread")
    problems = weave.index_errors()
    if problems:
        raise StructuralError("; ".join(problems))

    cols = len(warp) if width is None else width
    rows = len(weft) if height is None else height
    for y in range(rows):
        yield tuple(get_intersection_color(warp, weft, weave, x, y) for x in range(cols))
