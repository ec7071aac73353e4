"""
Tests for the intersection engine: is_warp_on_top, get_intersection_color, iter_rows.
"""

import pytest

from tartanism.errors import StructuralError
from tartanism.sett import ExpandedSett, expand_sett, parse
from tartanism.weave import (
    WEAVE_PATTERNS,
    WeavePattern,
    WeaveType,
    get_intersection_color,
    is_warp_on_top,
    iter_rows,
)

PLAIN = WEAVE_PATTERNS[WeaveType.PLAIN]
TWILL = WEAVE_PATTERNS[WeaveType.TWILL_2_2]


@pytest.fixture(scope="module")
def stewart():
    return expand_sett(parse("B/24 W4 B24 R2 K24 G24 W/2"))


# ── Plain-weave law ────────────────────────────────────────────────────────────


class TestPlainWeave:
    def test_warp_on_top_when_parities_match(self):
        for x in range(8):
            for y in range(8):
                assert is_warp_on_top(PLAIN, x, y) == (x % 2 == y % 2)

    def test_color_follows_parity(self):
        warp = ExpandedSett(("R", "G", "B"))
        weft = ExpandedSett(("K", "W"))
        for x in range(12):
            for y in range(12):
                expected = warp[x % 3] if x % 2 == y % 2 else weft[y % 2]
                assert get_intersection_color(warp, weft, PLAIN, x, y) == expected

    def test_same_warp_and_weft_on_diagonal(self, stewart):
        for i in range(len(stewart)):
            assert get_intersection_color(stewart, stewart, PLAIN, i, i) == stewart[i]


# ── Twill ──────────────────────────────────────────────────────────────────────


class TestTwill:
    def test_diagonal_shifts_one_per_row(self):
        row0 = [is_warp_on_top(TWILL, x, 0) for x in range(4)]
        row1 = [is_warp_on_top(TWILL, x, 1) for x in range(4)]
        assert row1 == row0[-1:] + row0[:-1]

    def test_half_the_crossings_show_warp(self):
        shown = sum(is_warp_on_top(TWILL, x, y) for x in range(8) for y in range(8))
        assert shown == 32

    def test_coordinates_wrap(self, stewart):
        n = len(stewart)
        assert get_intersection_color(stewart, stewart, TWILL, 5, 7) == get_intersection_color(
            stewart, stewart, TWILL, 5 + 4 * n, 7 + 4 * n
        )


# ── Errors ─────────────────────────────────────────────────────────────────────


class TestIntersectionErrors:
    def test_empty_warp(self):
        with pytest.raises(StructuralError):
            get_intersection_color((), ("R",), PLAIN, 0, 0)

    def test_empty_weft(self):
        with pytest.raises(StructuralError):
            get_intersection_color(("R",), [], PLAIN, 0, 0)

    def test_out_of_range_shaft(self):
        broken = WeavePattern(
            id="broken",
            name="Broken",
            tie_up=((True, False), (False, True)),
            threading=(0, 3),
            treadling=(0, 1),
        )
        with pytest.raises(StructuralError):
            is_warp_on_top(broken, 1, 0)

    def test_empty_threading(self):
        broken = WeavePattern(id="b", name="B", tie_up=((True,),), threading=(), treadling=(0,))
        with pytest.raises(StructuralError):
            is_warp_on_top(broken, 0, 0)


# ── Streaming rows ─────────────────────────────────────────────────────────────


class TestIterRows:
    def test_default_size_is_one_repeat(self, stewart):
        rows = list(iter_rows(stewart, stewart, TWILL))
        assert len(rows) == len(stewart)
        assert all(len(row) == len(stewart) for row in rows)

    def test_rows_match_point_lookup(self):
        warp = ExpandedSett(("R", "R", "G"))
        weft = ExpandedSett(("K", "W", "W", "W"))
        for y, row in enumerate(iter_rows(warp, weft, TWILL, width=9, height=6)):
            assert row == tuple(get_intersection_color(warp, weft, TWILL, x, y) for x in range(9))

    def test_is_lazy(self, stewart):
        rows = iter_rows(stewart, stewart, PLAIN, width=10_000, height=10_000)
        first = next(rows)
        assert len(first) == 10_000

    def test_rejects_malformed_weave_before_first_row(self):
        broken = WeavePattern(
            id="broken", name="Broken", tie_up=((True,),), threading=(0, 1), treadling=(0,)
        )
        rows = iter_rows(("R",), ("G",), broken)
        with pytest.raises(StructuralError):
            next(rows)

    def test_rejects_empty_threads(self):
        with pytest.raises(StructuralError):
            next(iter_rows((), ("G",), PLAIN))
