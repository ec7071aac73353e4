"""Tests for GeneratorConstraints validation and feasibility."""

import pytest

from tartanism.errors import ConstraintError
from tartanism.generator import DEFAULT_CONSTRAINTS, GeneratorConstraints, IntRange, Symmetry


class TestDefaults:
    def test_default_ranges(self):
        c = DEFAULT_CONSTRAINTS
        assert c.color_count == IntRange(3, 6)
        assert c.stripe_count == IntRange(4, 12)
        assert c.thread_count == IntRange(4, 48)
        assert c.total_threads == IntRange(60, 180)
        assert c.symmetry is Symmetry.SYMMETRIC
        assert c.allowed_colors is None

    def test_tuples_promoted_to_ranges(self):
        c = GeneratorConstraints(stripe_count=(2, 5))
        assert c.stripe_count == IntRange(2, 5)

    def test_symmetry_string_promoted(self):
        assert GeneratorConstraints(symmetry="either").symmetry is Symmetry.EITHER

    def test_allowed_colors_normalized(self):
        c = GeneratorConstraints(allowed_colors=["r", "g", "R"])
        assert c.allowed_colors == ("R", "G")

    def test_empty_allowed_colors_means_palette(self):
        assert GeneratorConstraints(allowed_colors=[]).allowed_colors is None

    def test_int_range_contains(self):
        assert 4 in IntRange(4, 6)
        assert 7 not in IntRange(4, 6)


class TestInvalidRanges:
    def test_min_greater_than_max(self):
        with pytest.raises(ConstraintError) as exc_info:
            GeneratorConstraints(stripe_count=IntRange(6, 2))
        assert exc_info.value.field == "stripe_count"

    def test_min_below_one(self):
        with pytest.raises(ConstraintError) as exc_info:
            GeneratorConstraints(thread_count=IntRange(0, 8))
        assert exc_info.value.field == "thread_count"

    def test_invalid_color_code(self):
        with pytest.raises(ConstraintError) as exc_info:
            GeneratorConstraints(allowed_colors=["R", "G2"])
        assert exc_info.value.field == "allowed_colors"

    def test_non_ascii_color_code(self):
        with pytest.raises(ConstraintError) as exc_info:
            GeneratorConstraints(allowed_colors=["R", "ß"])
        assert exc_info.value.field == "allowed_colors"

    def test_constraint_error_is_value_error(self):
        with pytest.raises(ValueError):
            GeneratorConstraints(color_count=IntRange(5, 1))


class TestFeasibility:
    def test_total_too_small_for_minimum_stripes(self):
        with pytest.raises(ConstraintError) as exc_info:
            GeneratorConstraints(
                stripe_count=IntRange(10, 12),
                thread_count=IntRange(10, 20),
                total_threads=IntRange(20, 50),
            )
        assert exc_info.value.field == "total_threads"

    def test_total_too_large_for_maximum_stripes(self):
        with pytest.raises(ConstraintError):
            GeneratorConstraints(
                stripe_count=IntRange(2, 3),
                thread_count=IntRange(4, 8),
                total_threads=IntRange(100, 200),
            )

    def test_gap_between_stripe_counts(self):
        # One stripe is too few (max 10) and two are too many (min 20).
        with pytest.raises(ConstraintError):
            GeneratorConstraints(
                stripe_count=IntRange(1, 10),
                thread_count=IntRange(10, 10),
                total_threads=IntRange(15, 19),
            )

    def test_feasible_stripe_counts_narrowed(self):
        c = GeneratorConstraints(
            stripe_count=IntRange(1, 20),
            thread_count=IntRange(10, 20),
            total_threads=IntRange(60, 100),
        )
        assert c.feasible_stripe_counts() == IntRange(3, 10)

    def test_default_feasible_range(self):
        assert DEFAULT_CONSTRAINTS.feasible_stripe_counts() == IntRange(4, 12)

    def test_color_minimum_above_stripe_maximum(self):
        # At most three stripes fit, so five distinct colors never can.
        with pytest.raises(ConstraintError) as exc_info:
            GeneratorConstraints(
                color_count=IntRange(5, 6),
                stripe_count=IntRange(2, 3),
                total_threads=IntRange(10, 100),
            )
        assert exc_info.value.field == "color_count"

    def test_color_minimum_checked_against_feasible_stripes(self):
        # stripe_count allows 8, but only 40 // 10 = 4 stripes fit the total.
        with pytest.raises(ConstraintError) as exc_info:
            GeneratorConstraints(
                color_count=IntRange(5, 5),
                stripe_count=IntRange(2, 8),
                thread_count=IntRange(10, 20),
                total_threads=IntRange(20, 40),
            )
        assert exc_info.value.field == "color_count"
