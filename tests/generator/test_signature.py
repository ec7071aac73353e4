"""Tests for sett signatures used by batch deduplication."""

from string import ascii_uppercase

from tartanism.generator import compute_signature
from tartanism.sett import Sett, ThreadStripe, parse


class TestFull:
    def test_full_is_threadcount(self):
        assert compute_signature(parse("b/24 w4 b/24")).full == "B/24 W4 B/24"


class TestStructure:
    def test_recoloring_collides(self):
        a = compute_signature(parse("R/8 G4 B/2"))
        b = compute_signature(parse("K/8 W4 Y/2"))
        assert a.structure == b.structure == "A/8 B4 C/2"
        assert a.full != b.full

    def test_repeated_color_reuses_role(self):
        assert compute_signature(parse("K/4 R2 K6")).structure == "A/4 B2 A6"

    def test_pivots_distinguish(self):
        assert compute_signature(parse("R8 G8")).structure != compute_signature(
            parse("R/8 G/8")
        ).structure

    def test_roles_beyond_z_use_two_letters(self):
        codes = [f"Q{c}" for c in ascii_uppercase]
        base = [ThreadStripe(code, 1) for code in codes]
        # Role Z with 2624 threads against a 27th color with 24 threads.
        reused = Sett(tuple(base + [ThreadStripe(codes[-1], 2624)]))
        extra = Sett(tuple(base + [ThreadStripe("RR", 24)]))
        assert compute_signature(reused).structure.endswith("Z1 Z2624")
        assert compute_signature(extra).structure.endswith("Z1 AA24")
        assert compute_signature(reused).structure != compute_signature(extra).structure


class TestProportion:
    def test_rescaling_collides(self):
        a = compute_signature(parse("R8 G8"))
        b = compute_signature(parse("R16 G16"))
        assert a.proportion == b.proportion == "A50 B50"
        assert a.structure != b.structure

    def test_rounded_to_five_percent(self):
        assert compute_signature(parse("R1 G2")).proportion == "A35 B65"
