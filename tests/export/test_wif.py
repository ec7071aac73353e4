"""
Tests for WIF export and import.

Covers:
  - Standard section layout and 1-based threading/treadling/tie-up
  - THREADING length equals the expanded sett length
  - Color table and private sections
  - Export preconditions
  - read_wif round trip: same sett, weave, and rendered cloth
  - Reading foreign WIF files without the private sections
"""

import configparser

import pytest

from tartanism.errors import ExportPreconditionError, WifReadError
from tartanism.export import LoomDraft, WifMetadata, generate_wif, read_wif
from tartanism.palette import RGB, PaletteColor, get_palette
from tartanism.sett import Sett, expand_sett, parse
from tartanism.weave import WEAVE_PATTERNS, WeavePattern, WeaveType, iter_rows

PLAIN = WEAVE_PATTERNS[WeaveType.PLAIN]
TWILL = WEAVE_PATTERNS[WeaveType.TWILL_2_2]
STEWART = parse("B/24 W4 B24 R2 K24 G24 W/2", name="Stewart Half")


def _sections(content):
    parser = configparser.ConfigParser(interpolation=None, delimiters=("=",))
    parser.optionxform = str
    parser.read_string(content)
    return parser


# ── Export ─────────────────────────────────────────────────────────────────────


class TestGenerateWif:
    def test_two_stripe_plain_threading_length(self):
        sett = parse("R/6 G/4")
        wif = _sections(generate_wif(sett, PLAIN).content)
        threading = wif["THREADING"]
        assert len(threading) == len(expand_sett(sett))
        shafts = int(wif["WEAVING"]["Shafts"])
        assert all(1 <= int(v) <= shafts for v in threading.values())

    def test_threading_cycles_weave_vector(self):
        wif = _sections(generate_wif(STEWART, TWILL).content)
        values = [int(wif["THREADING"][str(j)]) for j in range(1, 9)]
        assert values == [1, 2, 3, 4, 1, 2, 3, 4]

    def test_standard_sections_present(self):
        wif = _sections(generate_wif(STEWART, TWILL).content)
        for name in (
            "WIF",
            "CONTENTS",
            "TEXT",
            "WEAVING",
            "WARP",
            "WEFT",
            "COLOR PALETTE",
            "COLOR TABLE",
            "WARP COLORS",
            "WEFT COLORS",
            "THREADING",
            "TIEUP",
            "TREADLING",
        ):
            assert wif.has_section(name), name
        assert wif["WIF"]["Version"] == "1.1"
        assert wif["CONTENTS"]["THREADING"] == "true"

    def test_warp_and_weft_counts(self):
        wif = _sections(generate_wif(STEWART, TWILL).content)
        assert wif["WARP"]["Threads"] == "182"
        assert wif["WEFT"]["Threads"] == "182"
        assert len(wif["WARP COLORS"]) == 182
        assert len(wif["TREADLING"]) == 182

    def test_plain_tie_up_one_based(self):
        wif = _sections(generate_wif(parse("R/6 G/4"), PLAIN).content)
        assert dict(wif["TIEUP"]) == {"1": "1", "2": "2"}

    def test_color_table_uses_palette_rgb(self):
        wif = _sections(generate_wif(STEWART, TWILL).content)
        codes = dict(wif["PRIVATE TARTANISM COLOR CODES"])
        assert list(codes.values()) == list(STEWART.colors)
        red_index = next(k for k, v in codes.items() if v == "R")
        rgb = get_palette().resolve("R").rgb
        assert wif["COLOR TABLE"][red_index] == f"{rgb.r},{rgb.g},{rgb.b}"
        assert wif["COLOR PALETTE"]["Entries"] == str(len(STEWART.colors))

    def test_private_sett_section(self):
        metadata = WifMetadata(title="Stewart", warp_repeats=3, weft_repeats=4)
        wif = _sections(generate_wif(STEWART, TWILL, metadata).content)
        private = wif["PRIVATE TARTANISM SETT"]
        assert private["Threadcount"] == STEWART.threadcount
        assert private["Weave"] == "twill-2-2"
        assert private["Warp Repeats"] == "3"
        assert private["Weft Repeats"] == "4"

    def test_filename_from_title(self):
        draft = generate_wif(STEWART, TWILL, WifMetadata(title="Royal Stewart (Modern)"))
        assert draft.filename == "royal-stewart-modern.wif"

    def test_default_title_from_sett_name(self):
        assert generate_wif(STEWART, TWILL).filename == "stewart-half.wif"

    def test_custom_color_exported(self):
        palette = get_palette().with_custom([PaletteColor("ZZ", "Zest", "#FFAA00")])
        wif = _sections(generate_wif(parse("ZZ/4 K/4"), PLAIN, palette=palette).content)
        assert wif["COLOR TABLE"]["1"] == "255,170,0"


class TestExportPreconditions:
    def test_empty_sett(self):
        with pytest.raises(ExportPreconditionError):
            generate_wif(Sett(()), PLAIN)

    def test_out_of_range_weave(self):
        broken = WeavePattern(
            id="broken",
            name="Broken",
            tie_up=((True, False), (False, True)),
            threading=(0, 1, 2),
            treadling=(0, 1),
        )
        with pytest.raises(ExportPreconditionError, match="threading"):
            generate_wif(STEWART, broken)

    def test_unknown_color(self):
        with pytest.raises(ExportPreconditionError, match="QQ"):
            generate_wif(parse("QQ/4 K/4"), PLAIN)

    def test_bad_repeats(self):
        with pytest.raises(ValueError):
            WifMetadata(warp_repeats=0)


# ── Import ─────────────────────────────────────────────────────────────────────


class TestReadWif:
    @pytest.mark.parametrize("weave_type", list(WeaveType))
    def test_round_trip_sett_and_weave(self, weave_type):
        weave = WEAVE_PATTERNS[weave_type]
        draft = read_wif(generate_wif(STEWART, weave).content)
        assert isinstance(draft, LoomDraft)
        assert draft.to_sett() == STEWART
        assert draft.weave is weave
        assert draft.warp == expand_sett(STEWART)

    def test_round_trip_metadata(self):
        metadata = WifMetadata(title="Stewart", author="Weaver", warp_repeats=3, weft_repeats=5)
        draft = read_wif(generate_wif(STEWART, TWILL, metadata).content)
        assert draft.title == "Stewart"
        assert draft.author == "Weaver"
        assert (draft.warp_repeats, draft.weft_repeats) == (3, 5)
        assert draft.colors["R"] == get_palette().resolve("R").rgb

    def test_custom_weave_rebuilt_and_renders_identically(self):
        custom = WeavePattern(
            id="broken-twill",
            name="Broken Twill",
            tie_up=TWILL.tie_up,
            threading=(0, 1, 3, 2),
            treadling=(0, 1, 2, 3),
        )
        sett = parse("R/8 G4 K/8")
        draft = read_wif(generate_wif(sett, custom).content)
        assert draft.weave.id == "custom"
        warp = expand_sett(sett)
        assert list(iter_rows(draft.warp, draft.weft, draft.weave)) == list(
            iter_rows(warp, warp, custom)
        )

    def test_missing_section(self):
        with pytest.raises(WifReadError) as exc_info:
            read_wif("[WIF]\nVersion=1.1\n")
        assert exc_info.value.section == "COLOR TABLE"

    def test_not_ini(self):
        with pytest.raises(WifReadError):
            read_wif("Version=1.1 with no section header")


FOREIGN_WIF = """\
[WIF]
Version=1.1
Source Program=Other Loom

[WEAVING]
Shafts=2
Treadles=2
Rising Shed=true

[WARP]
Threads=4
Color=1

[WEFT]
Threads=2
Color=2

[COLOR PALETTE]
Entries=2
Range=0,999

[COLOR TABLE]
1=999,0,0
2=0,0,0

[WARP COLORS]
3=2
4=2

[THREADING]
1=1
2=2
3=1
4=2

[TIEUP]
1=1
2=2

[TREADLING]
1=1
2=2
"""


class TestReadForeignWif:
    def test_colors_matched_to_palette(self):
        draft = read_wif(FOREIGN_WIF)
        assert draft.colors[draft.warp[0]] == RGB(255, 0, 0)
        assert draft.warp[2] == "K"

    def test_default_thread_color(self):
        draft = read_wif(FOREIGN_WIF)
        assert draft.warp[0] == draft.warp[1]
        assert list(draft.weft) == ["K", "K"]

    def test_weave_rebuilt(self):
        draft = read_wif(FOREIGN_WIF)
        assert draft.weave.tie_up == ((True, False), (False, True))
        assert draft.weave.threading == (0, 1, 0, 1)
        assert draft.weave.treadling == (0, 1)

    def test_sett_from_run_lengths(self):
        sett = read_wif(FOREIGN_WIF).to_sett()
        assert [s.count for s in sett.stripes] == [2, 2]
        assert sett.stripes[1].color_code == "K"
        assert not sett.is_symmetric

    def test_sinking_shed_inverted(self):
        draft = read_wif(FOREIGN_WIF.replace("Rising Shed=true", "Rising Shed=false"))
        assert draft.weave.tie_up == ((False, True), (True, False))
