"""
Weaving Information File (WIF 1.1) export and import.

The writer emits the standard sections any loom program reads (weaving,
warp, weft, color table, threading, tie-up, treadling) for one unit of the
expanded sett, plus two private sections that let :func:`read_wif` recover
the exact threadcount, weave id and color codes::

    [PRIVATE TARTANISM SETT]
    Threadcount=B/24 W4 B24 R2 K24 G24 W/2
    Weave=twill-2-2
    Warp Repeats=2
    Weft Repeats=2

    [PRIVATE TARTANISM COLOR CODES]
    1=B
    2=W

Shaft and treadle numbers in the file are 1-based; the in-memory
WeavePattern is 0-based.  The tie-up is written as a rising shed: each
treadle lists the shafts it lifts, which are the crossings where the warp
shows.
"""

from __future__ import annotations

import configparser
import io
import logging
import re
from types import MappingProxyType

from tartanism.errors import ExportPreconditionError, WifReadError
from tartanism.export.types import LoomDraft, WifDraft, WifMetadata
from tartanism.palette import RGB, Palette, get_palette
from tartanism.sett.expansion import expand_sett
from tartanism.sett.types import ExpandedSett, Sett
from tartanism.weave.registry import get_weave_registry
from tartanism.weave.types import WeavePattern, WeaveType

logger = logging.getLogger(__name__)

WIF_VERSION = "1.1"
WIF_DATE = "April 20, 1997"
WIF_DEVELOPERS = "wif@mhsoft.com"
SOURCE_PROGRAM = "Tartanism"

SETT_SECTION = "PRIVATE TARTANISM SETT"
CODES_SECTION = "PRIVATE TARTANISM COLOR CODES"

_SLUG = re.compile(r"[^a-z0-9]+")


def _filename(title: str) -> str:
    slug = _SLUG.sub("-", title.lower()).strip("-")
    return f"{slug or 'tartan'}.wif"


def _writer() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None, delimiters=("=",))
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


# ── Export ─────────────────────────────────────────────────────────────────────


def generate_wif(
    sett: Sett,
    weave: WeavePattern,
    metadata: WifMetadata | None = None,
    palette: Palette | None = None,
) -> WifDraft:
    """Serialize *sett* woven with *weave* as WIF text.

    Warp and weft both carry one unit of ``expand_sett(sett)``.  THREADING
    has one entry per warp end and TREADLING one per weft pick, cycling the
    weave's vectors.

    Raises:
        ExportPreconditionError: If the sett has no stripes, the weave has
            out-of-range indices, or a color code is not in *palette*.
    """
    if not sett.stripes:
        raise ExportPreconditionError("cannot export a sett with no stripes")
    problems = weave.index_errors()
    if problems:
        raise ExportPreconditionError("; ".join(problems))

    palette = palette or get_palette()
    metadata = metadata or WifMetadata(title=sett.name or "Tartan")
    missing = [code for code in sett.colors if code not in palette]
    if missing:
        raise ExportPreconditionError(f"color codes not in palette: {missing}")

    threads = expand_sett(sett)
    color_index = {code: i for i, code in enumerate(sett.colors, start=1)}
    n = len(threads)

    parser = _writer()
    parser["WIF"] = {
        "Version": WIF_VERSION,
        "Date": WIF_DATE,
        "Developers": WIF_DEVELOPERS,
        "Source Program": SOURCE_PROGRAM,
    }
    parser.add_section("CONTENTS")
    parser["TEXT"] = {"Title": metadata.title, "Author": metadata.author}
    parser["WEAVING"] = {
        "Shafts": str(weave.shaft_count),
        "Treadles": str(weave.treadle_count),
        "Rising Shed": "true",
    }
    for axis in ("WARP", "WEFT"):
        parser[axis] = {"Threads": str(n), "Color": str(color_index[threads[0]])}
    parser["COLOR PALETTE"] = {"Entries": str(len(color_index)), "Range": "0,255"}
    parser["COLOR TABLE"] = {
        str(i): "{},{},{}".format(*_rgb_tuple(palette, code)) for code, i in color_index.items()
    }
    colors = {str(j): str(color_index[code]) for j, code in enumerate(threads, start=1)}
    parser["WARP COLORS"] = colors
    parser["WEFT COLORS"] = colors
    parser["THREADING"] = {
        str(j + 1): str(weave.threading[j % len(weave.threading)] + 1) for j in range(n)
    }
    parser["TIEUP"] = {
        str(t + 1): ",".join(str(s + 1) for s, up in enumerate(row) if up)
        for t, row in enumerate(weave.tie_up)
    }
    parser["TREADLING"] = {
        str(j + 1): str(weave.treadling[j % len(weave.treadling)] + 1) for j in range(n)
    }
    parser[SETT_SECTION] = {
        "Threadcount": sett.threadcount,
        "Weave": weave.id,
        "Warp Repeats": str(metadata.warp_repeats),
        "Weft Repeats": str(metadata.weft_repeats),
    }
    parser[CODES_SECTION] = {str(i): code for code, i in color_index.items()}

    for name in parser.sections():
        if name not in ("WIF", "CONTENTS"):
            parser.set("CONTENTS", name, "true")

    buf = io.StringIO()
    parser.write(buf, space_around_delimiters=False)
    filename = _filename(metadata.title)
    logger.info("Exported %s: %d ends x %d picks, weave %s", filename, n, n, weave.id)
    return WifDraft(content=buf.getvalue(), filename=filename)


def _rgb_tuple(palette: Palette, code: str) -> tuple[int, int, int]:
    rgb = palette.resolve(code).rgb
    return rgb.r, rgb.g, rgb.b


# ── Import ─────────────────────────────────────────────────────────────────────


class _Sections:
    """Case-insensitive access to the sections of a parsed WIF file."""

    def __init__(self, parser: configparser.ConfigParser) -> None:
        self._by_name = {name.upper(): parser[name] for name in parser.sections()}

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> configparser.SectionProxy:
        try:
            return self._by_name[name]
        except KeyError:
            raise WifReadError(name, "section is missing") from None

    def optional(self, name: str) -> dict[str, str]:
        proxy = self._by_name.get(name)
        return dict(proxy) if proxy is not None else {}

    def integer(self, name: str, key: str, default: int | None = None) -> int:
        raw = self.get(name).get(key)
        if raw is None:
            if default is None:
                raise WifReadError(name, f"{key} is missing")
            return default
        return _to_int(name, key, raw)


def _to_int(section: str, key: str, raw: str) -> int:
    try:
        # Multi-shaft and multi-treadle entries list several numbers; keep the first.
        return int(raw.split(",")[0].strip())
    except ValueError:
        raise WifReadError(section, f"{key}={raw!r} is not an integer") from None


def _read_color_table(sections: _Sections) -> dict[int, RGB]:
    scale = 255
    if "COLOR PALETTE" in sections:
        raw_range = sections.get("COLOR PALETTE").get("range", "0,255")
        try:
            scale = int(raw_range.split(",")[-1])
        except ValueError:
            raise WifReadError("COLOR PALETTE", f"range={raw_range!r} is malformed") from None
    table: dict[int, RGB] = {}
    for key, raw in sections.get("COLOR TABLE").items():
        try:
            r, g, b = (int(part) for part in raw.split(","))
            table[_to_int("COLOR TABLE", key, key)] = RGB(
                *(round(v * 255 / scale) for v in (r, g, b))
            )
        except ValueError as exc:
            raise WifReadError("COLOR TABLE", f"{key}={raw!r}: {exc}") from None
    return table


def _read_threads(sections: _Sections, axis: str, codes: dict[int, str]) -> ExpandedSett:
    count = sections.integer(axis, "threads")
    default = sections.integer(axis, "color", default=0)
    entries = sections.optional(f"{axis} COLORS")
    threads = []
    for j in range(1, count + 1):
        raw = entries.get(str(j))
        index = default if raw is None else _to_int(f"{axis} COLORS", str(j), raw)
        if index not in codes:
            raise WifReadError(f"{axis} COLORS", f"thread {j} uses unknown color {index}")
        threads.append(codes[index])
    return ExpandedSett(tuple(threads))


def _rebuild_weave(sections: _Sections, ends: int, picks: int, name: str) -> WeavePattern:
    shafts = sections.integer("WEAVING", "shafts")
    treadles = sections.integer("WEAVING", "treadles")
    rising = sections.get("WEAVING").get("rising shed", "true").strip().lower() != "false"

    tie_up_raw = sections.optional("TIEUP")
    tie_up = []
    for t in range(1, treadles + 1):
        raw = tie_up_raw.get(str(t), "")
        lifted = {_to_int("TIEUP", str(t), part) - 1 for part in raw.split(",") if part.strip()}
        tie_up.append(tuple((s in lifted) == rising for s in range(shafts)))

    threading_raw = sections.optional("THREADING")
    treadling_raw = sections.optional("TREADLING")
    threading = tuple(
        _to_int("THREADING", str(j), threading_raw.get(str(j), "1")) - 1 for j in range(1, ends + 1)
    )
    treadling = tuple(
        _to_int("TREADLING", str(j), treadling_raw.get(str(j), "1")) - 1 for j in range(1, picks + 1)
    )
    pattern = WeavePattern(
        id="custom",
        name=name,
        tie_up=tuple(tie_up),
        threading=threading,
        treadling=treadling,
    )
    problems = pattern.index_errors()
    if problems:
        raise WifReadError("THREADING", "; ".join(problems))
    return pattern


def read_wif(content: str, palette: Palette | None = None) -> LoomDraft:
    """Parse WIF text into a :class:`LoomDraft`.

    Drafts written by :func:`generate_wif` come back with their exact
    threadcount, catalog weave, and color codes.  Other WIF files are read
    from their standard sections: the weave is rebuilt from THREADING,
    TIEUP and TREADLING, and each color-table entry is mapped to the
    nearest color in *palette*.

    Raises:
        WifReadError: If a required section is missing or a value is malformed.
    """
    parser = configparser.ConfigParser(interpolation=None, delimiters=("=",), strict=False)
    try:
        parser.read_string(content)
    except configparser.Error as exc:
        raise WifReadError("WIF", f"not a readable WIF file: {exc}") from exc
    sections = _Sections(parser)
    sections.get("WIF")

    table = _read_color_table(sections)
    private_codes = sections.optional(CODES_SECTION)
    if private_codes:
        codes = {_to_int(CODES_SECTION, k, k): v.strip().upper() for k, v in private_codes.items()}
    else:
        palette = palette or get_palette()
        codes = {i: palette.closest(rgb) for i, rgb in table.items()}

    warp = _read_threads(sections, "WARP", codes)
    weft = _read_threads(sections, "WEFT", codes)

    text = sections.optional("TEXT")
    title = text.get("title", "")
    private = sections.optional(SETT_SECTION)
    weave_id = private.get("weave", "")
    if weave_id in {w.value for w in WeaveType}:
        weave = get_weave_registry().get(weave_id)
    else:
        weave = _rebuild_weave(sections, len(warp), len(weft), name=title or "Imported weave")

    colors = {code: table[i] for i, code in codes.items() if i in table}
    draft = LoomDraft(
        title=title,
        author=text.get("author", ""),
        warp=warp,
        weft=weft,
        weave=weave,
        colors=MappingProxyType(colors),
        warp_repeats=_to_int(SETT_SECTION, "warp repeats", private.get("warp repeats", "1")),
        weft_repeats=_to_int(SETT_SECTION, "weft repeats", private.get("weft repeats", "1")),
        threadcount=private.get("threadcount") or None,
    )
    logger.debug("Read WIF %r: %d ends, %d picks, weave %s", title, len(warp), len(weft), weave.id)
    return draft
