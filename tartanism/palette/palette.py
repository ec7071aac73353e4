"""
Palette: color-code → color lookup over the built-in table and custom colors.

The built-in 48-entry palette and the named presets are loaded from YAML at
import time.  Custom colors are never stored globally: callers build a
palette that carries them with :meth:`Palette.with_custom` and pass it into
every call that needs colors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from tartanism.palette.types import RGB, ColorPreset, PaletteColor
from tartanism.utilities.data import load_yaml

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


class Palette:
    """
    Read-only color lookup.

    Built-in colors are checked first, then custom colors; matching is
    case-insensitive.  A palette is never mutated; :meth:`with_custom`
    returns a new one.
    """

    def __init__(
        self,
        builtin: Mapping[str, PaletteColor],
        presets: Mapping[str, ColorPreset] | None = None,
        custom: Iterable[PaletteColor] = (),
    ) -> None:
        self.builtin: MappingProxyType[str, PaletteColor] = MappingProxyType(dict(builtin))
        self.presets: MappingProxyType[str, ColorPreset] = MappingProxyType(dict(presets or {}))
        self.custom: tuple[PaletteColor, ...] = tuple(custom)

    def with_custom(self, colors: Iterable[PaletteColor]) -> Palette:
        """Return a palette with *colors* appended to the custom list."""
        return Palette(self.builtin, self.presets, self.custom + tuple(colors))

    # ── Lookup ─────────────────────────────────────────────────────────────────

    def lookup(self, code: str) -> PaletteColor | None:
        """Return the color for *code*, or None if neither table has it."""
        key = code.upper()
        color = self.builtin.get(key)
        if color is not None:
            return color
        for custom in self.custom:
            if custom.code == key:
                return custom
        return None

    def resolve(self, code: str) -> PaletteColor:
        """Like :meth:`lookup` but raises KeyError for an unknown code."""
        color = self.lookup(code)
        if color is None:
            raise KeyError(f"Unknown color code: {code!r}")
        return color

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.lookup(code) is not None

    def codes(self) -> tuple[str, ...]:
        """Built-in codes in table order."""
        return tuple(self.builtin)

    def all_codes(self) -> tuple[str, ...]:
        """Built-in codes followed by custom codes not shadowed by a built-in."""
        extra = tuple(c.code for c in self.custom if c.code not in self.builtin)
        return self.codes() + tuple(dict.fromkeys(extra))

    def closest(self, rgb: RGB) -> str:
        """Code of the built-in color nearest to *rgb* (Manhattan distance).

        Ties resolve to the entry that comes first in the table.
        """
        if not self.builtin:
            raise KeyError("palette has no built-in colors")
        return min(self.builtin.values(), key=lambda c: c.rgb.distance(rgb)).code

    def preset(self, key: str) -> ColorPreset:
        """Return the preset named *key*; raises KeyError if unknown."""
        try:
            return self.presets[key]
        except KeyError:
            raise KeyError(f"Unknown color preset: {key!r}") from None


def load_palette(data_dir: Path = _DATA_DIR) -> Palette:
    """Load and cross-check ``colors.yaml`` and ``presets.yaml`` from *data_dir*.

    Raises ValueError listing every problem found (duplicate or malformed
    codes, bad hex values, presets naming unknown codes).
    """
    errors: list[str] = []

    builtin: dict[str, PaletteColor] = {}
    for entry in load_yaml(data_dir / "colors.yaml")["entries"]:
        try:
            color = PaletteColor(code=str(entry["code"]), name=entry["name"], hex=entry["hex"])
        except ValueError as exc:
            errors.append(f"color entry {entry.get('code')!r}: {exc}")
            continue
        if color.code in builtin:
            errors.append(f"color entry {color.code!r}: duplicate code")
            continue
        builtin[color.code] = color

    presets: dict[str, ColorPreset] = {}
    for entry in load_yaml(data_dir / "presets.yaml")["entries"]:
        codes = tuple(str(c).upper() for c in entry["colors"])
        unknown = [c for c in codes if c not in builtin]
        if unknown:
            errors.append(f"preset {entry['key']!r}: unknown color codes {unknown}")
        presets[entry["key"]] = ColorPreset(
            key=entry["key"],
            name=entry["name"],
            colors=codes,
            description=entry.get("description", "").strip(),
            category=entry.get("category", ""),
        )

    if errors:
        raise ValueError(
            "Palette validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
        )
    logger.debug("Loaded %d colors and %d presets", len(builtin), len(presets))
    return Palette(builtin, presets)


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# The built-in palette carries no custom colors; callers layer their own on
# top with with_custom().

_palette: Palette = load_palette()


def get_palette() -> Palette:
    """Return the built-in palette."""
    return _palette
