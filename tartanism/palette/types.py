"""
Color value objects: RGB triples, palette entries, and presets.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


@dataclass(frozen=True)
class RGB:
    """An 8-bit sRGB triple."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                raise ValueError(f"{channel} must be in [0, 255], got {value}")

    @classmethod
    def from_hex(cls, value: str) -> RGB:
        """Parse ``"#RRGGBB"`` (the leading ``#`` is optional)."""
        match = _HEX.fullmatch(value.strip())
        if match is None:
            raise ValueError(f"not a #RRGGBB color: {value!r}")
        r, g, b = (int(part, 16) for part in match.groups())
        return cls(r, g, b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def distance(self, other: RGB) -> int:
        """Manhattan distance between two colors."""
        return abs(self.r - other.r) + abs(self.g - other.g) + abs(self.b - other.b)


@dataclass(frozen=True)
class PaletteColor:
    """
    A named color addressable by code.

    Used both for the built-in palette and for caller-supplied custom colors.
    The code is stored upper-case and must be alphabetic so it can appear in
    threadcount notation.
    """

    code: str
    name: str
    hex: str

    def __post_init__(self) -> None:
        if not (self.code.isascii() and self.code.isalpha()):
            raise ValueError(f"color code must be ASCII letters, got {self.code!r}")
        object.__setattr__(self, "code", self.code.upper())
        object.__setattr__(self, "hex", RGB.from_hex(self.hex).hex)

    @property
    def rgb(self) -> RGB:
        return RGB.from_hex(self.hex)


@dataclass(frozen=True)
class ColorPreset:
    """A named subset of palette codes."""

    key: str
    name: str
    colors: tuple[str, ...]
    description: str = ""
    category: str = ""
