"""
Color palette: built-in tartan colors, presets, and caller-supplied custom colors.
"""

from tartanism.palette.palette import Palette, get_palette, load_palette
from tartanism.palette.types import RGB, ColorPreset, PaletteColor

__all__ = ["RGB", "PaletteColor", "ColorPreset", "Palette", "get_palette", "load_palette"]
