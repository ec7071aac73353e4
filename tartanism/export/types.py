"""
Loom-draft value objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from tartanism.palette.types import RGB
from tartanism.sett.notation import parse
from tartanism.sett.types import ExpandedSett, Sett, ThreadStripe
from tartanism.weave.types import WeavePattern


@dataclass(frozen=True)
class WifMetadata:
    """
    Descriptive fields and repeat multipliers for an exported draft.

    Attributes:
        title: Written to ``[TEXT] Title`` and used for the filename.
        author: Written to ``[TEXT] Author``.
        warp_repeats: Times the loom software should repeat the warp unit.
        weft_repeats: Times the loom software should repeat the weft unit.
    """

    title: str = "Tartan"
    author: str = "Tartanism"
    warp_repeats: int = 2
    weft_repeats: int = 2

    def __post_init__(self) -> None:
        for name in ("warp_repeats", "weft_repeats"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class WifDraft:
    """Serialized draft text and a suggested filename."""

    content: str
    filename: str


@dataclass(frozen=True)
class LoomDraft:
    """
    A draft read back from WIF text.

    ``warp`` and ``weft`` are the thread color sequences of one unit; pass
    them with ``weave`` to the intersection engine to render the cloth.
    """

    title: str
    author: str
    warp: ExpandedSett
    weft: ExpandedSett
    weave: WeavePattern
    colors: MappingProxyType[str, RGB]
    warp_repeats: int = 1
    weft_repeats: int = 1
    threadcount: str | None = None

    def to_sett(self) -> Sett:
        """The sett this draft was woven from.

        Uses the stored threadcount when the draft carries one; otherwise the
        warp is run-length encoded into an asymmetric sett, which expands back
        to the same thread sequence.
        """
        if self.threadcount:
            return parse(self.threadcount, name=self.title or None)
        stripes: list[ThreadStripe] = []
        for code in self.warp:
            if stripes and stripes[-1].color_code == code:
                last = stripes.pop()
                stripes.append(ThreadStripe(code, last.count + 1))
            else:
                stripes.append(ThreadStripe(code, 1))
        return Sett(tuple(stripes), name=self.title or None)
