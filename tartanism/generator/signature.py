"""
Sett signatures for deduplication.
"""

from __future__ import annotations

from string import ascii_uppercase

from tartanism.generator.types import Signature
from tartanism.sett.types import Sett

_PROPORTION_STEP = 5


def _role(index: int) -> str:
    """Role letters in spreadsheet-column order: A..Z, AA, AB, ...

    Roles stay purely alphabetic so the count that follows is unambiguous.
    """
    letters = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, len(ascii_uppercase))
        letters = ascii_uppercase[rem] + letters
    return letters


def compute_signature(sett: Sett) -> Signature:
    """Return the full, structure, and proportion fingerprints of *sett*."""
    roles = {code: _role(i) for i, code in enumerate(sett.colors)}
    total = sett.total_threads or 1

    structure = " ".join(
        f"{roles[s.color_code]}{'/' if s.is_pivot else ''}{s.count}" for s in sett.stripes
    )
    proportion = " ".join(
        f"{roles[s.color_code]}"
        f"{_PROPORTION_STEP * round(s.count * 100 / total / _PROPORTION_STEP)}"
        for s in sett.stripes
    )
    return Signature(full=sett.threadcount, structure=structure, proportion=proportion)
