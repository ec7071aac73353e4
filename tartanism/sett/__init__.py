"""
Sett model: threadcount notation, stripe value objects, expansion, library.
"""

from tartanism.sett.expansion import expand_sett, expanded_length
from tartanism.sett.library import (
    TartanCategory,
    TartanLibrary,
    TartanRecord,
    get_tartan_library,
)
from tartanism.sett.notation import parse, parse_threadcount, serialize
from tartanism.sett.types import ExpandedSett, Sett, ThreadStripe

__all__ = [
    # types
    "ThreadStripe",
    "Sett",
    "ExpandedSett",
    # notation
    "parse",
    "parse_threadcount",
    "serialize",
    # expansion
    "expand_sett",
    "expanded_length",
    # library
    "TartanCategory",
    "TartanRecord",
    "TartanLibrary",
    "get_tartan_library",
]
