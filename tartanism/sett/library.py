"""
Tartan library: named threadcounts loaded from ``data/library.yaml``.

The library is a module-level singleton; call get_tartan_library() to obtain
it.  Every threadcount is parsed at load time, so a malformed entry fails at
startup instead of when a user opens it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from tartanism.errors import NotationError
from tartanism.sett.notation import parse
from tartanism.sett.types import Sett
from tartanism.utilities.data import load_yaml

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


class TartanCategory(str, Enum):
    CLAN = "Clan"
    DISTRICT = "District"
    MILITARY = "Military"
    CORPORATE = "Corporate"
    FASHION = "Fashion"
    ROYAL = "Royal"
    HISTORIC = "Historic"


@dataclass(frozen=True)
class TartanRecord:
    """A named tartan and its parsed sett."""

    name: str
    threadcount: str
    category: TartanCategory
    sett: Sett
    description: str = ""
    popularity: int = 0


class TartanLibrary:
    """
    Read-only collection of named tartans.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_tartan_library() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir
        self.records: MappingProxyType[str, TartanRecord]
        self._load()

    def _load(self) -> None:
        data = load_yaml(self._data_dir / "library.yaml")
        errors: list[str] = []
        result: dict[str, TartanRecord] = {}
        for entry in data["entries"]:
            name = entry["name"]
            if name in result:
                errors.append(f"library entry {name!r}: duplicate name")
                continue
            try:
                sett = parse(entry["threadcount"], name=name)
            except NotationError as exc:
                errors.append(f"library entry {name!r}: {exc}")
                continue
            result[name] = TartanRecord(
                name=name,
                threadcount=sett.threadcount,
                category=TartanCategory(entry["category"]),
                sett=sett,
                description=entry.get("description", "").strip(),
                popularity=int(entry.get("popularity", 0)),
            )
        if errors:
            raise ValueError(
                "Tartan library validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )
        self.records = MappingProxyType(result)
        logger.debug("Loaded %d tartans from %s", len(result), self._data_dir)

    # ── Query API ──────────────────────────────────────────────────────────────

    def get(self, name: str) -> TartanRecord:
        """Return the record named *name* (case-insensitive).

        Raises KeyError if no tartan has that name.
        """
        record = self.records.get(name)
        if record is not None:
            return record
        wanted = name.casefold()
        for candidate in self.records.values():
            if candidate.name.casefold() == wanted:
                return candidate
        raise KeyError(f"Unknown tartan: {name!r}")

    def load_sett(self, name: str) -> Sett:
        """Return the named sett for *name*."""
        return self.get(name).sett

    def search(self, text: str) -> list[TartanRecord]:
        """Records whose name or description contains *text*, most popular first."""
        needle = text.casefold()
        hits = [
            r
            for r in self.records.values()
            if needle in r.name.casefold() or needle in r.description.casefold()
        ]
        return sorted(hits, key=lambda r: (-r.popularity, r.name))

    def by_category(self, category: TartanCategory) -> list[TartanRecord]:
        return sorted(
            (r for r in self.records.values() if r.category == category),
            key=lambda r: (-r.popularity, r.name),
        )

    def sorted_by_popularity(self) -> list[TartanRecord]:
        """All records, most popular first; ties broken by name."""
        return sorted(self.records.values(), key=lambda r: (-r.popularity, r.name))


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Loaded eagerly at import time; read-only afterwards.

_library: TartanLibrary = TartanLibrary()


def get_tartan_library() -> TartanLibrary:
    """Return the module-level library singleton."""
    return _library
