"""
Weave registry: loads the weave catalog from YAML at startup, validates it,
and exposes a read-only lookup.

The registry is a module-level singleton; call get_weave_registry() to obtain
it, or use the WEAVE_PATTERNS mapping directly.  Nothing writes to the
registry after startup.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any

from tartanism.utilities.data import load_yaml
from tartanism.weave.types import WeavePattern, WeaveType

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


def _parse_tie_up(rows: list[Any]) -> tuple[tuple[bool, ...], ...]:
    return tuple(tuple(ch == "1" for ch in str(row)) for row in rows)


class WeaveRegistry:
    """
    Read-only weave catalog.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_weave_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir
        self.patterns: MappingProxyType[WeaveType, WeavePattern]
        self._load()
        self._validate()

    def _load(self) -> None:
        data = load_yaml(self._data_dir / "weaves.yaml")
        result: dict[WeaveType, WeavePattern] = {}
        for entry in data["entries"]:
            wt = WeaveType(entry["id"])
            result[wt] = WeavePattern(
                id=wt.value,
                name=entry["name"],
                tie_up=_parse_tie_up(entry["tie_up"]),
                threading=tuple(int(i) for i in entry["threading"]),
                treadling=tuple(int(i) for i in entry["treadling"]),
                description=entry.get("description", "").strip(),
            )
        self.patterns = MappingProxyType(result)

    def _validate(self) -> None:
        """Raise ValueError listing every missing entry or out-of-range index."""
        errors: list[str] = []
        for wt in WeaveType:
            if wt not in self.patterns:
                errors.append(f"WeaveType.{wt.name} has no catalog entry")
        for pattern in self.patterns.values():
            errors.extend(pattern.index_errors())
        if errors:
            raise ValueError(
                "Weave catalog validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )
        logger.debug("Loaded %d weaves from %s", len(self.patterns), self._data_dir)

    def get(self, weave_type: WeaveType | str) -> WeavePattern:
        """Return the pattern for *weave_type* (enum member or its string id).

        Raises KeyError for an unknown id.
        """
        try:
            return self.patterns[WeaveType(weave_type)]
        except ValueError:
            raise KeyError(f"Unknown weave type: {weave_type!r}") from None


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time; the catalog is read-only afterwards.

_registry: WeaveRegistry = WeaveRegistry()

WEAVE_PATTERNS: MappingProxyType[WeaveType, WeavePattern] = _registry.patterns


def get_weave_registry() -> WeaveRegistry:
    """Return the module-level registry singleton."""
    return _registry
