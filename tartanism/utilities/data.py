"""
YAML loading shared by every read-only lookup table in the package.

Each registry keeps its tables in a ``data/`` directory next to its module and
calls :func:`load_yaml` once at construction time.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, cast

import yaml

logger = logging.getLogger(__name__)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping from *path*.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the file is not valid YAML or its top level is not a mapping.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Data file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse data file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Data file {path} must contain a mapping at the top level")
    logger.debug("Loaded %s", path)
    return cast(dict[str, Any], data)
