"""
Production registry: yarn profiles and product templates loaded from YAML.

Loaded once at import time and read-only afterwards.  Use
get_production_registry() for the singleton, or construct ProductionRegistry
with a custom data_dir in tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any

from tartanism.production.types import ProductTemplate, YarnProfile, YarnWeight
from tartanism.utilities.data import load_yaml
from tartanism.utilities.types import Gauge

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


def _gauge(entry: dict[str, Any]) -> Gauge:
    if "gauge" in entry:
        return Gauge.square(float(entry["gauge"]))
    return Gauge(float(entry["ends_per_inch"]), float(entry["picks_per_inch"]))


class ProductionRegistry:
    """Read-only yarn profile and product template tables."""

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir
        self.profiles: MappingProxyType[YarnWeight, YarnProfile]
        self.products: MappingProxyType[str, ProductTemplate]
        self._errors: list[str] = []
        self._load()
        self._validate_cross_references()

    def _load(self) -> None:
        profiles: dict[YarnWeight, YarnProfile] = {}
        for entry in load_yaml(self._data_dir / "yarn_profiles.yaml")["entries"]:
            weight = YarnWeight(entry["weight_class"])
            profiles[weight] = YarnProfile(
                weight_class=weight,
                wpi=int(entry["wpi"]),
                yards_per_100g=float(entry["yards_per_100g"]),
                skein_grams=float(entry.get("skein_grams", 100)),
            )
        self.profiles = MappingProxyType(profiles)

        products: dict[str, ProductTemplate] = {}
        for entry in load_yaml(self._data_dir / "products.yaml")["entries"]:
            key = entry["key"]
            try:
                weight = YarnWeight(entry["yarn_weight"])
            except ValueError:
                self._errors.append(
                    f"product {key!r}: unknown yarn_weight {entry['yarn_weight']!r}"
                )
                continue
            if key in products:
                self._errors.append(f"product {key!r}: duplicate key")
                continue
            products[key] = ProductTemplate(
                key=key,
                name=entry["name"],
                description=entry.get("description", "").strip(),
                width_in=float(entry["width_in"]),
                length_in=float(entry["length_in"]),
                yarn_weight=weight,
                gauge=_gauge(entry),
                waste_multiplier=float(entry.get("waste_multiplier", 1.15)),
            )
        self.products = MappingProxyType(products)

    def _validate_cross_references(self) -> None:
        """Raise ValueError if a product names a yarn weight with no profile."""
        errors = list(self._errors)
        for product in self.products.values():
            if product.yarn_weight not in self.profiles:
                errors.append(
                    f"product {product.key!r}: no yarn profile for {product.yarn_weight.value!r}"
                )
        if errors:
            raise ValueError(
                "Production registry validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )
        logger.debug(
            "Loaded %d yarn profiles and %d products from %s",
            len(self.profiles),
            len(self.products),
            self._data_dir,
        )

    def profile(self, weight: YarnWeight | str) -> YarnProfile:
        """Return the profile for *weight*; raises KeyError if unknown."""
        try:
            return self.profiles[YarnWeight(weight)]
        except (ValueError, KeyError):
            raise KeyError(f"No yarn profile for weight: {weight!r}") from None

    def product(self, key: str) -> ProductTemplate:
        """Return the template for *key*; raises KeyError if unknown."""
        try:
            return self.products[key]
        except KeyError:
            raise KeyError(f"Unknown product template: {key!r}") from None


# ── Module-level singleton ─────────────────────────────────────────────────────

_registry: ProductionRegistry = ProductionRegistry()

PRODUCT_TEMPLATES: MappingProxyType[str, ProductTemplate] = _registry.products
YARN_PROFILES: MappingProxyType[YarnWeight, YarnProfile] = _registry.profiles


def get_production_registry() -> ProductionRegistry:
    """Return the module-level registry singleton."""
    return _registry
