"""Catalog of presets — the fixed menu every product is composed from.

Tables are built once at import time.  They hold frozen ``Preset``
records inside read-only mappings; callers only ever get fresh
``PropertySet`` instances built from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from foodpos.domain.exceptions import UnknownVariant
from foodpos.domain.model.value_objects import PropertySet


class Category(Enum):
    BURGER_SIZE = "burger_size"
    BURGER_FILLING = "burger_filling"
    DRINK_TYPE = "drink_type"
    SALAD_TYPE = "salad_type"


@dataclass(frozen=True)
class Preset:
    """One fixed catalog choice: energy (calories) and price (tugriks)."""

    energy: float
    price: float

    def to_props(self, id: str) -> PropertySet:
        return PropertySet(energy=self.energy, price=self.price, id=id)


Tables = Mapping[Category, Mapping[str, Preset]]


def _freeze(tables: Mapping[Category, Mapping[str, Preset]]) -> Tables:
    return MappingProxyType({
        Category(category): MappingProxyType(dict(table))
        for category, table in tables.items()
    })


# salads are per 100 g
DEFAULT_TABLES: Tables = _freeze({
    Category.BURGER_SIZE: {
        "big": Preset(energy=40, price=100),
        "small": Preset(energy=20, price=50),
    },
    Category.BURGER_FILLING: {
        "cheese": Preset(energy=20, price=10),
        "potato": Preset(energy=10, price=15),
        "salad": Preset(energy=5, price=20),
    },
    Category.DRINK_TYPE: {
        "coffee": Preset(energy=20, price=80),
        "cola": Preset(energy=40, price=50),
    },
    Category.SALAD_TYPE: {
        "caesar": Preset(energy=20, price=100),
        "olivier": Preset(energy=80, price=50),
    },
})


class Catalog:
    """Read-only lookup of presets by category and variant key."""

    def __init__(self, tables: Mapping[Category, Mapping[str, Preset]] = DEFAULT_TABLES) -> None:
        self._tables = _freeze(tables)

    def lookup(self, category: Category | str, key: str) -> PropertySet:
        """Return a new PropertySet for *key* in *category*, tagged ``category:key``.

        Raises UnknownVariant if either the category or the key is absent.
        """
        table = self._table(category)
        try:
            preset = table[key]
        except (KeyError, TypeError):
            raise UnknownVariant(_category_name(category), key) from None
        return preset.to_props(f"{Category(category).value}:{key}")

    def keys(self, category: Category | str) -> list[str]:
        return list(self._table(category))

    def categories(self) -> list[Category]:
        return list(self._tables)

    def _table(self, category: Category | str) -> Mapping[str, Preset]:
        try:
            return self._tables[Category(category)]
        except (KeyError, ValueError):
            raise UnknownVariant("category", _category_name(category)) from None


def _category_name(category: Category | str) -> str:
    return category.value if isinstance(category, Category) else str(category)


DEFAULT_CATALOG = Catalog()
