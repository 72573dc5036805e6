"""Product variants — burgers, drinks and salads.

A product composes one or more catalog presets into a total it owns.
Products never change after construction, except a salad's weight which
is changed through ``Salad.rescale``.
"""

from __future__ import annotations

import math

import structlog

from foodpos.domain.exceptions import ValidationError
from foodpos.domain.model.catalog import DEFAULT_CATALOG, Catalog, Category
from foodpos.domain.model.value_objects import PropertySet

logger = structlog.get_logger(__name__)

DEFAULT_SALAD_WEIGHT = 100  # grams; salad presets are per 100 g


class Product:
    """A single sold food product of any kind."""

    kind = "product"

    def __init__(self) -> None:
        self._total = PropertySet(id=self.kind)

    @property
    def energy(self) -> float:
        """The energy, in calories."""
        return self._total.energy

    @property
    def price(self) -> float:
        """The price, in tugriks."""
        return self._total.price

    def props(self) -> PropertySet:
        """A snapshot of the total; changing it does not affect the product."""
        return self._total.copy()

    def details(self) -> dict[str, object]:
        """Variant-specific fields, for presentation."""
        return {}

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.details().items())
        return f"{type(self).__name__}({fields})"


class Burger(Product):

    kind = "burger"

    def __init__(self, size: str, filling: str, catalog: Catalog = DEFAULT_CATALOG) -> None:
        # Look both up first so a bad filling leaves nothing half-built.
        size_preset = catalog.lookup(Category.BURGER_SIZE, size)
        filling_preset = catalog.lookup(Category.BURGER_FILLING, filling)
        super().__init__()
        self._size = size
        self._filling = filling
        self._total.add(size_preset).add(filling_preset)

    @property
    def size(self) -> str:
        return self._size

    @property
    def filling(self) -> str:
        return self._filling

    def details(self) -> dict[str, object]:
        return {"size": self._size, "filling": self._filling}


class Drink(Product):

    kind = "drink"

    def __init__(self, type: str, catalog: Catalog = DEFAULT_CATALOG) -> None:
        preset = catalog.lookup(Category.DRINK_TYPE, type)
        super().__init__()
        self._type = type
        self._total.add(preset)

    @property
    def type(self) -> str:
        return self._type

    def details(self) -> dict[str, object]:
        return {"type": self._type}


class Salad(Product):
    """A salad whose totals are proportional to its weight in grams.

    A missing or invalid weight at construction is not an error: the
    salad keeps the default weight and a notice is logged.
    """

    kind = "salad"

    def __init__(
        self,
        type: str,
        weight: float | None = None,
        catalog: Catalog = DEFAULT_CATALOG,
    ) -> None:
        preset = catalog.lookup(Category.SALAD_TYPE, type)
        super().__init__()
        self._type = type
        self._preset = preset
        self._weight: float = DEFAULT_SALAD_WEIGHT
        self._total.add(preset)

        if weight is None:
            logger.info(
                "salad_weight_not_chosen",
                salad=type,
                assumed_weight=DEFAULT_SALAD_WEIGHT,
            )
        elif not is_valid_weight(weight):
            logger.warning(
                "salad_weight_invalid",
                salad=type,
                weight=weight,
                assumed_weight=DEFAULT_SALAD_WEIGHT,
            )
        else:
            self.rescale(weight)

    @property
    def type(self) -> str:
        return self._type

    @property
    def weight(self) -> float:
        """The weight, in grams."""
        return self._weight

    def rescale(self, new_weight: float) -> float:
        """Change the weight, scaling the totals proportionally.

        Totals are recomputed from the per-100 g preset each time.

        Returns the previous weight.  Raises ValidationError for a
        negative or non-numeric weight.
        """
        if not is_valid_weight(new_weight):
            raise ValidationError(
                f"Salad weight must be a non-negative number, got {new_weight!r}"
            )

        previous = self._weight
        self._total = (
            PropertySet(id=self.kind)
            .add(self._preset)
            .scale(new_weight / DEFAULT_SALAD_WEIGHT)
        )
        self._weight = new_weight
        return previous

    def details(self) -> dict[str, object]:
        return {"type": self._type, "weight": self._weight}


def is_valid_weight(weight: object) -> bool:
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        return False
    return math.isfinite(weight) and weight >= 0
