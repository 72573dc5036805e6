"""Application service: Build Product use case.

Turns a parsed ProductSpec into a concrete Product using the catalog.
"""

from __future__ import annotations

from foodpos.application.dto import ProductSpec
from foodpos.domain.exceptions import UnknownVariant, ValidationError
from foodpos.domain.model.catalog import Catalog
from foodpos.domain.model.product import Burger, Drink, Product, Salad

# Number of variant keys each product kind takes.
_ARITY = {"burger": 2, "drink": 1, "salad": 1}


class BuildProductHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self, spec: ProductSpec) -> Product:
        if spec.kind not in _ARITY:
            raise UnknownVariant("product", spec.kind)

        expected = _ARITY[spec.kind]
        if len(spec.variants) != expected:
            raise ValidationError(
                f"A {spec.kind} takes {expected} variant(s), got {len(spec.variants)}"
            )

        if spec.kind == "burger":
            size, filling = spec.variants
            return Burger(size, filling, catalog=self._catalog)
        if spec.kind == "drink":
            return Drink(spec.variants[0], catalog=self._catalog)
        return Salad(spec.variants[0], spec.weight, catalog=self._catalog)
