"""Value Objects shared across the domain.

A PropertySet carries the numeric attributes of anything that can be sold
or aggregated: a catalog preset, a product, a whole order.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

# Fractional digits kept after every arithmetic step.
PRECISION = 8

NUMERIC_FIELDS = ("energy", "price")


@dataclass
class PropertySet:
    """Energy (calories) and price (tugriks) with an optional identity tag.

    Arithmetic mutates the instance in place and returns it, so calls can
    be chained.  Every result is rounded to ``PRECISION`` digits to keep
    float drift bounded across long add/subtract sequences.  The ``id``
    tag is never touched by arithmetic.
    """

    energy: float = 0
    price: float = 0
    id: str | None = None

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: PropertySet) -> PropertySet:
        for name in NUMERIC_FIELDS:
            self._set(name, getattr(self, name) + getattr(other, name))
        return self

    def subtract(self, other: PropertySet) -> PropertySet:
        for name in NUMERIC_FIELDS:
            self._set(name, getattr(self, name) - getattr(other, name))
        return self

    def scale(self, factor: float) -> PropertySet:
        for name in NUMERIC_FIELDS:
            self._set(name, getattr(self, name) * factor)
        return self

    def copy(self) -> PropertySet:
        return replace(self)

    # --- Internal helpers -----------------------------------------------------

    def _set(self, name: str, value: float) -> None:
        setattr(self, name, round(value, PRECISION))
