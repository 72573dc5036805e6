"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from foodpos.domain.exceptions import ValidationError


@dataclass(frozen=True)
class ProductSpec:
    """Input: what the customer asked for (kind + variant keys + weight)."""

    kind: str
    variants: tuple[str, ...]
    weight: float | None = None

    @staticmethod
    def parse(raw: str) -> ProductSpec:
        """Parse 'burger:big:cheese', 'drink:cola' or 'salad:caesar:150'."""
        parts = [part.strip() for part in raw.split(":")]
        if len(parts) < 2 or not all(parts):
            raise ValidationError(
                f"Invalid product '{raw}'. Expected 'kind:variant[:variant]'."
            )
        kind, variants = parts[0].lower(), parts[1:]

        weight = None
        if kind == "salad" and len(variants) == 2:
            try:
                weight = float(variants.pop())
            except ValueError:
                raise ValidationError(
                    f"Invalid salad weight '{parts[-1]}' in '{raw}'."
                ) from None
        return ProductSpec(kind=kind, variants=tuple(variants), weight=weight)


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single order line as displayed to the user."""

    position: int  # 1-based, as accepted by Order.delete_by_index
    kind: str
    details: str  # formatted, e.g. "size=big, filling=cheese"
    energy: str
    price: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    status: str
    lines: list[OrderLineDTO]
    energy: str
    price: str
