"""Application service: Show Order use case (query)."""

from __future__ import annotations

from foodpos.application.dto import OrderDTO, OrderLineDTO
from foodpos.domain.model.order import Order


class ShowOrderHandler:

    def handle(self, order: Order) -> OrderDTO:
        return OrderDTO(
            status=order.status.value,
            lines=[
                OrderLineDTO(
                    position=position,
                    kind=product.kind,
                    details=", ".join(f"{k}={_number(v)}" for k, v in product.details().items()),
                    energy=calories(product.energy),
                    price=tugriks(product.price),
                )
                for position, product in enumerate(order, start=1)
            ],
            energy=calories(order.energy),
            price=tugriks(order.price),
        )


def calories(value: float) -> str:
    return f"{_number(value)} cal"


def tugriks(value: float) -> str:
    return f"{_number(value)} MNT"


def _number(value: object) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)
