"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its lines and keeps a running
total of everything in it.  Every mutation is guarded: once the order is
paid for it can never change again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from itertools import count
from typing import Iterator

import structlog

from foodpos.domain.exceptions import OrderClosed
from foodpos.domain.model.product import Product
from foodpos.domain.model.value_objects import PropertySet

logger = structlog.get_logger(__name__)


class OrderStatus(Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


@dataclass(frozen=True)
class LineHandle:
    """Identifies one line of an order; returned by ``Order.add``."""

    number: int


@dataclass
class OrderLine:
    handle: LineHandle
    product: Product
    props: PropertySet  # snapshot taken when the line was added


@dataclass
class Order:
    """Aggregate root for a customer's order.

    State is private; callers read it through ``products``, ``props()``,
    ``status`` and ``paid``, which hand out copies or immutable views.

    Invariants:
    - the total is always the sum of the current lines' totals; it is
      maintained incrementally, never recomputed
    - ``status`` only ever moves OPEN -> CLOSED
    """

    _lines: list[OrderLine] = field(init=False, default_factory=list)
    _total: PropertySet = field(init=False, default_factory=lambda: PropertySet(id="order"))
    _status: OrderStatus = field(init=False, default=OrderStatus.OPEN)
    _numbers: Iterator[int] = field(init=False, default_factory=lambda: count(1), repr=False, compare=False)

    # --- State transitions ----------------------------------------------------

    def add(self, product: Product) -> LineHandle:
        """Append *product* and return the handle of its new line."""
        self._ensure_open()
        handle = LineHandle(next(self._numbers))
        line = OrderLine(handle, product, product.props())
        self._lines.append(line)
        self._total.add(line.props)
        return handle

    def delete_by_index(self, index: int) -> None:
        """Remove the line at 1-based *index*.

        An index outside ``[1, len(order)]`` leaves the order untouched and
        is only logged.
        """
        self._ensure_open()
        if isinstance(index, bool) or not isinstance(index, int) or not 1 <= index <= len(self._lines):
            logger.info("order_line_not_found", index=index, size=len(self._lines))
            return
        self._remove(index - 1)

    def delete_by_ref(self, target: LineHandle | Product) -> None:
        """Remove the line identified by a handle or by the product instance.

        Products are matched by identity, so two equal burgers are still
        different lines.  A target that is not in the order is only logged.
        """
        self._ensure_open()
        for position, line in enumerate(self._lines):
            if line.handle == target or line.product is target:
                self._remove(position)
                return
        logger.info("order_line_not_found", target=repr(target), size=len(self._lines))

    def pay_for(self) -> None:
        """Transition OPEN -> CLOSED.  Paying twice raises OrderClosed."""
        self._ensure_open()
        self._status = OrderStatus.CLOSED
        logger.info("order_paid", lines=len(self._lines), energy=self.energy, price=self.price)

    # --- Computed properties --------------------------------------------------

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def paid(self) -> bool:
        return self._status == OrderStatus.CLOSED

    @property
    def energy(self) -> float:
        return self._total.energy

    @property
    def price(self) -> float:
        return self._total.price

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(line.product for line in self._lines)

    def props(self) -> PropertySet:
        return self._total.copy()

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def __len__(self) -> int:
        return len(self._lines)

    # --- Internal helpers -----------------------------------------------------

    def _ensure_open(self) -> None:
        if self._status == OrderStatus.CLOSED:
            raise OrderClosed()

    def _remove(self, position: int) -> None:
        self._total.subtract(self._lines[position].props)
        del self._lines[position]
