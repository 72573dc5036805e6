"""Domain-level exceptions.

All hard failures are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Recoverable conditions (a defaulted salad weight, a delete target that is
not in the order) are logged, never raised.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class UnknownVariant(DomainException):
    """A requested catalog category or key does not exist."""

    def __init__(self, category: str, key: object) -> None:
        super().__init__(f"Unknown {category} variant: {key!r}")
        self.category = category
        self.key = key


class OrderClosed(DomainException):
    """The order was already paid for and can no longer change."""

    def __init__(self) -> None:
        super().__init__("Order is already paid for")
