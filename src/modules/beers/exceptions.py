"""Beer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) translates them into HTTP responses through
an explicit status table.
"""

from __future__ import annotations

from typing import Any, Optional


class BeerAlreadyRegistered(Exception):
    """A beer with the same name already exists (RN-BEER-001)."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Beer with name {name} already registered in the system.")


class BeerNotFound(Exception):
    """The requested beer does not exist."""

    @classmethod
    def with_name(cls, name: str) -> BeerNotFound:
        return cls(f"Beer with name {name} not found in the system.")

    @classmethod
    def with_id(cls, id: Any) -> BeerNotFound:
        return cls(f"Beer with id {id} not found in the system.")


class BeerStockExceeded(Exception):
    """An increment would push the stock above ``max`` (RN-BEER-002)."""

    def __init__(self, id: Any, quantity: int, max: int) -> None:
        self.id = id
        self.quantity = quantity
        self.max = max
        super().__init__(
            f"Beers with {id} ID to increment informed exceeds "
            f"the max stock capacity: {max}"
        )


class BeerStockInsufficient(Exception):
    """A decrement would push the stock below zero (RN-BEER-002)."""

    def __init__(self, id: Any, quantity: int, stock: Optional[int] = None) -> None:
        self.id = id
        self.quantity = quantity
        self.stock = stock
        message = f"Insufficient Stock for decrement {quantity} from beer with ID: {id}"
        if stock is not None:
            message += f". Current Stock: {stock}"
        super().__init__(message)
