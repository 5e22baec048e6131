"""Order lines of a transaction and their pricing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from dineflow.domain.errors import InvalidQuantityError
from dineflow.domain.shared import NIL_ID, Price, Timestamp


@dataclass
class Order:
    id: UUID = NIL_ID
    transaction_id: UUID = NIL_ID
    menu_id: UUID = NIL_ID
    quantity: int = 0
    timestamps: Timestamp = field(default_factory=Timestamp)


@runtime_checkable
class OrderRepository(Protocol):
    """Storage of order lines."""

    def create_order(self, tx: Any, order: Order) -> Order:
        """Store a new order line and return it with its identifier."""

    def get_orders_by_transaction_id(self, tx: Any, transaction_id: str) -> list[Order]:
        """Return the order lines of one transaction."""


class OrderPricing:
    """Prices a single order line."""

    def calculate_price(self, price: Price, quantity: int) -> Price:
        """Return the unit price times quantity; quantity must be positive."""
        if quantity <= 0:
            raise InvalidQuantityError()
        return Price(price.amount * quantity)