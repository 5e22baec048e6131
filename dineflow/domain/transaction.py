"""Transactions, their statuses, queue codes and the payment gateway port."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from dineflow.application.responses import NextOrder
from dineflow.domain.errors import DomainError
from dineflow.domain.menu import Menu
from dineflow.domain.order import Order
from dineflow.domain.shared import NIL_ID, Price, Timestamp
from dineflow.domain.table import Table

_QUEUE_NUMBER = re.compile(r"[+-]?[0-9]+")


class OrderStatus(str, enum.Enum):
    """Progress of a transaction through the kitchen and to the table."""

    PENDING = "pending"
    PREPARING = "preparing"
    READY_TO_SERVE = "ready_to_serve"
    DELIVERING = "delivering"
    SERVED = "served"

    def __str__(self) -> str:
        return self.value


class PaymentStatus(str, enum.Enum):
    """Status of a payment as reported by the gateway."""

    CAPTURE = "capture"
    SETTLEMENT = "settlement"
    CANCEL = "cancel"
    DENY = "deny"
    EXPIRE = "expire"
    PENDING = "pending"

    def __str__(self) -> str:
        return self.value


@dataclass
class Payment:
    code: str = ""
    status: PaymentStatus = PaymentStatus.PENDING

    def __post_init__(self) -> None:
        self.status = PaymentStatus(self.status)


@dataclass
class QueueCode:
    """A kitchen queue code such as Q0001."""

    code: str = ""
    valid: bool = False

    @classmethod
    def parse(cls, code: str) -> QueueCode:
        """Wrap a code, marking whether it is a well-formed, non-zero code."""
        valid = code.startswith("Q") and len(code) == 5 and code[1:] != "0000"
        return cls(code=code, valid=valid)

    def queue_number(self) -> int:
        """Return the number in the code; zero for an empty or zero code."""
        number = self.code[1:] if self.code.startswith("Q") else self.code
        if number in ("", "0000"):
            return 0
        match = _QUEUE_NUMBER.match(number[:4])
        if match is None:
            raise ValueError(f"invalid queue code: {self.code}")
        return int(match.group())


@dataclass
class Transaction:
    id: UUID = NIL_ID
    user_id: UUID = NIL_ID
    table_id: UUID = NIL_ID
    payment: Payment = field(default_factory=Payment)
    order_status: OrderStatus = OrderStatus.PENDING
    cooked_at: datetime | None = None
    served_at: datetime | None = None
    queue_code: QueueCode = field(default_factory=QueueCode)
    total_price: Price = field(default_factory=Price)
    timestamps: Timestamp = field(default_factory=Timestamp)


@dataclass
class OrderQuery:
    order: Order = field(default_factory=Order)
    menu: Menu = field(default_factory=Menu)


@dataclass
class TransactionQuery:
    transaction: Transaction = field(default_factory=Transaction)
    orders: list[OrderQuery] = field(default_factory=list)
    table: Table = field(default_factory=Table)


@runtime_checkable
class TransactionRepository(Protocol):
    """Storage of transactions."""

    def create_transaction(self, tx: Any, transaction: Transaction) -> Transaction:
        """Store a new transaction and return it with its identifier."""

    def get_detailed_transaction_by_id(self, tx: Any, transaction_id: str) -> TransactionQuery:
        """Return a transaction with its orders and table."""

    def get_latest_queue_code(self, tx: Any, transaction_id: str) -> str:
        """Return the latest queue code issued."""

    def get_next_order(self, tx: Any) -> NextOrder:
        """Return the next order waiting for the kitchen."""

    def update_cooked_at(self, tx: Any, transaction_id: str) -> Transaction:
        """Record that cooking started now."""

    def update_transaction_cooking_status_start(self, tx: Any, transaction_id: str) -> Transaction:
        """Move a transaction to preparing."""

    def update_transaction_cooking_status_finish(self, tx: Any, transaction_id: str) -> Transaction:
        """Move a transaction to ready to serve."""

    def update_transaction_delivering_status_start(self, tx: Any, transaction_id: str) -> Transaction:
        """Move a transaction to delivering."""

    def update_transaction_delivering_status_finish(self, tx: Any, transaction_id: str) -> Transaction:
        """Move a transaction to served."""

    def update_served_at(self, tx: Any, transaction_id: str) -> Transaction:
        """Record that the order was served now."""

    def get_transaction_by_queue_code(self, tx: Any, queue_code: str) -> TransactionQuery:
        """Return the transaction holding this queue code."""


class TransactionRules:
    """Domain rules about queue codes, cooking times and delays."""

    def __init__(self, repository: TransactionRepository) -> None:
        self.repository = repository

    def generate_queue_code(self, transaction_id: str) -> str:
        """Return the latest queue code known to the repository."""
        try:
            return self.repository.get_latest_queue_code(None, transaction_id)
        except Exception as exc:
            raise DomainError(f"failed to get latest queue code: {exc}") from exc

    def calculate_max_cooking_time(self, orders: Iterable[OrderQuery]) -> timedelta:
        """Return the longest cooking time among the orders, at least zero."""
        return max([timedelta(0), *(order.menu.cooking_time for order in orders)])

    def get_order_delay_status(
        self,
        max_cooking_time: timedelta,
        cooked_at: datetime | None,
        served_at: datetime | None,
        now: datetime | None = None,
    ) -> bool:
        """Return whether the order was, or still is, served past its expected time."""
        if cooked_at is None:
            return False
        expected_finish = cooked_at + max_cooking_time
        if served_at is not None:
            return served_at > expected_finish
        current = now if now is not None else datetime.now(cooked_at.tzinfo)
        return current > expected_finish


@dataclass
class PaymentResult:
    token: str = ""
    payment_link: str = ""


@runtime_checkable
class PaymentGateway(Protocol):
    """External payment processor."""

    def process_payment(self, tx: Any, transaction: Transaction) -> PaymentResult:
        """Open a payment for a transaction."""

    def hook_payment(self, tx: Any, transaction_id: UUID, data: Mapping[str, Any]) -> None:
        """Apply a payment notification to a transaction."""