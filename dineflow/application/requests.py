"""Validated request payloads accepted by the application services."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class RequestValidationError(ValueError):
    """A request field breaks one of its binding rules."""

    def __init__(self, field_name: str, rule: str) -> None:
        super().__init__(f"field validation for '{field_name}' failed on the '{rule}' rule")
        self.field = field_name
        self.rule = rule


def _require(name: str, value: Any) -> None:
    if value is None or value == "":
        raise RequestValidationError(name, "required")


def _check_length(name: str, value: str, minimum: int | None = None, maximum: int | None = None) -> None:
    if minimum is not None and len(value) < minimum:
        raise RequestValidationError(name, f"min={minimum}")
    if maximum is not None and len(value) > maximum:
        raise RequestValidationError(name, f"max={maximum}")


def _check_email(name: str, value: str) -> None:
    if not _EMAIL.match(value):
        raise RequestValidationError(name, "email")


def _order_items(name: str, orders: Any) -> list[OrderItem]:
    _require(name, orders)
    return [item if isinstance(item, OrderItem) else OrderItem(**item) for item in orders]


@dataclass
class UpdateMenuAvailabilityRequest:
    is_available: bool | None

    def __post_init__(self) -> None:
        _require("is_available", self.is_available)


@dataclass
class OrderItem:
    """One line of an order; the quantity is checked when it is priced."""

    menu_id: str
    quantity: int

    def __post_init__(self) -> None:
        _require("menu_id", self.menu_id)


@dataclass
class CalculateTotalPriceRequest:
    orders: list[OrderItem]

    def __post_init__(self) -> None:
        self.orders = _order_items("orders", self.orders)


@dataclass
class PaymentNotification:
    """Notification sent by the payment gateway about a transaction."""

    transaction_time: str = ""
    transaction_status: str = ""
    transaction_id: str = ""
    status_message: str = ""
    status_code: str = ""
    signature_key: str = ""
    payment_type: str = ""
    order_id: str = ""
    merchant_id: str = ""
    masked_card: str = ""
    gross_amount: str = ""
    fraud_status: str = ""
    approval_code: str = ""
    currency: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PaymentNotification:
        """Build a notification from decoded JSON, ignoring unknown keys."""
        values = {}
        for item in fields(cls):
            if item.name not in data or data[item.name] is None:
                continue
            value = data[item.name]
            if not isinstance(value, str):
                raise RequestValidationError(item.name, "string")
            values[item.name] = value
        return cls(**values)


@dataclass
class TransactionCreateRequest:
    table_id: str
    orders: list[OrderItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        _require("table_id", self.table_id)
        self.orders = _order_items("orders", self.orders)


@dataclass
class StartCookingRequest:
    queue_code: str

    def __post_init__(self) -> None:
        _require("queue_code", self.queue_code)


@dataclass
class FinishCookingRequest:
    queue_code: str

    def __post_init__(self) -> None:
        _require("queue_code", self.queue_code)


@dataclass
class StartDeliveringRequest:
    queue_code: str

    def __post_init__(self) -> None:
        _require("queue_code", self.queue_code)


@dataclass
class FinishDeliveringRequest:
    queue_code: str

    def __post_init__(self) -> None:
        _require("queue_code", self.queue_code)


@dataclass
class UserRegisterRequest:
    email: str
    password: str = field(repr=False)
    name: str
    phone_number: str = ""

    def __post_init__(self) -> None:
        _require("email", self.email)
        _check_email("email", self.email)
        _require("password", self.password)
        _check_length("password", self.password, minimum=8)
        _require("name", self.name)
        _check_length("name", self.name, minimum=2, maximum=100)
        if self.phone_number:
            _check_length("phone_number", self.phone_number, minimum=8, maximum=20)


@dataclass
class UserLoginRequest:
    email: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        _require("email", self.email)
        _check_email("email", self.email)
        _require("password", self.password)
        _check_length("password", self.password, minimum=8)