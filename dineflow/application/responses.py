"""Response payloads returned by the application services."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from dineflow.domain.shared import format_decimal

_OMIT_EMPTY = {"omitempty": True}


@dataclass
class AccessToken:
    access_token: str = ""


@dataclass
class CategoryResponse:
    id: str = ""
    name: str = ""


@dataclass
class MenuResponse:
    id: str = ""
    name: str = ""
    description: str = ""
    image_url: str = ""
    is_available: bool = False
    price: Decimal = Decimal(0)
    category: CategoryResponse = field(default_factory=CategoryResponse)


@dataclass
class CalculateTotalPriceResponse:
    total_price: str = ""


@dataclass
class TransactionDetailResponse:
    id: str = ""
    queue_code: str = ""
    payment_code: str = ""
    payment_status: str = ""
    order_status: str = ""
    served_at: str = ""
    total_price: str = ""
    table_number: str = ""
    user_name: str = ""
    user_email: str = ""
    user_phone_number: str = ""


@dataclass
class TableResponse:
    id: str = ""
    table_number: str = ""


@dataclass
class MenuForTransaction:
    id: str = ""
    name: str = ""
    price: str = ""


@dataclass
class OrderForTransactionCreate:
    menu: MenuForTransaction = field(default_factory=MenuForTransaction)
    quantity: int = 0


@dataclass
class TransactionCreateResponse:
    transaction_id: str = ""
    total_price: str = ""
    token: str = ""
    payment_link: str = ""
    orders: list[OrderForTransactionCreate] = field(default_factory=list)


@dataclass
class OrderForTransaction:
    menu: MenuForTransaction = field(default_factory=MenuForTransaction)
    quantity: int = 0


@dataclass
class TransactionResponse:
    id: str = ""
    queue_code: str = ""
    estimate_time: str = ""
    orders: list[OrderForTransaction] = field(default_factory=list)
    total_price: Decimal = Decimal(0)
    table: TableResponse = field(default_factory=TableResponse)
    order_status: str = ""
    is_delayed: bool = False


@dataclass
class MenuForWaiter:
    id: str = ""
    name: str = ""


@dataclass
class OrderForWaiter:
    menu: MenuForWaiter = field(default_factory=MenuForWaiter)
    quantity: int = 0


@dataclass
class TableForWaiter:
    id: str = ""
    table_number: str = ""


@dataclass
class TransactionForWaiter:
    queue_code: str = ""
    orders: list[OrderForWaiter] = field(default_factory=list)
    table: TableForWaiter = field(default_factory=TableForWaiter)


@dataclass
class NextOrder:
    queue_code: str = ""
    orders: list[OrderForTransaction] = field(default_factory=list)


@dataclass
class StartCookingResponse:
    queue_code: str = ""
    orders: list[OrderForTransaction] = field(default_factory=list)


@dataclass
class FinishCookingResponse:
    queue_code: str = ""
    orders: list[OrderForTransaction] = field(default_factory=list)


@dataclass
class StartDeliveringResponse:
    queue_code: str = ""
    orders: list[OrderForTransaction] = field(default_factory=list)


@dataclass
class FinishDeliveringResponse:
    """Empty acknowledgement of a finished delivery."""


@dataclass
class UserResponse:
    id: str = ""
    email: str = ""
    name: str = ""
    phone_number: str = field(default="", metadata=_OMIT_EMPTY)
    role: str = ""


@dataclass
class UserRegisterResponse:
    id: str = ""
    email: str = ""
    name: str = ""
    phone_number: str = field(default="", metadata=_OMIT_EMPTY)
    role: str = ""


def _encode(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        encoded = {}
        for item in fields(value):
            attribute = getattr(value, item.name)
            if item.metadata.get("omitempty") and not attribute:
                continue
            encoded[item.name] = _encode(attribute)
        return encoded
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return format_decimal(value)
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _encode(item) for key, item in value.items()}
    return value


def to_dict(response: Any) -> dict[str, Any]:
    """Convert a response dataclass to a JSON-ready dictionary."""
    if not is_dataclass(response) or isinstance(response, type):
        raise TypeError(f"not a response object: {response!r}")
    return _encode(response)