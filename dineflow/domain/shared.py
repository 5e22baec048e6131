"""Value objects shared across the domain: identifiers, prices, URLs, timestamps."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Union

NIL_ID = uuid.UUID(int=0)

Amount = Union[Decimal, int, float, str]


def new_id() -> uuid.UUID:
    """Return a fresh random identifier."""
    return uuid.uuid4()


def _to_decimal(value: Amount) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"invalid price amount: {value!r}") from exc


def format_decimal(value: Decimal) -> str:
    """Render a decimal in plain notation without trailing fractional zeros."""
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(frozen=True)
class Price:
    """A non-negative monetary amount."""

    amount: Decimal = Decimal(0)

    def __post_init__(self) -> None:
        amount = _to_decimal(self.amount)
        if amount < 0:
            raise ValueError("price must be greater than zero")
        object.__setattr__(self, "amount", amount)

    @classmethod
    def from_schema(cls, amount: Amount) -> Price:
        """Build a price from stored data without validating it."""
        price = object.__new__(cls)
        object.__setattr__(price, "amount", _to_decimal(amount))
        return price

    def __add__(self, other: Price) -> Price:
        if not isinstance(other, Price):
            return NotImplemented
        return Price(self.amount + other.amount)

    def __str__(self) -> str:
        return format_decimal(self.amount)


@dataclass(frozen=True)
class URL:
    """A non-empty URL or path."""

    path: str

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError(f"invalid URL: {self.path}")

    @classmethod
    def from_schema(cls, path: str) -> URL:
        """Build a URL from stored data without validating it."""
        url = object.__new__(cls)
        object.__setattr__(url, "path", path)
        return url

    def __str__(self) -> str:
        return self.path


@dataclass
class Timestamp:
    """Creation, update and soft-deletion times of a record."""

    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None