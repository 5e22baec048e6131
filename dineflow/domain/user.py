"""Users, their roles and their hashed passwords."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

import bcrypt

from dineflow.domain.errors import DomainError
from dineflow.domain.shared import NIL_ID, Timestamp

BCRYPT_COST = 10
_MIN_PASSWORD_LENGTH = 8
_MAX_BCRYPT_BYTES = 72


class Role(str, enum.Enum):
    """The role a user plays in the restaurant."""

    SUPERADMIN = "superadmin"
    CUSTOMER = "customer"
    KITCHEN = "kitchen"
    WAITER = "waiter"

    def __str__(self) -> str:
        return self.value


class PasswordMismatchError(DomainError):
    """The plain password does not match the stored hash."""

    default_message = "hashedPassword is not the hash of the given password"


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


@dataclass(frozen=True)
class Password:
    """A bcrypt-hashed password."""

    hashed: str

    @classmethod
    def from_plain(cls, plain: str) -> Password:
        """Validate and hash a plain password."""
        if len(plain) < _MIN_PASSWORD_LENGTH:
            raise ValueError("password must be at least 8 characters")
        raw = _as_bytes(plain)
        if len(raw) > _MAX_BCRYPT_BYTES:
            raise ValueError("failed to hash password: password length exceeds 72 bytes")
        hashed = bcrypt.hashpw(raw, bcrypt.gensalt(rounds=BCRYPT_COST))
        return cls(hashed.decode("ascii"))

    @classmethod
    def from_schema(cls, hashed: str) -> Password:
        """Wrap an already hashed password."""
        return cls(hashed)

    def verify(self, plain: str | bytes) -> bool:
        """Return True when plain matches; raise PasswordMismatchError otherwise."""
        try:
            matches = bcrypt.checkpw(_as_bytes(plain), _as_bytes(self.hashed))
        except ValueError as exc:
            raise PasswordMismatchError("invalid password hash") from exc
        if not matches:
            raise PasswordMismatchError()
        return True


@dataclass
class User:
    id: UUID = NIL_ID
    email: str = ""
    password: Password = field(default_factory=lambda: Password(""), repr=False)
    name: str = ""
    phone_number: str = ""
    role: Role | None = None
    timestamps: Timestamp = field(default_factory=Timestamp)


@runtime_checkable
class UserRepository(Protocol):
    """Storage of users."""

    def register(self, tx: Any, user: User) -> User:
        """Store a new user and return it with its identifier."""

    def get_user_by_id(self, tx: Any, user_id: str) -> User:
        """Return the user with this identifier."""

    def get_user_by_email(self, tx: Any, email: str) -> User:
        """Return the user with this email."""

    def check_email(self, tx: Any, email: str) -> User | None:
        """Return the user registered under this email, or None."""