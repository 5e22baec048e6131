"""Transaction boundaries around a unit of work."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol, runtime_checkable

from dineflow.domain.errors import InvalidTransactionError


class UnexpectedError(Exception):
    """Wraps an interruption that escaped a unit of work."""

    def __init__(self, cause: object) -> None:
        super().__init__(f"recovered from panic: {cause}")
        self.cause = cause


@runtime_checkable
class UnitOfWork(Protocol):
    """Something that can open a transaction and close it."""

    def begin(self) -> Any:
        """Open a transaction and return its handle."""

    def commit_or_rollback(self, tx: Any, error: BaseException | None) -> None:
        """Commit when error is None, roll back otherwise."""


@contextmanager
def unit_of_work(manager: Any) -> Iterator[Any]:
    """Run a block inside a transaction of manager, committing or rolling back."""
    if not isinstance(manager, UnitOfWork):
        raise InvalidTransactionError()
    tx = manager.begin()
    try:
        yield tx
    except Exception as exc:
        manager.commit_or_rollback(tx, exc)
        raise
    except BaseException as exc:
        manager.commit_or_rollback(tx, UnexpectedError(exc))
        raise
    else:
        manager.commit_or_rollback(tx, None)