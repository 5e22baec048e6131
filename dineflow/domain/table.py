"""Restaurant tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from dineflow.domain.shared import NIL_ID, Timestamp


@dataclass
class Table:
    id: UUID = NIL_ID
    table_number: str = ""
    timestamps: Timestamp = field(default_factory=Timestamp)


@runtime_checkable
class TableRepository(Protocol):
    """Storage of tables."""

    def get_all_tables(self, tx: Any) -> list[Table]:
        """Return every table."""

    def get_table_by_id(self, tx: Any, table_id: str) -> Table:
        """Return the table with this identifier."""