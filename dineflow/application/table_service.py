"""Read access to restaurant tables."""

from __future__ import annotations

from dineflow.application.responses import TableResponse
from dineflow.domain.errors import (
    GetAllTablesError,
    GetTableByIDError,
    RecordNotFoundError,
    TableNotFoundError,
)
from dineflow.domain.table import Table, TableRepository


def _to_response(table: Table) -> TableResponse:
    return TableResponse(id=str(table.id), table_number=table.table_number)


class TableService:
    """Lists tables and looks them up."""

    def __init__(self, table_repository: TableRepository) -> None:
        self.table_repository = table_repository

    def get_all_tables(self) -> list[TableResponse]:
        """Return every table."""
        try:
            tables = self.table_repository.get_all_tables(None)
        except Exception as exc:
            raise GetAllTablesError() from exc
        return [_to_response(table) for table in tables]

    def get_table_by_id(self, table_id: str) -> TableResponse:
        """Return the table with this identifier."""
        try:
            table = self.table_repository.get_table_by_id(None, table_id)
        except RecordNotFoundError as exc:
            raise TableNotFoundError() from exc
        except Exception as exc:
            raise GetTableByIDError() from exc
        return _to_response(table)