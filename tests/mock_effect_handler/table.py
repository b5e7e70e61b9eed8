from collections.abc import Callable
from typing import Any


def show_row(
    name: str = "T",
    schema_name: str = "PUBLIC",
    database_name: str = "D",
    comment: str = "",
) -> dict[str, Any]:
    """A SHOW TABLES row as returned by a dict cursor."""
    return {
        "created_on": "2024-01-01 00:00:00.000 -0800",
        "name": name,
        "database_name": database_name,
        "schema_name": schema_name,
        "kind": "TABLE",
        "comment": comment,
        "cluster_by": "",
        "rows": 0,
        "bytes": 0,
        "owner": "SYSADMIN",
    }


class MockTableEffect:
    """Mock implementation of the table Effect protocols.

    Records executed statements and queries separately. ``rows`` answers every
    query unless ``rows_for`` maps a query to its own rows.
    """

    def __init__(
        self,
        rows: list[dict[str, Any]] | None = None,
        *,
        rows_for: Callable[[str], list[dict[str, Any]]] | None = None,
        should_raise: Exception | None = None,
        raise_on: Callable[[str], bool] | None = None,
    ) -> None:
        self.rows = [show_row()] if rows is None else rows
        self.rows_for = rows_for
        self.should_raise = should_raise
        self.raise_on = raise_on
        self.executed: list[str] = []
        self.queried: list[str] = []

    def _maybe_raise(self, statement: str) -> None:
        if self.should_raise is None:
            return
        if self.raise_on is None or self.raise_on(statement):
            raise self.should_raise

    def execute_statement(self, statement: str) -> None:
        self._maybe_raise(statement)
        self.executed.append(statement)

    def query_statement(self, statement: str) -> list[dict[str, Any]]:
        self._maybe_raise(statement)
        self.queried.append(statement)
        if self.rows_for is not None:
            return self.rows_for(statement)
        return self.rows
