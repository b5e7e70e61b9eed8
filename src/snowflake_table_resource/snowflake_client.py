"""
Snowflake client shared by every lifecycle operation.
"""

import logging
from types import TracebackType
from typing import Any, Self, cast

from snowflake.connector import (
    DataError,
    DictCursor,
    IntegrityError,
    NotSupportedError,
    OperationalError,
    ProgrammingError,
    SnowflakeConnection,
)

from .kernel.contract import contract
from .settings import SnowflakeSettings

logger = logging.getLogger(__name__)

KNOWN_DRIVER_ERRORS: tuple[type[Exception], ...] = (
    TimeoutError,
    ProgrammingError,
    OperationalError,
    DataError,
    IntegrityError,
    NotSupportedError,
)


class SnowflakeClient:
    """Snowflake database client.

    One connection is opened on first use and shared by all statements. Each
    statement runs on its own, without transactions, timeouts or retries.
    """

    def __init__(self, settings: SnowflakeSettings) -> None:
        self.settings = settings
        self._connection: SnowflakeConnection | None = None

    def _get_connection(self) -> SnowflakeConnection:
        """Return the shared connection, opening it if needed."""
        if self._connection is None:
            logger.info(
                "opening Snowflake connection",
                extra={"account": self.settings.account, "user": self.settings.user},
            )
            self._connection = SnowflakeConnection(
                connection_name=None,
                connections_file_path=None,
                **self.settings.connection_params(),
            )
        return self._connection

    def _run(self, statement: str) -> list[dict[str, Any]]:
        logger.debug("executing statement: %s", statement)
        with self._get_connection().cursor(DictCursor) as cursor:
            try:
                _ = cursor.execute(statement)
                if cursor.description is None:
                    return []
                return cast("list[dict[str, Any]]", cursor.fetchall())
            except Exception:
                logger.exception("Statement execution error")
                raise

    @contract(known_err=KNOWN_DRIVER_ERRORS)
    def execute(self, statement: str) -> None:
        """Execute a statement whose result rows are not needed.

        Raises
        ------
        ProgrammingError
            SQL syntax errors or other programming errors
        OperationalError
            Database operation related errors
        DataError
            Data processing related errors
        IntegrityError
            Referential integrity constraint violations
        NotSupportedError
            When an unsupported database feature is used
        """
        _ = self._run(statement)

    @contract(known_err=KNOWN_DRIVER_ERRORS)
    def query(self, statement: str) -> list[dict[str, Any]]:
        """Execute a query and return its rows keyed by column name.

        Parameters
        ----------
        statement : str
            Query to execute, typically a SHOW statement

        Returns
        -------
        list[dict[str, Any]]
            Result rows, empty when nothing matched
        """
        return self._run(statement)

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
