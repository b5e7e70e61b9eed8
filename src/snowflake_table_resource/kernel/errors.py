"""Error taxonomy for the table resource."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .update_steps import UpdateStep


class TableResourceError(Exception):
    """Base class for table resource failures."""


class InvalidIdentifierError(TableResourceError, ValueError):
    """Raised when a database, schema or table name cannot be rendered safely."""

    def __init__(self, field: str, value: str, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"invalid {field} {value!r}: {reason}")


class InvalidTableIdError(TableResourceError):
    """Raised when a composite ID is not of the form <database>|<schema>|<name>."""

    def __init__(self, table_id: str, *, operation: str | None = None) -> None:
        self.table_id = table_id
        self.operation = operation
        message = f"ID {table_id!r} is invalid"
        if operation is not None:
            message = f"error {operation} table: {message}"
        super().__init__(message)


class TableNotFoundError(TableResourceError):
    """Raised when a SHOW query returns no row for the table."""

    def __init__(self, table_id: str) -> None:
        self.table_id = table_id
        super().__init__(f"table {table_id} does not exist")


class StatementExecutionError(TableResourceError):
    """A statement failed; the cause is kept as ``__cause__`` and in the message."""

    def __init__(self, operation: str, table: str, cause: Exception) -> None:
        self.operation = operation
        self.table = table
        self.cause = cause
        super().__init__(f"error {operation} table {table}: {cause}")


class PartialUpdateError(StatementExecutionError):
    """An update step failed after zero or more steps were already committed."""

    def __init__(
        self,
        table: str,
        cause: Exception,
        *,
        applied: "tuple[UpdateStep, ...]",
        failed: "UpdateStep",
    ) -> None:
        self.applied = applied
        self.failed = failed
        super().__init__(failed.operation, table, cause)

    @property
    def applied_attributes(self) -> list[str]:
        return [step.attribute for step in self.applied]
