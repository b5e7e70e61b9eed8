import logging
from typing import Any, Protocol

from ..kernel import StatementExecutionError, TableNotFoundError, TableStatements, scan_table
from ..kernel.option import unwrap_or
from ..resource.data import ResourceData
from ._common import EXECUTION_ERRORS, decode_resource_id

logger = logging.getLogger(__name__)


class EffectReadTable(Protocol):
    def query_statement(self, statement: str) -> list[dict[str, Any]]: ...


def handle_read_table(data: ResourceData, effect_handler: EffectReadTable) -> None:
    """Refresh name, schema and database from the table's SHOW TABLES row.

    The comment is read but not written back.

    Raises
    ------
    InvalidTableIdError
        If the resource ID is malformed
    StatementExecutionError
        If the SHOW query fails
    TableNotFoundError
        If the SHOW query returns no row
    """
    identity = decode_resource_id(data, "reading")
    statement = TableStatements.for_identity(identity).show()

    try:
        rows = effect_handler.query_statement(statement)
    except EXECUTION_ERRORS as e:
        raise StatementExecutionError("reading", data.id, e) from e

    record = scan_table(rows)
    if record is None:
        raise TableNotFoundError(data.id)

    logger.debug("read table %s: %s", data.id, record)

    data.set("name", unwrap_or(record.name, ""))
    data.set("schema", unwrap_or(record.schema_name, ""))
    data.set("database", unwrap_or(record.database_name, ""))
