import logging
from typing import Protocol

from ..kernel import StatementExecutionError, encode_table_id, table
from ..resource.data import ResourceData
from ._common import EXECUTION_ERRORS
from .read_table import EffectReadTable, handle_read_table

logger = logging.getLogger(__name__)


class EffectCreateTable(EffectReadTable, Protocol):
    def execute_statement(self, statement: str) -> None: ...


def handle_create_table(data: ResourceData, effect_handler: EffectCreateTable) -> None:
    """Create the table, assign its composite ID, then read it back."""
    name = data.get("name")
    statements = table(name).with_database(data.get("database")).with_schema(data.get("schema"))

    comment, ok = data.get_ok("comment")
    if ok:
        statements = statements.with_comment(comment)

    try:
        effect_handler.execute_statement(statements.create())
    except EXECUTION_ERRORS as e:
        raise StatementExecutionError("creating", name, e) from e

    data.set_id(encode_table_id(statements.identity()))
    logger.info("created table %s", data.id)

    handle_read_table(data, effect_handler)
