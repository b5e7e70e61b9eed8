import logging
from typing import Protocol

from ..kernel import StatementExecutionError, TableStatements
from ..resource.data import ResourceData
from ._common import EXECUTION_ERRORS, decode_resource_id

logger = logging.getLogger(__name__)


class EffectDeleteTable(Protocol):
    def execute_statement(self, statement: str) -> None: ...


def handle_delete_table(data: ResourceData, effect_handler: EffectDeleteTable) -> None:
    """Drop the table and clear the resource ID."""
    identity = decode_resource_id(data, "deleting")
    statement = TableStatements.for_identity(identity).drop()

    try:
        effect_handler.execute_statement(statement)
    except EXECUTION_ERRORS as e:
        raise StatementExecutionError("deleting", data.id, e) from e

    logger.info("deleted table %s", data.id)
    data.set_id("")
