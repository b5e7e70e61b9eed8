from ..kernel import StatementExecutionError, TableStatements
from ..resource.data import ResourceData
from ._common import EXECUTION_ERRORS, decode_resource_id
from .read_table import EffectReadTable


def handle_table_exists(data: ResourceData, effect_handler: EffectReadTable) -> bool:
    """Tell whether SHOW TABLES returns a row for the table; no fields are scanned."""
    identity = decode_resource_id(data, "checking")
    statement = TableStatements.for_identity(identity).show()

    try:
        rows = effect_handler.query_statement(statement)
    except EXECUTION_ERRORS as e:
        raise StatementExecutionError("checking", data.id, e) from e

    return len(rows) > 0
