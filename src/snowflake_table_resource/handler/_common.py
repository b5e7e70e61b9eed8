from snowflake.connector import Error as SnowflakeError

from ..kernel import InvalidTableIdError, TableIdentity, decode_table_id
from ..kernel.contract import ContractViolationError
from ..resource.data import ResourceData

# Failures of a statement once it reached the effect handler
EXECUTION_ERRORS: tuple[type[Exception], ...] = (
    SnowflakeError,
    TimeoutError,
    ContractViolationError,
)


def decode_resource_id(data: ResourceData, operation: str) -> TableIdentity:
    try:
        return decode_table_id(data.id)
    except InvalidTableIdError as e:
        raise InvalidTableIdError(data.id, operation=operation) from e
