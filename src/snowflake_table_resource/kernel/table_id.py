"""Composite resource ID: ``<database>|<schema>|<name>``."""

from .errors import InvalidIdentifierError, InvalidTableIdError
from .table_metadata import DataBase, Schema, Table, TableIdentity

TABLE_ID_DELIMITER = "|"


def encode_table_id(identity: TableIdentity) -> str:
    """Join the identity into the ID persisted by the host.

    >>> encode_table_id(TableIdentity(DataBase("D"), Schema("S"), Table("T")))
    'D|S|T'
    """
    return TABLE_ID_DELIMITER.join((identity.database, identity.schema, identity.name))


def decode_table_id(value: str) -> TableIdentity:
    """Split an ID back into database, schema and table name.

    Raises
    ------
    InvalidTableIdError
        If the ID does not have exactly three segments or the name segment is not
        a valid identifier
    """
    parts = value.split(TABLE_ID_DELIMITER)
    if len(parts) != 3:
        raise InvalidTableIdError(value)

    database, schema, name = parts
    try:
        return TableIdentity(DataBase(database), Schema(schema), Table(name))
    except InvalidIdentifierError as e:
        raise InvalidTableIdError(value) from e
