"""Kernel module for domain layer types and logic."""

from .diff import normalize_statement, should_suppress_diff
from .errors import (
    InvalidIdentifierError,
    InvalidTableIdError,
    PartialUpdateError,
    StatementExecutionError,
    TableNotFoundError,
    TableResourceError,
)
from .statements import TableStatements, table
from .table_id import decode_table_id, encode_table_id
from .table_metadata import (
    DEFAULT_SCHEMA,
    DataBase,
    Schema,
    Table,
    TableIdentity,
    TableRecord,
    scan_table,
)
from .update_steps import UpdateStep, plan_table_update

__all__ = [
    "DEFAULT_SCHEMA",
    "DataBase",
    "InvalidIdentifierError",
    "InvalidTableIdError",
    "PartialUpdateError",
    "Schema",
    "StatementExecutionError",
    "Table",
    "TableIdentity",
    "TableNotFoundError",
    "TableRecord",
    "TableResourceError",
    "TableStatements",
    "UpdateStep",
    "decode_table_id",
    "encode_table_id",
    "normalize_statement",
    "plan_table_update",
    "scan_table",
    "should_suppress_diff",
    "table",
]
