from .data import ResourceData, ResourceState
from .schema import TABLE_SCHEMA, FieldSchema, TableArgs

__all__ = [
    "TABLE_SCHEMA",
    "FieldSchema",
    "ResourceData",
    "ResourceState",
    "TableArgs",
]
