"""Table identity and remote-read domain models using attrs."""

from collections.abc import Iterable, Mapping
from typing import Any, NewType

import attrs
import cattrs
from more_itertools import first

from .sql_utils import validate_ident

DataBase = NewType("DataBase", str)
Schema = NewType("Schema", str)
Table = NewType("Table", str)

DEFAULT_SCHEMA = Schema("PUBLIC")


def _validate_name(_instance: Any, attribute: "attrs.Attribute[str]", value: str) -> None:
    _ = validate_ident(value, attribute.name, required=True)


def _validate_optional(_instance: Any, attribute: "attrs.Attribute[str]", value: str) -> None:
    _ = validate_ident(value, attribute.name)


@attrs.define(frozen=True, slots=True)
class TableIdentity:
    """Which table a resource refers to. Empty database or schema means unset."""

    database: DataBase = attrs.field(validator=_validate_optional)
    schema: Schema = attrs.field(validator=_validate_optional)
    name: Table = attrs.field(validator=_validate_name)


@attrs.define(frozen=True, slots=True)
class TableRecord:
    """One row of ``SHOW TABLES`` projected onto the fields the resource uses.

    ``None`` means the column was missing or NULL; ``""`` means it was returned empty.
    """

    comment: str | None = None
    name: str | None = None
    schema_name: str | None = None
    database_name: str | None = None


_row_converter = cattrs.Converter()


def scan_table(rows: Iterable[Mapping[str, Any]]) -> TableRecord | None:
    """Scan the first row of a SHOW TABLES result.

    Parameters
    ----------
    rows : Iterable[Mapping[str, Any]]
        Rows as returned by a dict cursor; columns not in ``TableRecord`` are ignored

    Returns
    -------
    TableRecord | None
        The record for the first row, or None when the table does not exist
    """
    row = first(rows, None)
    if row is None:
        return None
    return _row_converter.structure(dict(row), TableRecord)
