"""SQL utilities for identifier validation, quoting and string literals."""

import re

from .errors import InvalidIdentifierError

# Double quotes would end the quoted identifier, and "|" is the composite ID delimiter
FORBIDDEN_IDENTIFIER_PATTERN = re.compile(r'["|\x00-\x1f\x7f]')


def validate_ident(value: str, field: str, *, required: bool = False) -> str:
    """Check that an identifier can be wrapped in double quotes as-is.

    Parameters
    ----------
    value : str
        The identifier to check
    field : str
        Which identifier this is ("name", "database" or "schema"), for error messages
    required : bool, optional
        Whether an empty value is an error, by default False

    Returns
    -------
    str
        The identifier, unchanged

    Raises
    ------
    InvalidIdentifierError
        If the identifier is required but blank, or contains a double quote,
        the "|" delimiter or a control character
    """
    if required and not value.strip():
        raise InvalidIdentifierError(field, value, "must not be empty")

    if match := FORBIDDEN_IDENTIFIER_PATTERN.search(value):
        raise InvalidIdentifierError(
            field,
            value,
            f"must not contain {match.group()!r}",
        )

    return value


def quote_ident(name: str) -> str:
    """Wrap an identifier in double quotes.

    Snowflake resolves quoted identifiers case-sensitively, so the name is
    never upper-cased or left bare. Callers validate with ``validate_ident`` first.
    """
    return f'"{name}"'


def escape_string(value: str) -> str:
    """Escape a value for use inside a single-quoted string literal.

    Backslashes are doubled as well, since Snowflake treats them as escapes.

    >>> escape_string("it's")
    "it''s"
    """
    return value.replace("\\", "\\\\").replace("'", "''")


def qualified_name(database: str, schema: str, name: str) -> str:
    """Create a qualified identifier from optional database and schema parts.

    Parameters
    ----------
    database : str
        Database name, empty when unset
    schema : str
        Schema name, empty when unset
    name : str
        Object name

    Returns
    -------
    str
        One of ``"db"."schema"."name"``, ``"db".."name"`` (default schema),
        ``"schema"."name"`` or ``"name"``
    """
    quoted_name = quote_ident(name)

    if database and schema:
        return f"{quote_ident(database)}.{quote_ident(schema)}.{quoted_name}"

    if database:
        return f"{quote_ident(database)}..{quoted_name}"

    if schema:
        return f"{quote_ident(schema)}.{quoted_name}"

    return quoted_name
