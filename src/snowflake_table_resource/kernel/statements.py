"""DDL statement rendering for a Snowflake table.

Supported statements are:

- CREATE OR REPLACE TABLE
- ALTER TABLE ... RENAME TO
- ALTER TABLE ... SET COMMENT / UNSET COMMENT
- SHOW TABLES LIKE
- DROP TABLE
"""

from typing import Self

import attrs

from .sql_utils import escape_string, qualified_name, quote_ident, validate_ident
from .table_metadata import DataBase, Schema, Table, TableIdentity

# Tables are created with a single placeholder column until columns are modelled
PLACEHOLDER_COLUMNS = "(placeholder varchar(100))"


def _check_name(_instance: object, _attribute: object, value: str) -> None:
    _ = validate_ident(value, "name", required=True)


def _check_database(_instance: object, _attribute: object, value: str) -> None:
    _ = validate_ident(value, "database")


def _check_schema(_instance: object, _attribute: object, value: str) -> None:
    _ = validate_ident(value, "schema")


@attrs.define(frozen=True, slots=True)
class TableStatements:
    """Immutable statement builder for one table.

    ``with_*`` methods return a configured copy; rendering methods never modify
    the instance.
    """

    name: Table = attrs.field(validator=_check_name)
    database: DataBase = attrs.field(default=DataBase(""), validator=_check_database)
    schema: Schema = attrs.field(default=Schema(""), validator=_check_schema)
    comment: str = ""

    @classmethod
    def for_identity(cls, identity: TableIdentity) -> Self:
        return cls(identity.name, identity.database, identity.schema)

    def with_database(self, database: str) -> Self:
        return attrs.evolve(self, database=DataBase(database))

    def with_schema(self, schema: str) -> Self:
        return attrs.evolve(self, schema=Schema(schema))

    def with_comment(self, comment: str) -> Self:
        return attrs.evolve(self, comment=comment)

    def identity(self) -> TableIdentity:
        return TableIdentity(self.database, self.schema, self.name)

    def qualified_name(self) -> str:
        return qualified_name(self.database, self.schema, self.name)

    def create(self) -> str:
        """Render the statement that creates (or replaces) the table."""
        query = f"CREATE OR REPLACE TABLE {self.qualified_name()}{PLACEHOLDER_COLUMNS}"
        if self.comment:
            query += f" COMMENT = '{escape_string(self.comment)}'"
        return query

    def rename(self, new_name: str) -> tuple[str, Self]:
        """Render the rename statement.

        Returns
        -------
        tuple[str, Self]
            The statement, and a builder for the table under its new name
        """
        renamed = attrs.evolve(self, name=Table(new_name))
        query = f"ALTER TABLE {self.qualified_name()} RENAME TO {renamed.qualified_name()}"
        return query, renamed

    def change_comment(self, comment: str) -> str:
        return f"ALTER TABLE {self.qualified_name()} SET COMMENT = '{escape_string(comment)}'"

    def remove_comment(self) -> str:
        return f"ALTER TABLE {self.qualified_name()} UNSET COMMENT"

    def show(self) -> str:
        """Render the SHOW query for the row describing this table.

        Only the database scopes the query; the schema is not used.
        """
        if not self.database:
            return f"SHOW TABLES LIKE '{escape_string(self.name)}'"
        return (
            f"SHOW TABLES LIKE '{escape_string(self.name)}'"
            f" IN DATABASE {quote_ident(self.database)}"
        )

    def drop(self) -> str:
        return f"DROP TABLE {self.qualified_name()}"


def table(name: str) -> TableStatements:
    """Start building statements for the table ``name``."""
    return TableStatements(Table(name))
