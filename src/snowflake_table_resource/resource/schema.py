"""Field declarations of the table resource."""

from collections.abc import Callable, Mapping

import attrs
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ..kernel import DEFAULT_SCHEMA, DataBase, Schema, Table, should_suppress_diff
from ..kernel.sql_utils import validate_ident

type DiffSuppressFunc = Callable[[str, str], bool]


@attrs.define(frozen=True, slots=True)
class FieldSchema:
    """How the host treats one string attribute of a resource."""

    description: str
    required: bool = False
    default: str = ""
    force_new: bool = False
    diff_suppress: DiffSuppressFunc | None = None

    def same(self, old: str, new: str) -> bool:
        """Tell whether ``old`` and ``new`` count as the same value."""
        if old == new:
            return True
        return self.diff_suppress is not None and self.diff_suppress(old, new)


TABLE_SCHEMA: Mapping[str, FieldSchema] = {
    "name": FieldSchema(
        description=(
            "Specifies the identifier for the table; must be unique for the schema"
            " in which the table is created. Don't use the | character."
        ),
        required=True,
    ),
    "database": FieldSchema(
        description="The database in which to create the table. Don't use the | character.",
        required=True,
        force_new=True,
    ),
    "schema": FieldSchema(
        description="The schema in which to create the table. Don't use the | character.",
        default=DEFAULT_SCHEMA,
        force_new=True,
    ),
    "comment": FieldSchema(
        description="Specifies a comment for the table.",
        diff_suppress=should_suppress_diff,
    ),
}


class TableArgs(BaseModel):
    """Desired state of a table as declared by the user."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: Table = Field(description=TABLE_SCHEMA["name"].description)
    database: DataBase = Field(description=TABLE_SCHEMA["database"].description)
    schema_: Schema = Field(
        DEFAULT_SCHEMA,
        alias="schema",
        description=TABLE_SCHEMA["schema"].description,
    )
    comment: str = Field("", description=TABLE_SCHEMA["comment"].description)

    @field_validator("name", "database")
    @classmethod
    def check_required_identifier(cls, value: str, info: ValidationInfo) -> str:
        return validate_ident(value, info.field_name or "name", required=True)

    @field_validator("schema_")
    @classmethod
    def check_schema_identifier(cls, value: str) -> str:
        return validate_ident(value, "schema")

    def attributes(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
