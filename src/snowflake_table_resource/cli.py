from pathlib import Path
from typing import Any, Literal

from pydantic import Field, FilePath
from pydantic_settings import BaseSettings, SettingsConfigDict

type Action = Literal["create", "read", "update", "delete", "exists", "import", "plan"]


class Cli(BaseSettings):
    model_config = SettingsConfigDict(
        cli_parse_args=True,
        cli_prog_name="snowflake-table",
        env_prefix="SNOWFLAKE_TABLE_",
    )

    config: FilePath = Field(init=False, description="Settings TOML file")
    action: Action = Field(init=False, description="Lifecycle operation to run")
    state: Path = Field(
        Path("snowflake_table.state.json"),
        init=False,
        description="JSON file holding the resource ID and attributes",
    )
    id: str | None = Field(None, init=False, description="Composite ID for import")

    name: str | None = Field(None, init=False)
    database: str | None = Field(None, init=False)
    schema_: str | None = Field(None, alias="schema", init=False)
    comment: str | None = Field(None, init=False)

    def desired_attributes(self) -> dict[str, Any]:
        """Return the attributes given on the command line, unset ones omitted."""
        attributes = {
            "name": self.name,
            "database": self.database,
            "schema": self.schema_,
            "comment": self.comment,
        }
        return {key: value for key, value in attributes.items() if value is not None}
