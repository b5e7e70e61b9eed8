import logging
from collections.abc import Mapping
from typing import Any, Protocol

from ..handler import (
    EffectCreateTable,
    EffectDeleteTable,
    EffectUpdateTable,
    handle_create_table,
    handle_delete_table,
    handle_read_table,
    handle_table_exists,
    handle_update_table,
)
from ..kernel import (
    InvalidTableIdError,
    PartialUpdateError,
    TableResourceError,
    decode_table_id,
)
from .base import PartialStateError, Resource
from .data import ResourceData, ResourceState
from .schema import TABLE_SCHEMA, FieldSchema, TableArgs

logger = logging.getLogger(__name__)


class EffectTable(EffectCreateTable, EffectUpdateTable, EffectDeleteTable, Protocol):
    pass


class TableResource(Resource):
    """The ``snowflake_table`` resource: lifecycle callbacks over one effect handler."""

    def __init__(self, effect_handler: EffectTable) -> None:
        self.effect_handler = effect_handler

    @property
    def type_name(self) -> str:
        return "snowflake_table"

    @property
    def schema(self) -> Mapping[str, FieldSchema]:
        return TABLE_SCHEMA

    def validate(self, config: Mapping[str, Any]) -> dict[str, str]:
        """Validate desired attributes and fill in defaults.

        Raises
        ------
        pydantic.ValidationError
            If a required attribute is missing or an identifier is invalid
        """
        return TableArgs.model_validate(config).attributes()

    def create(self, config: Mapping[str, Any]) -> ResourceState:
        """Create the table and return its state.

        Raises
        ------
        PartialStateError
            If the table was created but reading it back failed; carries its ID
        """
        data = ResourceData(TABLE_SCHEMA, config=self.validate(config))
        try:
            handle_create_table(data, self.effect_handler)
        except TableResourceError as e:
            if not data.id:
                raise
            logger.warning("table %s was created but could not be read back", data.id)
            raise PartialStateError(data.to_state(), e) from e
        return data.to_state()

    def read(self, state: ResourceState) -> ResourceState:
        """Refresh the state; a table that no longer exists clears the ID."""
        data = ResourceData.from_state(TABLE_SCHEMA, state)
        if not handle_table_exists(data, self.effect_handler):
            logger.warning("table %s no longer exists, removing it from state", state.id)
            data.set_id("")
            return data.to_state()

        handle_read_table(data, self.effect_handler)
        return data.to_state()

    def update(self, state: ResourceState, config: Mapping[str, Any]) -> ResourceState:
        """Apply changed attributes; database or schema changes recreate the table.

        Raises
        ------
        PartialStateError
            If an update step failed, or the read after it; carries the state to persist
        """
        data = ResourceData.from_state(TABLE_SCHEMA, state, self.validate(config))

        if data.requires_replacement():
            logger.info("replacing table %s", state.id)
            deleted = self.delete(state)
            try:
                return self.create(config)
            except TableResourceError as e:
                logger.warning("table %s was dropped but not recreated", state.id)
                raise PartialStateError(deleted, e) from e

        try:
            handle_update_table(data, self.effect_handler)
        except PartialUpdateError as e:
            logger.warning(
                "update of table %s stopped after %s",
                state.id,
                e.applied_attributes or "no changes",
            )
            raise PartialStateError(data.to_partial_state(), e) from e
        except TableResourceError as e:
            partial_state = data.to_partial_state()
            if partial_state == state:
                raise
            logger.warning("table %s was updated but could not be read back", data.id)
            raise PartialStateError(partial_state, e) from e
        return data.to_state()

    def delete(self, state: ResourceState) -> ResourceState:
        data = ResourceData.from_state(TABLE_SCHEMA, state)
        handle_delete_table(data, self.effect_handler)
        return data.to_state()

    def exists(self, state: ResourceState) -> bool:
        return handle_table_exists(
            ResourceData.from_state(TABLE_SCHEMA, state),
            self.effect_handler,
        )

    def import_state(self, id_: str) -> ResourceState:
        """Adopt an existing table by its ``<database>|<schema>|<name>`` ID."""
        try:
            _ = decode_table_id(id_)
        except InvalidTableIdError as e:
            raise InvalidTableIdError(id_, operation="importing") from e

        data = ResourceData(TABLE_SCHEMA, id_=id_)
        handle_read_table(data, self.effect_handler)
        return data.to_state()
