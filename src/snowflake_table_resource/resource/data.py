"""Per-operation view of one resource instance: prior state, desired config and writes."""

from collections.abc import Mapping
from typing import Self

import attrs

from .schema import FieldSchema


@attrs.define(frozen=True, slots=True)
class ResourceState:
    """What the host persists between operations."""

    id: str = ""
    attributes: dict[str, str] = attrs.field(factory=dict)


class ResourceData:
    """Attributes of one resource instance during a lifecycle call.

    Reads resolve in order: values written with ``set``, the desired config,
    the prior state, then the field default. Changes compare prior state with
    config, honouring each field's diff suppression.
    """

    def __init__(
        self,
        schema: Mapping[str, FieldSchema],
        *,
        id_: str = "",
        state: Mapping[str, str] | None = None,
        config: Mapping[str, str] | None = None,
    ) -> None:
        unknown = set(state or {}).union(config or {}).difference(schema)
        if unknown:
            raise KeyError(f"unknown attributes: {', '.join(sorted(unknown))}")

        self._schema = schema
        self._id = id_
        self._state = dict(state or {})
        self._config = dict(config) if config is not None else None
        self._set: dict[str, str] = {}
        self._partial = False
        self._committed: set[str] = set()

    @classmethod
    def from_state(
        cls,
        schema: Mapping[str, FieldSchema],
        state: ResourceState,
        config: Mapping[str, str] | None = None,
    ) -> Self:
        return cls(schema, id_=state.id, state=state.attributes, config=config)

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        """Assign the resource ID; an empty ID marks the resource as gone."""
        self._id = value

    def _field(self, key: str) -> FieldSchema:
        try:
            return self._schema[key]
        except KeyError:
            raise KeyError(f"unknown attribute: {key}") from None

    def get(self, key: str) -> str:
        field = self._field(key)
        if key in self._set:
            return self._set[key]
        if self._config is not None and key in self._config:
            return self._config[key]
        return self._state.get(key, field.default)

    def get_ok(self, key: str) -> tuple[str, bool]:
        """Return the value and whether it is set to something non-empty."""
        value = self.get(key)
        return value, value != ""

    def get_change(self, key: str) -> tuple[str, str]:
        """Return the (prior, desired) pair for ``key``."""
        field = self._field(key)
        old = self._state.get(key, field.default)
        if self._config is None:
            return old, old
        return old, self._config.get(key, field.default)

    def has_change(self, key: str) -> bool:
        old, new = self.get_change(key)
        return not self._field(key).same(old, new)

    def changed_attributes(self) -> list[str]:
        return [key for key in self._schema if self.has_change(key)]

    def requires_replacement(self) -> bool:
        """Whether a changed attribute can only be applied by recreating the resource."""
        return any(self._schema[key].force_new for key in self.changed_attributes())

    def set(self, key: str, value: str) -> None:
        _ = self._field(key)
        self._set[key] = value

    def partial(self, on: bool) -> None:
        """Switch partial mode: on failure only committed attributes are persisted."""
        self._partial = on

    def set_partial(self, key: str) -> None:
        """Commit the desired value of ``key`` even if the operation later fails."""
        _ = self._field(key)
        self._committed.add(key)

    @property
    def is_partial(self) -> bool:
        return self._partial

    def _persisted(self, key: str) -> str:
        field = self._schema[key]
        if (
            key not in self._set
            and key in self._state
            and field.diff_suppress is not None
            and not self.has_change(key)
        ):
            # A suppressed difference was never applied, so the prior value stands
            return self._state[key]
        return self.get(key)

    def to_state(self) -> ResourceState:
        """State to persist after the operation succeeded."""
        return ResourceState(self._id, {key: self._persisted(key) for key in self._schema})

    def to_partial_state(self) -> ResourceState:
        """State to persist after the operation failed part way."""
        attributes = {
            key: self._state.get(key, field.default) for key, field in self._schema.items()
        }
        if self._config is not None:
            for key in self._committed:
                attributes[key] = self._config.get(key, self._schema[key].default)
        attributes.update(self._set)
        return ResourceState(self._id, attributes)
