from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Literal

import attrs

from .data import ResourceData, ResourceState
from .schema import FieldSchema

type PlanAction = Literal["create", "update", "replace", "noop"]


@attrs.define(frozen=True, slots=True)
class ResourcePlan:
    action: PlanAction
    changed: tuple[str, ...] = ()


class PartialStateError(Exception):
    """An operation failed after committing part of its changes.

    ``state`` is what the host should persist; the failure is the ``__cause__``.
    """

    def __init__(self, state: ResourceState, cause: Exception) -> None:
        super().__init__(str(cause))
        self.state = state
        self.cause = cause


class Resource(ABC):
    @property
    @abstractmethod
    def type_name(self) -> str: ...

    @property
    @abstractmethod
    def schema(self) -> Mapping[str, FieldSchema]: ...

    @abstractmethod
    def create(self, config: Mapping[str, Any]) -> ResourceState: ...

    @abstractmethod
    def read(self, state: ResourceState) -> ResourceState: ...

    @abstractmethod
    def update(self, state: ResourceState, config: Mapping[str, Any]) -> ResourceState: ...

    @abstractmethod
    def delete(self, state: ResourceState) -> ResourceState: ...

    @abstractmethod
    def exists(self, state: ResourceState) -> bool: ...

    @abstractmethod
    def import_state(self, id_: str) -> ResourceState: ...

    @abstractmethod
    def validate(self, config: Mapping[str, Any]) -> dict[str, str]: ...

    def plan(self, state: ResourceState, config: Mapping[str, Any]) -> ResourcePlan:
        """Compare prior state with desired config, after diff suppression."""
        attributes = self.validate(config)
        if not state.id:
            return ResourcePlan("create", tuple(attributes))

        data = ResourceData.from_state(self.schema, state, attributes)
        changed = tuple(data.changed_attributes())
        if not changed:
            return ResourcePlan("noop")
        if data.requires_replacement():
            return ResourcePlan("replace", changed)
        return ResourcePlan("update", changed)
