"""Dispatch of command line actions onto a resource."""

import logging
from collections.abc import Mapping
from typing import Any

import attrs

from .cli import Action
from .resource.base import Resource
from .resource.data import ResourceState

logger = logging.getLogger(__name__)


@attrs.define(frozen=True, slots=True)
class ActionResult:
    state: ResourceState
    message: str


def _require_id(state: ResourceState, action: Action) -> None:
    if not state.id:
        raise ValueError(f"cannot {action}: the state has no resource ID")


def run_action(
    resource: Resource,
    action: Action,
    state: ResourceState,
    *,
    desired: Mapping[str, Any],
    import_id: str | None = None,
) -> ActionResult:
    """Run one lifecycle action and return the state to persist.

    Parameters
    ----------
    resource : Resource
        The resource to operate on
    action : Action
        Which lifecycle operation to run
    state : ResourceState
        The persisted state before the action
    desired : Mapping[str, Any]
        Desired attributes from the command line; used by create, update and plan
    import_id : str | None, optional
        Composite ID to adopt; required by import
    """
    match action:
        case "create":
            if state.id:
                raise ValueError(f"resource already exists with ID {state.id}, use update")
            new_state = resource.create(desired)
            return ActionResult(new_state, f"created {resource.type_name} {new_state.id}")
        case "read":
            _require_id(state, action)
            new_state = resource.read(state)
            if not new_state.id:
                return ActionResult(new_state, f"{resource.type_name} {state.id} is gone")
            return ActionResult(new_state, f"refreshed {resource.type_name} {new_state.id}")
        case "update":
            _require_id(state, action)
            # Attributes not given on the command line keep their current values
            new_state = resource.update(state, {**state.attributes, **desired})
            return ActionResult(new_state, f"updated {resource.type_name} {new_state.id}")
        case "delete":
            _require_id(state, action)
            new_state = resource.delete(state)
            return ActionResult(new_state, f"deleted {resource.type_name} {state.id}")
        case "exists":
            _require_id(state, action)
            found = resource.exists(state)
            return ActionResult(state, "true" if found else "false")
        case "import":
            if not import_id:
                raise ValueError("import requires --id <database>|<schema>|<name>")
            new_state = resource.import_state(import_id)
            return ActionResult(new_state, f"imported {resource.type_name} {new_state.id}")
        case "plan":
            plan = resource.plan(state, {**state.attributes, **desired})
            changed = ", ".join(plan.changed) or "nothing"
            return ActionResult(state, f"{plan.action}: {changed}")
