import logging
from typing import Protocol

from ..kernel import PartialUpdateError, TableStatements, UpdateStep, plan_table_update
from ..resource.data import ResourceData
from ._common import EXECUTION_ERRORS, decode_resource_id
from .read_table import EffectReadTable, handle_read_table

logger = logging.getLogger(__name__)


class EffectUpdateTable(EffectReadTable, Protocol):
    def execute_statement(self, statement: str) -> None: ...


def _desired_if_changed(data: ResourceData, key: str) -> str | None:
    if not data.has_change(key):
        return None
    _, new = data.get_change(key)
    return new


def handle_update_table(data: ResourceData, effect_handler: EffectUpdateTable) -> None:
    """Apply name and comment changes one step at a time, then read the table back.

    Each step is committed as soon as it succeeds. A failing step stops the
    update without undoing the steps before it.

    Raises
    ------
    InvalidTableIdError
        If the resource ID is malformed
    PartialUpdateError
        If a step fails; lists the steps already applied
    StatementExecutionError, TableNotFoundError
        If the read after the last step fails; the resource is still partial
    """
    data.partial(True)

    identity = decode_resource_id(data, "updating")
    steps = plan_table_update(
        TableStatements.for_identity(identity),
        new_name=_desired_if_changed(data, "name"),
        new_comment=_desired_if_changed(data, "comment"),
    )

    applied: list[UpdateStep] = []
    for step in steps:
        try:
            effect_handler.execute_statement(step.statement)
        except EXECUTION_ERRORS as e:
            raise PartialUpdateError(data.id, e, applied=tuple(applied), failed=step) from e

        if step.new_id is not None:
            data.set_id(step.new_id)
        data.set_partial(step.attribute)
        applied.append(step)
        logger.info("%s table %s: done", step.operation, data.id)

    # Still partial: a failed read leaves the applied steps committed
    handle_read_table(data, effect_handler)

    data.partial(False)
