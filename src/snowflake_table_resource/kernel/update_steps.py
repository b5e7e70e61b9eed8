"""Ordered, individually committed sub-operations of a table update."""

import attrs

from .statements import TableStatements
from .table_id import encode_table_id


@attrs.define(frozen=True, slots=True)
class UpdateStep:
    """One ALTER statement and the attribute it commits once it succeeds."""

    attribute: str
    operation: str
    statement: str
    new_id: str | None = None


def plan_table_update(
    statements: TableStatements,
    *,
    new_name: str | None = None,
    new_comment: str | None = None,
) -> tuple[UpdateStep, ...]:
    """Build the update steps in commit order: rename first, then comment.

    Parameters
    ----------
    statements : TableStatements
        Builder for the table as it currently exists
    new_name : str | None, optional
        The new table name, or None if the name did not change
    new_comment : str | None, optional
        The new comment, or None if the comment did not change; an empty
        comment unsets it

    Returns
    -------
    tuple[UpdateStep, ...]
        Steps to apply in order. Steps after a rename target the new name.
    """
    steps: list[UpdateStep] = []

    if new_name is not None:
        query, statements = statements.rename(new_name)
        steps.append(
            UpdateStep(
                attribute="name",
                operation="renaming",
                statement=query,
                new_id=encode_table_id(statements.identity()),
            )
        )

    if new_comment is not None:
        if new_comment == "":
            step = UpdateStep(
                attribute="comment",
                operation="unsetting comment for",
                statement=statements.remove_comment(),
            )
        else:
            step = UpdateStep(
                attribute="comment",
                operation="updating comment for",
                statement=statements.change_comment(new_comment),
            )
        steps.append(step)

    return tuple(steps)
