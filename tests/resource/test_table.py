import pytest
from pydantic import ValidationError
from snowflake.connector import OperationalError, ProgrammingError

from snowflake_table_resource.kernel import (
    InvalidTableIdError,
    PartialUpdateError,
    StatementExecutionError,
    TableNotFoundError,
)
from snowflake_table_resource.resource import ResourceState
from snowflake_table_resource.resource.base import PartialStateError, ResourcePlan
from snowflake_table_resource.resource.table import TableResource

from ..mock_effect_handler import MockTableEffect, show_row

PRIOR = {"name": "T", "database": "D", "schema": "PUBLIC", "comment": "hi"}
PRIOR_STATE = ResourceState("D|PUBLIC|T", PRIOR)


class TestTableResource:
    def test_type_name(self) -> None:
        assert TableResource(MockTableEffect()).type_name == "snowflake_table"

    def test_create(self) -> None:
        effect_handler = MockTableEffect()
        resource = TableResource(effect_handler)

        state = resource.create({"name": "T", "database": "D", "comment": "hi"})

        assert state == PRIOR_STATE
        assert effect_handler.executed == [
            'CREATE OR REPLACE TABLE "D"."PUBLIC"."T"(placeholder varchar(100)) COMMENT = \'hi\''
        ]

    def test_create_rejects_invalid_config(self) -> None:
        effect_handler = MockTableEffect()
        resource = TableResource(effect_handler)

        with pytest.raises(ValidationError):
            _ = resource.create({"name": "T"})

        assert effect_handler.executed == []

    def test_read_refreshes_identity(self) -> None:
        effect_handler = MockTableEffect(rows=[show_row(comment="remote")])
        resource = TableResource(effect_handler)

        state = resource.read(ResourceState("D|PUBLIC|T", {**PRIOR, "name": "stale"}))

        assert state == PRIOR_STATE
        assert len(effect_handler.queried) == 2

    def test_read_of_missing_table_clears_id(self) -> None:
        resource = TableResource(MockTableEffect(rows=[]))

        state = resource.read(PRIOR_STATE)

        assert state.id == ""
        assert state.attributes == PRIOR

    def test_exists(self) -> None:
        assert TableResource(MockTableEffect()).exists(PRIOR_STATE)
        assert not TableResource(MockTableEffect(rows=[])).exists(PRIOR_STATE)

    def test_delete(self) -> None:
        effect_handler = MockTableEffect()
        resource = TableResource(effect_handler)

        state = resource.delete(PRIOR_STATE)

        assert state.id == ""
        assert effect_handler.executed == ['DROP TABLE "D"."PUBLIC"."T"']

    def test_update_comment(self) -> None:
        effect_handler = MockTableEffect()
        resource = TableResource(effect_handler)

        state = resource.update(PRIOR_STATE, {**PRIOR, "comment": ""})

        assert effect_handler.executed == ['ALTER TABLE "D"."PUBLIC"."T" UNSET COMMENT']
        assert state == ResourceState("D|PUBLIC|T", {**PRIOR, "comment": ""})

    def test_update_database_recreates(self) -> None:
        effect_handler = MockTableEffect(rows=[show_row(database_name="D2")])
        resource = TableResource(effect_handler)

        state = resource.update(PRIOR_STATE, {**PRIOR, "database": "D2"})

        assert effect_handler.executed == [
            'DROP TABLE "D"."PUBLIC"."T"',
            'CREATE OR REPLACE TABLE "D2"."PUBLIC"."T"(placeholder varchar(100)) COMMENT = \'hi\'',
        ]
        assert state.id == "D2|PUBLIC|T"

    def test_update_partial_failure(self) -> None:
        effect_handler = MockTableEffect(
            should_raise=ProgrammingError("insufficient privileges"),
            raise_on=lambda statement: "COMMENT" in statement,
        )
        resource = TableResource(effect_handler)

        with pytest.raises(PartialStateError) as exc_info:
            _ = resource.update(PRIOR_STATE, {**PRIOR, "name": "T2", "comment": "bye"})

        assert exc_info.value.state == ResourceState("D|PUBLIC|T2", {**PRIOR, "name": "T2"})
        assert isinstance(exc_info.value.cause, PartialUpdateError)

    def test_import(self) -> None:
        effect_handler = MockTableEffect(rows=[show_row(schema_name="RAW")])
        resource = TableResource(effect_handler)

        state = resource.import_state("D|RAW|T")

        assert state.id == "D|RAW|T"
        assert state.attributes["schema"] == "RAW"
        assert state.attributes["comment"] == ""

    def test_import_malformed_id(self) -> None:
        effect_handler = MockTableEffect()
        resource = TableResource(effect_handler)

        with pytest.raises(InvalidTableIdError, match="error importing table"):
            _ = resource.import_state("D.PUBLIC.T")

        assert effect_handler.queried == []


class TestTableResourcePlan:
    @pytest.fixture
    def resource(self) -> TableResource:
        return TableResource(MockTableEffect())

    def test_create_without_id(self, resource: TableResource) -> None:
        plan = resource.plan(ResourceState(), {"name": "T", "database": "D"})

        assert plan == ResourcePlan("create", ("name", "database", "schema", "comment"))

    def test_noop(self, resource: TableResource) -> None:
        assert resource.plan(PRIOR_STATE, PRIOR) == ResourcePlan("noop")

    def test_suppressed_comment_is_noop(self, resource: TableResource) -> None:
        plan = resource.plan(PRIOR_STATE, {**PRIOR, "comment": "  HI\n"})

        assert plan.action == "noop"

    def test_update(self, resource: TableResource) -> None:
        plan = resource.plan(PRIOR_STATE, {**PRIOR, "name": "T2", "comment": "bye"})

        assert plan == ResourcePlan("update", ("name", "comment"))

    def test_replace(self, resource: TableResource) -> None:
        plan = resource.plan(PRIOR_STATE, {**PRIOR, "schema": "RAW"})

        assert plan == ResourcePlan("replace", ("schema",))


def _failing_on(prefix: str) -> MockTableEffect:
    return MockTableEffect(
        should_raise=OperationalError("connection lost"),
        raise_on=lambda statement: statement.startswith(prefix),
    )


class TestTableResourceCommittedChanges:
    def test_update_read_failure_keeps_rename(self) -> None:
        effect_handler = _failing_on("SHOW")
        resource = TableResource(effect_handler)

        with pytest.raises(PartialStateError) as exc_info:
            _ = resource.update(PRIOR_STATE, {**PRIOR, "name": "T2"})

        assert effect_handler.executed == [
            'ALTER TABLE "D"."PUBLIC"."T" RENAME TO "D"."PUBLIC"."T2"'
        ]
        assert exc_info.value.state == ResourceState("D|PUBLIC|T2", {**PRIOR, "name": "T2"})
        assert isinstance(exc_info.value.cause, StatementExecutionError)

    def test_update_read_not_found_keeps_comment(self) -> None:
        resource = TableResource(MockTableEffect(rows=[]))

        with pytest.raises(PartialStateError) as exc_info:
            _ = resource.update(PRIOR_STATE, {**PRIOR, "comment": ""})

        assert exc_info.value.state == ResourceState("D|PUBLIC|T", {**PRIOR, "comment": ""})
        assert isinstance(exc_info.value.cause, TableNotFoundError)

    def test_update_without_changes_propagates_read_failure(self) -> None:
        resource = TableResource(_failing_on("SHOW"))

        with pytest.raises(StatementExecutionError, match="error reading table"):
            _ = resource.update(PRIOR_STATE, PRIOR)

    def test_suppressed_comment_keeps_prior_value(self) -> None:
        effect_handler = MockTableEffect()
        resource = TableResource(effect_handler)

        state = resource.update(PRIOR_STATE, {**PRIOR, "comment": "  HI "})

        assert effect_handler.executed == []
        assert state == PRIOR_STATE

    def test_create_read_failure_keeps_new_id(self) -> None:
        effect_handler = _failing_on("SHOW")
        resource = TableResource(effect_handler)

        with pytest.raises(PartialStateError) as exc_info:
            _ = resource.create({"name": "T", "database": "D", "comment": "hi"})

        assert len(effect_handler.executed) == 1
        assert exc_info.value.state == PRIOR_STATE

    def test_create_failure_is_not_partial(self) -> None:
        resource = TableResource(_failing_on("CREATE"))

        with pytest.raises(StatementExecutionError, match="error creating table T"):
            _ = resource.create({"name": "T", "database": "D"})

    def test_replace_create_failure_clears_id(self) -> None:
        effect_handler = _failing_on("CREATE")
        resource = TableResource(effect_handler)

        with pytest.raises(PartialStateError) as exc_info:
            _ = resource.update(PRIOR_STATE, {**PRIOR, "database": "D2"})

        assert effect_handler.executed == ['DROP TABLE "D"."PUBLIC"."T"']
        assert exc_info.value.state.id == ""
        assert isinstance(exc_info.value.cause, StatementExecutionError)

    def test_replace_read_failure_keeps_new_id(self) -> None:
        resource = TableResource(_failing_on("SHOW"))

        with pytest.raises(PartialStateError) as exc_info:
            _ = resource.update(PRIOR_STATE, {**PRIOR, "database": "D2"})

        assert exc_info.value.state.id == "D2|PUBLIC|T"
