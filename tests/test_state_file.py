import json
from pathlib import Path

from snowflake_table_resource.resource import ResourceState
from snowflake_table_resource.state_file import dump_state, format_state, load_state


def test_missing_file_is_empty_state(tmp_path: Path) -> None:
    assert load_state(tmp_path / "absent.json") == ResourceState()


def test_dump_and_load(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    state = ResourceState("D|PUBLIC|T", {"name": "T", "database": "D"})

    dump_state(path, state)

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "id": "D|PUBLIC|T",
        "attributes": {"name": "T", "database": "D"},
    }
    assert load_state(path) == state


def test_format_state() -> None:
    formatted = format_state(ResourceState("D|PUBLIC|T", {"comment": "it's"}))

    assert '"id": "D|PUBLIC|T"' in formatted
    assert "it's" in formatted
