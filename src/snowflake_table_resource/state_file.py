"""
Persistence of resource state as JSON, using cattrs.
"""

import logging
from pathlib import Path

import cattrs.preconf.json

from .resource.data import ResourceState

logger = logging.getLogger(__name__)

converter = cattrs.preconf.json.make_converter()


def load_state(path: Path) -> ResourceState:
    """Load the state file, or an empty state if it does not exist yet."""
    if not path.exists():
        logger.info("state file %s not found, starting from empty state", path)
        return ResourceState()
    return converter.loads(path.read_text(encoding="utf-8"), ResourceState)


def dump_state(path: Path, state: ResourceState) -> None:
    _ = path.write_text(converter.dumps(state, indent=2) + "\n", encoding="utf-8")


def format_state(state: ResourceState) -> str:
    return converter.dumps(state, indent=2)
