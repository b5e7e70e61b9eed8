"""Table EffectHandler implementation."""

import logging
from typing import Any

from ..snowflake_client import SnowflakeClient

logger = logging.getLogger(__name__)


class TableEffectHandler:
    """EffectHandler for all table lifecycle operations."""

    def __init__(self, client: SnowflakeClient) -> None:
        """Initialize with SnowflakeClient."""
        self.client = client

    def execute_statement(self, statement: str) -> None:
        """Execute a DDL statement."""
        try:
            self.client.execute(statement)
        except Exception:
            logger.exception(
                "failed to execute table statement",
                extra={"query": statement},
            )
            raise

    def query_statement(self, statement: str) -> list[dict[str, Any]]:
        """Run a SHOW query and return its rows."""
        try:
            return self.client.query(statement)
        except Exception:
            logger.exception(
                "failed to execute table query",
                extra={"query": statement},
            )
            raise
