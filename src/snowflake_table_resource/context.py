"""Provider context for managing the Snowflake client and resources."""

from collections.abc import Iterator

from .adapter import TableEffectHandler
from .resource.base import Resource
from .resource.table import TableResource
from .settings import SnowflakeSettings
from .snowflake_client import SnowflakeClient


class ProviderContext:
    """Context for managing the Snowflake client and resources."""

    def __init__(self) -> None:
        """Initialize the provider context with empty state."""
        self._snowflake_client: SnowflakeClient | None = None
        self._resources: dict[str, Resource] = {}

    def prepare(self, snowflake_settings: SnowflakeSettings) -> None:
        """Create the shared client and the resources that use it."""
        self._snowflake_client = SnowflakeClient(snowflake_settings)

        all_resources: list[Resource] = [
            TableResource(TableEffectHandler(self._snowflake_client)),
        ]
        self._resources = {resource.type_name: resource for resource in all_resources}

    def is_available(self) -> bool:
        return self._snowflake_client is not None

    def resources(self) -> Iterator[Resource]:
        yield from self._resources.values()

    def resource(self, type_name: str) -> Resource | None:
        return self._resources.get(type_name)

    def close(self) -> None:
        if self._snowflake_client is not None:
            self._snowflake_client.close()
            self._snowflake_client = None
        self._resources = {}
