#!/usr/bin/env python3
"""
Snowflake table resource

Runs one lifecycle operation (create, read, update, delete, exists, import or
plan) of the snowflake_table resource and persists the resulting state.
"""

import logging
import sys

from pydantic import ValidationError
from pydantic_settings import SettingsConfigDict

from .cli import Cli
from .commands import run_action
from .context import ProviderContext
from .kernel import TableResourceError
from .kernel.contract import ContractViolationError
from .resource.base import PartialStateError
from .settings import Settings
from .state_file import dump_state, format_state, load_state

logger = logging.getLogger(__name__)


def main() -> int:
    """Run the command line entry point."""
    cli = Cli()

    settings_config = SettingsConfigDict(
        env_nested_delimiter="__",
        toml_file=cli.config,
    )
    settings = Settings.build(settings_config)
    logging.basicConfig(level=settings.logging.level, format=settings.logging.format)

    context = ProviderContext()
    context.prepare(settings.snowflake)
    resource = context.resource("snowflake_table")
    if resource is None:
        logger.error("snowflake_table resource is not available")
        return 1

    state = load_state(cli.state)
    try:
        result = run_action(
            resource,
            cli.action,
            state,
            desired=cli.desired_attributes(),
            import_id=cli.id,
        )
    except PartialStateError as e:
        dump_state(cli.state, e.state)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (TableResourceError, ContractViolationError, ValidationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        context.close()

    if result.state != state:
        dump_state(cli.state, result.state)
    print(result.message)
    logger.debug("state:\n%s", format_state(result.state))
    return 0


if __name__ == "__main__":
    sys.exit(main())
