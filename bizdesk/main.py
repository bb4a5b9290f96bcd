"""Application bootstrap: configure logging and wire the data layer."""

import asyncio
import logging

from bizdesk.config import Settings, get_settings
from bizdesk.infrastructure.dependencies import ServiceContainer, build_container
from bizdesk.infrastructure.logging.log_config import setup_logging

logger = logging.getLogger(__name__)


async def bootstrap(settings: Settings | None = None) -> ServiceContainer:
    """Set up logging and return a fully wired service container."""
    settings = settings or get_settings()
    setup_logging(settings)
    logger.info("Starting %s v%s (%s)", settings.app_title, settings.app_version, settings.app_env)
    return build_container(settings)


async def _summary() -> None:
    container = await bootstrap()
    try:
        for name, service in (
            ("clients", container.clients),
            ("projects", container.projects),
            ("tasks", container.tasks),
            ("users", container.users),
            ("timesheets", container.timesheets),
            ("roles", container.settings_service),
        ):
            logger.info("%-10s %d records", name, await service.count())
    finally:
        await container.close()


if __name__ == "__main__":
    asyncio.run(_summary())
