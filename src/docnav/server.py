"""aiohttp server for Docnav.

Application factory and route registration for standalone server mode.
"""

import logging

from aiohttp import web

from docnav.api.config import create_config_routes
from docnav.api.toc import create_toc_routes
from docnav.app_keys import (
    live_reload_enabled_key,
    live_reload_manager_key,
    sections_loader_key,
    toc_config_key,
)
from docnav.config import Config
from docnav.core.loader import SectionsLoader
from docnav.live import LiveReloadManager
from docnav.live.reload import create_live_reload_routes

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    loader = SectionsLoader(config.docs.sections_file)

    app[sections_loader_key] = loader
    app[toc_config_key] = config.toc
    app[live_reload_enabled_key] = config.live_reload.enabled

    app.router.add_routes(create_toc_routes())
    app.router.add_routes(create_config_routes())

    # Live reload WebSocket endpoint
    if config.live_reload.enabled:
        manager = LiveReloadManager(loader)
        app[live_reload_manager_key] = manager
        app.router.add_routes(create_live_reload_routes(manager))
        app.on_startup.append(_start_live_reload)
        app.on_cleanup.append(_stop_live_reload)

    return app


async def _start_live_reload(app: web.Application) -> None:
    """Start live reload on application startup."""
    manager = app[live_reload_manager_key]
    logger.debug(f"Watching {manager.sections_file} for changes")
    await manager.start()


async def _stop_live_reload(app: web.Application) -> None:
    """Stop live reload on application cleanup."""
    await app[live_reload_manager_key].stop()


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
