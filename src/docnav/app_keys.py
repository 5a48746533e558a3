"""Application keys for type-safe app configuration access."""

from aiohttp import web

from docnav.config import TocConfig
from docnav.core.loader import SectionsLoader
from docnav.live import LiveReloadManager

sections_loader_key = web.AppKey("sections_loader", SectionsLoader)
toc_config_key = web.AppKey("toc_config", TocConfig)
live_reload_enabled_key = web.AppKey("live_reload_enabled", bool)
live_reload_manager_key = web.AppKey("live_reload_manager", LiveReloadManager)
