"""Table of contents API endpoints.

Provides the raw section tree and the annotated table of contents for a
search term and location.
"""

import logging

from aiohttp import web

from docnav.app_keys import sections_loader_key, toc_config_key
from docnav.core.location import Location
from docnav.core.toc import build_table_of_contents

logger = logging.getLogger(__name__)


def create_toc_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/sections", get_sections),
        web.get("/api/toc", get_toc),
    ]


async def get_sections(request: web.Request) -> web.Response:
    loader = request.app[sections_loader_key]

    try:
        sections = loader.load()
    except FileNotFoundError:
        return _sections_not_found(str(loader.sections_file))
    except ValueError as e:
        return _invalid_sections(str(loader.sections_file), e)

    return web.json_response({"sections": [node.to_dict() for node in sections]})


async def get_toc(request: web.Request) -> web.Response:
    """Return the annotated table of contents.

    Query parameters:
        search: Search box value (default: empty)
        pathname: Current location pathname (default: "/")
        hash: Current location hash including "#" (default: empty)
    """
    loader = request.app[sections_loader_key]
    toc_config = request.app[toc_config_key]

    try:
        sections = loader.load()
    except FileNotFoundError:
        return _sections_not_found(str(loader.sections_file))
    except ValueError as e:
        return _invalid_sections(str(loader.sections_file), e)

    location = Location(
        pathname=request.query.get("pathname") or "/",
        hash=request.query.get("hash", ""),
    )
    toc = build_table_of_contents(
        sections,
        search_term=request.query.get("search", ""),
        location=location,
        use_router_links=toc_config.use_router_links,
        collapsible_sections=toc_config.collapsible_sections,
        search_mode=toc_config.search_mode,
    )
    return web.json_response(toc.to_dict())


def _sections_not_found(path: str) -> web.Response:
    return web.json_response(
        {"error": "Sections not found", "path": path},
        status=404,
    )


def _invalid_sections(path: str, error: ValueError) -> web.Response:
    logger.error(f"Invalid sections file {path}: {error}")
    return web.json_response(
        {"error": str(error), "path": path},
        status=500,
    )
