"""Config API endpoint."""

from aiohttp import web

from docnav.app_keys import live_reload_enabled_key, toc_config_key


def create_config_routes() -> list[web.RouteDef]:
    return [web.get("/api/config", get_config)]


async def get_config(request: web.Request) -> web.Response:
    toc_config = request.app[toc_config_key]
    return web.json_response(
        {
            "useRouterLinks": toc_config.use_router_links,
            "collapsibleSections": toc_config.collapsible_sections,
            "searchMode": toc_config.search_mode,
            "liveReloadEnabled": request.app[live_reload_enabled_key],
        }
    )
