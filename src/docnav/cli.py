"""CLI interface for Docnav.

Command-line tool for serving and previewing documentation tables of contents.
"""

import json
import logging
from pathlib import Path

import click

from docnav.config import Config
from docnav.core.filtering import SEARCH_MODES
from docnav.core.loader import SectionsLoader
from docnav.core.location import Location
from docnav.core.toc import TocLevel, build_table_of_contents


@click.group()
def cli() -> None:
    """Docnav - searchable, collapsible documentation navigation."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docnav.toml)",
)
@click.option(
    "--sections-file",
    "-s",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Section tree JSON file (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--live-reload/--no-live-reload",
    default=None,
    help="Enable/disable live reload (overrides config, default: enabled)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def serve(
    config_path: Path | None,
    sections_file: Path | None,
    host: str | None,
    port: int | None,
    live_reload: bool | None,
    verbose: bool,
) -> None:
    """Start the table of contents server."""
    from docnav.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        sections_file=sections_file,
        live_reload_enabled=live_reload,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Sections file: {config.docs.sections_file}")
    if config.toc.use_router_links:
        click.echo("Links: router")
    else:
        click.echo("Links: anchors")
    if config.live_reload.enabled:
        click.echo("Live reload: enabled")
    else:
        click.echo("Live reload: disabled")

    run_server(config)


@cli.command()
@click.argument(
    "sections_file",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    required=False,
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docnav.toml)",
)
@click.option(
    "--search",
    "-q",
    default="",
    help="Search term to filter sections by name",
)
@click.option(
    "--location",
    "-l",
    default="/",
    help='Current location, e.g. "/#button" or "/#/Components/Button"',
)
@click.option(
    "--router-links/--anchor-links",
    default=None,
    help="Address sections with router links or anchors (overrides config)",
)
@click.option(
    "--collapsible/--no-collapsible",
    default=None,
    help="Collapse sections off the active path (overrides config)",
)
@click.option(
    "--search-mode",
    type=click.Choice(SEARCH_MODES),
    default=None,
    help="Name matching mode (overrides config)",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the annotated tree as JSON",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def toc(
    sections_file: Path | None,
    config_path: Path | None,
    search: str,
    location: str,
    router_links: bool | None,
    collapsible: bool | None,
    search_mode: str | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Print the table of contents for a location and search term."""
    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(
        sections_file=sections_file,
        use_router_links=router_links,
        collapsible_sections=collapsible,
        search_mode=search_mode,
    )

    loader = SectionsLoader(config.docs.sections_file)
    try:
        sections = loader.load()
    except FileNotFoundError as e:
        raise click.ClickException(
            f"Sections file not found: {config.docs.sections_file}"
        ) from e
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    result = build_table_of_contents(
        sections,
        search_term=search,
        location=Location.from_url(location),
        use_router_links=config.toc.use_router_links,
        collapsible_sections=config.toc.collapsible_sections,
        search_mode=config.toc.search_mode,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    lines = format_outline(result)
    if not lines:
        click.echo("No matching sections")
        return
    for line in lines:
        click.echo(line)


def format_outline(level: TocLevel, indent: int = 0) -> list[str]:
    """Format an annotated tree as indented text lines.

    Headings are marked open or closed; the children of closed headings
    are not shown, as a collapsible renderer would hide them.
    """
    lines: list[str] = []
    pad = "  " * indent
    for item in level.items:
        if item.heading:
            marker = "▾" if item.force_open else "▸"
        else:
            marker = "•"
        label = item.name or "-"
        line = f"{pad}{marker} {label}"
        if item.href is not None:
            line += f"  {item.href}"
        lines.append(line)

        if item.content is not None and (item.force_open or not item.heading):
            lines.extend(format_outline(item.content, indent + 1))
    return lines


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
