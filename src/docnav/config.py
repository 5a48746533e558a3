"""Configuration management for Docnav.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from docnav.core.filtering import SEARCH_MODES

CONFIG_FILENAME = "docnav.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class DocsConfig:
    """Documentation configuration."""

    sections_file: Path = field(default_factory=lambda: Path("sections.json"))


@dataclass
class TocConfig:
    """Table of contents configuration."""

    use_router_links: bool = False
    collapsible_sections: bool = False
    search_mode: str = "substring"


@dataclass
class LiveReloadConfig:
    """Live reload configuration."""

    enabled: bool = True


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    docs: DocsConfig
    toc: TocConfig
    live_reload: LiveReloadConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for docnav.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(
            server=ServerConfig(),
            docs=DocsConfig(),
            toc=TocConfig(),
            live_reload=LiveReloadConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            docs=cls._parse_docs(data.get("docs"), config_dir),
            toc=cls._parse_toc(data.get("toc")),
            live_reload=cls._parse_live_reload(data.get("live_reload")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Parse docs configuration section.

        Args:
            data: Raw docs section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            DocsConfig instance
        """
        if data is None:
            return DocsConfig(sections_file=config_dir / "sections.json")

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        sections_file = data.get("sections_file", "sections.json")
        if not isinstance(sections_file, str):
            raise ValueError("docs.sections_file must be a string")

        return DocsConfig(sections_file=config_dir / sections_file)

    @classmethod
    def _parse_toc(cls, data: object) -> TocConfig:
        """Parse toc configuration section.

        Args:
            data: Raw toc section data

        Returns:
            TocConfig instance
        """
        if data is None:
            return TocConfig()

        if not isinstance(data, dict):
            raise ValueError("toc section must be a dictionary")

        use_router_links = data.get("use_router_links", False)
        if not isinstance(use_router_links, bool):
            raise ValueError("toc.use_router_links must be a boolean")

        collapsible_sections = data.get("collapsible_sections", False)
        if not isinstance(collapsible_sections, bool):
            raise ValueError("toc.collapsible_sections must be a boolean")

        search_mode = data.get("search_mode", "substring")
        if search_mode not in SEARCH_MODES:
            raise ValueError(
                f"toc.search_mode must be one of: {', '.join(SEARCH_MODES)}"
            )

        return TocConfig(
            use_router_links=use_router_links,
            collapsible_sections=collapsible_sections,
            search_mode=search_mode,
        )

    @classmethod
    def _parse_live_reload(cls, data: object) -> LiveReloadConfig:
        if data is None:
            return LiveReloadConfig()

        if not isinstance(data, dict):
            raise ValueError("live_reload section must be a dictionary")

        enabled = data.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ValueError("live_reload.enabled must be a boolean")

        return LiveReloadConfig(enabled=enabled)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        sections_file: Path | None = None,
        use_router_links: bool | None = None,
        collapsible_sections: bool | None = None,
        search_mode: str | None = None,
        live_reload_enabled: bool | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        docs = self.docs
        if sections_file is not None:
            docs = replace(self.docs, sections_file=sections_file)

        toc = self.toc
        if use_router_links is not None:
            toc = replace(toc, use_router_links=use_router_links)
        if collapsible_sections is not None:
            toc = replace(toc, collapsible_sections=collapsible_sections)
        if search_mode is not None:
            toc = replace(toc, search_mode=search_mode)

        live_reload = self.live_reload
        if live_reload_enabled is not None:
            live_reload = replace(self.live_reload, enabled=live_reload_enabled)

        return replace(
            self,
            server=server,
            docs=docs,
            toc=toc,
            live_reload=live_reload,
        )
