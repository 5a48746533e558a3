"""Tests for configuration loading."""

from pathlib import Path

import pytest
from docnav.config import (
    Config,
    DocsConfig,
    LiveReloadConfig,
    ServerConfig,
    TocConfig,
)


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "docnav.toml"
        config_file.write_text("""
[server]
host = "0.0.0.0"
port = 3000

[docs]
sections_file = "build/sections.json"

[toc]
use_router_links = true
collapsible_sections = true
search_mode = "fuzzy"

[live_reload]
enabled = false
""")

        config = Config.load(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.docs.sections_file == tmp_path / "build/sections.json"
        assert config.toc.use_router_links is True
        assert config.toc.collapsible_sections is True
        assert config.toc.search_mode == "fuzzy"
        assert config.live_reload.enabled is False
        assert config.config_path == config_file

    def test__minimal_config__uses_defaults(self, tmp_path: Path) -> None:
        """Load minimal config with defaults relative to config file."""
        config_file = tmp_path / "docnav.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server == ServerConfig()
        assert config.docs.sections_file == tmp_path / "sections.json"
        assert config.toc == TocConfig()
        assert config.live_reload == LiveReloadConfig()

    def test__missing_explicit_path__raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(tmp_path / "missing.toml")

    def test__no_path__discovers_config_in_parent(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Search the current directory and its parents."""
        config_file = tmp_path / "docnav.toml"
        config_file.write_text("[server]\nport = 9000\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        config = Config.load()

        assert config.server.port == 9000
        assert config.config_path == config_file

    def test__no_config_found__returns_defaults(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)

        config = Config.load()

        assert config.config_path is None
        assert config.docs == DocsConfig()
        assert config.toc == TocConfig()

    def test__invalid_toml__raises_value_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "docnav.toml"
        config_file.write_text("[server\n")

        with pytest.raises(ValueError, match="Invalid TOML"):
            Config.load(config_file)

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('server = "x"', "server section must be a dictionary"),
            ("[server]\nhost = 1", "server.host must be a string"),
            ('[server]\nport = "80"', "server.port must be an integer"),
            ("[server]\nport = true", "server.port must be an integer"),
            ("[docs]\nsections_file = 1", "docs.sections_file must be a string"),
            (
                '[toc]\nuse_router_links = "yes"',
                "toc.use_router_links must be a boolean",
            ),
            (
                "[toc]\ncollapsible_sections = 1",
                "toc.collapsible_sections must be a boolean",
            ),
            ('[toc]\nsearch_mode = "regex"', "toc.search_mode must be one of"),
            ('[live_reload]\nenabled = "no"', "live_reload.enabled must be a boolean"),
        ],
    )
    def test__invalid_value__raises_value_error(
        self,
        tmp_path: Path,
        content: str,
        message: str,
    ) -> None:
        config_file = tmp_path / "docnav.toml"
        config_file.write_text(content)

        with pytest.raises(ValueError, match=message):
            Config.load(config_file)


class TestConfigWithOverrides:
    """Tests for Config.with_overrides()."""

    def _config(self) -> Config:
        return Config(
            server=ServerConfig(),
            docs=DocsConfig(),
            toc=TocConfig(),
            live_reload=LiveReloadConfig(),
        )

    def test__no_overrides__keeps_values(self) -> None:
        config = self._config()

        assert config.with_overrides() == config

    def test__overrides__replace_values(self, tmp_path: Path) -> None:
        config = self._config().with_overrides(
            host="0.0.0.0",
            port=9000,
            sections_file=tmp_path / "s.json",
            use_router_links=True,
            collapsible_sections=True,
            search_mode="fuzzy",
            live_reload_enabled=False,
        )

        assert config.server == ServerConfig(host="0.0.0.0", port=9000)
        assert config.docs.sections_file == tmp_path / "s.json"
        assert config.toc == TocConfig(
            use_router_links=True,
            collapsible_sections=True,
            search_mode="fuzzy",
        )
        assert config.live_reload.enabled is False

    def test__overrides__do_not_modify_original(self) -> None:
        config = self._config()

        config.with_overrides(port=9000, use_router_links=True)

        assert config.server.port == 8080
        assert config.toc.use_router_links is False
