"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
from docnav.config import (
    Config,
    DocsConfig,
    LiveReloadConfig,
    ServerConfig,
    TocConfig,
)
from docnav.core.sections import Component, Node, Section

SAMPLE_SECTIONS = [
    {
        "name": "Docs",
        "sections": [
            {
                "name": "Components",
                "slug": "components",
                "components": [
                    {"name": "Button", "slug": "button"},
                    {"name": "Input", "slug": "input"},
                ],
            },
            {
                "name": "Guides",
                "slug": "guides",
                "components": [{"name": "Setup", "slug": "setup"}],
            },
        ],
    },
]


@pytest.fixture
def sample_tree() -> list[Node]:
    """Single root section wrapping two sections of components."""
    return [
        Section(
            name="Docs",
            sections=(
                Section(
                    name="Components",
                    slug="components",
                    components=(
                        Component(name="Button", slug="button"),
                        Component(name="Input", slug="input"),
                    ),
                ),
                Section(
                    name="Guides",
                    slug="guides",
                    components=(Component(name="Setup", slug="setup"),),
                ),
            ),
        ),
    ]


@pytest.fixture
def sections_file(tmp_path: Path) -> Path:
    """Write the sample section tree to a JSON file."""
    path = tmp_path / "sections.json"
    path.write_text(json.dumps(SAMPLE_SECTIONS))
    return path


@pytest.fixture
def test_config(sections_file: Path) -> Config:
    """Create a test configuration pointing at the sample sections file.

    Live reload is disabled so no file watcher is started.
    """
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(sections_file=sections_file),
        toc=TocConfig(collapsible_sections=True),
        live_reload=LiveReloadConfig(enabled=False),
    )
