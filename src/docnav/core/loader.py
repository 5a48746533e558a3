"""Section tree loader.

Reads a prebuilt section tree from a JSON file. The parsed tree is cached
and reloaded when the file's mtime changes or the cache is invalidated.
"""

import json
import logging
from pathlib import Path

from docnav.core.sections import Node, nodes_from_list

logger = logging.getLogger(__name__)


class SectionsLoader:
    """Loads and caches the section tree of a documentation site.

    The file holds either a list of root nodes or an object with a
    "sections" list.
    """

    def __init__(self, sections_file: Path) -> None:
        """Initialize loader.

        Args:
            sections_file: Path to the JSON section tree
        """
        self.sections_file = sections_file
        self._cached: list[Node] | None = None
        self._cached_mtime: float | None = None

    def load(self) -> list[Node]:
        """Return the section tree, reading the file if it changed.

        Returns:
            Root nodes of the section tree

        Raises:
            FileNotFoundError: If the sections file doesn't exist
            ValueError: If the file is not a valid section tree
        """
        mtime = self.sections_file.stat().st_mtime
        if self._cached is not None and self._cached_mtime == mtime:
            return self._cached

        logger.debug(f"Loading sections from {self.sections_file}")
        try:
            data = json.loads(self.sections_file.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {self.sections_file}: {e}") from e

        if isinstance(data, dict):
            data = data.get("sections")
        sections = nodes_from_list(data)

        self._cached = sections
        self._cached_mtime = mtime
        return sections

    def invalidate(self) -> None:
        """Drop the cached tree so the next load() rereads the file."""
        self._cached = None
        self._cached_mtime = None
