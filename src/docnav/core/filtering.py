"""Search filtering of the section tree.

Prunes the tree to nodes whose name matches the search term, keeping the
ancestors of every match so the result is still a tree.
"""

import re
from collections.abc import Callable
from dataclasses import replace

from docnav.core.sections import Component, Node

SEARCH_MODES = ("substring", "fuzzy")

NameMatcher = Callable[[str | None], bool]


def get_name_matcher(term: str, mode: str = "substring") -> NameMatcher:
    """Create a predicate testing node names against a search term.

    Args:
        term: Search term typed by the user
        mode: "substring" for a case-insensitive substring match, "fuzzy"
            for term characters appearing in order

    Returns:
        Predicate taking a node name (None never matches)

    Raises:
        ValueError: If mode is unknown
    """
    if mode == "substring":
        needle = term.casefold()

        def match_substring(name: str | None) -> bool:
            return name is not None and needle in name.casefold()

        return match_substring

    if mode == "fuzzy":
        # Punctuation and spaces in the term are ignored
        chars = re.sub(r"[^a-z0-9]", "", term, flags=re.IGNORECASE)
        pattern = re.compile(".*".join(re.escape(c) for c in chars), re.IGNORECASE)

        def match_fuzzy(name: str | None) -> bool:
            return name is not None and pattern.search(name) is not None

        return match_fuzzy

    raise ValueError(f"Unknown search mode: {mode!r}")


def filter_sections_by_name(
    nodes: list[Node],
    term: str,
    *,
    mode: str = "substring",
) -> list[Node]:
    """Filter a section tree by node name.

    Args:
        nodes: Root nodes of the tree
        term: Search term; empty returns nodes unchanged
        mode: Name matching mode, see get_name_matcher()

    Returns:
        Surviving nodes in original order, with pruned child collections
    """
    if not term:
        return nodes
    return _filter_nodes(nodes, get_name_matcher(term, mode))


def _filter_nodes(
    nodes: tuple[Node, ...] | list[Node],
    match: NameMatcher,
) -> list[Node]:
    result: list[Node] = []
    for node in nodes:
        if isinstance(node, Component):
            if match(node.name):
                result.append(node)
            continue

        sections = _filter_collection(node.sections, match)
        components = _filter_collection(node.components, match)
        if sections or components or match(node.name):
            result.append(replace(node, sections=sections, components=components))
    return result


def _filter_collection(
    nodes: tuple[Node, ...] | None,
    match: NameMatcher,
) -> tuple[Node, ...] | None:
    if nodes is None:
        return None
    return tuple(_filter_nodes(nodes, match))
