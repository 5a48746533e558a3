"""Table of contents builder.

Turns the section tree, the search term and the current location into the
annotated tree a list renderer paints. Navigation state is a view over the
section tree: nothing here mutates it.
"""

import logging
from dataclasses import dataclass, field
from typing import TypedDict

from docnav.core.filtering import filter_sections_by_name
from docnav.core.location import Location, matches
from docnav.core.sections import Node, Section
from docnav.core.types import Address
from docnav.core.urls import get_url

logger = logging.getLogger(__name__)


class TocItemDict(TypedDict, total=False):
    """Dictionary representation of an annotated table of contents item."""

    name: str
    slug: str
    sectionDepth: int
    heading: bool
    forceOpen: bool
    href: str
    content: "TocLevelDict"


class TocLevelDict(TypedDict):
    """Dictionary representation of one level of the table of contents."""

    items: list[TocItemDict]
    hashPath: list[str]
    useHashId: bool
    useRouterLinks: bool


@dataclass(frozen=True)
class TocItem:
    """Section or component annotated for display."""

    name: str | None
    slug: str | None
    section_depth: int
    heading: bool
    content: "TocLevel | None"
    force_open: bool
    href: Address | None
    node: Node = field(repr=False, compare=False)

    def to_dict(self) -> TocItemDict:
        """Convert to dictionary for JSON serialization."""
        result: TocItemDict = {
            "heading": self.heading,
            "forceOpen": self.force_open,
        }
        if self.name is not None:
            result["name"] = self.name
        if self.slug is not None:
            result["slug"] = self.slug
        if self.section_depth:
            result["sectionDepth"] = self.section_depth
        if self.href is not None:
            result["href"] = self.href
        if self.content is not None:
            result["content"] = self.content.to_dict()
        return result


@dataclass(frozen=True)
class TocLevel:
    """Sibling items plus the link settings a renderer needs for them."""

    items: list[TocItem] = field(default_factory=list)
    hash_path: tuple[str, ...] = ()
    use_hash_id: bool = False
    use_router_links: bool = False

    def to_dict(self) -> TocLevelDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "items": [item.to_dict() for item in self.items],
            "hashPath": list(self.hash_path),
            "useHashId": self.use_hash_id,
            "useRouterLinks": self.use_router_links,
        }


@dataclass(frozen=True)
class RenderContext:
    """Settings shared by every level of one table of contents render."""

    location: Location
    use_router_links: bool = False
    force_open_all: bool = False
    effective_location: str = field(init=False)

    def __post_init__(self) -> None:
        # One snapshot per render, never re-read per node
        object.__setattr__(
            self,
            "effective_location",
            self.location.effective(self.use_router_links),
        )


@dataclass(frozen=True)
class LevelResult:
    """Rendered level and whether it leads to the current location."""

    content: TocLevel
    contains_selected: bool


def normalize_root(sections: list[Node]) -> list[Node] | None:
    """Unwrap a single root section into its children.

    A lone top-level section would render as a redundant, unindented
    wrapper, so its subsections (or, without any, its components) become
    the roots.

    Returns:
        New root nodes, or None if the single root has neither
    """
    if len(sections) != 1:
        return sections

    root = sections[0]
    if not isinstance(root, Section):
        return None
    if root.sections:
        return list(root.sections)
    return None if root.components is None else list(root.components)


def render_level(
    nodes: list[Node] | tuple[Node, ...],
    context: RenderContext,
    hash_path: tuple[str, ...] = (),
    use_hash_id: bool = False,
) -> LevelResult:
    """Annotate one level of the tree, recursing into children.

    Args:
        nodes: Sibling nodes to annotate
        context: Render-wide settings and location snapshot
        hash_path: Ancestor names for router-style addresses
        use_hash_id: Whether router addresses of this level end with "?id=slug"

    Returns:
        Level payload and whether any node in it is on the active path
    """
    children_contain_selected = False
    items: list[TocItem] = []

    for node in nodes:
        children = node.children
        section_depth = node.section_depth or 0
        if section_depth == 0 and use_hash_id:
            child_hash_path = hash_path
        else:
            child_hash_path = (*hash_path, node.name or "-")

        if children:
            child = render_level(
                children,
                context,
                child_hash_path,
                use_hash_id=section_depth == 0,
            )
            content: TocLevel | None = child.content
            contains_selected = child.contains_selected
        else:
            content = None
            contains_selected = False

        href = get_url(
            node.name,
            node.slug,
            anchor=not context.use_router_links,
            hash_path=hash_path if context.use_router_links else None,
            id=use_hash_id if context.use_router_links else False,
            pathname=context.location.pathname,
        )

        if contains_selected or matches(context.effective_location, href):
            children_contain_selected = True

        items.append(
            TocItem(
                name=node.name,
                slug=node.slug,
                section_depth=node.section_depth,
                heading=bool(node.name) and len(children) > 0,
                content=content,
                # Own match only opens the parent, not this node
                force_open=context.force_open_all or contains_selected,
                href=href,
                node=node,
            )
        )

    return LevelResult(
        content=TocLevel(
            items=items,
            hash_path=hash_path,
            use_hash_id=use_hash_id,
            use_router_links=context.use_router_links,
        ),
        contains_selected=children_contain_selected,
    )


def build_table_of_contents(
    sections: list[Node],
    *,
    search_term: str = "",
    location: Location | None = None,
    use_router_links: bool = False,
    collapsible_sections: bool = False,
    search_mode: str = "substring",
) -> TocLevel:
    """Build the annotated table of contents.

    Args:
        sections: Full section tree
        search_term: Current search box value
        location: Current location snapshot (defaults to "/")
        use_router_links: Address nodes with "#/A/B" router links instead of anchors
        collapsible_sections: Let sections collapse; when off everything is open
        search_mode: Name matching mode for the search term

    Returns:
        Root level of the annotated tree, empty if nothing survives
    """
    first_level = normalize_root(sections)
    if first_level is None:
        return TocLevel(use_router_links=use_router_links)

    filtered = filter_sections_by_name(first_level, search_term, mode=search_mode)

    context = RenderContext(
        location=location if location is not None else Location(),
        use_router_links=use_router_links,
        force_open_all=bool(search_term) or not collapsible_sections,
    )
    result = render_level(filtered, context)

    logger.debug(
        f"Built table of contents: {len(result.content.items)} root items, "
        f"search {search_term!r}, active path found: {result.contains_selected}"
    )
    return result.content


class TableOfContents:
    """Table of contents with its search box state.

    Holds the section tree and settings; every render recomputes the
    annotated tree from them, the current search term and a location.
    """

    def __init__(
        self,
        sections: list[Node],
        *,
        use_router_links: bool = False,
        collapsible_sections: bool = False,
        search_mode: str = "substring",
    ) -> None:
        self.sections = sections
        self.use_router_links = use_router_links
        self.collapsible_sections = collapsible_sections
        self.search_mode = search_mode
        self.search_term = ""

    def set_search_term(self, search_term: str) -> None:
        """Update the search term from the search box."""
        self.search_term = search_term

    def render(self, location: Location | None = None) -> TocLevel:
        """Render the table of contents for a location."""
        return build_table_of_contents(
            self.sections,
            search_term=self.search_term,
            location=location,
            use_router_links=self.use_router_links,
            collapsible_sections=self.collapsible_sections,
            search_mode=self.search_mode,
        )
