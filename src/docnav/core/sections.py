"""Section tree model.

Documentation hierarchy made of sections (branches) and components (leaves).
The tree is immutable; every table of contents render derives a new
annotated tree from it.
"""

from dataclasses import dataclass
from typing import TypedDict


class NodeDict(TypedDict, total=False):
    """Dictionary representation of a section tree node."""

    name: str
    slug: str
    sectionDepth: int
    sections: list["NodeDict"]
    components: list["NodeDict"]


@dataclass(frozen=True)
class Component:
    """Documented leaf item with no children."""

    name: str | None = None
    slug: str | None = None
    section_depth: int = 0

    @property
    def children(self) -> tuple["Node", ...]:
        return ()

    def to_dict(self) -> NodeDict:
        """Convert to dictionary for JSON serialization."""
        result: NodeDict = {}
        _put_common(result, self)
        return result


@dataclass(frozen=True)
class Section:
    """Branch node with optional subsections and components.

    A child collection set to None is absent, an empty tuple is present
    but empty. Root normalization tells the two apart.
    """

    name: str | None = None
    slug: str | None = None
    section_depth: int = 0
    sections: tuple["Node", ...] | None = None
    components: tuple["Node", ...] | None = None

    @property
    def children(self) -> tuple["Node", ...]:
        """Subsections followed by components."""
        return (*(self.sections or ()), *(self.components or ()))

    def to_dict(self) -> NodeDict:
        """Convert to dictionary for JSON serialization."""
        result: NodeDict = {}
        _put_common(result, self)
        if self.sections is not None:
            result["sections"] = [node.to_dict() for node in self.sections]
        if self.components is not None:
            result["components"] = [node.to_dict() for node in self.components]
        return result


Node = Section | Component


def _put_common(result: NodeDict, node: Node) -> None:
    if node.name is not None:
        result["name"] = node.name
    if node.slug is not None:
        result["slug"] = node.slug
    if node.section_depth:
        result["sectionDepth"] = node.section_depth


def nodes_from_list(data: object, field: str = "sections") -> list[Node]:
    """Parse a list of node dictionaries.

    Args:
        data: Raw JSON value
        field: Dotted location of the value, used in error messages

    Returns:
        Parsed nodes in original order

    Raises:
        ValueError: If the data does not describe a section tree
    """
    if not isinstance(data, list):
        raise ValueError(f"{field} must be a list")
    return [node_from_dict(item, f"{field}[{i}]") for i, item in enumerate(data)]


def node_from_dict(data: object, field: str = "node") -> Node:
    """Parse a single node dictionary.

    A dictionary with a "sections" or "components" key becomes a Section,
    anything else a Component.

    Raises:
        ValueError: If a field has the wrong type
    """
    if not isinstance(data, dict):
        raise ValueError(f"{field} must be a dictionary")

    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise ValueError(f"{field}.name must be a string")

    slug = data.get("slug")
    if slug is not None and not isinstance(slug, str):
        raise ValueError(f"{field}.slug must be a string")

    section_depth = data.get("sectionDepth", 0)
    if section_depth is None:
        section_depth = 0
    if (
        not isinstance(section_depth, int)
        or isinstance(section_depth, bool)
        or section_depth < 0
    ):
        raise ValueError(f"{field}.sectionDepth must be a non-negative integer")

    if "sections" not in data and "components" not in data:
        return Component(name=name, slug=slug, section_depth=section_depth)

    sections_raw = data.get("sections")
    sections = (
        None
        if sections_raw is None
        else tuple(nodes_from_list(sections_raw, f"{field}.sections"))
    )
    components_raw = data.get("components")
    components = (
        None
        if components_raw is None
        else tuple(nodes_from_list(components_raw, f"{field}.components"))
    )

    return Section(
        name=name,
        slug=slug,
        section_depth=section_depth,
        sections=sections,
        components=components,
    )
