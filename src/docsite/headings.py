"""Heading anchors for nested configuration-schema documentation."""

from __future__ import annotations

from docsite.exceptions import HeadingDepthError
from docsite.schemas import ConfigNode, HeadingEntry

# Levels 0 and 1 belong to the page title and the section heading.
_HEADING_DEPTH_OFFSET = 2


def generate_config_heading_id(level: int, parent: str, key: str) -> str:
    """Build the anchor slug for a configuration key.

    The parts are joined with ``-`` as is; two keys with the same level,
    parent path and name get the same slug.
    """
    return "-".join([str(level), parent, key])


def generate_config_headings(
    node: ConfigNode,
    parent_slug: str = "",
    depth: int = 0,
    *,
    max_depth: int | None = None,
) -> list[HeadingEntry]:
    """Collect headings for every keyed node of a schema tree in pre-order.

    Keyed nodes extend the path of their children with ``parent.key``;
    anonymous nodes (the root, array elements) extend it with ``parent[i]``
    and produce no heading of their own.

    Args:
        node: Root of the (sub)tree to walk. It is never modified.
        parent_slug: Path of the enclosing node, empty at the top.
        depth: Nesting depth of ``node``.
        max_depth: Deepest nesting depth allowed. ``None`` disables the check.

    Returns:
        One ``HeadingEntry`` per keyed node, parents before children.

    Raises:
        HeadingDepthError: If a node deeper than ``max_depth`` is reached.
    """
    if max_depth is not None and depth > max_depth:
        raise HeadingDepthError(f"Schema nesting exceeds {max_depth} levels at {parent_slug or '<root>'!r}")

    result: list[HeadingEntry] = []

    if node.key:
        result.append(
            HeadingEntry(
                slug=generate_config_heading_id(depth, parent_slug, node.key),
                depth=depth + _HEADING_DEPTH_OFFSET,
                text=node.key,
            )
        )

    for index, child in enumerate(node.children):
        if node.key:
            child_slug = f"{parent_slug}.{node.key}" if parent_slug else node.key
        else:
            child_slug = f"{parent_slug}[{index}]"
        result.extend(generate_config_headings(child, child_slug, depth + 1, max_depth=max_depth))

    return result


def count_config_headings(node: ConfigNode) -> int:
    """Count the keyed nodes in a schema tree."""
    total = 1 if node.key else 0
    for child in node.children:
        total += count_config_headings(child)
    return total
