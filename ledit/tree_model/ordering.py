"""Sibling ordering for workspace nodes.

Directories come first, then files, then synthetic info rows; names break
ties within a kind.
"""

from __future__ import annotations

from functools import cmp_to_key

from .types import Node, NodeKind

KIND_RANK: dict[NodeKind, int] = {
    NodeKind.DIRECTORY: 0,
    NodeKind.FILE: 1,
    NodeKind.INFO: 2,
}


def node_sort_key(node: Node) -> tuple[int, str]:
    """Return ascending sort key ``(kind rank, display name)``."""
    return KIND_RANK[node.kind], node.display_name


def compare_nodes(a: Node, b: Node) -> int:
    """Three-way comparator: negative when ``a`` sorts before ``b``."""
    key_a = node_sort_key(a)
    key_b = node_sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def sort_nodes(nodes: list[Node]) -> None:
    """Sort ``nodes`` and every descendant list in place."""
    nodes.sort(key=cmp_to_key(compare_nodes))
    for node in nodes:
        if node.children:
            sort_nodes(node.children)
