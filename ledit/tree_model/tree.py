"""Workspace tree: identity lookup, expand state, and flattening.

Nodes are addressed by their ``id`` only. Row indices shift on every
re-flatten, so the UI maps a selected row back through ``TreeRow.node_id``.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from pathlib import Path

from .rendering import row_style, row_text
from .types import Node, TreeRow


class WorkspaceTree:
    """Ordered root nodes plus the operations the interaction layer needs."""

    def __init__(self, roots: list[Node], root: Path | None = None) -> None:
        self.roots = roots
        self.root = root

    def iter_nodes(self) -> Iterator[Node]:
        """Yield every node in pre-order, ignoring expand state."""
        stack = list(reversed(self.roots))
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))

    def node_count(self) -> int:
        return sum(1 for _node in self.iter_nodes())

    def find_by_id(self, node_id: uuid.UUID) -> Node | None:
        """Return the first node with ``node_id`` in depth-first order."""
        for node in self.iter_nodes():
            if node.id == node_id:
                return node
        return None

    def contains(self, node_id: uuid.UUID) -> bool:
        return self.find_by_id(node_id) is not None

    def toggle_expand(self, node_id: uuid.UUID) -> bool:
        """Flip expand state of an expandable node.

        Returns ``True`` when something changed; leaves and unknown ids are
        ignored.
        """
        node = self.find_by_id(node_id)
        if node is None or node.expanded is None:
            return False
        node.expanded = not node.expanded
        return True

    def set_expanded(self, node_id: uuid.UUID, expanded: bool) -> bool:
        """Force expand state; returns ``True`` when the state changed."""
        node = self.find_by_id(node_id)
        if node is None or node.expanded is None or node.expanded == expanded:
            return False
        node.expanded = expanded
        return True

    def flatten(self, show_hidden: bool = True) -> list[TreeRow]:
        """Project visible nodes into rows via a pre-order walk.

        Children are visited only below expanded nodes. With
        ``show_hidden=False`` dot-entries and their subtrees are omitted.
        """
        rows: list[TreeRow] = []

        def walk(nodes: list[Node]) -> None:
            for node in nodes:
                if not show_hidden and node.is_hidden:
                    continue
                rows.append(
                    TreeRow(
                        node_id=node.id,
                        text=row_text(node),
                        depth=node.depth,
                        kind=node.kind,
                        style=row_style(node),
                        path=node.full_path,
                    )
                )
                if node.expanded and node.children:
                    walk(node.children)

        walk(self.roots)
        return rows

    def visible_node_count(self, show_hidden: bool = True) -> int:
        """Count nodes whose whole ancestor chain is expanded."""

        def count(nodes: list[Node]) -> int:
            total = 0
            for node in nodes:
                if not show_hidden and node.is_hidden:
                    continue
                total += 1
                if node.expanded and node.children:
                    total += count(node.children)
            return total

        return count(self.roots)


def row_index_of(node_id: uuid.UUID, rows: list[TreeRow]) -> int | None:
    """Return the index of the row projected from ``node_id``."""
    for idx, row in enumerate(rows):
        if row.node_id == node_id:
            return idx
    return None
