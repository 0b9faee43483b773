"""Workspace tree model: construction, ordering, flattening, row formatting.

Defines ``Node`` and ``TreeRow`` plus the filesystem builder that produces
a ``WorkspaceTree`` for the explorer pane.
"""

from __future__ import annotations

from .build import (
    EMPTY_DIRECTORY_LABEL,
    EMPTY_WORKSPACE_LABEL,
    DirectoryChild,
    WorkspaceLoadError,
    build_workspace_tree,
    list_directory_children,
    placeholder_tree,
    resolve_workspace_path,
)
from .ordering import compare_nodes, node_sort_key, sort_nodes
from .rendering import format_tree_row, row_style, row_text, style_color
from .tree import WorkspaceTree, row_index_of
from .types import Node, NodeKind, TreeRow

__all__ = [
    "Node",
    "NodeKind",
    "TreeRow",
    "WorkspaceTree",
    "WorkspaceLoadError",
    "DirectoryChild",
    "EMPTY_WORKSPACE_LABEL",
    "EMPTY_DIRECTORY_LABEL",
    "build_workspace_tree",
    "list_directory_children",
    "placeholder_tree",
    "resolve_workspace_path",
    "compare_nodes",
    "node_sort_key",
    "sort_nodes",
    "row_index_of",
    "row_text",
    "row_style",
    "style_color",
    "format_tree_row",
]
