"""Workspace-tree construction from the filesystem.

Builds the whole node hierarchy eagerly, skipping entries that cannot be
read instead of failing the build.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .ordering import sort_nodes
from .tree import WorkspaceTree
from .types import Node, NodeKind

logger = logging.getLogger(__name__)

EMPTY_WORKSPACE_LABEL = "Empty workspace"
EMPTY_DIRECTORY_LABEL = "Empty directory"


class WorkspaceLoadError(Exception):
    """Raised when the workspace root itself cannot be listed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot open workspace {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class DirectoryChild:
    """One directory-listing record."""

    name: str
    path: Path
    is_dir: bool


def list_directory_children(directory: Path) -> tuple[list[DirectoryChild], OSError | None]:
    """List immediate children of ``directory`` in filesystem order.

    Returns ``(children, scan_error)``. Entries whose type cannot be read
    are skipped. Directory symlinks are reported as files.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError as exc:
                    logger.debug("Skipping %s: %s", child.path, exc)
                    continue
                children.append(DirectoryChild(name=child.name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        return [], exc
    return children, None


def _nodes_for_children(children: list[DirectoryChild], depth: int, max_depth: int | None) -> list[Node]:
    """Turn one listing into nodes, recursing into every directory."""
    nodes: list[Node] = []
    for child in children:
        if not child.is_dir:
            nodes.append(Node(child.name, child.path, NodeKind.FILE, depth=depth))
            continue
        grandchildren: list[Node] = []
        if max_depth is None or depth + 1 < max_depth:
            listing, scan_error = list_directory_children(child.path)
            if scan_error is not None:
                logger.debug("Cannot list %s: %s", child.path, scan_error)
            else:
                grandchildren = _nodes_for_children(listing, depth + 1, max_depth)
        nodes.append(
            Node(
                child.name,
                child.path,
                NodeKind.DIRECTORY,
                depth=depth,
                children=grandchildren,
                expanded=False,
            )
        )
    return nodes


def placeholder_tree(label: str = EMPTY_WORKSPACE_LABEL) -> WorkspaceTree:
    """Return a tree holding a single synthetic info node."""
    return WorkspaceTree([Node(label, None, NodeKind.INFO)])


def resolve_workspace_path(root: Path | str) -> Path:
    """Expand ``~`` and anchor a relative ``root`` at the current directory.

    An unknown ``~user`` raises ``WorkspaceLoadError``.
    """
    try:
        path = Path(root).expanduser()
    except RuntimeError as exc:
        raise WorkspaceLoadError(Path(root), str(exc)) from exc
    if not path.is_absolute():
        path = Path(os.getcwd()) / path
    return path


def build_workspace_tree(root: Path | str | None, max_depth: int | None = None) -> WorkspaceTree:
    """Build a sorted workspace tree for ``root``.

    ``None`` yields the "Empty workspace" placeholder. A root that cannot be
    listed raises ``WorkspaceLoadError``; failures below the root only drop
    the affected entries. ``max_depth`` limits how many levels are read.
    """
    if root is None:
        return placeholder_tree()

    root_path = resolve_workspace_path(root)
    children, scan_error = list_directory_children(root_path)
    if scan_error is not None:
        raise WorkspaceLoadError(root_path, scan_error.strerror or str(scan_error))

    roots = _nodes_for_children(children, 0, max_depth)
    if not roots:
        roots = [Node(EMPTY_DIRECTORY_LABEL, None, NodeKind.INFO)]
    sort_nodes(roots)
    logger.info("Built workspace tree for %s", root_path)
    return WorkspaceTree(roots, root=root_path)
