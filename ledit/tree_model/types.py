"""Workspace-tree datatypes shared by build, flattening, and rendering."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class NodeKind(Enum):
    """What a tree node stands for."""

    DIRECTORY = "directory"
    FILE = "file"
    INFO = "info"


@dataclass(eq=False)
class Node:
    """One workspace entry owning its children.

    ``children is None`` marks a leaf; ``[]`` is a directory without
    (readable) entries. ``expanded`` is ``None`` exactly for leaves.
    """

    display_name: str
    full_path: Path | None
    kind: NodeKind
    depth: int = 0
    children: list[Node] | None = None
    expanded: bool | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def is_expandable(self) -> bool:
        return self.expanded is not None

    @property
    def is_hidden(self) -> bool:
        return self.kind is not NodeKind.INFO and self.display_name.startswith(".")


@dataclass(frozen=True)
class TreeRow:
    """One flattened, render-ready row projected from a ``Node``."""

    node_id: uuid.UUID
    text: str
    depth: int
    kind: NodeKind
    style: str
    path: Path | None = None
