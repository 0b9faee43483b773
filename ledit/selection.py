"""Cursor-tracked ordered sequence for navigable lists."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class SelectionList(Generic[T]):
    """Items plus an optional selected index.

    ``next`` and ``previous`` wrap at both ends. With nothing selected,
    both select index ``0``.
    """

    def __init__(self, items: Sequence[T] = ()) -> None:
        self.items: list[T] = list(items)
        self.selected: int | None = None

    def __len__(self) -> int:
        return len(self.items)

    def next(self) -> None:
        if not self.items:
            self.selected = None
            return
        if self.selected is None or self.selected >= len(self.items) - 1:
            self.selected = 0
        else:
            self.selected += 1

    def previous(self) -> None:
        if not self.items:
            self.selected = None
            return
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = len(self.items) - 1
        else:
            self.selected = min(self.selected, len(self.items)) - 1

    def unselect(self) -> None:
        self.selected = None

    def select(self, index: int | None) -> None:
        """Select ``index`` clamped into range; ``None`` clears the cursor."""
        if index is None or not self.items:
            self.selected = None
            return
        self.selected = max(0, min(index, len(self.items) - 1))

    def selected_item(self) -> T | None:
        if self.selected is None or not 0 <= self.selected < len(self.items):
            return None
        return self.items[self.selected]

    def replace_items(self, items: Sequence[T]) -> None:
        """Swap the backing sequence and clamp a now out-of-range cursor."""
        self.items = list(items)
        if self.selected is not None:
            self.select(self.selected)
