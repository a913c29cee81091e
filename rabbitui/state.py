"""Selection state for tabs and tables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class TabsState:
    """A fixed list of tab titles with a wrapping cursor."""

    def __init__(self, titles: Sequence[str]) -> None:
        if not titles:
            raise ValueError("at least one tab title is required")
        self.titles = tuple(titles)
        self.index = 0

    def next(self) -> None:
        self.index = (self.index + 1) % len(self.titles)

    def previous(self) -> None:
        self.index = (self.index - 1) % len(self.titles)


class Datatable(Generic[T]):
    """Rows of data with an optional, wrapping row selection."""

    def __init__(self, entries: Iterable[T] = ()) -> None:
        self.entries: list[T] = list(entries)
        self.selected: int | None = None

    def select(self, index: int | None) -> None:
        self.selected = index

    @property
    def current(self) -> T | None:
        """The selected entry, or ``None`` when nothing is selected."""
        if self.selected is None:
            return None
        return self.entries[self.selected]

    def _require_entries(self) -> None:
        if not self.entries:
            raise IndexError("cannot move the selection in an empty table")

    def next(self) -> None:
        if self.selected is None:
            self.selected = 0
            return
        self._require_entries()
        self.selected = 0 if self.selected >= len(self.entries) - 1 else self.selected + 1

    def previous(self) -> None:
        if self.selected is None:
            self.selected = 0
            return
        self._require_entries()
        self.selected = len(self.entries) - 1 if self.selected == 0 else self.selected - 1