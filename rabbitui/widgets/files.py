"""A popup for browsing the file system and picking a file."""

from __future__ import annotations

from pathlib import Path

from rabbitui.canvas import Color, Frame, Style
from rabbitui.layout import Constraint, Rect, centered_rect
from rabbitui.state import Datatable

_DIR_STYLE = Style(fg=Color.CYAN)
_SELECTED_STYLE = Style(reversed=True)


def table_from_path(path: str | Path) -> Datatable[Path]:
    """List the non-hidden entries of ``path``, selecting the first if any."""
    files = sorted(entry for entry in Path(path).iterdir() if not entry.name.startswith("."))
    table: Datatable[Path] = Datatable(files)
    if files:
        table.select(0)
    return table


class FileNavigator:
    """Directory listing that descends into folders and returns chosen files."""

    def __init__(self, root: str | Path | None = None) -> None:
        self.root = Path.home() if root is None else Path(root)
        self.table = table_from_path(self.root)

    def draw(self, frame: Frame, area: Rect) -> None:
        pop_area = centered_rect(50, 55, area)
        frame.clear(pop_area)
        inner = frame.block(pop_area, "File-Explorer")
        rows = [
            [(entry.name, _DIR_STYLE if entry.is_dir() else Style())]
            for entry in self.table.entries
        ]
        frame.table(
            inner,
            rows=rows,
            widths=[Constraint.percentage(100)],
            selected=self.table.selected,
            highlight_style=_SELECTED_STYLE,
            highlight_symbol=">> ",
        )

    def next(self) -> None:
        self.table.next()

    def previous(self) -> None:
        self.table.previous()

    def _open(self, root: Path) -> None:
        self.table = table_from_path(root)
        self.root = root

    def select_parent(self) -> None:
        """Move up one directory, unless already at the top."""
        parent = self.root.parent
        if parent != self.root:
            self._open(parent)

    def select(self) -> Path | None:
        """Return the selected file, or enter the selected directory and return ``None``."""
        current = self.table.current
        if current is None:
            return None
        if current.is_file():
            return current
        self._open(current)
        return None