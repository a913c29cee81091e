"""An in-memory character grid that widgets draw into before it reaches the terminal."""

from __future__ import annotations

import sys
import textwrap
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from operator import itemgetter
from typing import Any, Optional, Union

from rabbitui.layout import Constraint, Direction, Rect, split


class Color(Enum):
    """Foreground colours, valued by their terminal capability names."""

    YELLOW = "yellow"
    CYAN = "cyan"
    RED = "red"
    GREEN = "green"
    MAGENTA = "magenta"
    GRAY = "white"
    LIGHT_YELLOW = "bright_yellow"


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Style:
    """How a cell is drawn."""

    fg: Optional[Color] = None
    bold: bool = False
    reversed: bool = False


_PLAIN = Style()

# Text, optionally paired with the style it is drawn in.
Styled = Union[str, "tuple[str, Style]"]


def _unpack(item: Any) -> tuple[str, Style]:
    if isinstance(item, tuple):
        text, style = item
        return str(text), style
    return str(item), _PLAIN


def _merge(base: Style, over: Style) -> Style:
    return Style(
        fg=over.fg if over.fg is not None else base.fg,
        bold=base.bold or over.bold,
        reversed=base.reversed or over.reversed,
    )


def _sequence(terminal: Any, style: Style) -> str:
    parts = []
    if style.fg is not None:
        parts.append(getattr(terminal, style.fg.value))
    if style.bold:
        parts.append(terminal.bold)
    if style.reversed:
        parts.append(terminal.reverse)
    return "".join(parts)


class Frame:
    """A ``width`` by ``height`` grid of styled characters."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("frame dimensions must not be negative")
        self.width = width
        self.height = height
        self.cells: list[list[tuple[str, Style]]] = [
            [(" ", _PLAIN)] * width for _ in range(height)
        ]

    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def clear(self, rect: Rect) -> None:
        """Blank every cell of ``rect`` that lies on the frame."""
        left, right = max(rect.x, 0), min(rect.right, self.width)
        if right <= left:
            return
        for row in self.cells[max(rect.y, 0) : max(min(rect.bottom, self.height), 0)]:
            row[left:right] = [(" ", _PLAIN)] * (right - left)

    def write(self, x: int, y: int, text: str, style: Style | None = None) -> None:
        """Put ``text`` at ``(x, y)``; whatever falls off the frame is dropped."""
        if not 0 <= y < self.height:
            return
        style = style or _PLAIN
        row = self.cells[y]
        for offset, char in enumerate(text):
            column = x + offset
            if column >= self.width:
                break
            if column >= 0:
                row[column] = (char, style)

    def _write_in(self, rect: Rect, x: int, y: int, text: str, style: Style) -> None:
        if not rect.y <= y < rect.bottom:
            return
        start = max(rect.x - x, 0)
        end = rect.right - x
        if end > start:
            self.write(x + start, y, text[start:end], style)

    def block(
        self,
        rect: Rect,
        title: Styled | None = None,
        style: Style | None = None,
        borders: bool = True,
    ) -> Rect:
        """Draw a bordered box with an optional title and return its inner area."""
        style = style or _PLAIN
        if rect.width <= 0 or rect.height <= 0:
            return Rect(rect.x, rect.y, 0, 0)
        if borders:
            middle = "─" * max(rect.width - 2, 0)
            self.write(rect.x, rect.y, ("┌" + middle + "┐")[: rect.width], style)
            if rect.height >= 2:
                self.write(rect.x, rect.bottom - 1, ("└" + middle + "┘")[: rect.width], style)
            for y in range(rect.y + 1, rect.bottom - 1):
                self.write(rect.x, y, "│", style)
                if rect.width >= 2:
                    self.write(rect.right - 1, y, "│", style)
        if title is not None:
            text, title_style = _unpack(title)
            if borders:
                self.write(rect.x + 1, rect.y, text[: max(rect.width - 2, 0)], title_style)
            else:
                self.write(rect.x, rect.y, text[: rect.width], title_style)
        if borders:
            return rect.inner(1)
        if title is not None:
            return Rect(rect.x, rect.y + 1, rect.width, rect.height - 1)
        return rect

    def paragraph(
        self,
        rect: Rect,
        text: str,
        align: Alignment = Alignment.LEFT,
        wrap: bool = False,
        trim: bool = False,
    ) -> None:
        """Draw ``text`` line by line into ``rect``, wrapping words when asked."""
        if rect.width <= 0 or rect.height <= 0:
            return
        wrapper = textwrap.TextWrapper(
            width=rect.width,
            drop_whitespace=trim,
            replace_whitespace=False,
            expand_tabs=False,
        )
        lines: list[str] = []
        for raw in text.split("\n"):
            if wrap:
                lines.extend(wrapper.wrap(raw) or [""])
            else:
                lines.append(raw)
        for y, line in zip(range(rect.y, rect.bottom), lines):
            line = line[: rect.width]
            if align is Alignment.CENTER:
                x = rect.x + (rect.width - len(line)) // 2
            elif align is Alignment.RIGHT:
                x = rect.right - len(line)
            else:
                x = rect.x
            self.write(x, y, line, _PLAIN)

    def table(
        self,
        rect: Rect,
        header: Sequence[Styled] | None = None,
        rows: Sequence[Sequence[Styled]] = (),
        widths: Sequence[Constraint] = (),
        selected: int | None = None,
        header_style: Style | None = None,
        highlight_style: Style | None = None,
        highlight_symbol: str = "",
    ) -> None:
        """Draw a table with a blank line after the header and after each row.

        The selected row is prefixed with ``highlight_symbol`` and scrolled into view.
        """
        if rect.width <= 0 or rect.height <= 0:
            return
        symbol_width = len(highlight_symbol) if selected is not None else 0
        column_area = Rect(rect.x + symbol_width, rect.y, max(rect.width - symbol_width, 0), 1)
        columns = split(column_area, widths, Direction.HORIZONTAL) if widths else [column_area]
        last_column = len(columns) - 1

        def draw_row(y: int, cells: Sequence[Styled], base: Style, prefix: str) -> None:
            self._write_in(rect, rect.x, y, prefix, base)
            for index, (column, cell) in enumerate(zip(columns, cells)):
                text, style = _unpack(cell)
                room = column.width if index == last_column else column.width - 1
                self._write_in(rect, column.x, y, text[: max(room, 0)], _merge(style, base))

        y = rect.y
        if header is not None:
            draw_row(y, header, header_style or _PLAIN, " " * symbol_width)
            y += 2
        body_height = rect.bottom - y
        if body_height <= 0:
            return
        visible = max((body_height + 1) // 2, 1)
        offset = 0 if selected is None else max(0, selected - visible + 1)
        all_rows = list(rows)
        for index, row in enumerate(all_rows[offset : offset + visible], start=offset):
            row_y = y + 2 * (index - offset)
            if row_y >= rect.bottom:
                break
            if index == selected:
                highlight = highlight_style or _PLAIN
                self._write_in(rect, rect.x, row_y, " " * rect.width, highlight)
                draw_row(row_y, row, highlight, highlight_symbol)
            else:
                draw_row(row_y, row, _PLAIN, " " * symbol_width)

    def lines(self) -> list[str]:
        """The characters of every row, without styling."""
        return ["".join(char for char, _ in row) for row in self.cells]

    def render(self, terminal: Any) -> None:
        """Write the frame to standard output using ``terminal``'s sequences."""
        chunks: list[str] = []
        for y, row in enumerate(self.cells):
            chunks.append(terminal.move_xy(0, y))
            for style, group in groupby(row, key=itemgetter(1)):
                text = "".join(char for char, _ in group)
                if style == _PLAIN:
                    chunks.append(text)
                else:
                    chunks.append(_sequence(terminal, style) + text + terminal.normal)
        sys.stdout.write("".join(chunks))
        sys.stdout.flush()