"""A yes/no box guarding destructive actions."""

from __future__ import annotations

from rabbitui.canvas import Alignment, Color, Frame, Style
from rabbitui.layout import Constraint, Direction, Rect, centered_rect, split
from rabbitui.state import Datatable

TEXT = "This is a destructive action. Confirm action:"


class ConfirmationBox:
    """Offers "No" (selected first) and "Yes"."""

    def __init__(self) -> None:
        self.table: Datatable[str] = Datatable(["No", "Yes"])
        self.table.select(0)

    def reset(self) -> None:
        self.table.select(0)

    def draw(self, frame: Frame, area: Rect) -> None:
        pop_area = centered_rect(30, 30, area)
        chunks = split(
            pop_area,
            [Constraint.percentage(10), Constraint.percentage(20), Constraint.min(0)],
            Direction.VERTICAL,
            margin=1,
        )
        frame.clear(pop_area)
        frame.block(
            pop_area,
            ("Warning", Style(fg=Color.YELLOW)),
            Style(fg=Color.LIGHT_YELLOW),
        )
        frame.paragraph(chunks[1], TEXT, Alignment.CENTER, wrap=True, trim=True)
        frame.table(
            chunks[2],
            rows=[[choice] for choice in self.table.entries],
            widths=[Constraint.percentage(100)],
            selected=self.table.selected,
            highlight_style=Style(reversed=True),
            highlight_symbol=">> ",
        )

    def is_confirmed(self) -> bool:
        return self.table.selected == 1

    def next(self) -> None:
        self.table.next()

    def previous(self) -> None:
        self.table.previous()