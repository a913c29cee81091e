"""A small notice in the lower-right corner."""

from __future__ import annotations

from rabbitui.canvas import Alignment, Color, Frame, Style
from rabbitui.layout import Constraint, Direction, Rect, split


def notif_rect(area: Rect) -> Rect:
    """The bottom-right corner of ``area`` where notices appear."""
    rows = split(
        area,
        [Constraint.percentage(93), Constraint.percentage(7)],
        Direction.VERTICAL,
    )
    return split(
        rows[1],
        [Constraint.percentage(85), Constraint.percentage(15)],
        Direction.HORIZONTAL,
    )[1]


class Notification:
    """A short message shown in a bordered box."""

    def __init__(self, message: str) -> None:
        self.message = message

    def draw(self, frame: Frame, area: Rect) -> None:
        pop_area = notif_rect(area)
        frame.clear(pop_area)
        inner = frame.block(pop_area, style=Style(fg=Color.YELLOW))
        frame.paragraph(inner, self.message, Alignment.CENTER)