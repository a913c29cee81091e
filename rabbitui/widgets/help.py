"""A popup with help text."""

from __future__ import annotations

from rabbitui.canvas import Color, Frame, Style
from rabbitui.layout import Rect, centered_rect


class Help:
    """A titled box showing ``text``, wrapped to fit."""

    def __init__(self, text: str) -> None:
        self.text = text

    def draw(self, frame: Frame, area: Rect) -> None:
        pop_area = centered_rect(30, 40, area)
        frame.clear(pop_area)
        inner = frame.block(pop_area, ("Help", Style(fg=Color.RED)))
        frame.paragraph(inner, self.text, wrap=True, trim=True)