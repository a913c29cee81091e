"""Rectangles and constraint-based splitting of screen areas."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Rect:
    """An axis-aligned screen area in cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inner(self, margin: int) -> Rect:
        """Shrink by ``margin`` on every side; an empty rect if it does not fit."""
        if self.width < 2 * margin or self.height < 2 * margin:
            return Rect(0, 0, 0, 0)
        return Rect(
            self.x + margin,
            self.y + margin,
            self.width - 2 * margin,
            self.height - 2 * margin,
        )


class Direction(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Constraint:
    """A size rule for one segment of a split."""

    kind: str
    value: int
    denominator: int = 1

    @classmethod
    def percentage(cls, percent: int) -> Constraint:
        return cls("percentage", percent)

    @classmethod
    def ratio(cls, numerator: int, denominator: int) -> Constraint:
        return cls("ratio", numerator, denominator)

    @classmethod
    def length(cls, cells: int) -> Constraint:
        return cls("length", cells)

    @classmethod
    def max(cls, cells: int) -> Constraint:
        return cls("max", cells)

    @classmethod
    def min(cls, cells: int) -> Constraint:
        return cls("min", cells)

    def _desired(self, total: int) -> int:
        if self.kind == "percentage":
            return total * self.value // 100
        if self.kind == "ratio":
            return total * self.value // self.denominator if self.denominator else 0
        if self.kind == "max":
            return min(self.value, total)
        if self.kind in ("length", "min"):
            return self.value
        raise ValueError(f"unknown constraint kind {self.kind!r}")


def split(
    area: Rect,
    constraints: Sequence[Constraint],
    direction: Direction = Direction.VERTICAL,
    margin: int = 0,
) -> list[Rect]:
    """Divide ``area`` along ``direction``; the last segment fills what is left."""
    inner = area.inner(margin)
    vertical = direction is Direction.VERTICAL
    total = inner.height if vertical else inner.width
    last = len(constraints) - 1
    rects: list[Rect] = []
    position = 0
    for index, constraint in enumerate(constraints):
        start = min(position, total)
        size = total - start if index == last else min(constraint._desired(total), total - start)
        if vertical:
            rects.append(Rect(inner.x, inner.y + start, inner.width, size))
        else:
            rects.append(Rect(inner.x + start, inner.y, size, inner.height))
        position = start + size
    return rects


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """A rect centred in ``area`` taking the given percentages of its size."""
    if not (0 <= percent_x <= 100 and 0 <= percent_y <= 100):
        raise ValueError("percentages must lie between 0 and 100")
    side_y = (100 - percent_y) // 2
    rows = split(
        area,
        [
            Constraint.percentage(side_y),
            Constraint.percentage(percent_y),
            Constraint.percentage(side_y),
        ],
        Direction.VERTICAL,
    )
    side_x = (100 - percent_x) // 2
    columns = split(
        rows[1],
        [
            Constraint.percentage(side_x),
            Constraint.percentage(percent_x),
            Constraint.percentage(side_x),
        ],
        Direction.HORIZONTAL,
    )
    return columns[1]