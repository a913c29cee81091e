"""Line charts of recent samples."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from itertools import pairwise

from rabbitui.canvas import Color, Frame, Style
from rabbitui.layout import Rect

X_WINDOW = 100
Y_PADDING = 1.1
_U64_MAX = 2**64 - 1
_MARKER = "•"


def _nan_max(values: Iterable[float]) -> float:
    present = [value for value in values if not math.isnan(value)]
    return max(present) if present else math.nan


def _nan_min(values: Iterable[float]) -> float:
    present = [value for value in values if not math.isnan(value)]
    return min(present) if present else math.nan


def _as_u64(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return _U64_MAX
    return min(int(value), _U64_MAX)


class ChartData:
    """The most recent ``X_WINDOW`` samples, each numbered by arrival."""

    def __init__(self) -> None:
        self._data: deque[tuple[float, float]] = deque(maxlen=X_WINDOW)
        self._counter = 0.0

    def push(self, value: float) -> None:
        self._data.append((self._counter, float(value)))
        self._counter += 1.0

    def y_max(self) -> float:
        """Largest sample, or NaN when empty."""
        return _nan_max(y for _, y in self._data)

    def y_min(self) -> float:
        """Smallest sample, or NaN when empty."""
        return _nan_min(y for _, y in self._data)

    def x_max(self) -> float:
        return self._counter

    def last_value(self) -> float:
        if not self._data:
            raise IndexError("no samples have been pushed")
        return self._data[-1][1]

    def points(self) -> list[tuple[float, float]]:
        return list(self._data)


def _line(start: tuple[int, int], end: tuple[int, int]) -> Iterator[tuple[int, int]]:
    (c0, r0), (c1, r1) = start, end
    steps = max(abs(c1 - c0), abs(r1 - r0))
    for step in range(steps + 1):
        t = step / steps if steps else 0.0
        yield round(c0 + (c1 - c0) * t), round(r0 + (r1 - r0) * t)


class RChart:
    """Several series drawn as coloured lines on shared axes."""

    def __init__(self, data: Sequence[ChartData], colors: Sequence[Color]) -> None:
        if len(data) != len(colors):
            raise ValueError("every dataset needs exactly one colour")
        self.data = tuple(data)
        self.colors = tuple(colors)

    def draw(self, frame: Frame, area: Rect) -> None:
        y_max = _nan_max(d.y_max() for d in self.data)
        y_min = _nan_min(d.y_min() for d in self.data)
        x_max = max([0.0, *(d.x_max() for d in self.data)])
        lower = 0.0 if x_max < X_WINDOW else x_max - X_WINDOW
        top = y_max * Y_PADDING

        inner = frame.block(area)
        if inner.width <= 0 or inner.height <= 0:
            return
        bold = Style(bold=True)
        low_label, high_label = str(_as_u64(y_min)), str(_as_u64(top))
        frame.write(inner.x, inner.y, high_label[: inner.width], bold)
        if inner.height > 1:
            frame.write(inner.x, inner.bottom - 1, low_label[: inner.width], bold)
        axis_x = inner.x + max(len(low_label), len(high_label))
        if axis_x < inner.right:
            axis_style = Style(fg=Color.GRAY)
            for y in range(inner.y, inner.bottom):
                frame.write(axis_x, y, "│", axis_style)
        plot = Rect(axis_x + 1, inner.y, inner.right - axis_x - 1, inner.height)
        if plot.width <= 0 or not top > 0:
            return

        def cell(x: float, y: float) -> tuple[int, int]:
            column = plot.x
            if x_max > lower:
                column += round((x - lower) / (x_max - lower) * (plot.width - 1))
            row = plot.bottom - 1 - round(y / top * (plot.height - 1))
            return column, row

        for series, color in zip(self.data, self.colors):
            style = Style(fg=color)
            cells = [
                cell(x, y)
                for x, y in series.points()
                if lower <= x <= x_max and 0 <= y <= top
            ]
            if len(cells) == 1:
                frame.write(*cells[0], _MARKER, style)
            for start, end in pairwise(cells):
                for column, row in _line(start, end):
                    frame.write(column, row, _MARKER, style)