"""The Overview tab: broker-wide message counts and disk rates."""

from __future__ import annotations

import math
import queue
from collections.abc import Sequence

from rabbitui.canvas import Color, Frame, Style
from rabbitui.client import ManagementClient
from rabbitui.events import Key
from rabbitui.layout import Constraint, Direction, Rect, split
from rabbitui.models import Overview, format_rate
from rabbitui.views.pane import Pane, latest
from rabbitui.widgets.chart import ChartData, RChart
from rabbitui.widgets.help import Help

HELP = (
    "Welcome to RabbiTui! The help displayed here is relevant to the Overview tab. "
    "Every help panel will be specific to the tab you are in.\n"
    "\n"
    "The overview pane shows high level throughput analytics.\n"
    "\n"
    "Keys:\n"
    "  - h: previous tab\n"
    "  - l: next tab\n"
    "  - ?: close the help menu"
)

_BOLD = Style(bold=True)


def _number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


class OverviewPane(Pane):
    """Charts of queue totals and disk rates, with their latest values."""

    def __init__(self, client: ManagementClient, data_chan: queue.Queue[Overview]) -> None:
        self.data_chan = data_chan
        self.counter = 0.0
        self.show_help = False
        self.overall = ChartData()
        self.ready = ChartData()
        self.unacked = ChartData()
        self.disk_read_rate = ChartData()
        self.disk_write_rate = ChartData()
        self._push(client.get_overview())

    def _push(self, overview: Overview) -> None:
        totals = overview.queue_totals
        stats = overview.message_stats
        self.ready.push(totals.messages_ready)
        self.overall.push(totals.messages)
        self.unacked.push(totals.messages_unacked)
        self.disk_write_rate.push(stats.disk_writes_details.rate)
        self.disk_read_rate.push(stats.disk_reads_details.rate)

    def _draw_info_list(
        self,
        frame: Frame,
        area: Rect,
        entries: Sequence[tuple[str, ChartData, Color]],
        rate: bool,
    ) -> None:
        inner = frame.block(area)
        if inner.width <= 0:
            return
        for index, (label, series, color) in enumerate(entries):
            y = inner.y + 2 * index
            if y >= inner.bottom:
                break
            value = series.last_value()
            shown = format_rate(value) if rate else _number(value)
            x = inner.x
            for text, style in ((f"{label:<10}", Style(fg=color)), (" ", Style()), (shown, _BOLD)):
                room = inner.right - x
                if room <= 0:
                    break
                frame.write(x, y, text[:room], style)
                x += len(text)

    def draw(self, frame: Frame, area: Rect) -> None:
        halves = split(area, [Constraint.ratio(1, 2), Constraint.ratio(1, 2)], Direction.VERTICAL)
        count_chunks = split(
            halves[0],
            [Constraint.percentage(90), Constraint.percentage(10)],
            Direction.HORIZONTAL,
        )
        rate_chunks = split(
            halves[1],
            [Constraint.percentage(85), Constraint.percentage(15)],
            Direction.HORIZONTAL,
        )
        RChart(
            [self.overall, self.ready, self.unacked],
            [Color.YELLOW, Color.CYAN, Color.RED],
        ).draw(frame, count_chunks[0])
        self._draw_info_list(
            frame,
            count_chunks[1],
            [
                ("Ready", self.ready, Color.YELLOW),
                ("Total", self.overall, Color.CYAN),
                ("Unacked", self.unacked, Color.RED),
            ],
            rate=False,
        )
        RChart(
            [self.disk_read_rate, self.disk_write_rate],
            [Color.MAGENTA, Color.GREEN],
        ).draw(frame, rate_chunks[0])
        self._draw_info_list(
            frame,
            rate_chunks[1],
            [
                ("Disk read", self.disk_read_rate, Color.MAGENTA),
                ("Disk write", self.disk_write_rate, Color.GREEN),
            ],
            rate=True,
        )
        if self.show_help:
            Help(HELP).draw(frame, area)

    def handle_key(self, key: Key) -> None:
        if key == Key.char("?"):
            self.show_help = not self.show_help

    def update(self) -> None:
        overview = latest(self.data_chan)
        if overview is not None:
            self.counter += 1.0
            self._push(overview)