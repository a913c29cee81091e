"""The Exchanges tab."""

from __future__ import annotations

import queue

from rabbitui.canvas import Color, Frame, Style
from rabbitui.client import ManagementClient
from rabbitui.events import Key
from rabbitui.layout import Constraint, Rect, centered_rect, split
from rabbitui.models import ExchangeBindings, ExchangeInfo
from rabbitui.state import Datatable
from rabbitui.views.pane import Pane, latest
from rabbitui.widgets.help import Help

HELP = (
    "The Exchanges tab is where you view all existing exchanges with drilldown information.\n"
    "\n"
    "Keys:\n"
    "  - h: previous tab\n"
    "  - l: next tab\n"
    "  - k: previous row\n"
    "  - j: next row\n"
    "  - return: open/close drilldown for selected exchange\n"
    "  - ?: close the help menu"
)

_SELECTED = Style(reversed=True)
_TABLE_WIDTHS = (
    Constraint.percentage(40),
    Constraint.percentage(30),
    Constraint.percentage(15),
    Constraint.percentage(15),
)
_BINDING_WIDTHS = (
    Constraint.percentage(50),
    Constraint.length(30),
    Constraint.max(10),
)


class ExchangePane(Pane):
    """Lists exchanges and shows the bindings of the selected one on demand."""

    def __init__(
        self, client: ManagementClient, data_chan: queue.Queue[list[ExchangeInfo]]
    ) -> None:
        self.client = client
        self.data_chan = data_chan
        self.table: Datatable[ExchangeInfo] = Datatable(client.get_exchange_overview())
        self.bindings_table: Datatable[ExchangeBindings] = Datatable()
        self.should_fetch_bindings = False
        self.should_draw_popout = False
        self.show_help = False

    def _draw_popout(self, frame: Frame, area: Rect) -> None:
        pop_area = centered_rect(60, 50, area)
        frame.clear(pop_area)
        inner = frame.block(pop_area, "Bindings")
        frame.table(
            inner,
            header=ExchangeBindings.HEADERS,
            rows=[binding.to_row() for binding in self.bindings_table.entries],
            widths=_BINDING_WIDTHS,
            selected=self.bindings_table.selected,
            header_style=Style(fg=Color.YELLOW),
            highlight_style=_SELECTED,
            highlight_symbol=">> ",
        )

    def _active_table(self) -> Datatable:
        return self.bindings_table if self.should_draw_popout else self.table

    def draw(self, frame: Frame, area: Rect) -> None:
        table_area = split(area, [Constraint.percentage(100)], margin=1)[0]
        inner = frame.block(table_area, "Exchanges")
        frame.table(
            inner,
            header=ExchangeInfo.HEADERS,
            rows=[exchange.to_row() for exchange in self.table.entries],
            widths=_TABLE_WIDTHS,
            selected=self.table.selected,
            header_style=Style(fg=Color.GREEN),
            highlight_style=_SELECTED,
            highlight_symbol=">> ",
        )
        if self.should_draw_popout and self.table.selected is not None:
            if self.should_fetch_bindings:
                drilldown = self.table.entries[self.table.selected]
                self.bindings_table = Datatable(self.client.get_exchange_bindings(drilldown))
                self.should_fetch_bindings = False
            self._draw_popout(frame, area)
        if self.show_help:
            Help(HELP).draw(frame, area)

    def handle_key(self, key: Key) -> None:
        if key == Key.char("j"):
            self._active_table().next()
        elif key == Key.char("k"):
            self._active_table().previous()
        elif key == Key.ENTER:
            self.should_fetch_bindings = True
            self.should_draw_popout = not self.should_draw_popout
        elif key == Key.char("?"):
            self.show_help = not self.show_help

    def update(self) -> None:
        data = latest(self.data_chan)
        if data is not None:
            self.table.entries = list(data)