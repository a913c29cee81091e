"""The top-level application: tabs, panes, data refresh and the main loop."""

from __future__ import annotations

import queue
import threading
from collections.abc import Sequence
from typing import Optional

from blessed import Terminal

from rabbitui.canvas import Alignment, Color, Frame, Style
from rabbitui.cli import parse_args
from rabbitui.client import Client, ManagementClient
from rabbitui.clipboard import Clipboard
from rabbitui.config import AppConfig
from rabbitui.events import Events, InputEvent, Key, read_terminal_keys
from rabbitui.layout import Constraint, Direction, Rect, split
from rabbitui.models import ExchangeInfo, Overview, QueueInfo
from rabbitui.state import TabsState
from rabbitui.views.exchange import ExchangePane
from rabbitui.views.overview import OverviewPane
from rabbitui.views.pane import Pane
from rabbitui.views.queues import QueuesPane
from rabbitui.widgets.files import FileNavigator

ASCII = "\n".join(
    (
        "",
        r"   ___       __   __   _ ______     _ ",
        r"  / _ \___ _/ /  / /  (_)_  __/_ __(_)",
        r" / , _/ _ `/ _ \/ _ \/ / / / / // / / ",
        r"/_/|_|\_,_/_.__/_.__/_/ /_/  \_,_/_/  ",
        r"                                      ",
        "",
    )
)

HELP_HINT = "Press ? for help"
TAB_TITLES = ("Overview", "Exchanges", "Queues")

_TAB_STYLE = Style(fg=Color.GREEN)
_TAB_SELECTED_STYLE = Style(fg=Color.YELLOW)
_DIVIDER = "│"


class TabsManager:
    """Keeps tabs and panes one to one and routes to the active pane."""

    def __init__(self, titles: Sequence[str], panes: Sequence[Pane]) -> None:
        if len(titles) != len(panes):
            raise ValueError("every tab needs exactly one pane")
        self.tabs = TabsState(titles)
        self.panes = tuple(panes)

    def curr(self) -> int:
        """Index of the active tab, which is also that of the active pane."""
        return self.tabs.index

    def titles(self) -> tuple[str, ...]:
        return self.tabs.titles

    def next(self) -> None:
        self.tabs.next()

    def prev(self) -> None:
        self.tabs.previous()

    def pane(self) -> Pane:
        """The currently active pane."""
        return self.panes[self.tabs.index]

    def update(self) -> None:
        """Let every pane take in data that has arrived."""
        for pane in self.panes:
            pane.update()


def _put(frame: Frame, area: Rect, x: int, y: int, text: str, style: Style) -> int:
    room = area.right - x
    if room > 0:
        frame.write(x, y, text[:room], style)
    return x + len(text)


class App:
    """Holds the tabs and panes and keeps their data fresh in the background."""

    def __init__(
        self,
        client: ManagementClient,
        config: Optional[AppConfig] = None,
        clipboard: Optional[Clipboard] = None,
        explorer: Optional[FileNavigator] = None,
    ) -> None:
        self.client = client
        self.config = config or AppConfig()
        self.data_error: Optional[Exception] = None
        self._overview_chan: queue.Queue[Overview] = queue.Queue()
        self._exchange_chan: queue.Queue[list[ExchangeInfo]] = queue.Queue()
        self._queue_chan: queue.Queue[list[QueueInfo]] = queue.Queue()
        self.manager = TabsManager(
            TAB_TITLES,
            [
                OverviewPane(client, self._overview_chan),
                ExchangePane(client, self._exchange_chan),
                QueuesPane(client, self._queue_chan, clipboard, explorer),
            ],
        )
        self._stop = threading.Event()
        self.data_thread = threading.Thread(target=self._gather, daemon=True)
        self.data_thread.start()

    def _gather(self) -> None:
        pause = self.config.update_rate / 1000
        while not self._stop.is_set():
            try:
                self._overview_chan.put(self.client.get_overview())
                self._exchange_chan.put(self.client.get_exchange_overview())
                self._queue_chan.put(self.client.get_queues_info())
            except Exception as exc:  # the refresh stops; the UI keeps its last data
                self.data_error = exc
                return
            if self._stop.wait(pause):
                return

    def draw(self, frame: Frame) -> None:
        """Draw the header and tabs, then the active pane below them."""
        chunks = split(
            frame.area(),
            [Constraint.length(6), Constraint.length(3), Constraint.min(0)],
            Direction.VERTICAL,
        )
        self._draw_header(frame, chunks[0])
        self._draw_tabs(frame, chunks[1])
        self.manager.pane().draw(frame, chunks[2])

    def _draw_header(self, frame: Frame, area: Rect) -> None:
        chunks = split(
            area,
            [
                Constraint.percentage(25),
                Constraint.percentage(25),
                Constraint.percentage(25),
                Constraint.percentage(20),
                Constraint.percentage(5),
            ],
            Direction.HORIZONTAL,
        )
        meta_chunks = split(
            chunks[3],
            [Constraint.percentage(50), Constraint.min(0)],
            Direction.VERTICAL,
        )
        frame.paragraph(chunks[0], ASCII, wrap=True, trim=False)
        frame.paragraph(meta_chunks[1], HELP_HINT, Alignment.RIGHT)

    def _draw_tabs(self, frame: Frame, area: Rect) -> None:
        inner = frame.block(area, "Tabs")
        if inner.width <= 0 or inner.height <= 0:
            return
        titles = self.manager.titles()
        selected = self.manager.curr()
        x = inner.x
        for index, title in enumerate(titles):
            x += 1
            style = _TAB_SELECTED_STYLE if index == selected else _TAB_STYLE
            x = _put(frame, inner, x, inner.y, title, style)
            if index != len(titles) - 1:
                x += 1
                x = _put(frame, inner, x, inner.y, _DIVIDER, Style())

    def handle_key(self, key: Key) -> None:
        """Switch tabs on ``h``/``l``; hand every other key to the active pane."""
        if key == Key.char("l"):
            self.manager.next()
        elif key == Key.char("h"):
            self.manager.prev()
        else:
            self.manager.pane().handle_key(key)

    def update(self) -> None:
        self.manager.update()

    def close(self) -> None:
        """Stop the background data refresh."""
        self._stop.set()

    def __enter__(self) -> App:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the terminal interface until ``q`` is pressed."""
    cli = parse_args(argv)
    client = Client(cli.addr, cli.user, cli.password)
    if not client.ping():
        print("Unable to ping RabbitMQ API.")
        print("Check that the service is running and that creds are correct.")
        return 0
    terminal = Terminal()
    with App(client, AppConfig()) as app:
        with terminal.fullscreen(), terminal.cbreak(), terminal.hidden_cursor():
            with Events(key_source=read_terminal_keys(terminal)) as events:
                while True:
                    frame = Frame(terminal.width, terminal.height)
                    app.draw(frame)
                    frame.render(terminal)
                    event = events.next()
                    if isinstance(event, InputEvent):
                        if event.key == Key.char("q"):
                            break
                        app.handle_key(event.key)
                    else:
                        app.update()
    return 0