"""The Queues tab."""

from __future__ import annotations

import queue
from typing import Optional

from rabbitui.canvas import Color, Frame, Style
from rabbitui.client import ManagementClient
from rabbitui.clipboard import Clipboard, TkClipboard
from rabbitui.events import Key
from rabbitui.layout import Constraint, Rect, split
from rabbitui.models import QueueInfo
from rabbitui.state import Datatable
from rabbitui.views.pane import Pane, latest
from rabbitui.widgets.confirmation import ConfirmationBox
from rabbitui.widgets.files import FileNavigator
from rabbitui.widgets.help import Help
from rabbitui.widgets.notif import Notification

HELP = (
    "The Queues tab is where you can view information on existing queues.\n"
    "\n"
    "Keys:\n"
    "  - h: previous tab\n"
    "  - l: next tab\n"
    "  - k: previous row\n"
    "  - j: next row\n"
    "  - p: drop message into queue from clipboard\n"
    "  - ctrl + p: pop message from queue onto clipboard\n"
    "  - d: purge selected queue\n"
    "  - return: select\n"
    "  - f: open/close file explorer\n"
    "  - backspace: go to parent in file explorer\n"
    "  - ?: close the help menu"
)

_SELECTED = Style(reversed=True)
_WIDTHS = (Constraint.percentage(20), *(Constraint.percentage(10) for _ in range(8)))


class QueuesPane(Pane):
    """Lists queues and lets messages be published, fetched and purged."""

    def __init__(
        self,
        client: ManagementClient,
        data_chan: queue.Queue[list[QueueInfo]],
        clipboard: Optional[Clipboard] = None,
        explorer: Optional[FileNavigator] = None,
    ) -> None:
        self.client = client
        self.data_chan = data_chan
        self.table: Datatable[QueueInfo] = Datatable(client.get_queues_info())
        self.confirmation = ConfirmationBox()
        self.explorer = explorer if explorer is not None else FileNavigator()
        self.clipboard = clipboard if clipboard is not None else TkClipboard()
        self.notif: Optional[Notification] = None
        self.show_help = False
        self.should_confirm = False
        self.should_open_files = False

    def draw(self, frame: Frame, area: Rect) -> None:
        table_area = split(area, [Constraint.percentage(100)], margin=1)[0]
        inner = frame.block(table_area, "Queues")
        frame.table(
            inner,
            header=QueueInfo.HEADERS,
            rows=[info.to_row() for info in self.table.entries],
            widths=_WIDTHS,
            selected=self.table.selected,
            header_style=Style(fg=Color.GREEN),
            highlight_style=_SELECTED,
            highlight_symbol=">> ",
        )
        if self.notif is not None:
            self.notif.draw(frame, area)
        if self.should_confirm:
            self.confirmation.draw(frame, area)
        if self.should_open_files:
            self.explorer.draw(frame, area)
        if self.show_help:
            Help(HELP).draw(frame, area)

    def _notify(self, message: str) -> None:
        self.notif = Notification(message)

    def _move(self, forward: bool) -> None:
        if self.should_confirm:
            target = self.confirmation
        elif self.should_open_files:
            target = self.explorer
        else:
            target = self.table
        if forward:
            target.next()
        else:
            target.previous()

    def _paste(self) -> None:
        info = self.table.current
        if info is None:
            return
        body = self.clipboard.get_contents()
        self.client.post_queue_payload(info.name, info.vhost, body)
        self._notify("Pasted from clipboard!")

    def _copy(self) -> None:
        info = self.table.current
        if info is None:
            return
        message = self.client.pop_queue_item(info.name, info.vhost)
        if message is None:
            self._notify("No messages to copy!")
        else:
            self.clipboard.set_contents(message.payload)
            self._notify("Copied to clipboard!")

    def _enter(self) -> None:
        if self.should_confirm:
            if self.confirmation.is_confirmed():
                info = self.table.current
                if info is not None:
                    self.client.purge_queue(info.name, info.vhost)
                    self._notify("Queue purged!")
            self.confirmation.reset()
            self.should_confirm = False
        elif self.should_open_files:
            chosen = self.explorer.select()
            info = self.table.current
            if chosen is not None and info is not None:
                body = chosen.read_text()
                self.client.post_queue_payload(info.name, info.vhost, body)
                self.should_open_files = False
                self._notify("Posted from file!")

    def handle_key(self, key: Key) -> None:
        self.notif = None
        if key == Key.char("j"):
            self._move(forward=True)
        elif key == Key.char("k"):
            self._move(forward=False)
        elif key == Key.char("p"):
            self._paste()
        elif key == Key.ctrl("p"):
            self._copy()
        elif key == Key.char("d"):
            if self.table.selected is not None:
                self.should_confirm = True
        elif key == Key.char("f"):
            self.should_open_files = not self.should_open_files
        elif key == Key.ENTER:
            self._enter()
        elif key == Key.BACKSPACE:
            if self.should_open_files:
                self.explorer.select_parent()
        elif key == Key.char("?"):
            self.show_help = not self.show_help

    def update(self) -> None:
        data = latest(self.data_chan)
        if data is not None:
            self.table.entries = list(data)