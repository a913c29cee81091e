"""Keyboard and tick events delivered through a single queue."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Union

from blessed import Terminal


@dataclass(frozen=True)
class Key:
    """A key press: a character, a control chord or a named key."""

    kind: str
    value: str = ""

    BACKSPACE: ClassVar[Key]
    ENTER: ClassVar[Key]
    ESC: ClassVar[Key]

    @classmethod
    def char(cls, c: str) -> Key:
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return cls("char", c)

    @classmethod
    def ctrl(cls, c: str) -> Key:
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return cls("ctrl", c.lower())


Key.BACKSPACE = Key("backspace")
Key.ENTER = Key("char", "\n")
Key.ESC = Key("esc")


@dataclass(frozen=True)
class InputEvent:
    key: Key


@dataclass(frozen=True)
class TickEvent:
    pass


Event = Union[InputEvent, TickEvent]


@dataclass(frozen=True)
class EventsConfig:
    """``exit_key`` ends input reading; ``tick_rate`` is seconds between ticks."""

    exit_key: Key = field(default_factory=lambda: Key.char("q"))
    tick_rate: float = 0.5


def _key_from_keystroke(keystroke: Any) -> Optional[Key]:
    if getattr(keystroke, "is_sequence", False):
        name = getattr(keystroke, "name", None) or ""
        if name in ("KEY_BACKSPACE", "KEY_DELETE"):
            return Key.BACKSPACE
        if name == "KEY_ENTER":
            return Key.ENTER
        if name == "KEY_ESCAPE":
            return Key.ESC
        return Key("other", name)
    text = str(keystroke)
    if not text:
        return None
    char = text[0]
    if char in "\r\n":
        return Key.ENTER
    if char in "\x7f\x08":
        return Key.BACKSPACE
    if char == "\x1b":
        return Key.ESC
    if ord(char) < 32:
        return Key.ctrl(chr(ord(char) + 96))
    return Key.char(char)


def read_terminal_keys(terminal: Any) -> Iterator[Key]:
    """Yield keys pressed on ``terminal`` forever, blocking between presses."""
    while True:
        key = _key_from_keystroke(terminal.inkey())
        if key is not None:
            yield key


class Events:
    """Merges key presses and periodic ticks, each produced on its own thread."""

    def __init__(
        self,
        config: EventsConfig | None = None,
        key_source: Iterable[Key] | None = None,
    ) -> None:
        self.config = config or EventsConfig()
        self._queue: queue.Queue[Event] = queue.Queue()
        self._ignore_exit_key = threading.Event()
        self._stop = threading.Event()
        if key_source is None:
            key_source = read_terminal_keys(Terminal())
        self._input_thread = threading.Thread(
            target=self._read_input, args=(key_source,), daemon=True
        )
        self._tick_thread = threading.Thread(target=self._tick, daemon=True)
        self._input_thread.start()
        self._tick_thread.start()

    def _read_input(self, source: Iterable[Key]) -> None:
        for key in source:
            if self._stop.is_set():
                return
            self._queue.put(InputEvent(key))
            if not self._ignore_exit_key.is_set() and key == self.config.exit_key:
                return

    def _tick(self) -> None:
        while not self._stop.is_set():
            self._queue.put(TickEvent())
            if self._stop.wait(self.config.tick_rate):
                return

    def next(self, timeout: float | None = None) -> Event:
        """Return the next event; raise ``TimeoutError`` if none comes in time."""
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError("no event arrived in time") from None

    def disable_exit_key(self) -> None:
        self._ignore_exit_key.set()

    def enable_exit_key(self) -> None:
        self._ignore_exit_key.clear()

    def close(self) -> None:
        """Stop producing ticks and stop forwarding input."""
        self._stop.set()

    def __enter__(self) -> Events:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()