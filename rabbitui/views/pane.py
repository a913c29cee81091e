"""The interface shared by every tab's pane."""

from __future__ import annotations

import queue
from abc import ABC, abstractmethod
from typing import Optional, TypeVar

from rabbitui.canvas import Frame
from rabbitui.events import Key
from rabbitui.layout import Rect

T = TypeVar("T")


def latest(channel: queue.Queue[T]) -> Optional[T]:
    """Take the next waiting item from ``channel`` without blocking, or ``None``."""
    try:
        return channel.get_nowait()
    except queue.Empty:
        return None


class Pane(ABC):
    """A view that draws itself, reacts to keys and takes in fresh data."""

    @abstractmethod
    def draw(self, frame: Frame, area: Rect) -> None:
        """Draw the pane into ``area`` of ``frame``."""

    @abstractmethod
    def handle_key(self, key: Key) -> None:
        """React to a key press."""

    @abstractmethod
    def update(self) -> None:
        """Take in any data that has arrived since the last update."""