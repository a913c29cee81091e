"""Access to the system clipboard."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Clipboard(ABC):
    """Somewhere text can be copied to and pasted from."""

    @abstractmethod
    def get_contents(self) -> str:
        """Return the text currently on the clipboard."""

    @abstractmethod
    def set_contents(self, text: str) -> None:
        """Replace the clipboard contents with ``text``."""


def _tk_root() -> Any:
    try:
        import tkinter
    except ImportError as exc:
        raise OSError("no clipboard is available: tkinter is missing") from exc
    try:
        root = tkinter.Tk()
    except tkinter.TclError as exc:
        raise OSError(f"no clipboard is available: {exc}") from exc
    root.withdraw()
    return root


class TkClipboard(Clipboard):
    """The system clipboard, reached through Tk."""

    def get_contents(self) -> str:
        import tkinter

        root = _tk_root()
        try:
            return str(root.clipboard_get())
        except tkinter.TclError as exc:
            raise OSError(f"cannot read the clipboard: {exc}") from exc
        finally:
            root.destroy()

    def set_contents(self, text: str) -> None:
        import tkinter

        root = _tk_root()
        try:
            root.clipboard_clear()
            root.clipboard_append(text)
            root.update()
        except tkinter.TclError as exc:
            raise OSError(f"cannot write the clipboard: {exc}") from exc
        finally:
            root.destroy()


class MemoryClipboard(Clipboard):
    """A clipboard held in memory, private to this process."""

    def __init__(self, text: str = "") -> None:
        self._text = text

    def get_contents(self) -> str:
        return self._text

    def set_contents(self, text: str) -> None:
        self._text = text