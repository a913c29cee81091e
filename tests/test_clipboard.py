import pytest

from rabbitui.clipboard import Clipboard, MemoryClipboard


def test_memory_clipboard_starts_empty():
    assert MemoryClipboard().get_contents() == ""


def test_memory_clipboard_initial_text():
    assert MemoryClipboard("queued body").get_contents() == "queued body"


def test_memory_clipboard_round_trip():
    clipboard = MemoryClipboard()
    clipboard.set_contents("hello world")
    assert clipboard.get_contents() == "hello world"


def test_memory_clipboard_overwrites():
    clipboard = MemoryClipboard("first")
    clipboard.set_contents("second")
    assert clipboard.get_contents() == "second"


def test_memory_clipboards_are_independent():
    one = MemoryClipboard()
    two = MemoryClipboard()
    one.set_contents("only here")
    assert two.get_contents() == ""


def test_clipboard_is_abstract():
    with pytest.raises(TypeError):
        Clipboard()


def test_memory_clipboard_works_as_a_clipboard():
    clipboard: Clipboard = MemoryClipboard()
    assert isinstance(clipboard, Clipboard)
    clipboard.set_contents("through the interface")
    assert clipboard.get_contents() == "through the interface"