import queue

import pytest

from rabbitui.canvas import Frame
from rabbitui.client import ManagementClient
from rabbitui.clipboard import MemoryClipboard
from rabbitui.events import Key
from rabbitui.models import MQMessage, QueueInfo
from rabbitui.views.queues import QueuesPane
from rabbitui.widgets.files import FileNavigator


def make_queue(name, vhost="/"):
    return QueueInfo(
        name=name, kind="classic", state="running", ready=0, unacked=0, total=0, vhost=vhost
    )


class FakeClient(ManagementClient):
    def __init__(self, queues, messages=None):
        self.queues = queues
        self.messages = list(messages or [])
        self.posted = []
        self.purged = []
        self.popped = []

    def get_exchange_overview(self):
        return []

    def get_exchange_bindings(self, exchange):
        return []

    def get_overview(self):
        raise AssertionError("not used")

    def get_queues_info(self):
        return list(self.queues)

    def post_queue_payload(self, queue_name, vhost, payload):
        self.posted.append((queue_name, vhost, payload))

    def pop_queue_item(self, queue_name, vhost):
        self.popped.append((queue_name, vhost))
        return self.messages.pop(0) if self.messages else None

    def ping(self):
        return True

    def purge_queue(self, queue_name, vhost):
        self.purged.append((queue_name, vhost))


@pytest.fixture
def client():
    return FakeClient([make_queue("orders"), make_queue("events", "dev")])


@pytest.fixture
def pane(client, tmp_path):
    (tmp_path / "payload.txt").write_text("from file")
    return QueuesPane(client, queue.Queue(), MemoryClipboard("clip body"), FileNavigator(tmp_path))


def test_initial_entries_come_from_client(pane):
    assert [q.name for q in pane.table.entries] == ["orders", "events"]
    assert pane.table.selected is None


def test_update_replaces_entries(pane):
    pane.data_chan.put([make_queue("fresh")])
    pane.update()
    assert [q.name for q in pane.table.entries] == ["fresh"]


def test_update_without_data_keeps_entries(pane):
    pane.update()
    assert [q.name for q in pane.table.entries] == ["orders", "events"]


def test_row_navigation_wraps(pane):
    pane.handle_key(Key.char("j"))
    assert pane.table.selected == 0
    pane.handle_key(Key.char("j"))
    assert pane.table.selected == 1
    pane.handle_key(Key.char("j"))
    assert pane.table.selected == 0
    pane.handle_key(Key.char("k"))
    assert pane.table.selected == 1


def test_paste_without_selection_does_nothing(pane, client):
    pane.handle_key(Key.char("p"))
    assert client.posted == []
    assert pane.notif is None


def test_paste_posts_clipboard_to_selected_queue(pane, client):
    pane.handle_key(Key.char("j"))
    pane.handle_key(Key.char("j"))
    pane.handle_key(Key.char("p"))
    assert client.posted == [("events", "dev", "clip body")]
    assert pane.notif.message == "Pasted from clipboard!"


def test_pop_copies_payload_to_clipboard(tmp_path):
    message = MQMessage(
        payload_bytes=5, redelivered=False, exchange="", routing_key="orders", payload="hello"
    )
    client = FakeClient([make_queue("orders")], [message])
    clipboard = MemoryClipboard()
    pane = QueuesPane(client, queue.Queue(), clipboard, FileNavigator(tmp_path))
    pane.handle_key(Key.char("j"))
    pane.handle_key(Key.ctrl("p"))
    assert clipboard.get_contents() == "hello"
    assert client.popped == [("orders", "/")]
    assert pane.notif.message == "Copied to clipboard!"


def test_pop_from_empty_queue_reports_it(pane):
    pane.handle_key(Key.char("j"))
    pane.handle_key(Key.ctrl("p"))
    assert pane.clipboard.get_contents() == "clip body"
    assert pane.notif.message == "No messages to copy!"


def test_notification_cleared_by_next_key(pane):
    pane.handle_key(Key.char("j"))
    pane.handle_key(Key.char("p"))
    pane.handle_key(Key.char("x"))
    assert pane.notif is None


def test_purge_needs_selection(pane):
    pane.handle_key(Key.char("d"))
    assert pane.should_confirm is False


def test_confirmed_purge(pane, client):
    pane.handle_key(Key.char("j"))
    pane.handle_key(Key.char("d"))
    assert pane.should_confirm is True
    pane.handle_key(Key.char("j"))
    assert pane.confirmation.is_confirmed()
    assert pane.table.selected == 0
    pane.handle_key(Key.ENTER)
    assert client.purged == [("orders", "/")]
    assert pane.notif.message == "Queue purged!"
    assert pane.should_confirm is False
    assert not pane.confirmation.is_confirmed()


def test_declined_purge(pane, client):
    pane.handle_key(Key.char("j"))
    pane.handle_key(Key.char("d"))
    pane.handle_key(Key.ENTER)
    assert client.purged == []
    assert pane.should_confirm is False
    assert pane.notif is None


def test_post_from_file(pane, client):
    pane.handle_key(Key.char("j"))
    pane.handle_key(Key.char("f"))
    assert pane.should_open_files is True
    pane.handle_key(Key.ENTER)
    assert client.posted == [("orders", "/", "from file")]
    assert pane.should_open_files is False
    assert pane.notif.message == "Posted from file!"


def test_enter_on_directory_descends(client, tmp_path):
    inner = tmp_path / "inner"
    inner.mkdir()
    (inner / "body.txt").write_text("x")
    pane = QueuesPane(client, queue.Queue(), MemoryClipboard(), FileNavigator(tmp_path))
    pane.handle_key(Key.char("j"))
    pane.handle_key(Key.char("f"))
    pane.handle_key(Key.ENTER)
    assert pane.explorer.root == inner
    assert client.posted == []
    assert pane.should_open_files is True
    pane.handle_key(Key.BACKSPACE)
    assert pane.explorer.root == tmp_path


def test_backspace_ignored_when_explorer_closed(pane, tmp_path):
    pane.handle_key(Key.BACKSPACE)
    assert pane.explorer.root == tmp_path


def test_help_toggle(pane):
    pane.handle_key(Key.char("?"))
    assert pane.show_help is True
    pane.handle_key(Key.char("?"))
    assert pane.show_help is False


def test_draw_shows_headers_and_queue_names(pane):
    frame = Frame(120, 40)
    pane.draw(frame, frame.area())
    text = "\n".join(frame.lines())
    assert "Queues" in text
    assert "Name" in text
    assert "orders" in text
    assert "events" in text


def test_draw_shows_help_and_notification(pane):
    pane.handle_key(Key.char("j"))
    pane.handle_key(Key.char("p"))
    pane.show_help = True
    frame = Frame(120, 50)
    pane.draw(frame, frame.area())
    text = "\n".join(frame.lines())
    assert "Help" in text
    assert "Pasted" in text


def test_file_read_error_propagates(client, tmp_path):
    target = tmp_path / "gone.txt"
    target.write_text("x")
    pane = QueuesPane(client, queue.Queue(), MemoryClipboard(), FileNavigator(tmp_path))
    target.unlink()
    target.mkdir()
    (tmp_path / "gone.txt" / "child").write_text("y")
    pane.handle_key(Key.char("j"))
    pane.handle_key(Key.char("f"))
    pane.handle_key(Key.ENTER)
    assert pane.explorer.root == target
    assert client.posted == []