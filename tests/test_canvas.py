import pytest

from rabbitui.canvas import Alignment, Color, Frame, Style
from rabbitui.layout import Constraint, Rect


def test_new_frame_is_blank():
    frame = Frame(5, 3)
    assert frame.lines() == ["     "] * 3
    assert frame.area() == Rect(0, 0, 5, 3)


def test_negative_size_is_rejected():
    with pytest.raises(ValueError):
        Frame(-1, 2)


def test_write_clips_to_frame():
    frame = Frame(4, 2)
    frame.write(2, 0, "abcdef")
    frame.write(0, 5, "ignored")
    frame.write(-1, 1, "xyz")
    assert frame.lines() == ["  ab", "yz  "]


def test_clear_blanks_rect():
    frame = Frame(4, 2)
    frame.write(0, 0, "abcd")
    frame.write(0, 1, "efgh")
    frame.clear(Rect(1, 0, 2, 2))
    assert frame.lines() == ["a  d", "e  h"]


def test_block_draws_border_and_title():
    frame = Frame(10, 4)
    rect = Rect(0, 0, 10, 4)
    inner = frame.block(rect, "Tabs")
    lines = frame.lines()
    assert inner == rect.inner(1)
    assert lines[0].startswith("┌Tabs")
    assert lines[0].endswith("┐")
    assert lines[3].startswith("└") and lines[3].endswith("┘")
    assert lines[1][0] == "│" and lines[1][-1] == "│"


def test_block_title_style_is_kept():
    frame = Frame(10, 3)
    red = Style(fg=Color.RED)
    frame.block(frame.area(), ("Help", red))
    assert frame.cells[0][1] == ("H", red)


def test_paragraph_alignment():
    frame = Frame(10, 3)
    frame.paragraph(Rect(0, 0, 10, 1), "ab", Alignment.RIGHT)
    frame.paragraph(Rect(0, 1, 10, 1), "ab", Alignment.LEFT)
    frame.paragraph(Rect(0, 2, 10, 1), "ab", Alignment.CENTER)
    lines = frame.lines()
    assert lines[0].endswith("ab")
    assert lines[1].startswith("ab")
    assert lines[2].strip() == "ab"
    assert lines[2].index("a") not in (0, 8)


def test_paragraph_wrap_keeps_words_within_width():
    text = "the quick brown fox jumps over the lazy dog"
    frame = Frame(12, 10)
    frame.paragraph(Rect(0, 0, 12, 10), text, wrap=True, trim=True)
    lines = [line.rstrip() for line in frame.lines() if line.strip()]
    assert all(len(line) <= 12 for line in lines)
    assert " ".join(lines).split() == text.split()


def test_paragraph_without_wrap_truncates():
    frame = Frame(5, 1)
    frame.paragraph(frame.area(), "abcdefgh")
    assert frame.lines() == ["abcde"]


def test_table_header_rows_and_selection():
    frame = Frame(20, 8)
    frame.table(
        frame.area(),
        header=["Name"],
        rows=[["one"], ["two"]],
        widths=[Constraint.percentage(100)],
        selected=1,
        highlight_style=Style(reversed=True),
        highlight_symbol=">> ",
    )
    lines = frame.lines()
    assert lines[0].strip() == "Name"
    assert lines[1].strip() == ""
    assert lines[2].strip() == "one"
    assert lines[4].startswith(">> two")
    assert frame.cells[4][19][1].reversed


def test_table_scrolls_selected_row_into_view():
    frame = Frame(20, 6)
    rows = [[f"row{n}"] for n in range(10)]
    frame.table(frame.area(), rows=rows, selected=9, highlight_symbol=">> ")
    lines = frame.lines()
    assert any(line.startswith(">> row9") for line in lines)
    assert not any("row0" in line for line in lines)


def test_table_columns_follow_widths():
    frame = Frame(20, 1)
    frame.table(
        frame.area(),
        rows=[["abcdefghijklmnop", "B"]],
        widths=[Constraint.percentage(50), Constraint.percentage(50)],
    )
    line = frame.lines()[0]
    assert line[10:].startswith("B")
    assert "abcdefghijklmnop" not in line


class _FakeTerminal:
    normal = "<normal>"

    def move_xy(self, x, y):
        return f"[{x},{y}]"

    def __getattr__(self, name):
        return f"<{name}>"


def test_render_emits_positions_and_styles(capsys):
    frame = Frame(3, 2)
    frame.write(0, 0, "ab", Style(fg=Color.YELLOW, bold=True))
    frame.render(_FakeTerminal())
    out = capsys.readouterr().out
    assert out.startswith("[0,0]<yellow><bold>ab<normal> [1,0]"[:5])
    assert "<yellow><bold>ab<normal>" in out
    assert "[0,1]   " in out