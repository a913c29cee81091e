import pytest

from rabbitui.layout import Constraint, Direction, Rect, centered_rect, split


def test_vertical_split_fills_area_contiguously():
    area = Rect(0, 0, 80, 30)
    parts = split(area, [Constraint.length(6), Constraint.length(3), Constraint.min(0)])
    assert [p.height for p in parts[:2]] == [6, 3]
    assert sum(p.height for p in parts) == area.height
    for before, after in zip(parts, parts[1:]):
        assert before.bottom == after.y
    assert all(p.width == area.width and p.x == area.x for p in parts)


def test_horizontal_percentages():
    area = Rect(0, 0, 100, 6)
    parts = split(
        area,
        [Constraint.percentage(p) for p in (25, 25, 25, 20, 5)],
        Direction.HORIZONTAL,
    )
    assert [p.width for p in parts] == [25, 25, 25, 20, 5]
    assert parts[-1].right == area.right


def test_ratio_halves():
    area = Rect(0, 0, 10, 40)
    top, bottom = split(area, [Constraint.ratio(1, 2), Constraint.ratio(1, 2)])
    assert top.height == bottom.height
    assert top.height + bottom.height == area.height


def test_last_segment_absorbs_remainder():
    area = Rect(0, 0, 10, 7)
    parts = split(area, [Constraint.percentage(50), Constraint.percentage(10)])
    assert parts[-1].bottom == area.bottom


def test_overflowing_lengths_are_clipped():
    area = Rect(0, 0, 10, 5)
    parts = split(area, [Constraint.length(4), Constraint.length(4), Constraint.length(4)])
    assert all(p.bottom <= area.bottom for p in parts)
    assert sum(p.height for p in parts) == area.height


def test_max_constraint_caps_size():
    area = Rect(0, 0, 50, 10)
    parts = split(area, [Constraint.max(10), Constraint.min(0)], Direction.HORIZONTAL)
    assert parts[0].width == 10


def test_margin_shrinks_area():
    area = Rect(0, 0, 10, 10)
    (part,) = split(area, [Constraint.percentage(100)], margin=1)
    assert part == area.inner(1)
    assert part == Rect(1, 1, 8, 8)


def test_margin_too_large_gives_empty_area():
    assert Rect(3, 3, 1, 1).inner(1) == Rect(0, 0, 0, 0)


def test_split_with_no_constraints():
    assert split(Rect(0, 0, 10, 10), []) == []


def test_centered_rect_pinned_value():
    assert centered_rect(60, 50, Rect(0, 0, 100, 40)) == Rect(20, 10, 60, 20)


def test_centered_rect_is_inside_and_balanced():
    area = Rect(5, 7, 120, 48)
    popup = centered_rect(30, 40, area)
    assert area.x <= popup.x and popup.right <= area.right
    assert area.y <= popup.y and popup.bottom <= area.bottom
    assert abs((popup.x - area.x) - (area.right - popup.right)) <= 1


def test_centered_rect_rejects_over_hundred():
    with pytest.raises(ValueError):
        centered_rect(101, 50, Rect(0, 0, 10, 10))