import pytest

from starraid.geometry import WIN_HEIGHT, WIN_WIDTH, Point, Rect


def test_window_rect_center_is_middle_of_xga_screen():
    screen = Rect(0, 0, WIN_WIDTH, WIN_HEIGHT)
    assert screen.center() == Point(512, 384)


def test_center_of_rect():
    assert Rect(0, 0, 10, 20).center() == Point(5, 10)


def test_center_lies_inside_rect():
    rect = Rect(3.5, -7.0, 12.0, 4.0)
    c = rect.center()
    assert rect.x < c.x < rect.x + rect.width
    assert rect.y < c.y < rect.y + rect.height


def test_overlapping_rects_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_touching_edges_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    assert not a.intersects(Rect(10, 0, 10, 10))
    assert not a.intersects(Rect(0, 10, 10, 10))


def test_separate_on_one_axis_only_is_no_intersection():
    a = Rect(0, 0, 10, 10)
    assert not a.intersects(Rect(2, 50, 5, 5))
    assert not a.intersects(Rect(50, 2, 5, 5))


def test_contained_rect_intersects():
    outer = Rect(0, 0, 100, 100)
    inner = Rect(40, 40, 1, 1)
    assert outer.intersects(inner)
    assert inner.intersects(outer)


def test_rect_is_immutable():
    rect = Rect(1, 2, 3, 4)
    with pytest.raises(AttributeError):
        rect.x = 5
    assert rect == Rect(1, 2, 3, 4)
    assert rect.center() == Point(2.5, 4.0)


def test_point_is_mutable():
    p = Point(1.0, 2.0)
    p.y += 3.0
    assert p == Point(1.0, 5.0)