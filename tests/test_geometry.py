import pytest

from akui.geometry import Point, Rect, Size


def test_point_defaults_to_origin():
    assert Point() == Point(0, 0)


def test_point_add_sub_round_trip():
    a = Point(7, -3)
    b = Point(12, 40)
    assert (a + b) - b == a
    assert (a + b) == (b + a)


def test_point_inequality():
    assert Point(1, 2) != Point(2, 1)


@pytest.mark.parametrize(
    "a,b,left,right,up,down",
    [
        (Point(1, 1), Point(5, 5), True, False, True, False),
        (Point(5, 5), Point(1, 1), False, True, False, True),
        (Point(3, 3), Point(3, 3), False, False, False, False),
    ],
)
def test_point_relations(a, b, left, right, up, down):
    assert a.is_left(b) is left
    assert a.is_right(b) is right
    assert a.is_up(b) is up
    assert a.is_down(b) is down


def test_point_is_immutable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5
    assert p.x == 1
    assert p == Point(1, 2)


def test_size_is_point():
    assert Size(3, 4) == Point(3, 4)


def test_from_coords_corners():
    r = Rect.from_coords(10, 20, 50, 60)
    assert r.top_left() == Point(10, 20)
    assert r.bottom_right() == Point(50, 60)
    assert r.top_right() == Point(50, 20)
    assert r.bottom_left() == Point(10, 60)


def test_from_coords_swaps_x():
    r = Rect.from_coords(50, 20, 10, 60)
    assert r.top_left() == Point(10, 20)
    assert r.bottom_right() == Point(50, 60)


def test_from_points_matches_from_coords():
    assert Rect.from_points(Point(3, 4), Point(30, 40)) == Rect.from_coords(3, 4, 30, 40)


def test_min_max_consistent_with_width_height():
    r = Rect.from_coords(5, 6, 25, 46)
    assert r.max_x() - r.min_x() == r.width()
    assert r.max_y() - r.min_y() == r.height()


def test_center_point_from_half_size():
    r = Rect(Point(0, 0), Point(10, 20))
    assert r.half_size() == Point(5, 10)
    assert r.center_point() == r.position + r.half_size()


def test_surrounds_is_inclusive():
    r = Rect.from_coords(10, 10, 20, 20)
    assert r.surrounds(Point(10, 10))
    assert r.surrounds(Point(20, 20))
    assert r.surrounds(Point(15, 12))
    assert not r.surrounds(Point(21, 15))
    assert not r.surrounds(Point(15, 9))


def test_edge_checks_are_independent():
    r = Rect.from_coords(0, 0, 10, 10)
    p = Point(50, 5)
    assert r.is_above_and_below(p)
    assert not r.is_left_and_right_of(p)
    assert not r.surrounds(p)


def test_translate_keeps_size():
    r = Rect.from_coords(0, 0, 10, 10)
    size = r.size
    result = r.translate_by(Point(3, 4))
    assert result is r
    assert r.position == Point(3, 4)
    assert r.size == size


def test_expand_then_shrink_round_trip():
    r = Rect.from_coords(10, 10, 30, 40)
    original = Rect(r.position, r.size)
    r.expand_by(5).expand_by(-5)
    assert r == original


def test_expand_by_keeps_center():
    r = Rect.from_coords(10, 10, 30, 40)
    center = r.center_point()
    r.expand_by(4)
    assert r.center_point() == center
    assert r.surrounds(Point(6, 6))


def test_expand_width_only_touches_x():
    r = Rect.from_coords(10, 10, 30, 40)
    height, y = r.height(), r.min_y()
    r.expand_width_by(3)
    assert r.height() == height
    assert r.min_y() == y
    assert r.min_x() == 10 - 3
    assert r.max_x() == 30 + 3


def test_expand_height_only_touches_y():
    r = Rect.from_coords(10, 10, 30, 40)
    width, x = r.width(), r.min_x()
    r.expand_height_by(2)
    assert r.width() == width
    assert r.min_x() == x
    assert r.min_y() == 10 - 2
    assert r.max_y() == 40 + 2


def test_setters_chain():
    r = Rect().set_position(Point(1, 2)).set_size(Point(3, 4))
    assert r == Rect(Point(1, 2), Point(3, 4))
    assert r.bottom_right() == Point(1, 2) + Point(3, 4)


def test_rect_equality():
    assert Rect.from_coords(0, 0, 4, 4) == Rect.from_coords(0, 0, 4, 4)
    assert Rect.from_coords(0, 0, 4, 4) != Rect.from_coords(1, 0, 4, 4)