import math

import pytest

from tuit.rect import Rectangle


def test_new_normalises_vertices():
    rect = Rectangle((5, 1), (2, 7))
    assert rect.left_top() == (2, 1)
    assert rect.right_bottom() == (5, 7)
    assert rect.left_bottom() == (2, 7)
    assert rect.right_top() == (5, 1)


def test_negative_coordinates_rejected():
    with pytest.raises(ValueError):
        Rectangle((-1, 0), (3, 3))


def test_of_size_starts_at_origin():
    rect = Rectangle.of_size((20, 10))
    assert rect.left_top() == (0, 0)
    assert rect.dimensions() == (20, 10)


def test_corners_round_trip():
    rect = Rectangle((3, 4), (9, 12))
    assert Rectangle.from_corners(rect.to_corners()) == rect


def test_width_height_area_invariants():
    rect = Rectangle((3, 4), (9, 12))
    assert rect.width() == rect.right() - rect.left()
    assert rect.height() == rect.bottom() - rect.top()
    assert rect.area() == rect.width() * rect.height()
    assert math.isclose(rect.edge_to_edge(), math.hypot(*rect.dimensions()))


def test_contains_documented_example():
    assert Rectangle.of_size((20, 20)).contains((5, 5))


def test_contains_excludes_right_and_bottom_edges():
    rect = Rectangle.of_size((20, 20))
    assert not rect.contains((20, 0))
    assert not rect.contains((0, 20))
    assert rect.contains((19, 19))


def test_contains_rect_documented_example():
    rect = Rectangle.of_size((20, 20))
    assert not rect.contains_rect(Rectangle((1, 2), (21, 21)))
    assert rect.contains_rect(Rectangle.of_size((5, 5)).at((5, 5)))


def test_at_keeps_dimensions():
    rect = Rectangle.of_size((5, 7)).at((40, 30))
    assert rect.left_top() == (40, 30)
    assert rect.dimensions() == (5, 7)


def test_offset_moves_and_refuses_negative():
    rect = Rectangle.of_size((5, 5)).at((10, 10))
    moved = rect.offset((-3, 4))
    assert moved.left_top() == (rect.left() - 3, rect.top() + 4)
    assert moved.dimensions() == rect.dimensions()
    assert rect.offset((-11, 0)) is None


def test_right_to_swaps_when_crossing():
    rect = Rectangle.of_size((5, 5)).at((40, 40))
    moved = rect.right_to(30)
    assert moved.left() == 30
    assert moved.right() == 40


def test_left_to_swaps_when_crossing():
    rect = Rectangle.of_size((5, 5)).at((40, 40))
    moved = rect.left_to(50)
    assert moved.left() == rect.right()
    assert moved.right() == 50


def test_top_and_bottom_to_swap_when_crossing():
    rect = Rectangle.of_size((5, 5)).at((40, 40))
    assert rect.top_to(50).top_bottom if False else rect.top_to(50).bottom() == 50
    assert rect.top_to(50).top() == rect.bottom()
    assert rect.bottom_to(30).top() == 30
    assert rect.bottom_to(30).bottom() == rect.top()


def test_trim_right_documented_example():
    rect = Rectangle.of_size((5, 5)).at((40, 40)).trim_right(20)
    assert rect.right() == 40
    assert rect.left() == 25


def test_trim_below_zero_is_none():
    rect = Rectangle.of_size((5, 5))
    assert rect.trim_left(-1) is None
    assert rect.trim_top(-1) is None
    assert rect.trim_right(6) is None
    assert rect.trim_bottom(6) is None


def test_trim_x_and_y_shrink_symmetrically():
    rect = Rectangle.of_size((10, 10)).at((5, 5))
    trimmed = rect.trim_x(2)
    assert trimmed.left() == rect.left() + 2
    assert trimmed.right() == rect.right() - 2
    assert trimmed.top_to(trimmed.top()) == trimmed
    trimmed_y = rect.trim_y(2)
    assert trimmed_y.top() == rect.top() + 2
    assert trimmed_y.bottom() == rect.bottom() - 2


def test_extend_undoes_trim():
    rect = Rectangle.of_size((10, 10)).at((5, 5))
    assert rect.trim_x(2).trim_y(2).extend(2) == rect
    assert Rectangle.of_size((3, 3)).extend(1) is None


def test_center_lies_between_edges():
    rect = Rectangle((2, 4), (9, 11))
    assert rect.center() == ((rect.left() + rect.right()) // 2, (rect.top() + rect.bottom()) // 2)
    assert rect.contains(rect.center())


def test_ranges_are_inclusive():
    rect = Rectangle.of_size((20, 20)).at((40, 40))
    assert 57 in rect.range_x()
    assert 57 in rect.range_y()
    assert rect.range_x()[-1] == rect.right()
    assert rect.range_y()[0] == rect.top()


def test_index_into_documented_examples():
    rect = Rectangle.of_size((20, 20))
    assert rect.index_into(10) == (10, 0)
    assert rect.index_into(25) == (5, 1)
    assert rect.index_into(20) == (0, 1)


def test_index_into_out_of_bounds():
    rect = Rectangle.of_size((4, 4))
    assert rect.index_into(rect.area() + 1) is None


def test_ordering_by_area_and_equality_by_vertices():
    small = Rectangle.of_size((2, 2))
    large = Rectangle.of_size((3, 3))
    assert small < large
    assert large > small
    moved = small.at((5, 5))
    assert moved <= small and moved >= small
    assert moved != small
    assert max([large, small]) == large