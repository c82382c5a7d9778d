"""Axis-aligned rectangles in terminal cell coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

Point = Tuple[int, int]


def _check_point(name: str, point: Point) -> Point:
    x, y = point
    for value in (x, y):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} coordinates must be ints, got {point!r}")
        if value < 0:
            raise ValueError(f"{name} coordinates must not be negative, got {point!r}")
    return (x, y)


@dataclass(frozen=True, init=False)
class Rectangle:
    """A rectangle given by its top-left and bottom-right vertices.

    The y-axis grows downwards, so ``top() <= bottom()``. Equality compares
    the vertices; ordering compares areas.
    """

    _left_top: Point = field(default=(0, 0))
    _right_bottom: Point = field(default=(0, 0))

    def __init__(self, first_point: Point = (0, 0), second_point: Point = (0, 0)) -> None:
        first_x, first_y = _check_point("first_point", first_point)
        second_x, second_y = _check_point("second_point", second_point)
        object.__setattr__(self, "_left_top", (min(first_x, second_x), min(first_y, second_y)))
        object.__setattr__(
            self, "_right_bottom", (max(first_x, second_x), max(first_y, second_y))
        )

    @classmethod
    def of_size(cls, size: Point) -> Rectangle:
        """A rectangle of ``(width, height)`` with its top-left at (0, 0)."""
        return cls((0, 0), size)

    @classmethod
    def from_corners(cls, corners: Tuple[Point, Point]) -> Rectangle:
        """Build a rectangle from a ``(left_top, right_bottom)`` pair."""
        left_top, right_bottom = corners
        return cls(left_top, right_bottom)

    def to_corners(self) -> Tuple[Point, Point]:
        """Return ``(left_top, right_bottom)``."""
        return (self.left_top(), self.right_bottom())

    def _with(self, left: int, top: int, right: int, bottom: int) -> Rectangle:
        return Rectangle((left, top), (right, bottom))

    def left(self) -> int:
        return self._left_top[0]

    def top(self) -> int:
        return self._left_top[1]

    def right(self) -> int:
        return self._right_bottom[0]

    def bottom(self) -> int:
        return self._right_bottom[1]

    def left_top(self) -> Point:
        return (self.left(), self.top())

    def right_bottom(self) -> Point:
        return (self.right(), self.bottom())

    def left_bottom(self) -> Point:
        return (self.left(), self.bottom())

    def right_top(self) -> Point:
        return (self.right(), self.top())

    def width(self) -> int:
        return self.right() - self.left()

    def height(self) -> int:
        return self.bottom() - self.top()

    def dimensions(self) -> Point:
        """Return ``(width, height)``."""
        return (self.width(), self.height())

    def area(self) -> int:
        return self.width() * self.height()

    def edge_to_edge(self) -> float:
        """Distance between the top-left and bottom-right vertices."""
        return math.sqrt(self.width() ** 2 + self.height() ** 2)

    def right_to(self, new_edge: int) -> Rectangle:
        """Move the right edge; if it passes the left edge the two swap."""
        if new_edge >= self.left():
            return self._with(self.left(), self.top(), new_edge, self.bottom())
        return self._with(new_edge, self.top(), self.left(), self.bottom())

    def left_to(self, new_edge: int) -> Rectangle:
        """Move the left edge; if it passes the right edge the two swap."""
        if new_edge <= self.right():
            return self._with(new_edge, self.top(), self.right(), self.bottom())
        return self._with(self.right(), self.top(), new_edge, self.bottom())

    def bottom_to(self, new_edge: int) -> Rectangle:
        """Move the bottom edge; if it passes the top edge the two swap."""
        if new_edge >= self.top():
            return self._with(self.left(), self.top(), self.right(), new_edge)
        return self._with(self.left(), new_edge, self.right(), self.top())

    def top_to(self, new_edge: int) -> Rectangle:
        """Move the top edge; if it passes the bottom edge the two swap."""
        if new_edge <= self.bottom():
            return self._with(self.left(), new_edge, self.right(), self.bottom())
        return self._with(self.left(), self.bottom(), self.right(), new_edge)

    def contains(self, point: Point) -> bool:
        """Whether ``(x, y)`` lies inside; right and bottom edges are exclusive."""
        x, y = point
        return self.left() <= x < self.right() and self.top() <= y < self.bottom()

    def contains_rect(self, rect: Rectangle) -> bool:
        """Whether ``rect`` lies entirely inside this rectangle."""
        right, bottom = rect.right_bottom()
        return self.contains(rect.left_top()) and self.contains((right - 1, bottom - 1))

    def at(self, new_left_top: Point) -> Rectangle:
        """The same-sized rectangle with its top-left moved to ``new_left_top``."""
        left, top = _check_point("new_left_top", new_left_top)
        width, height = self.dimensions()
        return self._with(left, top, left + width, top + height)

    def offset(self, offset: Point) -> Optional[Rectangle]:
        """Shift by ``(dx, dy)``; ``None`` if the top-left would go negative."""
        dx, dy = offset
        left = self.left() + dx
        top = self.top() + dy
        if left < 0 or top < 0:
            return None
        return self.at((left, top))

    def center_x(self) -> int:
        return (self.left() + self.right()) // 2

    def center_y(self) -> int:
        return (self.top() + self.bottom()) // 2

    def center(self) -> Point:
        return (self.center_x(), self.center_y())

    def range_x(self) -> range:
        """The x values from left to right, both inclusive."""
        return range(self.left(), self.right() + 1)

    def range_y(self) -> range:
        """The y values from top to bottom, both inclusive."""
        return range(self.top(), self.bottom() + 1)

    def trim_left(self, distance: int) -> Optional[Rectangle]:
        """Move the left edge inwards by ``distance``; ``None`` below zero."""
        shift = self.left() + distance
        return None if shift < 0 else self.left_to(shift)

    def trim_right(self, distance: int) -> Optional[Rectangle]:
        """Move the right edge inwards by ``distance``; ``None`` below zero."""
        shift = self.right() - distance
        return None if shift < 0 else self.right_to(shift)

    def trim_top(self, distance: int) -> Optional[Rectangle]:
        """Move the top edge inwards by ``distance``; ``None`` below zero."""
        shift = self.top() + distance
        return None if shift < 0 else self.top_to(shift)

    def trim_bottom(self, distance: int) -> Optional[Rectangle]:
        """Move the bottom edge inwards by ``distance``; ``None`` below zero."""
        shift = self.bottom() - distance
        return None if shift < 0 else self.bottom_to(shift)

    def trim_y(self, distance: int) -> Optional[Rectangle]:
        """Trim both the top and the bottom edge."""
        trimmed = self.trim_top(distance)
        return None if trimmed is None else trimmed.trim_bottom(distance)

    def trim_x(self, distance: int) -> Optional[Rectangle]:
        """Trim both the left and the right edge."""
        trimmed = self.trim_left(distance)
        return None if trimmed is None else trimmed.trim_right(distance)

    def extend(self, distance: int) -> Optional[Rectangle]:
        """Grow every edge outwards by ``distance``; ``None`` below zero."""
        extended = self.trim_x(-distance)
        return None if extended is None else extended.trim_y(-distance)

    def index_into(self, index: int) -> Optional[Point]:
        """The ``(x, y)`` of a row-major ``index``, or ``None`` past the end."""
        width, height = self.dimensions()
        if index > width * height:
            return None
        y, x = divmod(index, width)
        return (x, y)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.area() < other.area()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.area() <= other.area()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.area() > other.area()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.area() >= other.area()

    def __repr__(self) -> str:
        return f"Rectangle({self.left_top()!r}, {self.right_bottom()!r})"