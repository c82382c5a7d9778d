"""Views onto a rectangular part of another terminal."""

from __future__ import annotations

from itertools import islice
from typing import Iterator, Optional, Tuple

from tuit.errors import oob_with
from tuit.rect import Rectangle
from tuit.style import Style
from tuit.terminal import Cell, Terminal


def _skip(iterator: Iterator[Cell], count: int) -> None:
    next(islice(iterator, count, count), None)


class View(Terminal):
    """A terminal that shows the part of ``parent`` inside ``rect``.

    Coordinates inside the view are relative to the rectangle's top-left;
    cells are shared with the parent, so changes show up in both.
    """

    def __init__(self, parent: Terminal, rect: Rectangle) -> None:
        if not parent.bounding_box().contains_rect(rect):
            raise oob_with(rect.right_bottom())
        self._parent = parent
        self._rect = rect
        self._default_style = parent.default_style()

    @property
    def parent(self) -> Terminal:
        return self._parent

    @property
    def rect(self) -> Rectangle:
        return self._rect

    def dimensions(self) -> Tuple[int, int]:
        return self._rect.dimensions()

    def default_style(self) -> Style:
        return self._default_style

    def cells(self) -> Iterator[Cell]:
        parent_width = self._parent.width()
        width, height = self._rect.dimensions()
        source = iter(self._parent.cells())
        _skip(source, self._rect.top() * parent_width + self._rect.left())
        for row in range(height):
            if row:
                _skip(source, parent_width - width)
            yield from islice(source, width)

    def cell(self, x: int, y: int) -> Optional[Cell]:
        x += self._rect.left()
        y += self._rect.top()
        if self._rect.contains((x, y)):
            return self._parent.cell(x, y)
        return None

    def __repr__(self) -> str:
        return f"View({self._parent!r}, {self._rect!r})"