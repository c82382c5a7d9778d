"""Splitting a terminal in half along either axis."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from tuit.rect import Rectangle
from tuit.style import Style
from tuit.terminal import Cell, Rescalable, Terminal
from tuit.view import View

_DIRECTIONS = ("up", "down", "left", "right")


class ViewSplit(Terminal):
    """Wraps a terminal and hands out views onto its halves.

    The views share cells with the wrapped terminal, so drawing into a
    half draws into the terminal itself.
    """

    def __init__(self, child: Terminal) -> None:
        self._child = child

    def inner(self) -> Terminal:
        """The terminal this splitter was created with."""
        return self._child

    def _view(self, left: int, top: int, right: int, bottom: int) -> View:
        return self._child.view(Rectangle((left, top), (right, bottom)))

    def split_left(self) -> View:
        """The left half of the terminal."""
        box = self._child.bounding_box()
        return self._view(box.left(), box.top(), box.center_x(), box.bottom())

    def split_right(self) -> View:
        """The right half of the terminal."""
        box = self._child.bounding_box()
        return self._view(box.center_x(), box.top(), box.right(), box.bottom())

    def split_top(self) -> View:
        """The top half of the terminal."""
        box = self._child.bounding_box()
        return self._view(box.left(), box.top(), box.right(), box.center_y())

    def split_bottom(self) -> View:
        """The bottom half of the terminal."""
        box = self._child.bounding_box()
        return self._view(box.left(), box.center_y(), box.right(), box.bottom())

    def split(self, direction: str) -> View:
        """The half named by ``direction``: ``"up"``, ``"down"``, ``"left"`` or ``"right"``."""
        if direction == "down":
            return self.split_bottom()
        if direction == "up":
            return self.split_top()
        if direction == "left":
            return self.split_left()
        if direction == "right":
            return self.split_right()
        raise ValueError(
            f"direction must be one of {', '.join(_DIRECTIONS)}; got {direction!r}"
        )

    def dimensions(self) -> Tuple[int, int]:
        return self._child.dimensions()

    def default_style(self) -> Style:
        return self._child.default_style()

    def cells(self) -> Iterator[Cell]:
        return iter(self._child.cells())

    def cell(self, x: int, y: int) -> Optional[Cell]:
        return self._child.cell(x, y)

    def rescale(self, new_size: Tuple[int, int]) -> None:
        """Rescale the wrapped terminal; it must itself be rescalable."""
        if not isinstance(self._child, Rescalable):
            raise TypeError(
                f"{type(self._child).__name__} cannot be rescaled"
            )
        self._child.rescale(new_size)

    def __repr__(self) -> str:
        return f"ViewSplit({self._child!r})"