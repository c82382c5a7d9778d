"""Ready-made terminals: fixed-size, borrowed, bounded, empty and growable grids."""

from __future__ import annotations

from itertools import chain, islice
from typing import Iterator, List, Optional, Tuple

from tuit.errors import RescaleRefused
from tuit.style import Style
from tuit.terminal import Cell, Rescalable, Terminal

Grid = List[List[Cell]]


def _check_size(name: str, value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _grid(width: int, height: int, character: str) -> Grid:
    return [[Cell(character) for _ in range(width)] for _ in range(height)]


def _lookup(grid: Grid, x: int, y: int) -> Optional[Cell]:
    if x < 0 or y < 0 or y >= len(grid):
        return None
    row = grid[y]
    return row[x] if x < len(row) else None


class ConstantSize(Terminal):
    """A terminal whose size is fixed when it is created.

    Every cell starts out as a space with an empty style.
    """

    _fill = " "

    def __init__(self, width: int, height: int) -> None:
        self._width = _check_size("width", width)
        self._height = _check_size("height", height)
        self.characters: Grid = _grid(self._width, self._height, self._fill)
        self._default_style = Style()

    def dimensions(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def default_style(self) -> Style:
        return self._default_style

    def cells(self) -> Iterator[Cell]:
        return chain.from_iterable(self.characters)

    def cell(self, x: int, y: int) -> Optional[Cell]:
        return _lookup(self.characters, x, y)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._width}, {self._height})"


class ConstantBoxed(ConstantSize):
    """A fixed-size terminal whose cells start out as NUL characters."""

    _fill = "\0"


class ConstantSizeRef(Terminal):
    """A fixed-size terminal over a grid of cells owned by the caller.

    The grid is shared, not copied: changes made through the terminal show
    up in ``characters`` and the other way round.
    """

    def __init__(self, width: int, height: int, characters: Grid) -> None:
        self._width = _check_size("width", width)
        self._height = _check_size("height", height)
        if len(characters) != self._height or any(
            len(row) != self._width for row in characters
        ):
            raise ValueError(
                f"characters must be {self._height} rows of {self._width} cells"
            )
        self.characters = characters
        self._default_style = Style()

    def dimensions(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def default_style(self) -> Style:
        return self._default_style

    def cells(self) -> Iterator[Cell]:
        return chain.from_iterable(self.characters)

    def cell(self, x: int, y: int) -> Optional[Cell]:
        return _lookup(self.characters, x, y)


class MaxSize(Terminal, Rescalable):
    """A rescalable terminal that holds the cells of its largest size up front.

    It starts at its maximum size. Rescaling only succeeds to a size that lies
    strictly inside the current bounding box.
    """

    def __init__(self, max_width: int, max_height: int) -> None:
        self._max_width = _check_size("max_width", max_width)
        self._max_height = _check_size("max_height", max_height)
        self._characters: Grid = _grid(self._max_width, self._max_height, "\0")
        self._default_style = Style()
        self._dimensions = (self._max_width, self._max_height)

    def rescale(self, new_size: Tuple[int, int]) -> None:
        """Shrink to ``new_size``; raise :class:`RescaleRefused` with a size hint otherwise."""
        new_width, new_height = new_size
        if not self.bounding_box().contains((new_width, new_height)):
            raise RescaleRefused(
                min(new_width, self._max_width), min(new_height, self._max_height)
            )
        self._dimensions = (new_width, new_height)

    def dimensions(self) -> Tuple[int, int]:
        return self._dimensions

    def default_style(self) -> Style:
        return self._default_style

    def cells(self) -> Iterator[Cell]:
        width, height = self._dimensions
        return islice(chain.from_iterable(self._characters), width * height)

    def cell(self, x: int, y: int) -> Optional[Cell]:
        width, height = self._dimensions
        if x > width or y > height:
            return None
        return _lookup(self._characters, x, y)


class DummyTerminal(Terminal):
    """A terminal with no cells at all and an empty default style."""

    def dimensions(self) -> Tuple[int, int]:
        return (0, 0)

    def default_style(self) -> Style:
        return Style()

    def cells(self) -> Iterator[Cell]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DummyTerminal)

    def __hash__(self) -> int:
        return hash(DummyTerminal)

    def __repr__(self) -> str:
        return "DummyTerminal()"


class Rescale(Terminal, Rescalable):
    """A terminal that grows and shrinks to any size.

    Cells added by growing start out as NUL characters; cells that stay
    within the new size keep their contents. Single-cell lookups are
    indexed as ``(row, column)``.
    """

    def __init__(self, size: Tuple[int, int] = (0, 0)) -> None:
        width, height = size
        self._width = _check_size("width", width)
        self._rows: Grid = _grid(self._width, _check_size("height", height), "\0")
        self._default_style = Style()

    def dimensions(self) -> Tuple[int, int]:
        return (self._width, len(self._rows))

    def default_style(self) -> Style:
        return self._default_style

    def cells(self) -> Iterator[Cell]:
        return chain.from_iterable(self._rows)

    def cell(self, x: int, y: int) -> Optional[Cell]:
        return _lookup(self._rows, y, x)

    def rescale(self, new_size: Tuple[int, int]) -> None:
        """Change the size to ``new_size``; this never fails."""
        new_width, new_height = new_size
        _check_size("width", new_width)
        _check_size("height", new_height)
        rows = [
            row[:new_width] + [Cell("\0") for _ in range(new_width - len(row))]
            for row in self._rows[:new_height]
        ]
        rows.extend(_grid(new_width, new_height - len(rows), "\0"))
        self._rows = rows
        self._width = new_width

    def __repr__(self) -> str:
        return f"Rescale({self.dimensions()!r})"