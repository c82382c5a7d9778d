"""The cell type and the abstract interfaces every terminal implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from itertools import islice
from typing import TYPE_CHECKING, Iterator, Optional, Protocol, Tuple

from tuit.rect import Rectangle
from tuit.style import Style

if TYPE_CHECKING:
    from tuit.view import View


class _Renderer(Protocol):
    def render(self, terminal: "Terminal") -> None: ...


@dataclass
class Cell:
    """A single character in the terminal together with its styling."""

    character: str = "\0"
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        if not isinstance(self.character, str) or len(self.character) != 1:
            raise ValueError(
                f"a cell holds exactly one character, got {self.character!r}"
            )


class Terminal(ABC):
    """A grid of cells with dimensions and a default style.

    Subclasses provide :meth:`dimensions`, :meth:`default_style` and
    :meth:`cells`; cells are yielded row by row and may be modified in place.
    """

    @abstractmethod
    def dimensions(self) -> Tuple[int, int]:
        """Return ``(width, height)``."""

    @abstractmethod
    def default_style(self) -> Style:
        """Return the terminal's default style."""

    @abstractmethod
    def cells(self) -> Iterator[Cell]:
        """Yield every cell, row by row."""

    def width(self) -> int:
        return self.dimensions()[0]

    def height(self) -> int:
        return self.dimensions()[1]

    def bounding_box(self) -> Rectangle:
        """A rectangle of the terminal's size with its top-left at (0, 0)."""
        return Rectangle.of_size((self.width(), self.height()))

    def cell(self, x: int, y: int) -> Optional[Cell]:
        """The cell at ``(x, y)``, or ``None`` if it lies outside the terminal."""
        width, height = self.dimensions()
        if not (0 <= x < width and 0 <= y < height):
            return None
        return next(islice(self.cells(), x + width * y, None), None)

    def view(self, rect: Rectangle) -> "View":
        """A view onto the part of the terminal covered by ``rect``.

        Raises :class:`tuit.errors.OutOfBoundsCoordinate` if ``rect`` does
        not fit inside the terminal.
        """
        from tuit.view import View

        return View(self, rect)

    def display(self, renderer: _Renderer) -> None:
        """Hand the terminal to ``renderer``; its errors propagate."""
        renderer.render(self)


class Rescalable(ABC):
    """A terminal whose size can change."""

    @abstractmethod
    def rescale(self, new_size: Tuple[int, int]) -> None:
        """Change the size to ``(width, height)``.

        Raises :class:`tuit.errors.RescaleRefused` carrying a size hint when
        the new size cannot be taken. Redraw after rescaling: the contents
        are not guaranteed to be meaningful afterwards.
        """