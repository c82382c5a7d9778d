"""Errors raised by terminals, widgets and renderers."""

from __future__ import annotations

from typing import Optional, Protocol, Tuple


class _Sized(Protocol):
    def width(self) -> int: ...

    def height(self) -> int: ...


class TuitError(Exception):
    """Base class of every error raised by the package; also the generic error."""


class IoError(TuitError):
    """A generic I/O error."""

    def __init__(self) -> None:
        super().__init__("Encountered an I/O error.")


class RenderError(TuitError):
    """A renderer failed to render the terminal."""

    def __init__(self) -> None:
        super().__init__("Failed to render terminal screen.")


class OutOfBoundsIndex(TuitError):
    """An index into a terminal's cell buffer was out of bounds."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"Attempted to access a character that was out of bounds at index {index}"
        )


class OutOfBoundsCoordinate(TuitError):
    """An (x, y) coordinate was out of bounds; either part may be unknown."""

    def __init__(self, x: Optional[int] = None, y: Optional[int] = None) -> None:
        self.x = x
        self.y = y
        super().__init__(
            "Attempted to access a character co-ordinate that was out of bounds at: "
            f"(x: {x!r}, y: {y!r})"
        )


class RequestRescale(TuitError):
    """Not enough space; the terminal should be rescaled to the given size."""

    def __init__(self, new_width: int, new_height: int) -> None:
        self.new_width = new_width
        self.new_height = new_height
        super().__init__(
            "There was not enough space in the terminal, so a rescale to a width of "
            f"{new_width} and a height of {new_height}"
        )


class GenericDrawError(TuitError):
    """An error raised by an object while drawing to a terminal."""

    def __init__(self, source: BaseException) -> None:
        self.source = source
        super().__init__(str(source))
        self.__cause__ = source


class GenericUpdateError(TuitError):
    """An error raised by an object while updating."""

    def __init__(self, source: BaseException) -> None:
        self.source = source
        super().__init__(str(source))
        self.__cause__ = source


class TodoError(TuitError):
    """Raised by code paths that are not implemented yet."""

    def __init__(self) -> None:
        super().__init__("This area has not been implemented!")


class RescaleRefused(TuitError):
    """A terminal could not be rescaled; carries the largest size it can take."""

    def __init__(self, hint_width: int, hint_height: int) -> None:
        self.hint_width = hint_width
        self.hint_height = hint_height
        super().__init__(
            f"Rescale refused; the size hint is a width of {hint_width} "
            f"and a height of {hint_height}"
        )

    @property
    def hint(self) -> Tuple[int, int]:
        """The size hint as ``(width, height)``."""
        return (self.hint_width, self.hint_height)


def oob() -> OutOfBoundsCoordinate:
    """An out-of-bounds coordinate error with no coordinates."""
    return OutOfBoundsCoordinate(None, None)


def oob_with(point: Tuple[int, int]) -> OutOfBoundsCoordinate:
    """An out-of-bounds coordinate error for ``(x, y)``."""
    x, y = point
    return OutOfBoundsCoordinate(x, y)


def oobi(index: int) -> OutOfBoundsIndex:
    """An out-of-bounds index error."""
    return OutOfBoundsIndex(index)


def rescale(size: Tuple[int, int]) -> RequestRescale:
    """A rescale request to ``(width, height)``."""
    width, height = size
    return RequestRescale(width, height)


def rescale_to(rectangle: _Sized) -> RequestRescale:
    """A rescale request to the dimensions of ``rectangle``."""
    return RequestRescale(rectangle.width(), rectangle.height())