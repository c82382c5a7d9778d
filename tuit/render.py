"""Renderers that turn a terminal's cells into output, and a debugging terminal."""

from __future__ import annotations

import sys
import unicodedata
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Protocol, TextIO, Tuple

from tuit.errors import IoError, TuitError
from tuit.style import (
    Ansi4,
    Ansi16,
    Ansi256,
    Colour,
    Luma8,
    Rgb24,
    Style,
    TerminalDefault,
)
from tuit.terminal import Cell, Terminal


class _Writer(Protocol):
    def write(self, text: str) -> object: ...


class Renderer(ABC):
    """Something that can show a terminal's cells."""

    @abstractmethod
    def render(self, terminal: Terminal) -> None:
        """Render ``terminal``; raise :class:`tuit.errors.TuitError` on failure."""


class DummyTarget(Renderer):
    """A renderer that does nothing at all."""

    def render(self, terminal: Terminal) -> None:
        return None


_ANSI16_FOREGROUND = {
    Ansi4.BLACK: 30,
    Ansi4.RED: 31,
    Ansi4.GREEN: 32,
    Ansi4.YELLOW: 33,
    Ansi4.BLUE: 34,
    Ansi4.MAGENTA: 35,
    Ansi4.CYAN: 36,
    Ansi4.WHITE: 37,
    Ansi4.BRIGHT_BLACK: 90,
    Ansi4.BRIGHT_RED: 91,
    Ansi4.BRIGHT_GREEN: 92,
    Ansi4.BRIGHT_YELLOW: 93,
    Ansi4.BRIGHT_BLUE: 94,
    # Bright magenta is rendered as plain magenta.
    Ansi4.BRIGHT_MAGENTA: 35,
    Ansi4.BRIGHT_CYAN: 96,
    Ansi4.BRIGHT_WHITE: 97,
}

_DEFAULT_FOREGROUND = 39
_BOLD = "1"
_UNDERLINE = "4"
_RESET = "\x1b[0m"


def _sgr(colour: Colour, background: bool) -> str:
    extended = 48 if background else 38
    offset = 10 if background else 0
    if isinstance(colour, Rgb24):
        return f"{extended};2;{colour.r};{colour.g};{colour.b}"
    if isinstance(colour, Luma8):
        level = colour.luminosity
        return f"{extended};2;{level};{level};{level}"
    if isinstance(colour, Ansi16):
        return str(_ANSI16_FOREGROUND[colour.colour] + offset)
    if isinstance(colour, Ansi256):
        return f"{extended};5;{colour.index}"
    if isinstance(colour, TerminalDefault):
        return str(_DEFAULT_FOREGROUND + offset)
    raise TypeError(f"not a colour: {colour!r}")


def ansi_foreground(colour: Colour) -> str:
    """The SGR parameters that set ``colour`` as the foreground."""
    return _sgr(colour, background=False)


def ansi_background(colour: Colour) -> str:
    """The SGR parameters that set ``colour`` as the background."""
    return _sgr(colour, background=True)


def style_codes(style: Style) -> List[str]:
    """The SGR parameters for ``style``: foreground, background, then effects.

    Inversion swaps the colours; unset colours use the terminal default.
    """
    foreground, background = style.fg_colour, style.bg_colour
    if style.invert is True:
        foreground, background = background, foreground

    codes = [
        ansi_foreground(foreground if foreground is not None else TerminalDefault()),
        ansi_background(background if background is not None else TerminalDefault()),
    ]
    if style.font_weight is not None and style.font_weight >= 700:
        codes.append(_BOLD)
    if style.underline is True:
        codes.append(_UNDERLINE)
    return codes


def format_cell(cell: Cell) -> str:
    """The cell's character wrapped in ANSI escape codes for its style."""
    return f"\x1b[{';'.join(style_codes(cell.style))}m{cell.character}{_RESET}"


def _printable(character: str) -> str:
    if character.isspace() or unicodedata.category(character) == "Cc":
        return " "
    return character


class AnsiRenderer(Renderer):
    """Writes the terminal as ANSI-styled text to a text stream.

    Every row starts with a newline; whitespace and control characters are
    written as spaces so that they cannot break the alignment.
    """

    def __init__(self, writer: _Writer) -> None:
        self.writer = writer

    def _write(self, text: str) -> None:
        try:
            self.writer.write(text)
        except OSError as error:
            raise TuitError(str(error)) from error

    def render(self, terminal: Terminal) -> None:
        width = terminal.width()
        for index, cell in enumerate(terminal.cells()):
            if index % width == 0:
                self._write("\n")
            shown = Cell(_printable(cell.character), cell.style)
            self._write(format_cell(shown))


class StdoutRenderer(AnsiRenderer):
    """An :class:`AnsiRenderer` for standard output that flushes after each render."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        super().__init__(stream if stream is not None else sys.stdout)

    def render(self, terminal: Terminal) -> None:
        super().render(terminal)
        try:
            self.writer.flush()
        except OSError as error:
            raise IoError() from error


class DebugTerminal(Terminal):
    """Wraps a terminal to make its drawing visible.

    Every single-cell access renders the wrapped terminal first, and every
    cell handed out through :meth:`cells_mut` gets a red background.
    """

    def __init__(self, terminal: Terminal, display: Renderer) -> None:
        self.terminal = terminal
        self.display = display

    @classmethod
    def stdout(cls, terminal: Terminal) -> DebugTerminal:
        """A debug wrapper that renders to standard output."""
        return cls(terminal, StdoutRenderer())

    def dimensions(self) -> Tuple[int, int]:
        return self.terminal.dimensions()

    def default_style(self) -> Style:
        return self.terminal.default_style()

    def cells(self) -> Iterator[Cell]:
        return iter(self.terminal.cells())

    def cells_mut(self) -> Iterator[Cell]:
        """Yield every cell, marking each with a red background first."""
        for cell in self.terminal.cells():
            cell.style = cell.style.bg(Ansi16(Ansi4.RED))
            yield cell

    def cell(self, x: int, y: int) -> Optional[Cell]:
        return self.terminal.cell(x, y)

    def cell_mut(self, x: int, y: int) -> Optional[Cell]:
        """Render the wrapped terminal, ignoring failures, then return the cell."""
        try:
            self.display.render(self.terminal)
        except (TuitError, OSError):
            pass
        return self.terminal.cell(x, y)