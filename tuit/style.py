"""Styling types: ANSI colours, colour variants and cell styles."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional, Union


def _check_range(name: str, value: int, upper: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be within 0..={upper}, got {value}")


class Ansi4(IntEnum):
    """A 4-bit ANSI terminal colour.

    Two of them combine with ``|`` into an 8-bit foreground/background byte.
    """

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15

    def __or__(self, other: object) -> int:
        """Pack ``self`` into the high nibble and ``other`` into the low nibble."""
        if not isinstance(other, Ansi4):
            return NotImplemented
        return (int(self) << 4) | int(other)


@dataclass(frozen=True)
class Rgb24:
    """A 24-bit true colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_range(name, getattr(self, name), 255)


@dataclass(frozen=True)
class Luma8:
    """An 8-bit grayscale colour."""

    luminosity: int

    def __post_init__(self) -> None:
        _check_range("luminosity", self.luminosity, 255)


@dataclass(frozen=True)
class Ansi16:
    """One of the 16 ANSI terminal colours."""

    colour: Ansi4

    def __post_init__(self) -> None:
        _check_range("colour", int(self.colour), 15)
        object.__setattr__(self, "colour", Ansi4(self.colour))


@dataclass(frozen=True)
class Ansi256:
    """One of the 256 ANSI terminal colours."""

    index: int

    def __post_init__(self) -> None:
        _check_range("index", self.index, 255)


@dataclass(frozen=True)
class TerminalDefault:
    """The terminal's own default colour."""


Colour = Union[Rgb24, Luma8, Ansi16, Ansi256, TerminalDefault]


@dataclass(frozen=True)
class Style:
    """A cell's styling data; ``None`` fields are unset and inherit from elsewhere."""

    fg_colour: Optional[Colour] = None
    bg_colour: Optional[Colour] = None
    font_weight: Optional[int] = None
    underline: Optional[bool] = None
    invert: Optional[bool] = None

    def __post_init__(self) -> None:
        if self.font_weight is not None:
            _check_range("font_weight", self.font_weight, 0xFFFF)

    def fg(self, fg_colour: Colour) -> Style:
        """Return a copy with the foreground colour set."""
        return replace(self, fg_colour=fg_colour)

    def bg(self, bg_colour: Colour) -> Style:
        """Return a copy with the background colour set."""
        return replace(self, bg_colour=bg_colour)

    def fg_ansi4(self, fg_colour: Ansi4) -> Style:
        return self.fg(Ansi16(fg_colour))

    def bg_ansi4(self, bg_colour: Ansi4) -> Style:
        return self.bg(Ansi16(bg_colour))

    def fg_ansi8(self, fg_colour: int) -> Style:
        return self.fg(Ansi256(fg_colour))

    def bg_ansi8(self, bg_colour: int) -> Style:
        return self.bg(Ansi256(bg_colour))

    def fg_luma8(self, fg_luminosity: int) -> Style:
        return self.fg(Luma8(fg_luminosity))

    def bg_luma8(self, bg_luminosity: int) -> Style:
        return self.bg(Luma8(bg_luminosity))

    def fg_rgb24(self, r: int, g: int, b: int) -> Style:
        return self.fg(Rgb24(r, g, b))

    def bg_rgb24(self, r: int, g: int, b: int) -> Style:
        return self.bg(Rgb24(r, g, b))

    def fg_default(self) -> Style:
        return self.fg(TerminalDefault())

    def bg_default(self) -> Style:
        return self.bg(TerminalDefault())

    def with_underline(self, underline: bool) -> Style:
        """Return a copy with underlining set to ``underline``."""
        return replace(self, underline=underline)

    def underlined(self) -> Style:
        return self.with_underline(True)

    def not_underlined(self) -> Style:
        return self.with_underline(False)

    def with_font_weight(self, weight: int) -> Style:
        """Return a copy with the font weight set."""
        return replace(self, font_weight=weight)

    def inversion(self, inversion: bool) -> Style:
        """Return a copy with foreground/background inversion set."""
        return replace(self, invert=inversion)

    def inverted(self) -> Style:
        return self.inversion(True)

    def not_inverted(self) -> Style:
        return self.inversion(False)

    def inherits(self, fallback: Style) -> Style:
        """Fill every unset field from ``fallback``."""

        def pick(own, other):
            return other if own is None else own

        return Style(
            fg_colour=pick(self.fg_colour, fallback.fg_colour),
            bg_colour=pick(self.bg_colour, fallback.bg_colour),
            font_weight=pick(self.font_weight, fallback.font_weight),
            underline=pick(self.underline, fallback.underline),
            invert=pick(self.invert, fallback.invert),
        )