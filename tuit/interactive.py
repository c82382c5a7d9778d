"""Input events sent to widgets and the results widgets report back."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum, IntEnum
from typing import Union

from tuit.rect import Rectangle


class MouseButton(Enum):
    """The primary and secondary mouse buttons."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class AuxiliaryButton:
    """Any additional mouse button, identified by number."""

    number: int


Button = Union[MouseButton, AuxiliaryButton]


class KeyState(IntEnum):
    """The state a keyboard key is in."""

    KEY_UP = 0
    KEY_DOWN = 1
    KEY_HELD = 2


@dataclass(frozen=True)
class NoInfo:
    """Nothing to report."""


@dataclass(frozen=True)
class CellClicked:
    """A cell at ``(x, y)`` was clicked with ``button``."""

    x: int
    y: int
    button: Button

    def mouse_relative_to(self, rect: Rectangle) -> Union[CellClicked, NoInfo]:
        """The click relative to ``rect``'s top-left, or ``NoInfo`` if it lies above or left of it."""
        x = self.x - rect.left()
        y = self.y - rect.top()
        if x < 0 or y < 0:
            return NoInfo()
        return CellClicked(x, y, self.button)


@dataclass(frozen=True)
class KeyboardCharacter:
    """A printable key was pressed, held or released."""

    character: str
    state: KeyState


@dataclass(frozen=True)
class KeyboardInput:
    """A non-printable key, given by its USB HID code, changed state."""

    code: int
    state: KeyState


@dataclass(frozen=True)
class TimeDelta:
    """Time passed since the last update."""

    elapsed: timedelta


@dataclass(frozen=True)
class TerminalResized:
    """The terminal was resized."""


UpdateInfo = Union[CellClicked, KeyboardCharacter, KeyboardInput, TimeDelta, TerminalResized, NoInfo]


class UpdateResult(IntEnum):
    """A widget's status after an update; larger values take priority."""

    NO_EVENT = 0
    INTERACTED = 1
    LIFECYCLE_END = 2


def mouse_relative_to(info: UpdateInfo, rect: Rectangle) -> UpdateInfo:
    """Make a click relative to ``rect``; other events pass through unchanged."""
    if isinstance(info, CellClicked):
        return info.mouse_relative_to(rect)
    return info