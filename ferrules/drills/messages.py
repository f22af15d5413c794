"""Message drills: a state machine driven by message variants."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Point:
    """A position on a small grid."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    """Store a message."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Mark the state as quitting."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """What processed messages have changed."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case Echo(text=text):
                self.message = text
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")