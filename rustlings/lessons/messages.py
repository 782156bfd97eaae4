"""A small state machine driven by message values."""

from __future__ import annotations

from dataclasses import dataclass, field


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..=255, got {value}")


@dataclass(frozen=True)
class Point:
    """A position with 8-bit coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_byte("x", self.x)
        _check_byte("y", self.y)


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Echo:
    """Print some text."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_byte("red", self.red)
        _check_byte("green", self.green)
        _check_byte("blue", self.blue)


@dataclass(frozen=True)
class Quit:
    """Ask the state to quit."""


Message = Move | Echo | ChangeColor | Quit


@dataclass
class MessageState:
    """Colour, position and quit flag updated by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case Move(point=point):
                self.position = point
            case ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case Echo(text=text):
                print(text)
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")