"""Transforming strings with a list of commands."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Uppercase:
    """Convert the string to upper case."""


@dataclass(frozen=True)
class Trim:
    """Strip leading and trailing whitespace."""


@dataclass(frozen=True)
class Append:
    """Append "bar" ``count`` times."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must not be negative, got {self.count}")


Command = Uppercase | Trim | Append


def _apply(text: str, command: Command) -> str:
    match command:
        case Append(count=count):
            return text + "bar" * count
        case Trim():
            return text.strip()
        case Uppercase():
            return text.upper()
        case _:
            raise TypeError(f"unknown command: {command!r}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string, in order."""
    return [_apply(text, command) for text, command in items]