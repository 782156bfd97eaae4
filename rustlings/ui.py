"""Coloured status lines printed to the terminal."""

from __future__ import annotations

import os

_COLORS = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}
_RESET = "\x1b[0m"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def style(text: object, color: str | None = None, bold: bool = False) -> str:
    """Wrap ``text`` in ANSI escape codes for the given colour and weight."""
    codes: list[str] = []
    if color is not None:
        try:
            codes.append(str(_COLORS[color]))
        except KeyError:
            raise ValueError(f"unknown color: {color!r}") from None
    if bold:
        codes.append("1")
    rendered = str(text)
    if not codes:
        return rendered
    return f"\x1b[{';'.join(codes)}m{rendered}{_RESET}"


def warn(message: str) -> None:
    """Print a warning line in red."""
    symbol = "!" if no_emoji() else "⚠️ "
    print(style(symbol, "red"), style(message, "red"))


def success(message: str) -> None:
    """Print a success line in green."""
    symbol = "✓" if no_emoji() else "✅"
    print(style(symbol, "green"), style(message, "green"))