"""Small string helpers."""

from __future__ import annotations


def current_favorite_color() -> str:
    """Return the favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colours."""
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Strip leading and trailing whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!" to the text."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def longest(x: str, y: str) -> str:
    """Return the longer string by UTF-8 length; ``y`` on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y