"""RGB colours built from integer triples with range checking."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class ColorErrorKind(Enum):
    """Why integers could not be turned into a Color."""

    BAD_LEN = "bad_len"
    INT_CONVERSION = "int_conversion"


class IntoColorError(ValueError):
    """Integers could not be turned into a Color."""

    def __init__(self, kind: ColorErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def _channel(value: int) -> int:
    if not 0 <= value <= 255:
        raise IntoColorError(ColorErrorKind.INT_CONVERSION)
    return value


@dataclass(frozen=True)
class Color:
    """A colour with 8-bit red, green and blue channels."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Color:
        """Build a colour from three channels, each in 0..=255."""
        channels = [_channel(value) for value in (red, green, blue)]
        return cls(*channels)

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> Color:
        """Build a colour from a sequence that must hold exactly three values."""
        if len(values) != 3:
            raise IntoColorError(ColorErrorKind.BAD_LEN)
        red, green, blue = values
        return cls.from_rgb(red, green, blue)