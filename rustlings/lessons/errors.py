"""Error handling around name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_SIGNED = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, with strict messages."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 2 ** (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens for a typed quantity: five per item plus a fee of one."""
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * cost_per_item + processing_fee
    if not -(2**31) <= cost < 2**31:
        raise OverflowError("attempt to compute the cost overflowed")
    return cost


def purchase(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationErrorKind(Enum):
    """Why a value is not a positive nonzero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value is not a positive nonzero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a positive nonzero integer.

    ``cause`` is either a CreationError or the ValueError from parsing.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError."""
    try:
        number = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc