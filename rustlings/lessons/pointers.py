"""A cons list and a clone-on-write sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

_I32_MIN = -(2**31)


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    next: Cons | Nil


def create_empty_list() -> Nil:
    """Return an empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """Return a cons list holding a single value."""
    return Cons(1, Nil())


class Cow:
    """A sequence that is borrowed until it must be changed, then copied."""

    def __init__(self, data: Sequence[int], owned: bool) -> None:
        self._data = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        """Wrap ``data`` without copying it."""
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: Sequence[int]) -> Cow:
        """Take ``data`` as owned storage."""
        return cls(list(data), owned=True)

    @property
    def is_owned(self) -> bool:
        return self._owned

    @property
    def data(self) -> Sequence[int]:
        return self._data

    def to_mut(self) -> list[int]:
        """Return mutable storage, copying borrowed data first."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying only when a change is needed."""
    for index, value in enumerate(tuple(cow.data)):
        if value < 0:
            if value == _I32_MIN:
                raise OverflowError("attempt to negate with overflow")
            cow.to_mut()[index] = -value
    return cow