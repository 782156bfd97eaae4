"""Shared behaviour through base classes with default methods."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Return ``value`` with "Bar" appended."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return f"{value}Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Something that carries licensing information."""

    def licensing_info(self) -> str:
        """Return the licensing information."""
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both pieces of software carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    """Provides ``some_function``."""

    def some_function(self) -> bool:
        return True


class OtherTrait:
    """Provides ``other_function``."""

    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    """Has both behaviours."""


class OtherStruct(SomeTrait, OtherTrait):
    """Has both behaviours."""


def some_func(item: SomeTrait) -> bool:
    """Call both functions of an item that provides both behaviours."""
    if not (isinstance(item, SomeTrait) and isinstance(item, OtherTrait)):
        raise TypeError(f"{type(item).__name__} must provide SomeTrait and OtherTrait")
    return item.some_function() and item.other_function()