"""Report cards with numeric or alphabetical grades."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def _display(value: object) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class ReportCard(Generic[T]):
    """A student's grade of any printable kind."""

    grade: T
    student_name: str
    student_age: int

    def __post_init__(self) -> None:
        if not 0 <= self.student_age <= 255:
            raise ValueError(f"student_age must be in 0..=255, got {self.student_age}")

    def render(self) -> str:
        """Return the report line for this card."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )