"""Quizzes combining earlier topics."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def calculate_price_of_apples(n: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    return n * 2 if n <= 40 else n


class _Kind(enum.Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformation applied to a string."""

    kind: _Kind
    count: int = 0

    @classmethod
    def uppercase(cls) -> Command:
        return cls(_Kind.UPPERCASE)

    @classmethod
    def trim(cls) -> Command:
        return cls(_Kind.TRIM)

    @classmethod
    def append(cls, count: int) -> Command:
        if count < 0:
            raise ValueError("append count must not be negative")
        return cls(_Kind.APPEND, count)

    def apply(self, text: str) -> str:
        match self.kind:
            case _Kind.UPPERCASE:
                return text.upper()
            case _Kind.TRIM:
                return text.strip()
            case _Kind.APPEND:
                return text + "bar" * self.count


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [command.apply(text) for text, command in items]


@dataclass
class ReportCard(Generic[T]):
    """A student's report card with a grade of any printable kind."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )