"""A recursive cons list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    rest: ConsList


ConsList = Union[Cons, Nil]


def create_empty_list() -> ConsList:
    return Nil()


def create_non_empty_list() -> ConsList:
    return Cons(1, Nil())