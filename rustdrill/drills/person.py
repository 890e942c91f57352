"""Building a person from "name,age" text, leniently or strictly."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1
_USIZE_MAX = (1 << 64) - 1


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse an integer strictly: an optional sign and digits, nothing else."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text) or (low >= 0 and text.startswith("-")):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


@dataclass
class Person:
    """A person; the default is 30 year old John."""

    name: str = "John"
    age: int = 30


class ParsePersonError(ValueError):
    """Text could not be turned into a person."""


class EmptyError(ParsePersonError):
    """The input was empty."""

    def __init__(self) -> None:
        super().__init__("input is empty")


class BadLenError(ParsePersonError):
    """The input did not have exactly two fields."""

    def __init__(self) -> None:
        super().__init__("expected exactly two comma separated fields")


class NoNameError(ParsePersonError):
    """The name field was empty."""

    def __init__(self) -> None:
        super().__init__("name is empty")


class ParseIntError(ParsePersonError):
    """The age field was not a valid non-negative integer."""


def person_from(s: str) -> Person:
    """Parse "name,age", falling back to the default person on any problem."""
    if "," not in s:
        return Person()
    fields = s.split(",")
    name = fields[0]
    if not name:
        return Person()
    try:
        age = _parse_int(fields[1], _I32_MIN, _I32_MAX)
    except ValueError:
        return Person()
    if age == -1:
        return Person()
    # Other negative ages wrap around as an unsigned machine word.
    return Person(name=name, age=age % (_USIZE_MAX + 1))


def parse_person(s: str) -> Person:
    """Parse "name,age" strictly; raise a ParsePersonError on any problem."""
    if not s:
        raise EmptyError()
    fields = s.split(",")
    name = fields[0]
    if not name:
        raise NoNameError()
    if len(fields) < 2:
        raise BadLenError()
    try:
        age = _parse_int(fields[1], 0, _USIZE_MAX)
    except ValueError as err:
        raise ParseIntError(str(err)) from err
    if len(fields) > 2:
        raise BadLenError()
    return Person(name=name, age=age)