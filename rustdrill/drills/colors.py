"""Fallible conversion of integer triples into RGB colours."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels in 0..=255."""

    red: int
    green: int
    blue: int


class IntoColorError(ValueError):
    """Values could not be converted into a colour."""


class BadLenError(IntoColorError):
    """The sequence did not hold exactly three values."""

    def __init__(self) -> None:
        super().__init__("expected exactly three values")


class IntConversionError(IntoColorError):
    """A value lies outside 0..=255."""

    def __init__(self) -> None:
        super().__init__("colour values must lie in 0..=255")


def color_from_tuple(values: tuple[int, int, int]) -> Color:
    """Convert exactly three integers; raise IntConversionError if any is out of range."""
    if len(values) != 3:
        raise TypeError("a colour needs exactly three values")
    if any(not 0 <= value <= 255 for value in values):
        raise IntConversionError()
    red, green, blue = values
    return Color(red, green, blue)


def color_from_slice(values: Sequence[int]) -> Color:
    """Convert a sequence of any length; raise BadLenError unless it holds three."""
    if len(values) != 3:
        raise BadLenError()
    return color_from_tuple(tuple(values))