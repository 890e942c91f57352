"""Shared behaviour through single dispatch and base classes."""

from __future__ import annotations

from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string or to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Something with licensing information."""

    def licensing_info(self) -> str:
        return "some information"


class SomeSoftware(Licensed):
    pass


class OtherSoftware(Licensed):
    pass


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two items carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    def some_function(self) -> bool:
        return True


class OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    pass


class OtherStruct(SomeTrait, OtherTrait):
    pass


def some_func(item: SomeTrait) -> bool:
    """Require both behaviours of ``item``."""
    return item.some_function() and item.other_function()