"""Trait drills: appending "Bar" and shared licensing information."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value: object) -> object:
    """Append "Bar" to a string, or add "Bar" as a new item to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software versioned by a number."""

    version_number: int = 1


@dataclass
class OtherSoftware(Licensed):
    """Software versioned by a string."""

    version_number: str = "v2.0.0"


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two licensed items share the same licensing information."""
    for item in (software, software_two):
        if not isinstance(item, Licensed):
            raise TypeError(f"{type(item).__name__} is not Licensed")
    return software.licensing_info() == software_two.licensing_info()