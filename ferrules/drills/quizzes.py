"""Quiz drills: apple pricing, a string transformer and report cards."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return quantity if quantity > 40 else 2 * quantity


class Command(enum.Enum):
    """Commands that take no argument."""

    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" the given number of times."""

    times: int


def transformer(items: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string."""

    def apply(text: str, command: Command | Append) -> str:
        match command:
            case Command.UPPERCASE:
                return text.upper()
            case Command.TRIM:
                return text.strip()
            case Append(times=times):
                return text + "bar" * times
        raise TypeError(f"unknown command: {command!r}")

    return [apply(text, command) for text, command in items]


@dataclass
class ReportCard(Generic[T]):
    """A report card with a grade of any printable type."""

    grade: T
    student_name: str
    student_age: int

    def render(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"