"""Branching drills: comparisons, string matching, pricing and optional values."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at a given hour, or None for an invalid hour."""
    if time_of_day > 23:
        return None
    return 5 if time_of_day < 22 else 0