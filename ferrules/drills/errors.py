"""Error-handling drills: name tags, token costs and positive integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_EMPTY_NAME = "`name` was empty; it must be nonempty."


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly: optional sign, ASCII digits, in range."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    sign, digits = (text[0], text[1:]) if text[0] in "+-" else ("", text)
    if not digits or any(c not in "0123456789" for c in digits):
        raise ValueError("invalid digit found in string")
    value = -int(digits) if sign == "-" else int(digits)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return name tag text; an empty name raises ValueError."""
    if not name:
        raise ValueError(_EMPTY_NAME)
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens for a typed quantity: 5 per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    return qty * cost_per_item + processing_fee


class CreationKind(enum.Enum):
    """Why a positive integer could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value was not a positive, non-zero integer."""

    def __init__(self, kind: CreationKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True, repr=False)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationKind.ZERO)

    def __repr__(self) -> str:
        return f"PositiveNonzeroInteger({self.value})"


class ParsePosNonzeroError(ValueError):
    """Parsing failed; cause is the parse error or the CreationError."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger."""
    try:
        number = _parse_int(s, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err


def describe_input(text: str = "42") -> str:
    """Parse text and describe the resulting positive integer."""
    return f"output={PositiveNonzeroInteger(_parse_int(text, 64))!r}"