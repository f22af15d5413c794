from __future__ import annotations

import pytest

from ferrules.drills.errors import (
    CreationError,
    CreationKind,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    describe_input,
    generate_nametag_text,
    parse_pos_nonzero,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


@pytest.mark.parametrize("text", [" 34", "3_4", "-", "+"])
def test_item_quantity_rejects_loose_formats(text):
    with pytest.raises(ValueError) as info:
        total_cost(text)
    assert str(info.value) == "invalid digit found in string"


def test_item_quantity_empty():
    with pytest.raises(ValueError) as info:
        total_cost("")
    assert str(info.value) == "cannot parse integer from empty string"


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger(-10)
    assert negative.value.kind is CreationKind.NEGATIVE
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger(0)
    assert zero.value.kind is CreationKind.ZERO


def test_creation_error_messages():
    assert str(CreationError(CreationKind.NEGATIVE)) == "number is negative"
    assert str(CreationError(CreationKind.ZERO)) == "number is zero"


def test_describe_input():
    assert describe_input("42") == "output=PositiveNonzeroInteger(42)"
    assert describe_input() == "output=PositiveNonzeroInteger(42)"


def test_describe_input_propagates_errors():
    with pytest.raises(CreationError):
        describe_input("-3")
    with pytest.raises(ValueError):
        describe_input("forty-two")


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert isinstance(info.value.cause, ValueError)
    assert not isinstance(info.value.cause, CreationError)


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert isinstance(info.value.cause, CreationError)
    assert info.value.cause.kind is CreationKind.NEGATIVE


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert info.value.cause.kind is CreationKind.ZERO


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)