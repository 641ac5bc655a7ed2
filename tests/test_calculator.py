import math

import pytest

from dxdemos.calculator import ExpressionPad, calc_val


@pytest.mark.parametrize("text", ["42", "0.25", "1000"])
def test_single_number(text):
    assert calc_val(text) == float(text)


def test_leading_negative_number():
    assert calc_val("-7") == -7.0


def test_left_to_right_evaluation():
    assert calc_val("2+3*4") == (2 + 3) * 4


def test_negative_first_operand_with_operation():
    assert calc_val("-2*3") == -2 * 3


def test_trailing_operator_returns_first_operand():
    assert calc_val("5+") == 5.0


def test_division_by_zero_is_infinite():
    assert calc_val("1/0") == math.inf
    assert math.isnan(calc_val("0/0"))


@pytest.mark.parametrize("text", ["", "abc", "1+x"])
def test_malformed_expression_raises(text):
    with pytest.raises(ValueError):
        calc_val(text)


def test_pad_starts_at_zero():
    pad = ExpressionPad()
    assert pad.display() == "0"
    assert pad.clear_label() == "AC"


def test_first_digit_replaces_zero():
    pad = ExpressionPad()
    pad.input_digit(7)
    assert pad.value == "7"


def test_clear_empties_value():
    pad = ExpressionPad("123")
    pad.clear()
    assert pad.value == ""
    assert pad.display() == "0"
    assert pad.clear_label() == "C"


def test_backspace_on_empty_is_harmless():
    pad = ExpressionPad("")
    pad.backspace()
    assert pad.value == ""


def test_backspace_removes_last_char():
    pad = ExpressionPad("12+")
    pad.handle_key("Backspace")
    assert pad.value == "12"


def test_keys_build_expression_and_evaluate():
    pad = ExpressionPad()
    for key in ["1", "2", "+", "3"]:
        pad.handle_key(key)
    assert pad.value == "12+3"
    pad.evaluate()
    assert pad.value == "15"


def test_unknown_key_ignored():
    pad = ExpressionPad("9")
    pad.handle_key("x")
    pad.handle_key("Enter")
    assert pad.value == "9"


def test_toggle_sign_round_trip():
    pad = ExpressionPad("5")
    pad.toggle_sign()
    assert pad.value == "-5"
    pad.toggle_sign()
    assert pad.value == "5"


def test_percent():
    pad = ExpressionPad("50")
    pad.percent()
    assert pad.value == "0.5"


def test_evaluate_drops_fraction_for_whole_numbers():
    pad = ExpressionPad("2.5*2")
    pad.evaluate()
    assert pad.value == "5"