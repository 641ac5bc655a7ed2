import pytest

from dxdemos.calculator_mutable import Calculator, Operator, separated_string


def test_separated_string_groups_thousands():
    assert separated_string(1234567.0) == "1,234,567"


def test_separated_string_keeps_sign_and_fraction():
    assert separated_string(-1234.5) == "-1,234.5"


def test_separated_string_small_number_unchanged():
    assert separated_string(999) == "999"


def test_new_calculator_shows_zero():
    calc = Calculator()
    assert calc.display_value == "0"
    assert calc.formatted_display() == "0"
    assert calc.operator is None


def test_digits_append():
    calc = Calculator()
    calc.input_digit(1)
    calc.input_digit(2)
    assert calc.display_value == "12"


def test_only_one_dot():
    calc = Calculator(display_value="12")
    calc.input_dot()
    calc.input_dot()
    assert calc.display_value.count(".") == 1
    assert calc.display_value.startswith("12")


def test_operation_flow():
    calc = Calculator(display_value="12")
    calc.set_operator(Operator.ADD)
    assert calc.waiting_for_operand is True
    assert calc.cur_val == 12.0
    calc.input_digit(3)
    assert calc.display_value == "3"
    calc.perform_operation()
    assert calc.cur_val == 12 + 3
    assert float(calc.display_value) == calc.cur_val
    assert calc.operator is None


def test_perform_without_operator_is_noop():
    calc = Calculator(display_value="8")
    calc.perform_operation()
    assert calc.display_value == "8"
    assert calc.cur_val == 0.0


def test_division_by_zero_yields_inf():
    calc = Calculator(display_value="4")
    calc.set_operator(Operator.DIV)
    calc.input_digit(0)
    calc.perform_operation()
    assert calc.display_value == "inf"


def test_toggle_sign_round_trip():
    calc = Calculator(display_value="42")
    calc.toggle_sign()
    assert calc.display_value == "-42"
    calc.toggle_sign()
    assert calc.display_value == "42"


def test_toggle_percent():
    calc = Calculator(display_value="50")
    calc.toggle_percent()
    assert float(calc.display_value) == 50 / 100


def test_backspace_keeps_single_zero():
    calc = Calculator()
    calc.backspace()
    assert calc.display_value == "0"


def test_backspace_via_key():
    calc = Calculator(display_value="123")
    calc.handle_key("Backspace")
    assert calc.display_value == "12"


def test_operator_key_only_selects_operator():
    calc = Calculator(display_value="7")
    calc.handle_key("+")
    assert calc.operator is Operator.ADD
    assert calc.waiting_for_operand is False
    assert calc.display_value == "7"


@pytest.mark.parametrize("key", ["a", "Enter", "="])
def test_unknown_keys_ignored(key):
    calc = Calculator(display_value="5")
    calc.handle_key(key)
    assert calc.display_value == "5"
    assert calc.operator is None


def test_clear_display():
    calc = Calculator(display_value="987")
    calc.clear_display()
    assert calc.display_value == "0"


def test_formatted_display_invalid_raises():
    calc = Calculator(display_value="")
    with pytest.raises(ValueError):
        calc.formatted_display()