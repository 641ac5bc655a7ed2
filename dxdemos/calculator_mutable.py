"""Calculator whose whole state lives in a single object."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .calculator import _apply, _format_float, _parse_float


def separated_string(value: float) -> str:
    """Format a number with commas between thousands of its integer part."""
    text = _format_float(float(value))
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    integer, dot, fraction = text.partition(".")
    if integer.isdigit():
        integer = f"{int(integer):,}"
    return f"{sign}{integer}{dot}{fraction}"


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


_KEY_OPERATORS = {op.value: op for op in Operator}


@dataclass
class Calculator:
    """A pocket-calculator state machine."""

    display_value: str = "0"
    operator: Operator | None = None
    waiting_for_operand: bool = False
    cur_val: float = 0.0

    def formatted_display(self) -> str:
        return separated_string(_parse_float(self.display_value))

    def clear_display(self) -> None:
        self.display_value = "0"

    def input_digit(self, digit: int) -> None:
        content = str(digit)
        if self.waiting_for_operand or self.display_value == "0":
            self.waiting_for_operand = False
            self.display_value = content
        else:
            self.display_value += content

    def input_dot(self) -> None:
        if "." not in self.display_value:
            self.display_value += "."

    def perform_operation(self) -> None:
        if self.operator is None:
            return
        rhs = _parse_float(self.display_value)
        new_val = _apply(self.operator.value, self.cur_val, rhs)
        self.cur_val = new_val
        self.display_value = _format_float(new_val)
        self.operator = None

    def toggle_sign(self) -> None:
        if self.display_value.startswith("-"):
            self.display_value = self.display_value.lstrip("-")
        else:
            self.display_value = f"-{self.display_value}"

    def toggle_percent(self) -> None:
        self.display_value = _format_float(_parse_float(self.display_value) / 100.0)

    def backspace(self) -> None:
        if self.display_value != "0":
            self.display_value = self.display_value[:-1]

    def set_operator(self, operator: Operator) -> None:
        self.operator = operator
        self.cur_val = _parse_float(self.display_value)
        self.waiting_for_operand = True

    def handle_key(self, key: str) -> None:
        """Handle a key name; operator keys only select the pending operator."""
        if key == "Backspace":
            self.backspace()
        elif len(key) == 1 and key.isdigit():
            self.input_digit(int(key))
        elif key in _KEY_OPERATORS:
            self.operator = _KEY_OPERATORS[key]