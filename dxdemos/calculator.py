"""Expression-style calculator: the display holds a raw expression string."""

from __future__ import annotations

import itertools
import math
import re
from dataclasses import dataclass
from decimal import Decimal

_OPERATORS = frozenset("+-*/")
_DIGITS = frozenset("0123456789")

_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.IGNORECASE,
)


def _parse_float(text: str) -> float:
    """Parse a float strictly: no surrounding whitespace, no underscores."""
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def _format_float(value: float) -> str:
    """Render a float in shortest form without exponent; whole numbers drop '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _apply(operator: str, lhs: float, rhs: float) -> float:
    """Apply a binary operator with IEEE semantics for division by zero."""
    if operator == "+":
        return lhs + rhs
    if operator == "-":
        return lhs - rhs
    if operator == "*":
        return lhs * rhs
    if operator == "/":
        try:
            return lhs / rhs
        except ZeroDivisionError:
            if lhs == 0 or math.isnan(lhs):
                return math.nan
            return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    raise ValueError(f"unknown operator: {operator!r}")


def calc_val(val: str) -> float:
    """Evaluate an expression strictly left to right, ignoring precedence.

    A leading '-' belongs to the first operand. Raises ValueError for an
    empty or malformed expression.
    """
    if val[:1] == "-":
        head, rest, start = "-", val[1:], 1
    else:
        head, rest, start = "", val, 0

    first = "".join(itertools.takewhile(lambda c: c not in _OPERATORS, rest))
    start += len(first)
    result = _parse_float(head + first)

    if start + 1 >= len(val):
        return result

    operation = "+"
    pending = ""
    for char in val[start:]:
        if char in _OPERATORS:
            if pending:
                result = _apply(operation, result, _parse_float(pending))
            operation = char
            pending = ""
        else:
            pending += char

    if pending:
        result = _apply(operation, result, _parse_float(pending))
    return result


@dataclass
class ExpressionPad:
    """Calculator state where every key appends to an expression string."""

    value: str = "0"

    def input_digit(self, digit: int | str) -> None:
        if self.value == "0":
            self.value = ""
        self.value += str(digit)

    def input_operator(self, operator: str) -> None:
        self.value += operator

    def backspace(self) -> None:
        self.value = self.value[:-1]

    def clear(self) -> None:
        self.value = ""

    def clear_label(self) -> str:
        return "C" if not self.value else "AC"

    def display(self) -> str:
        return self.value or "0"

    def toggle_sign(self) -> None:
        new_val = calc_val(self.value)
        if new_val > 0.0:
            self.value = f"-{_format_float(new_val)}"
        else:
            self.value = _format_float(abs(new_val))

    def percent(self) -> None:
        self.value = _format_float(calc_val(self.value) / 100.0)

    def evaluate(self) -> None:
        self.value = _format_float(calc_val(self.value))

    def handle_key(self, key: str) -> None:
        """Handle a key name: 'Backspace', an operator or a digit; others are ignored."""
        if key == "Backspace":
            self.backspace()
        elif key in _OPERATORS:
            self.input_operator(key)
        elif key in _DIGITS:
            self.input_digit(key)