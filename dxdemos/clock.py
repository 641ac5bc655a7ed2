"""Stopwatch display formatting."""


def _div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return -quotient if a < 0 else quotient


def _rem(a: int, b: int) -> int:
    return a - b * _div(a, b)


def format_elapsed(millis: int) -> str:
    """Format milliseconds as MM:SS:mmm, wrapping minutes every hour."""
    minutes = _rem(_div(_div(millis, 1000), 60), 60)
    seconds = _rem(_div(millis, 1000), 60)
    fraction = _rem(millis, 1000)
    return f"{minutes:02}:{seconds:02}:{fraction:03}"