"""State objects, data records and HTTP clients for a collection of small interactive apps."""

__version__ = "0.1.0"

__all__ = [
    "auth",
    "calculator",
    "calculator_mutable",
    "clock",
    "explorer",
    "hackernews",
    "shop",
    "theme",
]