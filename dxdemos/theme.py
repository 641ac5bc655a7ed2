"""Theme values shared through a hierarchy of context scopes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"

    def stylesheet(self) -> str:
        """CSS class name for this theme."""
        if self is Theme.LIGHT:
            return "light-theme"
        return "dark-theme"


@dataclass
class ContextScope:
    """A scope holding one value per type, falling back to its parent."""

    parent: ContextScope | None = None
    _values: dict[type, Any] = field(default_factory=dict, init=False, repr=False)

    def provide(self, value: Any) -> Any:
        """Store a value in this scope, replacing any of the same type."""
        self._values[type(value)] = value
        return value

    def consume(self, kind: type) -> Any | None:
        """Find the nearest value of exactly this type, or None."""
        scope: ContextScope | None = self
        while scope is not None:
            if kind in scope._values:
                return scope._values[kind]
            scope = scope.parent
        return None


def use_theme_context(scope: ContextScope) -> Theme:
    """Return the provided theme; raise LookupError if none is in reach."""
    theme = scope.consume(Theme)
    if theme is None:
        raise LookupError("Theme context not found. Ensure <App> is the root component.")
    return theme