"""Map raw key events to navigation directions."""

from __future__ import annotations

from typing import Any

from .config import NavigatorConfig
from .key_types import Direction


def key_identifier(event: Any) -> Any:
    """Return the lookup identifier for a host key event.

    tkinter events carry a ``keysym``; pynput hands over ``Key`` members
    (with a ``name``) or ``KeyCode`` objects (with a ``char``). Strings are
    lowercased and anything else, such as integer key codes, is returned
    unchanged.
    """
    keysym = getattr(event, "keysym", None)
    if isinstance(keysym, str):
        return keysym.lower()
    name = getattr(event, "name", None)
    if isinstance(name, str):
        return name.lower()
    char = getattr(event, "char", None)
    if isinstance(char, str) and char:
        return char.lower()
    if isinstance(event, str):
        return event.lower()
    return event


class DirectionResolver:
    """Pure lookup from key identifiers to :class:`Direction`."""

    def __init__(self, config: NavigatorConfig | None = None) -> None:
        self.keys = (config or NavigatorConfig()).bindings()

    def resolve(self, identifier: Any) -> Direction | None:
        if isinstance(identifier, str):
            identifier = identifier.lower()
        try:
            return self.keys.get(identifier)
        except TypeError:  # unhashable identifiers are never bound
            return None

    def resolve_event(self, event: Any) -> Direction | None:
        return self.resolve(key_identifier(event))
