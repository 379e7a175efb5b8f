from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields
from typing import Any

from .key_types import Direction

log = logging.getLogger(__name__)


@dataclass
class NavigatorConfig:
    selected: str = "selected"  # marker applied to the selected element
    selector: str = "item"  # candidate criteria handed to the host query
    left: Any = "left"
    up: Any = "up"
    right: Any = "right"
    down: Any = "down"
    # runtime handle only, never persisted
    scroll_container: Any = field(default=None, compare=False, repr=False)

    def bindings(self) -> dict[Any, Direction]:
        """Return the key binding table, identifier -> direction.

        Raises ``ValueError`` if a binding cannot be used as a lookup key or
        if two directions share a key.
        """
        keys: dict[Any, Direction] = {}
        for direction in Direction:
            key = getattr(self, direction.value)
            if isinstance(key, str):
                key = key.lower()
            try:
                taken = keys.get(key)
            except TypeError:
                raise ValueError(f"binding for {direction.value} is not hashable: {key!r}") from None
            if taken is not None:
                raise ValueError(
                    f"{direction.value} and {taken.value} are both bound to {key!r}"
                )
            keys[key] = direction
        return keys

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data.pop("scroll_container")
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NavigatorConfig":
        """Build a config from saved data, keeping defaults for unusable values."""
        known = {f.name for f in fields(cls)} - {"scroll_container"}
        unknown = sorted(set(data) - known)
        if unknown:
            log.debug("Ignoring unknown config keys: %s", ", ".join(unknown))

        values = {}
        for name, value in data.items():
            if name not in known:
                continue
            if name in Direction.__members__:
                usable = isinstance(value, (str, int)) and not isinstance(value, bool)
            else:
                usable = isinstance(value, str)
            if not usable:
                log.warning("Invalid value for %r in config: %r; using default", name, value)
                continue
            values[name] = value

        config = cls(**values)
        try:
            config.bindings()
        except ValueError as exc:
            log.warning("%s; using default key bindings", exc)
            for direction in Direction:
                setattr(config, direction.value, getattr(cls, direction.value))
        return config


CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".spatial_navigator")
CONFIG_FILE = os.getenv(
    "SPATIAL_NAVIGATOR_CONFIG", os.path.join(CONFIG_DIR, "navigator.json")
)


def load_config(path: str = CONFIG_FILE) -> NavigatorConfig:
    """Return saved navigator settings or defaults if unavailable."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        log.debug("Using default config (%s)", exc)
        return NavigatorConfig()
    if not isinstance(data, dict):
        log.warning("Config file %s does not hold an object; using defaults", path)
        return NavigatorConfig()
    return NavigatorConfig.from_dict(data)


def save_config(config: NavigatorConfig, path: str = CONFIG_FILE) -> None:
    """Persist ``config`` to ``path`` in JSON format."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f)
