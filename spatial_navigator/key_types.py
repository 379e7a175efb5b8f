from enum import Enum, auto


# Authoritative list of navigation directions. Every dispatch on a direction
# must handle all four members.
class Direction(str, Enum):
    def _generate_next_value_(name, *_):
        return name

    left = auto()
    up = auto()
    right = auto()
    down = auto()

    @classmethod
    def coerce(cls, value) -> "Direction":
        """Return ``value`` as a :class:`Direction` or raise ``ValueError``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in cls.__members__:
            return cls[value]
        raise ValueError(f"invalid direction value: {value!r}")
