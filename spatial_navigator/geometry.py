"""Rectangle helpers and offset-chain arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any


@dataclass(frozen=True, slots=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, other: "Rect") -> bool:
        """Return ``True`` if ``other`` lies fully inside this rectangle."""
        return (
            other.left >= self.left
            and other.top >= self.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )


def _number(value: Any) -> float:
    # bool is a Real subclass but never a valid offset
    if isinstance(value, bool) or not isinstance(value, Real):
        return 0.0
    value = float(value)
    if math.isnan(value):
        return 0.0
    return value


def element_rect(element: Any) -> Rect:
    """Read ``element``'s local offsets into a :class:`Rect`."""
    return Rect(
        _number(getattr(element, "offset_left", 0)),
        _number(getattr(element, "offset_top", 0)),
        _number(getattr(element, "offset_width", 0)),
        _number(getattr(element, "offset_height", 0)),
    )


def _absolute_offset(element: Any, attr: str) -> float:
    total = 0.0
    while element is not None:
        total += _number(getattr(element, attr, 0))
        element = getattr(element, "offset_parent", None)
    return total


def absolute_offset_left(element: Any) -> float:
    """Return the left offset of ``element`` relative to the document root.

    Walks the ``offset_parent`` chain; contributions that are not numbers
    (or are NaN) count as zero.
    """
    return _absolute_offset(element, "offset_left")


def absolute_offset_top(element: Any) -> float:
    """Return the top offset of ``element`` relative to the document root."""
    return _absolute_offset(element, "offset_top")
