"""Nearest-candidate selection for directional navigation."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .candidates import CandidateSet
from .geometry import element_rect
from .key_types import Direction

log = logging.getLogger(__name__)


class NearestNeighborSelector:
    """Pick the element to move to from the current selection.

    Left and right step through the candidates in sequence order and never
    wrap. Up and down measure the Manhattan distance from an anchor on the
    current selection to every candidate on the far side of it and take the
    closest one; on equal distances the earlier candidate wins.

    The vertical filter only looks at top offsets. Candidates to either side
    are kept and only the distance term prefers those that line up
    horizontally.
    """

    def __init__(self, candidates: CandidateSet) -> None:
        self.candidates = candidates

    def next_element(self, selected: Any, direction: Direction | str) -> Any | None:
        direction = Direction.coerce(direction)
        if direction is Direction.right:
            return self.candidates.next_after(selected)
        elif direction is Direction.left:
            return self.candidates.previous_before(selected)
        elif direction is Direction.down:
            rect = element_rect(selected)
            return self._nearest(self.candidates.elements_after(rect.bottom), rect.left, rect.bottom)
        elif direction is Direction.up:
            rect = element_rect(selected)
            top = rect.top - 1
            return self._nearest(self.candidates.elements_before(top), rect.left, top)
        raise ValueError(f"invalid direction value: {direction!r}")

    @staticmethod
    def _nearest(elements: list[Any], left: float, top: float) -> Any | None:
        if not elements:
            return None
        # geometry is read fresh on every step
        rects = [element_rect(el) for el in elements]
        lefts = np.fromiter((r.left for r in rects), dtype=float, count=len(rects))
        tops = np.fromiter((r.top for r in rects), dtype=float, count=len(rects))

        distance = np.abs(lefts - left) + np.abs(tops - top)
        # argmin returns the first minimum: earlier candidates win ties
        idx = int(np.argmin(distance))
        log.debug("Nearest candidate %r at distance %s", elements[idx], distance[idx])
        return elements[idx]
