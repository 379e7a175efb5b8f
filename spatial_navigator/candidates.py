from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Iterator

from .geometry import element_rect
from .interfaces import CandidateQuery

log = logging.getLogger(__name__)


class CandidateSet(Sequence):
    """Navigable elements in document order as of the last :meth:`scan`.

    The set is a snapshot. Hosts that change their content must call
    :meth:`scan` again; until then the old elements are used.
    """

    def __init__(self, query: CandidateQuery) -> None:
        self.query = query
        self._elements: tuple[Any, ...] = ()

    def scan(self, container: Any, selector: Any) -> tuple[Any, ...]:
        self._elements = tuple(self.query.query_selector_all(container, selector))
        log.debug("Scanned %d candidates for %r", len(self._elements), selector)
        return self._elements

    def clear(self) -> None:
        self._elements = ()

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def index_of(self, element: Any) -> int | None:
        """Return the position of ``element`` (compared by identity)."""
        for idx, candidate in enumerate(self._elements):
            if candidate is element:
                return idx
        return None

    def next_after(self, element: Any) -> Any | None:
        idx = self.index_of(element)
        if idx is None or idx + 1 >= len(self._elements):
            return None
        return self._elements[idx + 1]

    def previous_before(self, element: Any) -> Any | None:
        idx = self.index_of(element)
        if idx is None or idx == 0:
            return None
        return self._elements[idx - 1]

    def elements_after(self, top: float) -> list[Any]:
        """Candidates whose top offset is at or below ``top``."""
        return [el for el in self._elements if element_rect(el).top >= top]

    def elements_before(self, top: float) -> list[Any]:
        """Candidates whose top offset is at or above ``top``."""
        return [el for el in self._elements if element_rect(el).top <= top]
