"""Selection state machine tying key input, candidate search and scrolling together."""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Any

from .candidates import CandidateSet
from .config import NavigatorConfig
from .interfaces import Document, VisualEffects
from .key_types import Direction
from .resolver import DirectionResolver
from .scroller import ViewportScroller
from .selector import NearestNeighborSelector

log = logging.getLogger(__name__)


class NavigatorState(str, Enum):
    def _generate_next_value_(name, *_):
        return name

    disabled = auto()
    enabled_no_selection = auto()
    enabled_selected = auto()


class Navigator:
    """Move a single selection over the items of ``container`` with the arrow keys.

    Parameters
    ----------
    container:
        Element whose descendants are navigated.
    document:
        Host providing key events, candidate queries and the window viewport.
    effects:
        Applies and removes the selection marker and moves input focus.
    config:
        Marker name, selector, key bindings and an optional scroll container
        (defaults to ``container``).
    """

    def __init__(
        self,
        container: Any,
        document: Document,
        effects: VisualEffects,
        config: NavigatorConfig | None = None,
    ) -> None:
        self.config = config or NavigatorConfig()
        self.container = container
        self.document = document
        self.effects = effects
        self.scroll_container = self.config.scroll_container
        if self.scroll_container is None:
            self.scroll_container = container

        self.resolver = DirectionResolver(self.config)
        self.candidates = CandidateSet(document)
        self.selector = NearestNeighborSelector(self.candidates)
        self.scroller = ViewportScroller(self.scroll_container, document)

        self.enabled = False
        self._selected: Any = None
        self._key_handler = None
        self._destroyed = False

    # ───────── lifecycle ──────────────────────────────────────────────────
    def enable(self) -> None:
        if self._destroyed:
            raise RuntimeError("Navigator has been destroyed")
        if self.enabled:
            return
        log.info("enable")
        self.rescan()
        self._key_handler = self.handle_key
        self.document.add_key_listener(self._key_handler)
        self.enabled = True

    def disable(self) -> None:
        if not self.enabled:
            return
        log.info("disable")
        if self._key_handler is not None:
            self.document.remove_key_listener(self._key_handler)
            self._key_handler = None
        self.unselect()
        self.enabled = False

    def destroy(self) -> None:
        """Disable the navigator and release the container."""
        self.disable()
        if self._destroyed:
            return
        log.info("destroy")
        self.candidates.clear()
        self.container = None
        self._destroyed = True

    def rescan(self) -> None:
        """Rebuild the candidate list from the container's current content."""
        if self.container is None:
            raise RuntimeError("Navigator has been destroyed")
        self.candidates.scan(self.container, self.config.selector)

    # ───────── state ──────────────────────────────────────────────────────
    @property
    def selected(self) -> Any:
        return self._selected

    @property
    def state(self) -> NavigatorState:
        if not self.enabled:
            return NavigatorState.disabled
        if self._selected is None:
            return NavigatorState.enabled_no_selection
        return NavigatorState.enabled_selected

    # ───────── selection ──────────────────────────────────────────────────
    def select(self, element: Any, direction: Direction | str | None = None) -> None:
        """Select ``element``; scroll it into view when ``direction`` is given."""
        if element is None or element is self._selected:
            return
        if not self.enabled:
            log.debug("Ignoring select of %r while disabled", element)
            return
        if direction is not None:
            direction = Direction.coerce(direction)
        self.unselect()
        if getattr(element, "is_text_input", False):
            self.effects.focus(element)
        else:
            self.effects.highlight(element, self.config.selected)
        self._selected = element
        if direction is not None:
            self.scroller.scroll_to(element, direction)
        log.debug("Selected %r", element)

    def unselect(self) -> None:
        if self._selected is not None:
            self.effects.unhighlight(self._selected, self.config.selected)
            self._selected = None

    def move(self, direction: Direction | str) -> Any:
        """Take one navigation step and return the selected element."""
        direction = Direction.coerce(direction)
        if self._selected is None:
            # the first selection never scrolls
            if len(self.candidates):
                self.select(self.candidates[0])
            return self._selected
        target = self.selector.next_element(self._selected, direction)
        if target is not None:
            self.select(target, direction)
        return self._selected

    def handle_key(self, event: Any) -> bool:
        """Handle a key event; return ``True`` if it was a navigation key."""
        direction = self.resolver.resolve_event(event)
        log.debug("handle_key %r -> %s", event, direction)
        if direction is None:
            return False
        self.move(direction)
        return True
