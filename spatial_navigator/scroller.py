from __future__ import annotations

import logging
from typing import Any

from .geometry import Rect, absolute_offset_left, absolute_offset_top, element_rect
from .interfaces import ScrollContainer, Viewport
from .key_types import Direction

log = logging.getLogger(__name__)


class ViewportScroller:
    """Keep an element visible in its scroll container and in the window."""

    def __init__(self, container: ScrollContainer, viewport: Viewport) -> None:
        self.container = container
        self.viewport = viewport

    # ------------------------------------------------------------
    def in_container_view(self, element: Any) -> bool:
        """Return ``True`` if all four edges of ``element`` are inside the container."""
        box = element_rect(self.container)
        rect = element_rect(element)
        scroll_left = self.container.scroll_left
        scroll_top = self.container.scroll_top
        if rect.left - scroll_left < box.left:
            return False
        if rect.top - scroll_top < box.top:
            return False
        if rect.right - scroll_left > box.right:
            return False
        if rect.bottom - scroll_top > box.bottom:
            return False
        return True

    def in_viewport(self, element: Any) -> bool:
        """Return ``True`` if ``element`` is fully visible in the window."""
        window = Rect(0, 0, self.viewport.width, self.viewport.height)
        return window.contains(self.viewport.bounding_rect(element))

    # ------------------------------------------------------------
    def scroll_to(self, element: Any, direction: Direction | str) -> bool:
        """Scroll so ``element`` becomes visible; return ``True`` if anything moved."""
        direction = Direction.coerce(direction)
        if not self.in_container_view(element):
            self._scroll_container(element, direction)
            return True
        if not self.in_viewport(element):
            self._scroll_page(element, direction)
            return True
        return False

    def _scroll_container(self, element: Any, direction: Direction) -> None:
        container = self.container
        box = element_rect(container)
        rect = element_rect(element)
        if direction is Direction.left:
            container.scroll_left = rect.left - box.left
        elif direction is Direction.up:
            container.scroll_top = rect.top - box.top
        elif direction is Direction.right:
            container.scroll_left = rect.left - box.left - (box.width - rect.width)
        elif direction is Direction.down:
            container.scroll_top = rect.top - box.top - (box.height - rect.height)
        else:
            raise ValueError(f"invalid direction value: {direction!r}")
        log.debug(
            "Container scrolled %s to (%s, %s)",
            direction.value,
            container.scroll_left,
            container.scroll_top,
        )

    def _scroll_page(self, element: Any, direction: Direction) -> None:
        page = self.viewport
        rect = element_rect(element)
        if direction is Direction.left:
            page.scroll_left = absolute_offset_left(element) - page.offset_left
        elif direction is Direction.up:
            page.scroll_top = absolute_offset_top(element) - page.offset_top
        elif direction is Direction.right:
            page.scroll_left = (
                absolute_offset_left(element)
                - page.offset_left
                - (page.width - rect.width)
            )
        elif direction is Direction.down:
            page.scroll_top = (
                absolute_offset_top(element)
                - page.offset_top
                - (page.height - rect.height)
            )
        else:
            raise ValueError(f"invalid direction value: {direction!r}")
        log.debug(
            "Page scrolled %s to (%s, %s)", direction.value, page.scroll_left, page.scroll_top
        )
