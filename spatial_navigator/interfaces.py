"""Interface definitions for the host the navigator runs against."""

from __future__ import annotations

from typing import Any, Callable, Protocol, Sequence, runtime_checkable

from .geometry import Rect


KeyHandler = Callable[[Any], bool]


@runtime_checkable
class Element(Protocol):
    """A positioned item; offsets are relative to ``offset_parent``."""

    offset_left: float
    offset_top: float
    offset_width: float
    offset_height: float
    offset_parent: "Element | None"
    is_text_input: bool


@runtime_checkable
class ScrollContainer(Protocol):
    """Element whose content can be scrolled."""

    offset_left: float
    offset_top: float
    offset_width: float
    offset_height: float
    scroll_left: float
    scroll_top: float


@runtime_checkable
class CandidateQuery(Protocol):
    def query_selector_all(self, container: Any, selector: Any) -> Sequence[Any]:
        """Return elements under ``container`` matching ``selector`` in document order."""
        ...


@runtime_checkable
class KeySource(Protocol):
    def add_key_listener(self, handler: KeyHandler) -> None:
        ...

    def remove_key_listener(self, handler: KeyHandler) -> None:
        ...


@runtime_checkable
class Viewport(Protocol):
    """The visible window and the page-level scroll position."""

    width: float
    height: float
    offset_left: float
    offset_top: float
    scroll_left: float
    scroll_top: float

    def bounding_rect(self, element: Any) -> Rect:
        """Return ``element``'s rectangle relative to the visible window."""
        ...


@runtime_checkable
class Document(KeySource, CandidateQuery, Viewport, Protocol):
    """Everything the navigator needs from its host besides visual effects."""


@runtime_checkable
class VisualEffects(Protocol):
    def highlight(self, element: Any, marker: str) -> None:
        ...

    def unhighlight(self, element: Any, marker: str) -> None:
        ...

    def focus(self, element: Any) -> None:
        ...
