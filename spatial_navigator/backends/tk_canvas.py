"""Run a navigator over items drawn on a :class:`tkinter.Canvas`."""

from __future__ import annotations

import logging
import tkinter as tk
from typing import Any, Callable

from ..geometry import Rect
from ..interfaces import KeySource

log = logging.getLogger(__name__)

KEY_SEQUENCE = "<KeyPress>"


class CanvasItem:
    """A rectangle item on the canvas, seen as a positioned element."""

    offset_parent = None

    def __init__(self, canvas: tk.Canvas, item_id: int, widget: Any = None) -> None:
        self.canvas = canvas
        self.item_id = item_id
        self.widget = widget  # entry window for text-input items

    @property
    def is_text_input(self) -> bool:
        return self.widget is not None

    def _coords(self) -> list[float]:
        coords = self.canvas.coords(self.item_id)
        if len(coords) < 4:
            return [0.0, 0.0, 0.0, 0.0]
        return [float(c) for c in coords[:4]]

    @property
    def offset_left(self) -> float:
        return self._coords()[0]

    @property
    def offset_top(self) -> float:
        return self._coords()[1]

    @property
    def offset_width(self) -> float:
        x1, _, x2, _ = self._coords()
        return x2 - x1

    @property
    def offset_height(self) -> float:
        _, y1, _, y2 = self._coords()
        return y2 - y1

    def __repr__(self) -> str:
        return f"CanvasItem({self.item_id})"


class CanvasContainer:
    """The canvas as a scroll container; its content origin is the document origin."""

    offset_left = 0.0
    offset_top = 0.0
    offset_parent = None

    def __init__(self, canvas: tk.Canvas) -> None:
        self.canvas = canvas

    @property
    def offset_width(self) -> float:
        return float(self.canvas.winfo_width())

    @property
    def offset_height(self) -> float:
        return float(self.canvas.winfo_height())

    def scroll_region(self) -> tuple[float, float, float, float]:
        region = self.canvas.cget("scrollregion")
        if isinstance(region, str):
            region = region.split()
        try:
            x1, y1, x2, y2 = (float(v) for v in region)
        except (TypeError, ValueError):
            return (0.0, 0.0, self.offset_width, self.offset_height)
        return (x1, y1, x2, y2)

    @staticmethod
    def _fraction(value: float, start: float, end: float) -> float:
        span = end - start
        if span <= 0:
            return 0.0
        return min(1.0, max(0.0, (value - start) / span))

    @property
    def scroll_left(self) -> float:
        return float(self.canvas.canvasx(0))

    @scroll_left.setter
    def scroll_left(self, value: float) -> None:
        x1, _, x2, _ = self.scroll_region()
        self.canvas.xview_moveto(self._fraction(value, x1, x2))

    @property
    def scroll_top(self) -> float:
        return float(self.canvas.canvasy(0))

    @scroll_top.setter
    def scroll_top(self, value: float) -> None:
        _, y1, _, y2 = self.scroll_region()
        self.canvas.yview_moveto(self._fraction(value, y1, y2))


class CanvasScene:
    """Host for a navigator: candidate queries, key events, viewport and effects.

    The canvas is both the scroll container and the page viewport. Key
    events come from the canvas' toplevel unless another ``key_source`` is
    given.
    """

    def __init__(
        self,
        canvas: tk.Canvas,
        *,
        fill: str = "white",
        highlight_fill: str = "yellow",
        key_source: KeySource | None = None,
    ) -> None:
        self.canvas = canvas
        self.container = CanvasContainer(canvas)
        self.fill = fill
        self.highlight_fill = highlight_fill
        self.key_source = key_source
        self._items: dict[int, CanvasItem] = {}
        self._bindings: dict[Callable[[Any], bool], str] = {}

    # ───────── building ───────────────────────────────────────────────────
    def add_card(
        self, x: float, y: float, width: float, height: float, label: str = "", tag: str = "item"
    ) -> CanvasItem:
        item_id = self.canvas.create_rectangle(
            x, y, x + width, y + height, fill=self.fill, outline="#888", tags=(tag,)
        )
        if label:
            self.canvas.create_text(x + width / 2, y + height / 2, text=label)
        item = CanvasItem(self.canvas, item_id)
        self._items[item_id] = item
        return item

    def add_input(
        self, x: float, y: float, width: float, height: float, widget: Any = None, tag: str = "item"
    ) -> CanvasItem:
        item_id = self.canvas.create_rectangle(
            x, y, x + width, y + height, fill=self.fill, outline="#888", tags=(tag,)
        )
        if widget is None:
            widget = tk.Entry(self.canvas)
        self.canvas.create_window(
            x + 4, y + 4, window=widget, anchor="nw", width=width - 8, height=height - 8
        )
        item = CanvasItem(self.canvas, item_id, widget)
        self._items[item_id] = item
        return item

    def fit_scroll_region(self) -> None:
        bbox = self.canvas.bbox("all")
        if bbox:
            self.canvas.configure(scrollregion=bbox)

    # ───────── candidate query ────────────────────────────────────────────
    def query_selector_all(self, container: Any, selector: str) -> list[CanvasItem]:
        # find_withtag reports items in stacking order, which is creation order here
        return [self._items[i] for i in self.canvas.find_withtag(selector) if i in self._items]

    # ───────── key events ─────────────────────────────────────────────────
    def add_key_listener(self, handler: Callable[[Any], bool]) -> None:
        if self.key_source is not None:
            self.key_source.add_key_listener(handler)
            return
        if handler in self._bindings:
            return

        def _on_key(event):
            return "break" if handler(event) else None

        toplevel = self.canvas.winfo_toplevel()
        self._bindings[handler] = toplevel.bind(KEY_SEQUENCE, _on_key, add="+")

    def remove_key_listener(self, handler: Callable[[Any], bool]) -> None:
        if self.key_source is not None:
            self.key_source.remove_key_listener(handler)
            return
        funcid = self._bindings.pop(handler, None)
        if funcid is not None:
            self.canvas.winfo_toplevel().unbind(KEY_SEQUENCE, funcid)

    # ───────── viewport ───────────────────────────────────────────────────
    @property
    def width(self) -> float:
        return self.container.offset_width

    @property
    def height(self) -> float:
        return self.container.offset_height

    offset_left = 0.0
    offset_top = 0.0

    @property
    def scroll_left(self) -> float:
        return self.container.scroll_left

    @scroll_left.setter
    def scroll_left(self, value: float) -> None:
        self.container.scroll_left = value

    @property
    def scroll_top(self) -> float:
        return self.container.scroll_top

    @scroll_top.setter
    def scroll_top(self, value: float) -> None:
        self.container.scroll_top = value

    def bounding_rect(self, element: CanvasItem) -> Rect:
        return Rect(
            element.offset_left - self.scroll_left,
            element.offset_top - self.scroll_top,
            element.offset_width,
            element.offset_height,
        )

    # ───────── visual effects ─────────────────────────────────────────────
    def highlight(self, element: CanvasItem, marker: str) -> None:
        self.canvas.itemconfigure(element.item_id, fill=self.highlight_fill)
        self.canvas.addtag_withtag(marker, element.item_id)

    def unhighlight(self, element: CanvasItem, marker: str) -> None:
        self.canvas.itemconfigure(element.item_id, fill=self.fill)
        self.canvas.dtag(element.item_id, marker)
        if element.widget is not None:
            self.canvas.focus_set()

    def focus(self, element: CanvasItem) -> None:
        if element.widget is not None:
            element.widget.focus_set()
        else:
            log.debug("%r has no input widget to focus", element)
