"""Global keyboard input through pynput, delivered on the tkinter loop."""

from __future__ import annotations

import logging
from queue import Empty, SimpleQueue
from typing import Any, Callable

log = logging.getLogger(__name__)


class PynputKeySource:
    """Key source that listens to the whole keyboard, not just one window.

    pynput calls back on its own thread. Presses are queued and handed to
    the registered handlers from ``root.after`` so navigation still runs on
    the tkinter thread, one event at a time.
    """

    def __init__(self, root: Any, listener_factory: Callable | None = None, poll_ms: int = 10) -> None:
        self.root = root
        self.poll_ms = poll_ms
        self._listener_factory = listener_factory
        self._queue: SimpleQueue[Any] = SimpleQueue()
        self._handlers: list[Callable[[Any], bool]] = []
        self._listener: Any = None
        self._after_id: str | None = None

    # ------------------------------------------------------------
    def add_key_listener(self, handler: Callable[[Any], bool]) -> None:
        if handler in self._handlers:
            return
        self._handlers.append(handler)
        if self._listener is None:
            self._start()

    def remove_key_listener(self, handler: Callable[[Any], bool]) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)
        if not self._handlers and self._listener is not None:
            self._stop()

    @property
    def listening(self) -> bool:
        return self._listener is not None

    # ------------------------------------------------------------
    def _start(self) -> None:
        factory = self._listener_factory
        if factory is None:
            from pynput import keyboard

            factory = keyboard.Listener
        self._listener = factory(on_press=self._on_press)
        self._listener.start()
        self._after_id = self.root.after(self.poll_ms, self._pump)
        log.debug("Global key listener started")

    def _stop(self) -> None:
        self._listener.stop()
        self._listener = None
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None
        log.debug("Global key listener stopped")

    def _on_press(self, key: Any) -> None:
        # runs on the pynput thread
        self._queue.put(key)

    def _pump(self) -> None:
        self._after_id = None
        try:
            while True:
                try:
                    key = self._queue.get_nowait()
                except Empty:
                    break
                for handler in list(self._handlers):
                    handler(key)
        finally:
            # a handler may have restarted the listener, which already scheduled a pump
            if self._listener is not None and self._after_id is None:
                self._after_id = self.root.after(self.poll_ms, self._pump)
