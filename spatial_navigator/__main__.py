"""Command line entry point: a scrollable card grid driven by the arrow keys."""

from __future__ import annotations

import argparse
import logging
import random
import tkinter as tk

from . import logging as nav_logging
from .backends.pynput_source import PynputKeySource
from .backends.tk_canvas import CanvasScene
from .config import CONFIG_FILE, load_config
from .navigator import Navigator

log = logging.getLogger(__name__)

CARD_HEIGHT = 60
GAP = 12


def layout_cards(count: int, columns: int, width: int, seed: int = 0) -> list[tuple[int, int, int, int]]:
    """Return ``(x, y, w, h)`` boxes for ``count`` cards of uneven width.

    Cards flow left to right and wrap when a row is full, so columns do not
    line up between rows.
    """
    rng = random.Random(seed)
    base = (width - GAP * (columns + 1)) // columns
    boxes = []
    x, y = GAP, GAP
    for _ in range(count):
        w = max(40, int(base * rng.uniform(0.6, 1.4)))
        if x + w > width - GAP and x > GAP:
            x = GAP
            y += CARD_HEIGHT + GAP
        boxes.append((x, y, w, CARD_HEIGHT))
        x += w + GAP
    return boxes


def build_scene(root: tk.Misc, args: argparse.Namespace, key_source=None) -> CanvasScene:
    frame = tk.Frame(root)
    frame.pack(fill=tk.BOTH, expand=True)
    canvas = tk.Canvas(frame, width=args.width, height=args.height, bg="#eee", highlightthickness=0)
    vbar = tk.Scrollbar(frame, orient=tk.VERTICAL, command=canvas.yview)
    canvas.configure(yscrollcommand=vbar.set)
    vbar.pack(side=tk.RIGHT, fill=tk.Y)
    canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

    scene = CanvasScene(canvas, key_source=key_source)
    for idx, (x, y, w, h) in enumerate(layout_cards(args.items, args.columns, args.width)):
        if idx == args.input_index:
            scene.add_input(x, y, w, h, tag=args.selector)
        else:
            scene.add_card(x, y, w, h, label=str(idx + 1), tag=args.selector)
    scene.fit_scroll_region()
    return scene


def main(argv: list[str] | None = None) -> None:
    """Launch the demo window."""
    parser = argparse.ArgumentParser(description="Navigate a card grid with the arrow keys")
    parser.add_argument("--config", default=CONFIG_FILE, help="Path to navigator config JSON")
    parser.add_argument("--items", type=int, default=40, help="Number of cards")
    parser.add_argument("--columns", type=int, default=4, help="Approximate cards per row")
    parser.add_argument("--width", type=int, default=600, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=400, help="Canvas height in pixels")
    parser.add_argument(
        "--input-index", type=int, default=5, help="Card that holds a text entry (-1 for none)"
    )
    parser.add_argument("--marker", help="Tag applied to the selected card")
    parser.add_argument(
        "--global-keys",
        action="store_true",
        help="Listen to the whole keyboard with pynput instead of the window",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
    args = parser.parse_args(argv)

    if args.items < 1:
        parser.error("--items must be at least 1")
    if args.columns < 1:
        parser.error("--columns must be at least 1")

    nav_logging.setup(logging.DEBUG if args.verbose else logging.INFO)

    config = load_config(args.config)
    if args.marker:
        config.selected = args.marker
    args.selector = config.selector

    root = tk.Tk()
    root.title("Spatial Navigator")
    key_source = PynputKeySource(root) if args.global_keys else None
    scene = build_scene(root, args, key_source=key_source)

    navigator = Navigator(scene.container, scene, scene, config)
    navigator.enable()
    log.info("Navigating %d candidates", len(navigator.candidates))

    def _close() -> None:
        navigator.destroy()
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", _close)
    root.mainloop()


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
