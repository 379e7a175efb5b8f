"""Arrow-key navigation over freely positioned rectangular items."""

from .config import NavigatorConfig, load_config, save_config
from .geometry import Rect, absolute_offset_left, absolute_offset_top
from .key_types import Direction
from .navigator import Navigator, NavigatorState

__all__ = [
    "Direction",
    "Navigator",
    "NavigatorConfig",
    "NavigatorState",
    "Rect",
    "absolute_offset_left",
    "absolute_offset_top",
    "load_config",
    "save_config",
]
