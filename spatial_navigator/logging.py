"""Log setup for the demo window and any host embedding a navigator."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


_DEFAULT_LOG = Path.home() / ".spatial_navigator.log"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s: %(message)s"


def setup(level: int = logging.INFO, log_file: str | Path | None = None) -> None:
    """Send navigator logs to stderr and to a log file.

    Lifecycle changes are logged at INFO. Key handling, candidate scans,
    selection and scrolling are logged at DEBUG, so ``level=logging.DEBUG``
    traces every navigation step.

    Parameters
    ----------
    level:
        Root logger level.
    log_file:
        Where to append the log; ``~/.spatial_navigator.log`` when omitted.
        If the file cannot be opened only stderr is used.
    """

    log_file = _DEFAULT_LOG if log_file is None else Path(log_file)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    try:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    except OSError as exc:
        print(f"spatial_navigator: not logging to {log_file}: {exc}", file=sys.stderr)

    logging.basicConfig(level=level, format=_FORMAT, datefmt="%H:%M:%S", handlers=handlers)

    def _excepthook(exc_type, exc, tb) -> None:
        # errors raised from tk callbacks or the CLI end up in the log file too
        logging.getLogger(__name__).critical(
            "Unhandled exception", exc_info=(exc_type, exc, tb)
        )

    sys.excepthook = _excepthook
