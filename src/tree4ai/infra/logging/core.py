from __future__ import annotations

"""
Logging Session Lifecycle.

Records from every module reach the root logger through one QueueHandler;
a QueueListener thread hands them to the stderr stream and the optional
rotating file. stdout stays reserved for the rendered document.

Each call to :func:`configure_logging` replaces the previous session, so the
CLI can be invoked repeatedly in one process without stacking handlers.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from tree4ai.infra.logging.config import (
    CONSOLE_FORMAT,
    DATE_FORMAT,
    FILE_FORMAT,
    LEVELS,
    LoggingConfig,
)
from tree4ai.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Root logger attribute holding the running listener
_QUEUE_LISTENER_ATTR: str = "_tree4ai_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig) -> logging.Logger:
    """
    Start a logging session, ending any session already running.

    Args:
        cfg: Level, destinations and rotation limits.

    Returns:
        logging.Logger: The root logger.
    """
    shutdown_logging()

    root = logging.getLogger()
    level = LEVELS.get((cfg.level or "").strip().upper(), logging.INFO)
    root.setLevel(level)

    sinks = _build_sinks(cfg, level)
    if not sinks:
        return root

    records: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(records, *sinks, respect_handler_level=True)
    listener.start()

    entry = QueueHandler(records)
    _tag_handler(entry)
    root.addHandler(entry)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    atexit.register(_stop_listener, listener)
    return root


def shutdown_logging() -> None:
    """Drain pending records and detach the handlers of the current session."""
    root = logging.getLogger()

    _stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually the caller's ``__name__``)."""
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _build_sinks(cfg: LoggingConfig, level: int) -> List[logging.Handler]:
    """Create the handlers the listener thread writes to."""
    sinks: List[logging.Handler] = []

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level)
        sh.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        _tag_handler(sh)
        sinks.append(sh)

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level,
            logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            sinks.append(fh)

    return sinks


def _stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop ``listener`` and close its handlers.

    Safe to call twice: the atexit hook runs after an explicit shutdown.
    """
    if listener is None or getattr(listener, "_thread", None) is None:
        return

    listener.stop()
    for h in listener.handlers:
        h.close()
