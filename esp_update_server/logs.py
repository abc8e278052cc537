from __future__ import annotations

import logging
import os
from functools import lru_cache


def _ensure_logging() -> None:
    """Basic root logging at LOG_LEVEL, only when nothing configured logging yet."""
    root = logging.getLogger()
    if root.handlers:
        return
    level_name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@lru_cache(maxsize=1)
def _log() -> logging.Logger:
    """Process log for the update server.

    Startup, send and rejection events go to uvicorn's (or gunicorn's) error
    logger when the server is hosted by one, so they share its handlers.
    Per-device request records are kept separately by ``RequestLog``.
    """
    for name in ("uvicorn.error", "gunicorn.error"):
        candidate = logging.getLogger(name)
        if candidate.hasHandlers():
            return candidate
    return logging.getLogger("esp_update_server")
