from __future__ import annotations

import logging

from iceorders.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str | None = None) -> None:
    global _handler

    settings = get_settings()
    resolved = (level or settings.log_level).upper()

    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in root.handlers:
        root.addHandler(_handler)
    root.setLevel(resolved)
