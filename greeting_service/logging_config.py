"""Logging setup for the greeting service."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the root logger at ``level``."""

    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    # uvicorn installs its own handlers; keep its loggers aligned with ours.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level)


__all__ = ["LOG_FORMAT", "configure_logging"]
