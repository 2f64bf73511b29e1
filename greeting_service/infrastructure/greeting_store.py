"""In-memory storage for the shared greeting."""

from __future__ import annotations

import logging
import threading

from greeting_service.config import DEFAULT_GREETING
from greeting_service.domain.entities import Greeting

logger = logging.getLogger(__name__)


class GreetingStore:
    """Hold a single greeting and serialize every read and write to it."""

    def __init__(self, initial: str = DEFAULT_GREETING) -> None:
        self._lock = threading.Lock()
        self._message = initial

    def get(self) -> str:
        """Return the most recently stored greeting."""

        with self._lock:
            return self._message

    def set(self, new_value: str) -> None:
        """Replace the stored greeting with ``new_value``."""

        with self._lock:
            self._message = new_value
        logger.debug("Greeting replaced (%d characters)", len(new_value))

    def snapshot(self) -> Greeting:
        """Return the current greeting as a domain entity."""

        return Greeting(message=self.get())


__all__ = ["GreetingStore"]
