"""Use cases for reading and replacing the shared greeting."""

from greeting_service.domain.entities import Greeting
from greeting_service.infrastructure.greeting_store import GreetingStore


def get_greeting(store: GreetingStore) -> Greeting:
    """Return the greeting currently held by ``store``."""

    return store.snapshot()


def update_greeting(store: GreetingStore, message: str) -> Greeting:
    """Store ``message`` as the new greeting and return it.

    The returned greeting is built from ``message`` itself rather than read
    back, so a concurrent writer cannot change what the caller is echoed.
    """

    store.set(message)
    return Greeting(message=message)


__all__ = ["get_greeting", "update_greeting"]
