"""Infrastructure adapters backing the application use cases."""

from .greeting_store import GreetingStore

__all__ = ["GreetingStore"]
