"""Aggregate application use cases."""

from .greetings import get_greeting, update_greeting

__all__ = [
    "get_greeting",
    "update_greeting",
]
