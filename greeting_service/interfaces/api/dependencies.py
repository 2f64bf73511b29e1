"""FastAPI dependency utilities."""

from fastapi import Request

from greeting_service.infrastructure.greeting_store import GreetingStore


def get_greeting_store(request: Request) -> GreetingStore:
    """Return the greeting store owned by the running application."""

    return request.app.state.greeting_store
