"""Exception handlers shared by every API route."""

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException


async def route_not_found_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Answer a known path requested with the wrong method as not found.

    Routing is keyed on method and path together, so ``GET /set`` is as
    unknown as ``GET /nonexistent``.
    """

    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        exc = StarletteHTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Register the API exception handlers on the FastAPI application."""

    app.add_exception_handler(StarletteHTTPException, route_not_found_handler)


__all__ = ["register_exception_handlers", "route_not_found_handler"]
