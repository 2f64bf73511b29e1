"""Routes serving and replacing the shared greeting."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from greeting_service.application.use_cases.greetings import (
    get_greeting,
    update_greeting,
)
from greeting_service.infrastructure.greeting_store import GreetingStore
from greeting_service.interfaces.api.dependencies import get_greeting_store
from greeting_service.interfaces.api.schemas import GreetingPayload

router = APIRouter(tags=["greetings"])

logger = logging.getLogger(__name__)


@router.api_route("/", methods=["GET", "HEAD"], response_model=GreetingPayload)
def read_greeting(
    store: GreetingStore = Depends(get_greeting_store),
) -> GreetingPayload:
    """Return the current greeting."""

    greeting = get_greeting(store)
    return GreetingPayload(msg=greeting.message)


@router.post("/set", response_model=GreetingPayload)
async def set_greeting(
    request: Request,
    store: GreetingStore = Depends(get_greeting_store),
) -> GreetingPayload:
    """Replace the greeting with the ``msg`` field of the JSON body.

    The body is parsed by hand instead of through a typed parameter so that a
    malformed payload is reported as ``400 Bad Request``.
    """

    try:
        body = await request.body()
    except ClientDisconnect as exc:
        logger.warning("Client disconnected before sending the greeting body")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body could not be read",
        ) from exc

    try:
        payload = GreetingPayload.model_validate_json(body)
    except ValidationError as exc:
        logger.warning(
            "Rejected greeting update with %d validation error(s)", exc.error_count()
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Body must be a JSON object of the form {"msg": "<text>"}',
        ) from exc

    greeting = update_greeting(store, payload.msg)
    logger.info("Greeting updated")
    return GreetingPayload(msg=greeting.message)


__all__ = ["router"]
