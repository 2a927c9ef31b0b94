"""API endpoints for subscribing and confirming subscriptions."""

import logging
import time

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Response, status

from src.api.dependencies import get_base_url, get_email_client, get_token_generator
from src.api.models import INTERNAL_ERROR_DETAIL, ErrorResponse
from src.domain import NewSubscriber
from src.email_client import EmailClient
from src.errors import (
    DeliveryError,
    PersistenceError,
    SubscriberValidationError,
    TokenNotFoundError,
    format_error_chain,
)
from src.subscriptions import TokenGenerator, confirm, onboard_subscriber

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])

TOKEN_NOT_FOUND_DETAIL = "Unknown subscription token"


def parse_subscriber_form(
    name: str | None = Form(default=None),
    email: str | None = Form(default=None),
) -> NewSubscriber:
    """Validate the subscribe form.

    Declared ahead of the other dependencies of the subscribe endpoint so a
    bad form is rejected with 400 before any collaborator is resolved.
    Missing fields are treated like empty ones.

    :param name: Raw subscriber name.
    :param email: Raw subscriber email.
    :returns: The validated subscriber.
    :raises HTTPException: 400 if either field is missing or invalid.
    """
    try:
        return NewSubscriber.parse(name=name or "", email=email or "")
    except SubscriberValidationError as e:
        logger.warning(f"Subscribe rejected: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Subscribe",
    responses={400: {"model": ErrorResponse, "description": "Invalid name or email"}},
)
def subscribe_endpoint(
    new_subscriber: NewSubscriber = Depends(parse_subscriber_form),
    email_client: EmailClient = Depends(get_email_client),
    base_url: str = Depends(get_base_url),
    token_generator: TokenGenerator = Depends(get_token_generator),
) -> Response:
    """Register a new subscriber and send the confirmation email."""
    start = time.perf_counter()
    logger.info(f"Subscribe: email={new_subscriber.email}, name={new_subscriber.name}")

    try:
        pending = onboard_subscriber(
            new_subscriber,
            email_client=email_client,
            base_url=base_url,
            token_generator=token_generator,
        )
    except (PersistenceError, DeliveryError) as e:
        logger.error(f"Subscribe failed:\n{format_error_chain(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_DETAIL,
        ) from e

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"Subscribe complete: subscriber_id={pending.subscriber_id}, elapsed={elapsed_ms:.0f}ms"
    )
    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/confirm",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Confirm subscription",
    responses={400: {"model": ErrorResponse, "description": "Missing or unknown token"}},
)
def confirm_endpoint(subscription_token: str | None = Query(default=None)) -> Response:
    """Confirm a pending subscription from the emailed link."""
    start = time.perf_counter()
    logger.info("Confirm subscription requested")

    if not subscription_token:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=TOKEN_NOT_FOUND_DETAIL)

    try:
        subscriber_id = confirm(subscription_token)
    except TokenNotFoundError as e:
        logger.warning("Confirm rejected: unknown subscription token")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=TOKEN_NOT_FOUND_DETAIL,
        ) from e
    except PersistenceError as e:
        logger.error(f"Confirm failed:\n{format_error_chain(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_DETAIL,
        ) from e

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"Confirm complete: subscriber_id={subscriber_id}, elapsed={elapsed_ms:.0f}ms")
    return Response(status_code=status.HTTP_200_OK)
