"""Subscriber onboarding: validate, persist, issue a token and send the opt-in email."""

import logging
import uuid as uuid_module
from dataclasses import dataclass
from urllib.parse import urlencode

from sqlalchemy.exc import SQLAlchemyError

from src.database.connection import get_session
from src.database.subscriptions import insert_subscriber, store_token
from src.domain import NewSubscriber, SubscriberEmail
from src.domain.subscription_token import TokenGenerator, get_token_generator
from src.email_client import EmailClient, EmailDeliveryError
from src.errors import ConfirmationEmailError, PersistenceError

logger = logging.getLogger(__name__)

CONFIRMATION_PATH = "/subscriptions/confirm"
CONFIRMATION_SUBJECT = "Welcome!"


@dataclass(frozen=True)
class PendingSubscription:
    """A committed subscription awaiting confirmation."""

    subscriber_id: uuid_module.UUID
    token: str


def build_confirmation_link(base_url: str, token: str) -> str:
    """Build the link a subscriber follows to confirm.

    :param base_url: Public base URL of the service.
    :param token: The subscription token.
    :returns: The absolute confirmation URL.
    """
    query = urlencode({"subscription_token": token})
    return f"{base_url.rstrip('/')}{CONFIRMATION_PATH}?{query}"


def send_confirmation_email(
    email_client: EmailClient,
    recipient: SubscriberEmail,
    base_url: str,
    token: str,
) -> None:
    """Send the double opt-in email.

    The HTML and plain-text bodies carry the same link.

    :param email_client: Client used for delivery.
    :param recipient: The new subscriber's address.
    :param base_url: Public base URL of the service.
    :param token: The subscription token.
    :raises EmailDeliveryError: If the provider call fails.
    """
    link = build_confirmation_link(base_url, token)
    html_content = (
        "Welcome to our newsletter!<br />"
        f'Click <a href="{link}">here</a> to confirm your subscription.'
    )
    text_content = f"Welcome to our newsletter!\nVisit {link} to confirm your subscription."
    email_client.send_email(recipient, CONFIRMATION_SUBJECT, html_content, text_content)


def subscribe(
    *,
    name: str,
    email: str,
    email_client: EmailClient,
    base_url: str,
    token_generator: TokenGenerator | None = None,
) -> PendingSubscription:
    """Validate raw input and onboard the new subscriber.

    :param name: Raw subscriber name.
    :param email: Raw subscriber email.
    :param email_client: Client used to send the confirmation email.
    :param base_url: Public base URL used to build the confirmation link.
    :param token_generator: Token source. Defaults to the process-wide generator.
    :returns: The committed subscription and its token.
    :raises SubscriberValidationError: If the input is invalid. Nothing is written.
    :raises PersistenceError: If the transaction failed. Nothing is written.
    :raises ConfirmationEmailError: If the email could not be sent.
    """
    new_subscriber = NewSubscriber.parse(name=name, email=email)
    return onboard_subscriber(
        new_subscriber,
        email_client=email_client,
        base_url=base_url,
        token_generator=token_generator,
    )


def onboard_subscriber(
    new_subscriber: NewSubscriber,
    *,
    email_client: EmailClient,
    base_url: str,
    token_generator: TokenGenerator | None = None,
) -> PendingSubscription:
    """Store an already validated subscriber and send the confirmation email.

    The subscriber and its token are written in one transaction. The
    confirmation email is sent after commit, and a failed send leaves the
    committed subscription in place.

    :param new_subscriber: The validated subscriber.
    :param email_client: Client used to send the confirmation email.
    :param base_url: Public base URL used to build the confirmation link.
    :param token_generator: Token source. Defaults to the process-wide generator.
    :returns: The committed subscription and its token.
    :raises PersistenceError: If the transaction failed. Nothing is written.
    :raises ConfirmationEmailError: If the email could not be sent.
    """
    generator = token_generator or get_token_generator()

    try:
        with get_session() as session:
            subscriber_id = insert_subscriber(session, new_subscriber)
            token = generator.generate()
            store_token(session, subscriber_id, token)
    except SQLAlchemyError as e:
        raise PersistenceError("Failed to commit the transaction to store a new subscriber.") from e

    logger.info(f"Stored pending subscriber: id={subscriber_id}")

    try:
        send_confirmation_email(email_client, new_subscriber.email, base_url, token)
    except EmailDeliveryError as e:
        raise ConfirmationEmailError(
            f"Failed to send a confirmation email to subscriber {subscriber_id}."
        ) from e

    logger.info(f"Sent confirmation email: subscriber_id={subscriber_id}")
    return PendingSubscription(subscriber_id=subscriber_id, token=token)
