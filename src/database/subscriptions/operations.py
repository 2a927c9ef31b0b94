"""Database operations for newsletter subscriptions."""

from __future__ import annotations

import logging
import uuid as uuid_module
from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.database.subscriptions.models import Subscription, SubscriptionStatus, SubscriptionToken
from src.domain import NewSubscriber, SubscriberEmail
from src.errors import PersistenceError, SubscriberValidationError, TokenNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmedSubscriber:
    """A confirmed subscriber whose stored address is still valid."""

    email: SubscriberEmail


def insert_subscriber(session: Session, new_subscriber: NewSubscriber) -> uuid_module.UUID:
    """Insert a subscriber awaiting confirmation.

    :param session: Database session.
    :param new_subscriber: The validated subscriber.
    :returns: The ID of the new subscription.
    :raises PersistenceError: If the row could not be written.
    """
    subscription = Subscription(
        id=uuid_module.uuid4(),
        email=new_subscriber.email.value,
        name=new_subscriber.name.value,
        subscribed_at=datetime.now(UTC),
        status=SubscriptionStatus.PENDING_CONFIRMATION.value,
    )
    try:
        session.add(subscription)
        session.flush()
    except SQLAlchemyError as e:
        logger.error(f"Failed to insert subscriber: {e}")
        raise PersistenceError("Failed to insert new subscriber in the database.") from e

    logger.info(f"Inserted subscriber: id={subscription.id}, status={subscription.status}")
    return subscription.id


def store_token(session: Session, subscriber_id: uuid_module.UUID, token: str) -> None:
    """Store a confirmation token for a subscriber.

    :param session: Database session.
    :param subscriber_id: ID of the owning subscription.
    :param token: The confirmation token.
    :raises PersistenceError: If the row could not be written, for example
        because the subscriber does not exist.
    """
    try:
        session.add(SubscriptionToken(subscription_token=token, subscriber_id=subscriber_id))
        session.flush()
    except SQLAlchemyError as e:
        logger.error(f"Failed to store subscription token: subscriber_id={subscriber_id}: {e}")
        raise PersistenceError("Failed to store the confirmation token for a new subscriber.") from e

    logger.debug(f"Stored subscription token: subscriber_id={subscriber_id}")


def get_subscriber_id_from_token(session: Session, token: str) -> uuid_module.UUID | None:
    """Resolve a confirmation token to its subscriber.

    :param session: Database session.
    :param token: The confirmation token.
    :returns: The subscriber ID or None if the token is unknown.
    :raises PersistenceError: If the lookup failed.
    """
    try:
        return (
            session.query(SubscriptionToken.subscriber_id)
            .filter(SubscriptionToken.subscription_token == token)
            .scalar()
        )
    except SQLAlchemyError as e:
        raise PersistenceError("Failed to look up subscription token.") from e


def get_subscription_by_id(
    session: Session,
    subscriber_id: uuid_module.UUID,
) -> Subscription | None:
    """Get a subscription by ID.

    :param session: Database session.
    :param subscriber_id: Subscription ID.
    :returns: The subscription or None if not found.
    :raises PersistenceError: If the lookup failed.
    """
    try:
        return session.query(Subscription).filter(Subscription.id == subscriber_id).first()
    except SQLAlchemyError as e:
        raise PersistenceError(f"Failed to look up subscription {subscriber_id}.") from e


def confirm_subscriber(session: Session, token: str) -> uuid_module.UUID:
    """Mark the subscriber owning a token as confirmed.

    Confirming an already confirmed subscriber is a no-op.

    :param session: Database session.
    :param token: The confirmation token.
    :returns: The ID of the confirmed subscriber.
    :raises TokenNotFoundError: If the token is unknown.
    :raises PersistenceError: If the update failed.
    """
    subscriber_id = get_subscriber_id_from_token(session, token)
    if subscriber_id is None:
        raise TokenNotFoundError("Subscription token not found.")

    try:
        session.query(Subscription).filter(Subscription.id == subscriber_id).update(
            {Subscription.status: SubscriptionStatus.CONFIRMED.value},
            synchronize_session=False,
        )
        session.flush()
    except SQLAlchemyError as e:
        raise PersistenceError("Failed to mark subscriber as confirmed.") from e

    logger.info(f"Confirmed subscriber: id={subscriber_id}")
    return subscriber_id


def list_confirmed_subscribers(session: Session) -> list[ConfirmedSubscriber]:
    """List every confirmed subscriber with a valid email address.

    Rows whose stored email no longer validates are skipped with a warning
    so that a single bad row cannot abort a broadcast.

    :param session: Database session.
    :returns: Confirmed subscribers.
    :raises PersistenceError: If the query failed.
    """
    try:
        rows = (
            session.query(Subscription.email)
            .filter(Subscription.status == SubscriptionStatus.CONFIRMED.value)
            .all()
        )
    except SQLAlchemyError as e:
        raise PersistenceError("Failed to fetch confirmed subscribers.") from e

    subscribers = []
    for row in rows:
        try:
            subscribers.append(ConfirmedSubscriber(email=SubscriberEmail.parse(row.email)))
        except SubscriberValidationError as e:
            logger.warning(f"Skipping a confirmed subscriber with an invalid stored email: {e}")

    logger.debug(f"Fetched confirmed subscribers: valid={len(subscribers)}, total={len(rows)}")
    return subscribers
