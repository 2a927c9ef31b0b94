"""Newsletter broadcast to confirmed subscribers."""

import logging
import time

from sqlalchemy.exc import SQLAlchemyError

from src.database.connection import get_session
from src.database.subscriptions import ConfirmedSubscriber, list_confirmed_subscribers
from src.email_client import EmailClient, EmailDeliveryError
from src.errors import NewsletterDeliveryError, PersistenceError
from src.newsletters.models import BroadcastResult, NewsletterIssue

logger = logging.getLogger(__name__)


def get_confirmed_subscribers() -> list[ConfirmedSubscriber]:
    """Load the broadcast recipient list in its own short transaction.

    :returns: Confirmed subscribers with valid addresses.
    :raises PersistenceError: If the store could not be queried.
    """
    try:
        with get_session() as session:
            return list_confirmed_subscribers(session)
    except SQLAlchemyError as e:
        raise PersistenceError("Failed to load confirmed subscribers.") from e


def publish_newsletter(issue: NewsletterIssue, *, email_client: EmailClient) -> BroadcastResult:
    """Send a newsletter issue to every confirmed subscriber.

    Sends happen one at a time. The first failed delivery aborts the
    broadcast: recipients after it are not attempted.

    :param issue: The newsletter to send.
    :param email_client: Client used for delivery.
    :returns: Number of recipients the issue was sent to.
    :raises PersistenceError: If the recipients could not be loaded.
    :raises NewsletterDeliveryError: On the first failed delivery, naming the recipient.
    """
    start = time.perf_counter()
    subscribers = get_confirmed_subscribers()
    logger.info(f"Publishing newsletter: title={issue.title!r}, recipients={len(subscribers)}")

    sent = 0
    for subscriber in subscribers:
        try:
            email_client.send_email(
                subscriber.email,
                issue.title,
                issue.html_content,
                issue.text_content,
            )
        except EmailDeliveryError as e:
            raise NewsletterDeliveryError(
                f"Failed to send newsletter issue to {subscriber.email}",
                recipient=subscriber.email.value,
            ) from e
        sent += 1

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"Published newsletter: sent={sent}, elapsed={elapsed_ms:.0f}ms")
    return BroadcastResult(recipients=sent)
