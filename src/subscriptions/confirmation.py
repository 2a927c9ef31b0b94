"""Subscription confirmation via emailed token."""

import logging
import uuid as uuid_module

from sqlalchemy.exc import SQLAlchemyError

from src.database.connection import get_session
from src.database.subscriptions import confirm_subscriber
from src.errors import PersistenceError

logger = logging.getLogger(__name__)


def confirm(token: str) -> uuid_module.UUID:
    """Confirm the subscription that owns a token.

    Unknown, malformed and never-issued tokens are indistinguishable to the
    caller. Confirming twice succeeds.

    :param token: Token taken from the confirmation link.
    :returns: ID of the confirmed subscriber.
    :raises TokenNotFoundError: If the token does not resolve to a subscriber.
    :raises PersistenceError: If the store could not be reached.
    """
    try:
        with get_session() as session:
            subscriber_id = confirm_subscriber(session, token)
    except SQLAlchemyError as e:
        raise PersistenceError("Failed to commit subscriber confirmation.") from e

    return subscriber_id
