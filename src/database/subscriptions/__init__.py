"""Database module for newsletter subscriptions."""

from src.database.subscriptions.models import (
    Subscription,
    SubscriptionStatus,
    SubscriptionToken,
)
from src.database.subscriptions.operations import (
    ConfirmedSubscriber,
    confirm_subscriber,
    get_subscriber_id_from_token,
    get_subscription_by_id,
    insert_subscriber,
    list_confirmed_subscribers,
    store_token,
)

__all__ = [
    "ConfirmedSubscriber",
    "Subscription",
    "SubscriptionStatus",
    "SubscriptionToken",
    "confirm_subscriber",
    "get_subscriber_id_from_token",
    "get_subscription_by_id",
    "insert_subscriber",
    "list_confirmed_subscribers",
    "store_token",
]
