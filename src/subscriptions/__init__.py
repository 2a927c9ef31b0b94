"""Subscriber onboarding and confirmation workflows."""

from src.domain.subscription_token import (
    TokenGenerator,
    generate_subscription_token,
    get_token_generator,
)
from src.subscriptions.confirmation import confirm
from src.subscriptions.onboarding import (
    PendingSubscription,
    build_confirmation_link,
    onboard_subscriber,
    send_confirmation_email,
    subscribe,
)

__all__ = [
    "PendingSubscription",
    "TokenGenerator",
    "build_confirmation_link",
    "confirm",
    "generate_subscription_token",
    "get_token_generator",
    "onboard_subscriber",
    "send_confirmation_email",
    "subscribe",
]
