"""Subscriber identity value objects."""

from src.domain.new_subscriber import NewSubscriber
from src.domain.subscriber_email import SubscriberEmail
from src.domain.subscriber_name import SubscriberName
from src.domain.subscription_token import SUBSCRIPTION_TOKEN_LENGTH, TokenGenerator

__all__ = [
    "SUBSCRIPTION_TOKEN_LENGTH",
    "NewSubscriber",
    "SubscriberEmail",
    "SubscriberName",
    "TokenGenerator",
]
