"""Validated input for creating a subscription."""

from dataclasses import dataclass

from src.domain.subscriber_email import SubscriberEmail
from src.domain.subscriber_name import SubscriberName


@dataclass(frozen=True)
class NewSubscriber:
    """A name and email pair that is ready to be stored."""

    name: SubscriberName
    email: SubscriberEmail

    @classmethod
    def parse(cls, *, name: str, email: str) -> "NewSubscriber":
        """Validate raw form data.

        :param name: Raw subscriber name.
        :param email: Raw subscriber email.
        :returns: The validated subscriber.
        :raises SubscriberValidationError: If either field is invalid.
        """
        return cls(name=SubscriberName.parse(name), email=SubscriberEmail.parse(email))
