"""Validated subscriber email address."""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from src.errors import SubscriberValidationError


def _has_forbidden_characters(raw: str) -> bool:
    return any(char.isspace() or not char.isprintable() for char in raw)


@dataclass(frozen=True)
class SubscriberEmail:
    """An email address that passed grammar validation.

    Deliverability is not checked, so parsing never touches the network.
    Special-use domains such as ``.local`` and ``.test`` are accepted.
    """

    value: str

    @classmethod
    def parse(cls, raw: str) -> "SubscriberEmail":
        """Validate a raw email address.

        :param raw: Address as submitted by the user.
        :returns: The validated address.
        :raises SubscriberValidationError: If the address is not well formed.
        """
        if _has_forbidden_characters(raw):
            raise SubscriberValidationError(f"{raw!r} is not a valid subscriber email.")

        if raw.count("@") != 1:
            raise SubscriberValidationError(f"{raw!r} is not a valid subscriber email.")

        local_part, domain = raw.split("@")
        if not local_part or "." not in domain:
            raise SubscriberValidationError(f"{raw!r} is not a valid subscriber email.")

        try:
            validate_email(raw, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError as e:
            raise SubscriberValidationError(f"{raw!r} is not a valid subscriber email.") from e

        return cls(raw)

    def __str__(self) -> str:
        """Return the address."""
        return self.value
