"""Validated subscriber display name."""

import unicodedata
from dataclasses import dataclass

import regex

from src.errors import SubscriberValidationError

MAX_NAME_LENGTH = 256
FORBIDDEN_CHARACTERS = frozenset('/()"<>\\{}')

# One match per extended grapheme cluster
_GRAPHEME_PATTERN = regex.compile(r"\X")


def _grapheme_length(value: str) -> int:
    return len(_GRAPHEME_PATTERN.findall(value))


@dataclass(frozen=True)
class SubscriberName:
    """A subscriber name that passed validation.

    Only ``parse`` should be used to build instances.
    """

    value: str

    @classmethod
    def parse(cls, raw: str) -> "SubscriberName":
        """Validate a raw name.

        :param raw: Name as submitted by the user.
        :returns: The validated name, with surrounding whitespace removed.
        :raises SubscriberValidationError: If the name is empty, longer than
            256 characters or contains a forbidden character.
        """
        trimmed = unicodedata.normalize("NFC", raw).strip()

        if not trimmed:
            raise SubscriberValidationError("Subscriber name must not be empty.")

        if _grapheme_length(trimmed) > MAX_NAME_LENGTH:
            raise SubscriberValidationError(
                f"Subscriber name must be at most {MAX_NAME_LENGTH} characters long."
            )

        forbidden = sorted(FORBIDDEN_CHARACTERS.intersection(trimmed))
        if forbidden:
            raise SubscriberValidationError(
                f"Subscriber name contains forbidden characters: {' '.join(forbidden)}"
            )

        return cls(trimmed)

    def __str__(self) -> str:
        """Return the name."""
        return self.value
