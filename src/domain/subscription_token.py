"""Subscription confirmation tokens."""

import secrets
import string
from typing import Protocol

SUBSCRIPTION_TOKEN_LENGTH = 25

# Alphabet for tokens: A-Za-z0-9 = 62 characters
# 25 characters = 62^25 ≈ 6.4e44 combinations
TOKEN_ALPHABET = string.ascii_letters + string.digits


class RandomSource(Protocol):
    """Anything that can pick a random element, such as ``random.Random``."""

    def choice(self, seq: str) -> str:
        """Pick one element of ``seq``."""
        ...


class TokenGenerator:
    """Generates unguessable subscription tokens from an injected random source."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        """Initialise the generator.

        :param rng: Random source. Defaults to the operating system CSPRNG.
        """
        self._rng: RandomSource = rng if rng is not None else secrets.SystemRandom()

    def generate(self) -> str:
        """Generate a new token.

        :returns: 25-character string from [A-Za-z0-9].
        """
        return "".join(self._rng.choice(TOKEN_ALPHABET) for _ in range(SUBSCRIPTION_TOKEN_LENGTH))


# Seeded once at import, shared by callers that do not inject their own
_default_generator = TokenGenerator()


def get_token_generator() -> TokenGenerator:
    """Get the process-wide token generator.

    :returns: The default TokenGenerator.
    """
    return _default_generator


def generate_subscription_token() -> str:
    """Generate a token with the process-wide generator.

    :returns: 25-character string from [A-Za-z0-9].
    """
    return _default_generator.generate()
