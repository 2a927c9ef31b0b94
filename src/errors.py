"""Exception taxonomy for the subscriptions service.

Every error raised across a layer boundary derives from
``SubscriptionServiceError`` and keeps the original exception as its
``__cause__`` (``raise ... from err``) so diagnostics can render the full chain.
"""


class SubscriptionServiceError(Exception):
    """Base class for all service errors."""


class SubscriberValidationError(SubscriptionServiceError, ValueError):
    """Raised when a raw name or email cannot be turned into a subscriber identity.

    The message is safe to return to clients.
    """


class PersistenceError(SubscriptionServiceError):
    """Raised when the subscription store is unavailable or rejects a write."""


class TokenNotFoundError(SubscriptionServiceError):
    """Raised when a confirmation token does not resolve to a subscriber."""


class DeliveryError(SubscriptionServiceError):
    """Raised when an outbound email could not be delivered."""


class ConfirmationEmailError(DeliveryError):
    """Raised when the confirmation email for a new subscriber fails to send."""


class NewsletterDeliveryError(DeliveryError):
    """Raised when a newsletter broadcast aborts on a recipient.

    :param recipient: Address of the recipient whose delivery failed.
    """

    def __init__(self, message: str, recipient: str) -> None:
        """Initialise the error.

        :param message: Error message.
        :param recipient: Address of the failing recipient.
        """
        super().__init__(message)
        self.recipient = recipient


def format_error_chain(error: BaseException) -> str:
    """Render an exception and every exception it was raised from.

    Follows ``__cause__`` first and falls back to ``__context__`` unless the
    context was explicitly suppressed.

    :param error: The outermost exception.
    :returns: A multi-line description, outermost error first.
    """
    lines = [f"{type(error).__name__}: {error}"]
    seen = {id(error)}
    current: BaseException | None = error

    while current is not None:
        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__context__ is not None and not current.__suppress_context__:
            current = current.__context__
        else:
            current = None

        if current is None or id(current) in seen:
            break
        seen.add(id(current))
        lines.append(f"Caused by:\n\t{type(current).__name__}: {current}")

    return "\n".join(lines)
