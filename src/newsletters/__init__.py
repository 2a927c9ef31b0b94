"""Newsletter broadcasts."""

from src.newsletters.models import BroadcastResult, NewsletterIssue
from src.newsletters.publish import get_confirmed_subscribers, publish_newsletter

__all__ = [
    "BroadcastResult",
    "NewsletterIssue",
    "get_confirmed_subscribers",
    "publish_newsletter",
]
