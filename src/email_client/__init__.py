"""Outbound email delivery."""

from src.email_client.client import EmailClient, EmailDeliveryError

__all__ = ["EmailClient", "EmailDeliveryError"]
