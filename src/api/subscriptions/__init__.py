"""Subscription endpoints."""

from src.api.subscriptions.endpoints import router

__all__ = ["router"]
