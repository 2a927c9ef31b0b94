"""Pydantic models for newsletter broadcasts."""

from pydantic import BaseModel, Field


class NewsletterIssue(BaseModel):
    """One newsletter issue to deliver to every confirmed subscriber."""

    title: str = Field(..., description="Email subject")
    html_content: str = Field(..., description="HTML body")
    text_content: str = Field(..., description="Plain-text body")


class BroadcastResult(BaseModel):
    """Result of a completed broadcast."""

    recipients: int = 0
