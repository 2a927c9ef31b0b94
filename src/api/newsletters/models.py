"""Pydantic models for newsletter endpoints."""

from pydantic import BaseModel, Field


class NewsletterContent(BaseModel):
    """Both renditions of a newsletter body."""

    html: str = Field(..., description="HTML body")
    text: str = Field(..., description="Plain-text body")


class PublishNewsletterRequest(BaseModel):
    """Request model for publishing a newsletter issue."""

    title: str = Field(..., description="Newsletter title, used as the email subject")
    content: NewsletterContent = Field(..., description="Newsletter body")
