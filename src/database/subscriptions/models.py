"""SQLAlchemy ORM models for newsletter subscriptions."""

import uuid as uuid_module
from datetime import UTC, datetime
from enum import StrEnum

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.database.core import Base
from src.domain.subscription_token import SUBSCRIPTION_TOKEN_LENGTH


class SubscriptionStatus(StrEnum):
    """Status of a subscription.

    Subscriptions only ever move from PENDING_CONFIRMATION to CONFIRMED.
    """

    PENDING_CONFIRMATION = "pending_confirmation"
    CONFIRMED = "confirmed"


class Subscription(Base):
    """ORM model for newsletter subscribers."""

    __tablename__ = "subscriptions"

    id: Mapped[uuid_module.UUID] = mapped_column(
        Uuid(),
        primary_key=True,
        default=uuid_module.uuid4,
    )
    email: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    subscribed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=SubscriptionStatus.PENDING_CONFIRMATION.value,
    )

    tokens: Mapped[list["SubscriptionToken"]] = relationship(
        "SubscriptionToken",
        back_populates="subscriber",
    )

    __table_args__ = (Index("idx_subscriptions_status", "status"),)

    @property
    def is_confirmed(self) -> bool:
        """Check whether the subscriber completed the double opt-in."""
        return self.status == SubscriptionStatus.CONFIRMED.value

    def __repr__(self) -> str:
        """Return string representation of the subscription."""
        return f"<Subscription(id={self.id}, email={self.email!r}, status={self.status})>"


class SubscriptionToken(Base):
    """ORM model for confirmation tokens.

    Each token belongs to exactly one subscriber. Tokens are never updated.
    """

    __tablename__ = "subscription_tokens"

    subscription_token: Mapped[str] = mapped_column(
        String(SUBSCRIPTION_TOKEN_LENGTH),
        primary_key=True,
    )
    subscriber_id: Mapped[uuid_module.UUID] = mapped_column(
        Uuid(),
        ForeignKey("subscriptions.id"),
        nullable=False,
    )

    subscriber: Mapped["Subscription"] = relationship(
        "Subscription",
        back_populates="tokens",
    )

    __table_args__ = (Index("idx_subscription_tokens_subscriber_id", "subscriber_id"),)

    def __repr__(self) -> str:
        """Return string representation of the token row."""
        return f"<SubscriptionToken(subscriber_id={self.subscriber_id})>"
