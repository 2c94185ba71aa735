"""Notification preference and coverage area models."""
import uuid
from datetime import datetime
from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agentcast.database import Base
from agentcast.services.price_range import PriceRangePreference


class NotificationPreference(Base):
    """Which broadcasts an agent wants, one row per agent."""

    __tablename__ = "notification_preferences"

    agent_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("agents.id", ondelete="CASCADE"), primary_key=True
    )
    buyer_need: Mapped[bool] = mapped_column(Boolean, default=False)
    sales_intel: Mapped[bool] = mapped_column(Boolean, default=False)
    renter_need: Mapped[bool] = mapped_column(Boolean, default=False)
    general_discussion: Mapped[bool] = mapped_column(Boolean, default=False)

    # Price range (has_no_* wins over the stored number)
    min_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    max_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    has_no_min: Mapped[bool] = mapped_column(Boolean, default=False)
    has_no_max: Mapped[bool] = mapped_column(Boolean, default=False)

    property_types: Mapped[list] = mapped_column(JSON, default=list)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    agent: Mapped["Agent"] = relationship("Agent", back_populates="notification_preference")

    @property
    def price_range(self) -> PriceRangePreference:
        return PriceRangePreference(
            min_price=self.min_price,
            max_price=self.max_price,
            has_no_min=bool(self.has_no_min),
            has_no_max=bool(self.has_no_max),
        )


class AgentCoverageArea(Base):
    """One covered location: a whole state, county, town or a town's neighborhood."""

    __tablename__ = "agent_coverage_areas"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    agent_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("agents.id", ondelete="CASCADE"), index=True
    )
    state: Mapped[str] = mapped_column(String(2), nullable=False, index=True)
    county: Mapped[str | None] = mapped_column(String(100), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    neighborhood: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    agent: Mapped["Agent"] = relationship("Agent", back_populates="coverage_areas")
