"""Agent directory model."""
import uuid
from datetime import datetime
from sqlalchemy import Boolean, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agentcast.database import Base
from agentcast.services.onboarding import OnboardingStep


class Agent(Base):
    """A real-estate agent who can send and receive broadcasts."""

    __tablename__ = "agents"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True, index=True)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    onboarding_step: Mapped[str] = mapped_column(
        String(20), default=OnboardingStep.WELCOME.value
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    notification_preference: Mapped["NotificationPreference"] = relationship(
        "NotificationPreference", back_populates="agent", uselist=False, cascade="all, delete-orphan"
    )
    coverage_areas: Mapped[list["AgentCoverageArea"]] = relationship(
        "AgentCoverageArea", back_populates="agent", cascade="all, delete-orphan"
    )

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
