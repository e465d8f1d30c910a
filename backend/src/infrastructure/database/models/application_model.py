"""Application SQLAlchemy model."""

from datetime import datetime
from sqlalchemy import String, Integer, Boolean, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class ApplicationModel(Base):
    """SQLAlchemy model for founder applications."""
    
    __tablename__ = "applications"
    
    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    # Public identifier for status tracking
    tracking_token: Mapped[str] = mapped_column(
        String(36),
        unique=True,
        index=True,
        nullable=False
    )
    
    # Founder
    founder_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    
    # Venture
    venture_name: Mapped[str] = mapped_column(String(255), nullable=False)
    industry: Mapped[str] = mapped_column(String(100), default="Technology", nullable=False)
    
    # Private storage keys
    pitch_deck_key: Mapped[str] = mapped_column(Text, nullable=False)
    business_plan_key: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    gdpr_consent: Mapped[bool] = mapped_column(Boolean, nullable=False)
    
    # Review workflow
    status: Mapped[str] = mapped_column(
        String(50),
        default="Submitted",
        nullable=False,
        index=True
    )
    
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False
    )
    
    def __repr__(self) -> str:
        return f"<ApplicationModel(id={self.id}, status={self.status})>"
