"""
Activity: append-only feed entry for the acting user. Display only; never read for authorization.
"""
import uuid
from datetime import datetime
from sqlalchemy import Integer, String, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from educonnect.database import Base
from educonnect.models.types import UuidType, ActivityType, sql_in, utcnow


class Activity(Base):
    __tablename__ = "activities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        UuidType(), ForeignKey("users.id"), nullable=False, index=True
    )
    type: Mapped[str] = mapped_column(String(30), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    related_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False, index=True)

    __table_args__ = (CheckConstraint(f"type IN ({sql_in(ActivityType)})", name="activities_type_check"),)

    user = relationship("User", back_populates="activities")
