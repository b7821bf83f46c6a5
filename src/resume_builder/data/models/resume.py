from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_builder.data.db import Base

if TYPE_CHECKING:
    from resume_builder.data.models.user import User


class ResumeRecord(Base):
    """
    The single resume document saved by a user.

    Scalar fields get their own columns; each list or nested section is stored
    as a JSON string in the camelCase form the API exchanges.
    """

    __tablename__ = "resumes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="My Resume")
    template_style: Mapped[str] = mapped_column(
        String(32), nullable=False, default="professional"
    )
    target_role: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    professional_summary: Mapped[str] = mapped_column(Text, nullable=False, default="")

    personal_info: Mapped[str] = mapped_column(Text, nullable=False, default="{}")
    work_experience: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    education: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    skills: Mapped[str] = mapped_column(Text, nullable=False, default="{}")
    certifications: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    projects: Mapped[str] = mapped_column(Text, nullable=False, default="[]")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    # Relationships
    user: Mapped[User] = relationship("User", back_populates="resume")
