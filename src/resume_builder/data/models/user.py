"""User account model.

Accounts are keyed by a normalized (stripped, lower-cased) email address.
Passwords are stored as salted PBKDF2 hashes, never in plaintext.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_builder.data.db import Base

if TYPE_CHECKING:
    from resume_builder.data.models.resume import ResumeRecord


class User(Base):
    """Application user account.

    Attributes:
        id: Auto-incrementing primary key.
        email: Unique, normalized login address.
        first_name: Given name.
        last_name: Family name.
        date_of_birth: Free-text date of birth as entered at sign-up.
        password_hash: Salted hash of the user's password.
        auth_provider: How the account signs in; only ``local`` is supported.
        created_at: UTC timestamp when the account was created.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str] = mapped_column(String(128), nullable=False)
    date_of_birth: Mapped[str] = mapped_column(String(32), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(256), nullable=False)
    auth_provider: Mapped[str] = mapped_column(String(32), nullable=False, default="local")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    resume: Mapped[ResumeRecord | None] = relationship(
        "ResumeRecord", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
