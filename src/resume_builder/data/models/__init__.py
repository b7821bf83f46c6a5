"""ORM models package for database tables.

- User: Login account keyed by email
- ResumeRecord: The one saved resume document per user

All models inherit from the shared Base declarative class defined in data.db.
"""

from resume_builder.data.db import Base
from resume_builder.data.models.resume import ResumeRecord
from resume_builder.data.models.user import User

__all__ = ["Base", "ResumeRecord", "User"]
