"""SQLAlchemy model for projects."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from journal.infrastructure.database import Base
from journal.utils import now_in_app_naive_datetime


class ProjectModel(Base):
    """Database representation of a project."""

    __tablename__ = "project"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["ProjectModel"]
