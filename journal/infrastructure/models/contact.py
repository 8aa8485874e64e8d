"""SQLAlchemy model for contacts."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from journal.infrastructure.database import Base
from journal.utils import now_in_app_naive_datetime


class ContactModel(Base):
    """Database representation of a contact."""

    __tablename__ = "contact"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    title = Column(String(150), nullable=True)
    company = Column(String(200), nullable=True)
    email = Column(String(254), nullable=True)
    phone = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["ContactModel"]
