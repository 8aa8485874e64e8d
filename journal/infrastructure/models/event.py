"""SQLAlchemy models for events and their linked contacts."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship

from journal.infrastructure.database import Base
from journal.utils import now_in_app_naive_datetime

event_contact_table = Table(
    "event_contact",
    Base.metadata,
    Column(
        "event_id",
        Integer,
        ForeignKey("event.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "contact_id",
        Integer,
        ForeignKey("contact.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class EventModel(Base):
    """Database representation of a dated interaction."""

    __tablename__ = "event"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    event_date = Column(DateTime(), nullable=False, index=True)
    event_type = Column(String(50), nullable=True)
    project_id = Column(
        Integer,
        ForeignKey("project.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    project = relationship("ProjectModel", lazy="joined")
    contacts = relationship(
        "ContactModel",
        secondary=event_contact_table,
        lazy="selectin",
        order_by="ContactModel.name",
    )


__all__ = ["EventModel", "event_contact_table"]
