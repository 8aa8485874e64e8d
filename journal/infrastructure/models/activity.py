"""SQLAlchemy models for project activities and their assignees."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship

from journal.infrastructure.database import Base
from journal.utils import now_in_app_naive_datetime

activity_contact_table = Table(
    "activity_contact",
    Base.metadata,
    Column(
        "activity_id",
        Integer,
        ForeignKey("project_activity.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "contact_id",
        Integer,
        ForeignKey("contact.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("assigned_at", DateTime(), nullable=False, default=now_in_app_naive_datetime),
)


class ActivityModel(Base):
    """Database representation of an activity inside a project."""

    __tablename__ = "project_activity"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(
        Integer,
        ForeignKey("project.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    estimated_completion_date = Column(Date(), nullable=True)
    status = Column(String(20), nullable=False, default="pending", index=True)
    activated_at = Column(DateTime(), nullable=True)
    paused_at = Column(DateTime(), nullable=True)
    completed_at = Column(DateTime(), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    project = relationship("ProjectModel", lazy="joined")
    assignees = relationship(
        "ContactModel",
        secondary=activity_contact_table,
        lazy="selectin",
        order_by="ContactModel.name",
    )


__all__ = ["ActivityModel", "activity_contact_table"]
