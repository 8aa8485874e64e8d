"""SQLAlchemy model for generated summaries."""

from sqlalchemy import JSON, Boolean, Column, Date, DateTime, Index, Integer, String, Text

from journal.infrastructure.database import Base
from journal.utils import now_in_app_naive_datetime


class SummaryModel(Base):
    """Database representation of a period report."""

    __tablename__ = "summary"
    __table_args__ = (
        Index("ix_summary_dates", "start_date", "end_date"),
        Index("ix_summary_type", "summary_type"),
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    summary_type = Column(String(20), nullable=False)
    start_date = Column(Date(), nullable=False)
    end_date = Column(Date(), nullable=False)
    content = Column(Text, nullable=False)
    statistics = Column(JSON, nullable=False, default=dict)
    is_auto_generated = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["SummaryModel"]
