"""
Generic record database model.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, JSON, Index
from fintrack.database import Base


class Record(Base):
    """A schemaless record belonging to a named table of the record store."""

    __tablename__ = "records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    table_name = Column(String(100), nullable=False, index=True)
    data = Column(JSON, nullable=False, default=dict)
    created_on = Column(DateTime, default=datetime.utcnow, nullable=False)
    modified_on = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("idx_record_table_id", "table_name", "id"),
    )
