"""SQLAlchemy ORM models for the content store."""
import datetime
from sqlalchemy import Boolean, Column, DateTime, JSON, String, Text
from .database import Base


class Tool(Base):
    __tablename__ = "tools"

    id = Column(String(64), primary_key=True)
    name = Column(String(128), nullable=False, index=True)
    description = Column(Text, default="")
    category = Column(String(64), nullable=False)  # free-form label, normalized at lookup
    config = Column(JSON, default=dict)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)
