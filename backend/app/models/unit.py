from sqlalchemy import Column, DateTime, Integer, String

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class Unit(Base):
    __tablename__ = "units"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(10), nullable=True)
    name = Column(String(25), nullable=False)
    destroyed_at = Column(DateTime(timezone=True), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
