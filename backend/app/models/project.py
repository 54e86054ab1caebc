from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


def _new_uuid() -> str:
    return str(uuid4())


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    organisation_id = Column(
        Integer, ForeignKey("organisations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    uuid = Column(String(36), nullable=False, unique=True, default=_new_uuid)
    destroyed_at = Column(DateTime(timezone=True), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
