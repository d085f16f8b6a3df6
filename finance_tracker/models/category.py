import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey
from finance_tracker.core.database import Base
from finance_tracker.models.profile import utcnow


def new_id():
    return str(uuid.uuid4())


class Category(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), index=True, nullable=False)

    name = Column(String, nullable=False)
    icon = Column(String, nullable=False, default="money")
    color = Column(String(7), nullable=False, default="#3b82f6")
    type = Column(String, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


class GlobalCategory(Base):
    __tablename__ = "global_categories"

    id = Column(String(36), primary_key=True, default=new_id)

    name = Column(String, nullable=False, unique=True)
    icon = Column(String, nullable=False, default="money")
    color = Column(String(7), nullable=False, default="#3b82f6")
    type = Column(String, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
