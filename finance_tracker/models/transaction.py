from sqlalchemy import Column, String, Float, Date, DateTime, Text, ForeignKey
from finance_tracker.core.database import Base
from finance_tracker.models.category import new_id
from finance_tracker.models.profile import utcnow


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), index=True, nullable=False)

    amount = Column(Float, nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, index=True, nullable=False)
    type = Column(String, nullable=False)

    # points at either categories.id or global_categories.id
    category_id = Column(String(36), index=True, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
