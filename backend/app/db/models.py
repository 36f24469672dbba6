from sqlalchemy import Column, String, DateTime, Float
from datetime import datetime, timezone
from .session import Base
import uuid


def gen_uuid():
    return str(uuid.uuid4())

class Event(Base):
    __tablename__ = "events"
    id = Column(String, primary_key=True, default=gen_uuid)
    group_id = Column(String, nullable=False, index=True)
    title = Column(String, nullable=True)
    end_at = Column(DateTime, nullable=False, index=True)
    review_duration_in_hours = Column(Float, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
