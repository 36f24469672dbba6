from sqlalchemy.orm import Session
from datetime import datetime, timezone
from typing import Optional
import logging
from ..db import models
from ..repositories.event_repository import EventRepository, SqlAlchemyEventRepository

logger = logging.getLogger(__name__)

class EventNotFound(Exception):
    pass

class EventService:
    def __init__(self, repository: EventRepository | None = None):
        self.repo = repository or SqlAlchemyEventRepository()

    def create_event(self, db: Session, group_id: str, end_at: datetime,
                    review_duration_in_hours: float,
                    title: Optional[str] = None) -> models.Event:
        # Store UTC; naive input is taken as UTC already
        if end_at.tzinfo is not None:
            end_at = end_at.astimezone(timezone.utc)
        else:
            end_at = end_at.replace(tzinfo=timezone.utc)
        event = models.Event(
            group_id=group_id,
            title=title,
            end_at=end_at,
            review_duration_in_hours=review_duration_in_hours,
        )
        event = self.repo.add(db, event)
        logger.info("recorded event %s for group %s", event.id, group_id)
        return event

    def get_last_event(self, db: Session, group_id: str) -> models.Event:
        event = self.repo.find_last_by_group(db, group_id)
        if not event:
            raise EventNotFound()
        return event
