"""EventLookup adapter backed by the events table."""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from ..db import models
from ..domain.event_status import EventRecord
from ..repositories.event_repository import EventRepository, SqlAlchemyEventRepository


def as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo; stored values are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_event_record(event: models.Event) -> EventRecord:
    return EventRecord(end_date=as_utc(event.end_at), review_duration_in_hours=event.review_duration_in_hours)


class SqlAlchemyEventLookup:
    def __init__(self, db: Session, repository: EventRepository | None = None):
        self.db = db
        self.repo = repository or SqlAlchemyEventRepository()

    async def load_last_event(self, group_id: str) -> Optional[EventRecord]:
        event = await run_in_threadpool(self.repo.find_last_by_group, self.db, group_id)
        if event is None:
            return None
        return to_event_record(event)
