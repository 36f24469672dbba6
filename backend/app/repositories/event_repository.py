from __future__ import annotations
from typing import Protocol, Optional
from sqlalchemy.orm import Session

from ..db import models


class EventRepository(Protocol):
    def find_last_by_group(self, db: Session, group_id: str) -> Optional[models.Event]: ...
    def add(self, db: Session, event: models.Event) -> models.Event: ...


class SqlAlchemyEventRepository:
    """SQLAlchemy-backed implementation; the last event is the one ending latest."""

    def find_last_by_group(self, db: Session, group_id: str) -> Optional[models.Event]:
        q = db.query(models.Event)
        q = q.filter(models.Event.group_id == group_id)
        q = q.order_by(models.Event.end_at.desc(), models.Event.created_at.desc())
        return q.first()

    def add(self, db: Session, event: models.Event) -> models.Event:
        db.add(event)
        db.commit()
        db.refresh(event)
        return event
