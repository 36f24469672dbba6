from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional
import math
from ..db.session import get_db
from ..db import models
from ..adapters.sql_event_lookup import SqlAlchemyEventLookup, as_utc
from ..services.event_service import EventService, EventNotFound
from ..usecases.check_last_event_status import CheckLastEventStatusUseCase
from ..errors import ValidationAppError, NotFoundError
from ..domain.enums import EventStatus

router = APIRouter(prefix="/groups", tags=["groups"])

class EventCreate(BaseModel):
    title: Optional[str] = None
    end_at: datetime = Field(..., alias="endAt")
    review_duration_in_hours: float = Field(..., alias="reviewDurationInHours")

class EventOut(BaseModel):
    id: str
    group_id: str = Field(..., alias="groupId")
    title: Optional[str] = None
    end_at: datetime = Field(..., alias="endAt")
    review_duration_in_hours: float = Field(..., alias="reviewDurationInHours")
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)

class StatusOut(BaseModel):
    group_id: str = Field(..., alias="groupId")
    status: EventStatus

    model_config = ConfigDict(populate_by_name=True)


def _event_out(event: models.Event) -> EventOut:
    return EventOut(
        id=event.id,
        groupId=event.group_id,
        title=event.title,
        endAt=as_utc(event.end_at),
        reviewDurationInHours=event.review_duration_in_hours,
        createdAt=as_utc(event.created_at),
    )

@router.post("/{group_id}/events", response_model=EventOut, status_code=201)
def create_event(group_id: str, body: EventCreate, db: Session = Depends(get_db)):
    hours = body.review_duration_in_hours
    if not math.isfinite(hours) or hours < 0:
        raise ValidationAppError("EVENT_INVALID_REVIEW_DURATION", "review duration must be a finite, non-negative number")

    event = EventService().create_event(
        db=db,
        group_id=group_id,
        end_at=body.end_at,
        review_duration_in_hours=body.review_duration_in_hours,
        title=body.title,
    )
    return _event_out(event)

@router.get("/{group_id}/events/last", response_model=EventOut)
def get_last_event(group_id: str, db: Session = Depends(get_db)):
    try:
        event = EventService().get_last_event(db, group_id)
    except EventNotFound:
        raise NotFoundError("EVENT_NOT_FOUND", "Group has no events")
    return _event_out(event)

@router.get("/{group_id}/status", response_model=StatusOut)
async def get_status(group_id: str, db: Session = Depends(get_db)):
    use_case = CheckLastEventStatusUseCase(SqlAlchemyEventLookup(db))
    result = await use_case.execute(group_id)
    return StatusOut(groupId=group_id, status=result.status)
