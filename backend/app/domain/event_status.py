"""Lifecycle status of a group's last event.

An event is ``active`` up to and including its end date, ``inReview`` up to
and including the end of its review window, and ``done`` afterwards. A group
without any event is ``done``.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
import math

from .enums import EventStatus

# Milliseconds of review window per configured "hour". Kept at 60 * 60 * 100
# (not * 1000) so stored review durations keep their historical meaning.
REVIEW_MS_PER_HOUR = 60 * 60 * 100


@dataclass(frozen=True)
class EventRecord:
    end_date: datetime
    review_duration_in_hours: float

    @property
    def review_window(self) -> Optional[timedelta]:
        """Length of the review window; None when too long for a timedelta."""
        try:
            return timedelta(milliseconds=self.review_duration_in_hours * REVIEW_MS_PER_HOUR)
        except OverflowError:
            return None

    @property
    def review_deadline(self) -> Optional[datetime]:
        """End of the review window; None when past the datetime range."""
        window = self.review_window
        if window is None:
            return None
        try:
            return self.end_date + window
        except OverflowError:
            return None


def compute_event_status(event: Optional[EventRecord], now: datetime) -> EventStatus:
    """Classify ``event`` against ``now``; both boundaries are inclusive.

    An unrepresentably long review window never elapses. A NaN duration has
    no deadline to be within, so the event counts as done once it ended.
    """
    if event is None:
        return EventStatus.DONE
    if now <= event.end_date:
        return EventStatus.ACTIVE
    if math.isnan(event.review_duration_in_hours):
        return EventStatus.DONE
    window = event.review_window
    # elapsed time instead of end_date + window keeps this inside datetime range
    if window is None or now - event.end_date <= window:
        return EventStatus.IN_REVIEW
    return EventStatus.DONE
