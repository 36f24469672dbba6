"""Domain enumerations for strong typing & validation."""
from enum import Enum

class EventStatus(str, Enum):
    ACTIVE = "active"
    IN_REVIEW = "inReview"
    DONE = "done"
