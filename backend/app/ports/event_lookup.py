from __future__ import annotations
from typing import Protocol, Optional

from ..domain.event_status import EventRecord


class EventLookup(Protocol):
    """Abstracts loading a group's last event for testability."""

    async def load_last_event(self, group_id: str) -> Optional[EventRecord]:
        """Return the group's last event, or None if it never had one."""
        ...
