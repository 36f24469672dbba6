from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable
import logging

from ..domain.enums import EventStatus
from ..domain.event_status import compute_event_status
from ..metrics import STATUS_CHECK_COUNT
from ..ports.event_lookup import EventLookup

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CheckLastEventStatusResult:
    status: EventStatus


class CheckLastEventStatusUseCase:
    def __init__(
        self,
        lookup: EventLookup,
        clock: Callable[[], datetime] | None = None,
    ):
        self.lookup = lookup
        self.clock = clock or utc_now

    async def execute(self, group_id: str) -> CheckLastEventStatusResult:
        event = await self.lookup.load_last_event(group_id)
        status = compute_event_status(event, self.clock())
        logger.debug("group %s last event status: %s", group_id, status.value)
        STATUS_CHECK_COUNT.labels(status=status.value).inc()
        return CheckLastEventStatusResult(status=status)
