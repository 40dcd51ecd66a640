"""In-memory holder for the current rate schedule snapshot"""

import logging
from typing import Optional

from visa_fee_gateway.domain.schedule import ScheduleSnapshot
from visa_fee_gateway.infrastructure.clients.schedule import ScheduleClient
from visa_fee_gateway.infrastructure.observability.metrics import schedule_records_gauge

logger = logging.getLogger(__name__)


class ScheduleStore:
    """
    Holds one immutable ScheduleSnapshot.

    Refresh builds a complete new snapshot before swapping the reference, so
    readers see either the old schedule or the new one, never a mix.
    """

    def __init__(self, snapshot: Optional[ScheduleSnapshot] = None):
        self._snapshot = snapshot

    @property
    def snapshot(self) -> Optional[ScheduleSnapshot]:
        return self._snapshot

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    def replace(self, snapshot: ScheduleSnapshot) -> None:
        self._snapshot = snapshot
        schedule_records_gauge.set(len(snapshot))

    async def refresh(self, client: ScheduleClient) -> ScheduleSnapshot:
        """
        Reload the schedule from the store.

        Raises:
            ScheduleSourceError: The current snapshot is kept when loading fails
        """
        records = await client.get_records()
        snapshot = ScheduleSnapshot.from_records(records)
        self.replace(snapshot)
        logger.info(
            "Rate schedule loaded",
            extra={"records": len(snapshot), "step": "schedule_refresh"},
        )
        return snapshot


schedule_store = ScheduleStore()
