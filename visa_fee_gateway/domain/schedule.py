"""Immutable snapshot of the visa charge table"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from visa_fee_gateway.domain.models import FeeScheduleRecord


@dataclass(frozen=True)
class ScheduleSnapshot:
    """Charge table as loaded at one point in time"""

    records: Tuple[FeeScheduleRecord, ...] = ()
    loaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_records(cls, records: Iterable[FeeScheduleRecord]) -> "ScheduleSnapshot":
        return cls(records=tuple(records))

    def find(self, subclass_code: str) -> Optional[FeeScheduleRecord]:
        """First record with a matching subclass code, like the source lookup"""
        for record in self.records:
            if record.subclass_code == subclass_code:
                return record
        return None

    def search(self, query: str | None) -> List[FeeScheduleRecord]:
        return search_records(self.records, query)

    def __len__(self) -> int:
        return len(self.records)


def search_records(records: Iterable[FeeScheduleRecord], query: str | None) -> List[FeeScheduleRecord]:
    """Case-insensitive substring match on "<subclass> <name>"; empty query matches all"""
    needle = (query or "").strip().lower()
    if not needle:
        return list(records)
    return [
        record
        for record in records
        if needle in f"{record.subclass_code} {record.visa_name}".lower()
    ]
