"""Rate schedule HTTP client for fetching the visa charge table"""

import httpx
from typing import Any, Dict, List, Tuple
from visa_fee_gateway.domain.models import FeeScheduleRecord
from visa_fee_gateway.domain.exceptions import ScheduleSourceError, InvalidScheduleDataError
from visa_fee_gateway.config import settings
from visa_fee_gateway.infrastructure.observability.logging import log_unparsable_charge
from visa_fee_gateway.infrastructure.observability.metrics import unparsable_charge_counter
from visa_fee_gateway.utils.charge_utils import extract_subclass_code, is_parsable_charge, parse_charge

NAME_FIELD = "Visa Subclass"

# Source column -> FeeScheduleRecord attribute
CHARGE_FIELDS: Dict[str, str] = {
    "Base Application Charge": "base_fee",
    "Subsequent Temporary Application charge": "subsequent_fee",
    "Non - Internet Application charge": "non_internet_fee",
    "Additional Applicant 18 years and Over": "additional_adult_fee",
    "Additional Applicant under 18 years": "additional_child_fee",
}


def record_from_raw(item: Dict[str, Any]) -> Tuple[FeeScheduleRecord, List[str]]:
    """
    Map one raw store item onto a FeeScheduleRecord.

    Returns the record and the source columns whose values could not be
    parsed (those default to 0).
    """
    visa_name = str(item.get(NAME_FIELD) or "")
    charges: Dict[str, int] = {}
    unparsable: List[str] = []

    for column, attribute in CHARGE_FIELDS.items():
        raw_value = item.get(column)
        if not is_parsable_charge(raw_value):
            unparsable.append(column)
        charges[attribute] = parse_charge(raw_value)

    record = FeeScheduleRecord(
        subclass_code=extract_subclass_code(visa_name),
        visa_name=visa_name,
        **charges,
    )
    return record, unparsable


def records_from_payload(data: Any) -> List[FeeScheduleRecord]:
    """
    Convert the store's JSON object into records, in store order.

    Raises:
        InvalidScheduleDataError: When the payload is not an object of items
    """
    if not isinstance(data, dict):
        raise InvalidScheduleDataError("Invalid schedule response format")

    records = []
    for item in data.values():
        if not isinstance(item, dict):
            raise InvalidScheduleDataError(f"Invalid schedule item: {item!r}")

        record, unparsable = record_from_raw(item)
        for column in unparsable:
            unparsable_charge_counter.labels(field=CHARGE_FIELDS[column]).inc()
            log_unparsable_charge(record.visa_name, column, item.get(column))
        records.append(record)

    return records


class ScheduleClient:
    """Client for the external visa charge store"""

    def __init__(
        self,
        source_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.source_url = source_url or settings.schedule_source_url
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_records(self) -> List[FeeScheduleRecord]:
        """
        Fetch the full charge table.

        Raises:
            ScheduleSourceError: On timeout, HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(self.source_url)
                response.raise_for_status()
                data = response.json()

            except httpx.TimeoutException as e:
                raise ScheduleSourceError(f"Schedule store timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise ScheduleSourceError(f"Schedule store error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise ScheduleSourceError(f"Schedule store unreachable: {e}") from e
            except ValueError as e:
                raise InvalidScheduleDataError(f"Invalid schedule data: {e}") from e

        return records_from_payload(data)
