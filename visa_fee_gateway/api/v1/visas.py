"""GET/POST /v1/visas - browse and reload the visa charge table"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from visa_fee_gateway.api.v1.schemas import RefreshResponse, VisaListResponse, VisaRecordSchema
from visa_fee_gateway.api.dependencies import get_request_id, get_schedule_client, get_schedule_store
from visa_fee_gateway.domain.exceptions import ScheduleSourceError
from visa_fee_gateway.domain.models import FeeScheduleRecord
from visa_fee_gateway.infrastructure.clients.schedule import ScheduleClient
from visa_fee_gateway.infrastructure.observability.metrics import schedule_refresh_failures_counter
from visa_fee_gateway.infrastructure.schedule_store import ScheduleStore

router = APIRouter()


def record_to_schema(record: FeeScheduleRecord) -> VisaRecordSchema:
    return VisaRecordSchema(
        subclass_code=record.subclass_code,
        visa_name=record.visa_name,
        base_fee=record.base_fee,
        subsequent_fee=record.subsequent_fee,
        non_internet_fee=record.non_internet_fee,
        additional_adult_fee=record.additional_adult_fee,
        additional_child_fee=record.additional_child_fee,
    )


@router.get("/visas", response_model=VisaListResponse)
def list_visas(
    search: str | None = Query(None, description="Filter by subclass number or visa name"),
    store: ScheduleStore = Depends(get_schedule_store),
):
    """
    List visa subclasses in the loaded schedule.

    Returns:
        Matching records; an empty list when no schedule is loaded
    """
    snapshot = store.snapshot
    if snapshot is None:
        return VisaListResponse(count=0, visas=[])

    matches = snapshot.search(search)
    return VisaListResponse(
        loaded_at=snapshot.loaded_at.isoformat(),
        count=len(matches),
        visas=[record_to_schema(r) for r in matches],
    )


@router.get("/visas/{subclass_code}", response_model=VisaRecordSchema)
def get_visa(subclass_code: str, store: ScheduleStore = Depends(get_schedule_store)):
    """Retrieve a single subclass from the loaded schedule"""
    snapshot = store.snapshot
    record = snapshot.find(subclass_code) if snapshot is not None else None

    if not record:
        raise HTTPException(status_code=404, detail="Visa subclass not found")

    return record_to_schema(record)


@router.post("/visas/refresh", response_model=RefreshResponse)
async def refresh_visas(
    request: Request,
    store: ScheduleStore = Depends(get_schedule_store),
    schedule_client: ScheduleClient = Depends(get_schedule_client),
):
    """
    Reload the charge table from the remote store.

    The previous snapshot stays active when the store is unavailable.
    """
    request_id = get_request_id(request)

    try:
        snapshot = await store.refresh(schedule_client)
    except ScheduleSourceError as e:
        schedule_refresh_failures_counter.inc()
        logging.error(f"Schedule store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Rate schedule store unavailable")

    return RefreshResponse(loaded_at=snapshot.loaded_at.isoformat(), count=len(snapshot))
