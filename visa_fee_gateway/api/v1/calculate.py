"""POST /v1/fees/calculate - visa application charge calculation endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from visa_fee_gateway.api.v1.schemas import BreakdownResponse, CalculationRequest, CalculationResponse
from visa_fee_gateway.api.dependencies import get_request_id, get_schedule_store
from visa_fee_gateway.infrastructure.schedule_store import ScheduleStore
from visa_fee_gateway.domain.composition import build_composition
from visa_fee_gateway.domain.fees import calculate
from visa_fee_gateway.domain.models import FeeBreakdown, FeeCalculationInput
from visa_fee_gateway.infrastructure.observability.metrics import record_calculation
from visa_fee_gateway.infrastructure.observability.logging import log_calculation
from visa_fee_gateway.utils.charge_utils import format_currency

router = APIRouter()


def breakdown_to_response(breakdown: FeeBreakdown) -> BreakdownResponse:
    return BreakdownResponse(
        base_fee=format_currency(breakdown.base_fee),
        non_internet_fee=format_currency(breakdown.non_internet_fee),
        subsequent_fee_primary=format_currency(breakdown.subsequent_fee_primary),
        subsequent_fee_secondary=format_currency(breakdown.subsequent_fee_secondary),
        subsequent_fee_dependent=format_currency(breakdown.subsequent_fee_dependent),
        additional_adult_fee=format_currency(breakdown.additional_adult_fee),
        additional_child_fee=format_currency(breakdown.additional_child_fee),
        subtotal=format_currency(breakdown.subtotal),
        surcharge_rate=str(breakdown.surcharge_rate),
        surcharge=format_currency(breakdown.surcharge),
        total=format_currency(breakdown.total),
    )


@router.post("/fees/calculate", response_model=CalculationResponse)
def calculate_fees(
    request_body: CalculationRequest,
    request: Request,
    store: ScheduleStore = Depends(get_schedule_store),
):
    """
    Calculate the itemized charges for a visa application.

    Flow:
    1. Build the applicant composition (onshore reset rule applied)
    2. Take the current schedule snapshot
    3. Compute the breakdown (unknown subclass -> all zeros)
    4. Record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        composition = build_composition(
            secondary_count=request_body.secondary_count,
            dependent_count=request_body.dependent_count,
            primary_onshore=request_body.primary.is_onshore,
            primary_prior_visa=request_body.primary.prior_visa,
            secondary_onshore=request_body.secondary.is_onshore,
            secondary_prior_visa=request_body.secondary.prior_visa,
            dependent_onshore=request_body.dependent.is_onshore,
            dependent_prior_visa=request_body.dependent.prior_visa,
        )
        calculation = FeeCalculationInput(
            subclass_code=request_body.subclass_code,
            composition=composition,
            lodgement=request_body.lodgement,
            payment=request_body.payment_method,
        )

        # Single read so the record lookup and the calculation share one schedule
        snapshot = store.snapshot
        record = snapshot.find(calculation.subclass_code) if snapshot is not None else None
        breakdown = calculate(snapshot, calculation)

        duration_ms = (time.time() - start_time) * 1000
        record_calculation(request_body.payment_method.value, record is not None, float(breakdown.total))
        log_calculation(
            request_id,
            request_body.subclass_code,
            record is not None,
            format_currency(breakdown.total),
            duration_ms,
        )

        return CalculationResponse(
            subclass_code=request_body.subclass_code,
            visa_name=record.visa_name if record else None,
            record_found=record is not None,
            breakdown=breakdown_to_response(breakdown),
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
