"""GET /v1/reference - option lists for building a calculation request"""

from fastapi import APIRouter

from visa_fee_gateway.api.v1.schemas import PaymentMethodSchema, PriorVisaOptionSchema, ReferenceResponse
from visa_fee_gateway.domain.models import PRIOR_VISA_OPTIONS, SURCHARGE_RATES, LodgementMode

router = APIRouter()


@router.get("/reference", response_model=ReferenceResponse)
def get_reference():
    """Payment methods with surcharge rates, lodgement modes and prior visa codes"""
    return ReferenceResponse(
        payment_methods=[
            PaymentMethodSchema(method=method, surcharge_rate=str(rate))
            for method, rate in SURCHARGE_RATES.items()
        ],
        lodgement_modes=list(LodgementMode),
        prior_visas=[
            PriorVisaOptionSchema(code=code, label=label)
            for code, label in PRIOR_VISA_OPTIONS.items()
        ],
    )
