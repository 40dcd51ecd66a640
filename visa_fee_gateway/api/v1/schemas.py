"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List, Optional

from visa_fee_gateway.domain.models import NO_PRIOR_VISA, LodgementMode, PaymentMethod


class ApplicantGroupSchema(BaseModel):
    """Onshore status of one applicant category"""

    is_onshore: bool = False
    prior_visa: str = Field(NO_PRIOR_VISA, description="Prior visa code held onshore, or 'none'")


class CalculationRequest(BaseModel):
    """Request body for POST /v1/fees/calculate"""

    subclass_code: str = Field(..., min_length=1, description="Visa subclass, e.g. '500'")
    secondary_count: int = Field(0, ge=0, description="Additional applicants 18 and over")
    dependent_count: int = Field(0, ge=0, description="Additional applicants under 18")
    primary: ApplicantGroupSchema = Field(default_factory=ApplicantGroupSchema)
    secondary: ApplicantGroupSchema = Field(default_factory=ApplicantGroupSchema)
    dependent: ApplicantGroupSchema = Field(default_factory=ApplicantGroupSchema)
    lodgement: LodgementMode = LodgementMode.ONLINE
    payment_method: PaymentMethod = PaymentMethod.BPAY


class BreakdownResponse(BaseModel):
    """Itemized charges, as two-decimal strings"""

    base_fee: str
    non_internet_fee: str
    subsequent_fee_primary: str
    subsequent_fee_secondary: str
    subsequent_fee_dependent: str
    additional_adult_fee: str
    additional_child_fee: str
    subtotal: str
    surcharge_rate: str
    surcharge: str
    total: str


class CalculationResponse(BaseModel):
    """Response for POST /v1/fees/calculate"""

    subclass_code: str
    visa_name: Optional[str] = None
    record_found: bool
    breakdown: BreakdownResponse


class VisaRecordSchema(BaseModel):
    """Single row of the charge table"""

    subclass_code: str
    visa_name: str
    base_fee: int
    subsequent_fee: int
    non_internet_fee: int
    additional_adult_fee: int
    additional_child_fee: int


class VisaListResponse(BaseModel):
    """Response for GET /v1/visas"""

    loaded_at: Optional[str] = None
    count: int
    visas: List[VisaRecordSchema]


class RefreshResponse(BaseModel):
    """Response for POST /v1/visas/refresh"""

    loaded_at: str
    count: int


class PaymentMethodSchema(BaseModel):
    method: PaymentMethod
    surcharge_rate: str


class PriorVisaOptionSchema(BaseModel):
    code: str
    label: str


class ReferenceResponse(BaseModel):
    """Response for GET /v1/reference"""

    payment_methods: List[PaymentMethodSchema]
    lodgement_modes: List[LodgementMode]
    prior_visas: List[PriorVisaOptionSchema]
