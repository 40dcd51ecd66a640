"""Visa fee calculation engine - core business logic for application charges"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from visa_fee_gateway.domain.models import (
    NO_PRIOR_VISA,
    PRIOR_VISA_OPTIONS,
    SURCHARGE_RATES,
    ApplicantComposition,
    ApplicantGroup,
    FeeBreakdown,
    FeeCalculationInput,
    FeeScheduleRecord,
    LodgementMode,
    PaymentMethod,
)
from visa_fee_gateway.domain.schedule import ScheduleSnapshot

CENTS = Decimal("0.01")


def _money(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def surcharge_rate_for(payment: PaymentMethod | str) -> Decimal:
    """Percentage surcharge for a payment method; unknown methods carry none"""
    if not isinstance(payment, str):
        return Decimal("0")
    return SURCHARGE_RATES.get(payment, Decimal("0"))


def subsequent_fee_for(
    record: FeeScheduleRecord, group: ApplicantGroup, count: int
) -> Decimal:
    """
    Subsequent temporary application charge for one applicant category.

    Charged per applicant only when the schedule has the charge, the category
    is onshore, and it held one of the recognised prior temporary visas.
    Unrecognised prior visa codes are treated as "none".
    """
    if record.subsequent_fee <= 0 or not group.is_onshore:
        return Decimal(0)
    prior_visa = group.prior_visa
    if not isinstance(prior_visa, str) or prior_visa == NO_PRIOR_VISA or prior_visa not in PRIOR_VISA_OPTIONS:
        return Decimal(0)
    return Decimal(record.subsequent_fee) * max(count, 0)


def compute_breakdown(
    record: Optional[FeeScheduleRecord],
    composition: ApplicantComposition,
    lodgement: LodgementMode | str,
    payment: PaymentMethod | str,
) -> FeeBreakdown:
    """
    Compute the itemized charges for a visa application.

    Steps:
    - Base application charge
    - Non-internet charge when lodging offline and the schedule has one
    - Subsequent charge per onshore category (primary always counts once)
    - Additional applicant charges per secondary adult and dependent child
    - Payment surcharge as a percentage of the subtotal

    Amounts are accumulated unrounded and quantized to cents once at the end.
    A missing record yields an all-zero breakdown; nothing here raises.

    Example:
        base 1650 + secondary subsequent 790 + adult 1240 + child 415
        = 4095 subtotal, 1.4% surcharge 57.33, total 4152.33
    """
    if record is None:
        return FeeBreakdown()

    secondary_count = max(composition.secondary.count, 0)
    dependent_count = max(composition.dependent.count, 0)

    base = Decimal(record.base_fee)

    non_internet = Decimal(0)
    if lodgement == LodgementMode.OFFLINE and record.non_internet_fee > 0:
        non_internet = Decimal(record.non_internet_fee)

    subsequent_primary = subsequent_fee_for(record, composition.primary, 1)
    subsequent_secondary = subsequent_fee_for(record, composition.secondary, secondary_count)
    subsequent_dependent = subsequent_fee_for(record, composition.dependent, dependent_count)

    additional_adult = Decimal(record.additional_adult_fee) * secondary_count
    additional_child = Decimal(record.additional_child_fee) * dependent_count

    subtotal = (
        base
        + non_internet
        + subsequent_primary
        + subsequent_secondary
        + subsequent_dependent
        + additional_adult
        + additional_child
    )

    rate = surcharge_rate_for(payment)
    surcharge = subtotal * rate / 100
    total = subtotal + surcharge

    return FeeBreakdown(
        base_fee=_money(base),
        non_internet_fee=_money(non_internet),
        subsequent_fee_primary=_money(subsequent_primary),
        subsequent_fee_secondary=_money(subsequent_secondary),
        subsequent_fee_dependent=_money(subsequent_dependent),
        additional_adult_fee=_money(additional_adult),
        additional_child_fee=_money(additional_child),
        subtotal=_money(subtotal),
        surcharge_rate=rate,
        surcharge=_money(surcharge),
        total=_money(total),
    )


def calculate(schedule: Optional[ScheduleSnapshot], calculation: FeeCalculationInput) -> FeeBreakdown:
    """
    Main entry point: resolve the schedule record and compute the breakdown.

    An unloaded schedule or unknown subclass yields an all-zero breakdown.
    """
    record = schedule.find(calculation.subclass_code) if schedule is not None else None
    return compute_breakdown(
        record,
        calculation.composition,
        calculation.lodgement,
        calculation.payment,
    )
