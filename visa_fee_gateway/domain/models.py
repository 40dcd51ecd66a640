"""Domain models - pure Python dataclasses representing fee calculation entities"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict

NO_PRIOR_VISA = "none"

# Prior temporary visas that trigger the subsequent temporary application charge
PRIOR_VISA_OPTIONS: Dict[str, str] = {
    NO_PRIOR_VISA: "No prior visa held onshore",
    "402_training_research_ot": "402 - Occupational Trainee stream",
    "402_training_research_r": "402 - Research stream",
    "407": "407 - Training visa",
    "408": "408 - Temporary Activity visa",
    "417": "417 - Working Holiday",
    "426": "426 - Domestic Worker (Diplomatic/Consular)",
    "442": "442 - Occupational Trainee",
    "457": "457 - Temporary Work (Skilled)",
    "462": "462 - Work and Holiday",
    "482": "482 - Temporary Skill Shortage (TSS)",
    "500": "500 - Student",
    "576": "576 - Foreign Affairs or Defence Sector",
    "600": "600 - Visitor",
    "602": "602 - Medical Treatment",
    "685": "685 - Medical Treatment (Long Stay)",
}


class LodgementMode(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"


class PaymentMethod(str, Enum):
    BPAY = "bpay"
    PAYPAL = "paypal"
    VISA = "visa"
    AMERICAN_EXPRESS = "american_express"
    MASTERCARD = "mastercard"
    UNIONPAY = "unionpay"


# Card/merchant surcharge as a percentage of the subtotal
SURCHARGE_RATES: Dict[PaymentMethod, Decimal] = {
    PaymentMethod.BPAY: Decimal("0"),
    PaymentMethod.PAYPAL: Decimal("1.01"),
    PaymentMethod.VISA: Decimal("1.4"),
    PaymentMethod.AMERICAN_EXPRESS: Decimal("1.4"),
    PaymentMethod.MASTERCARD: Decimal("1.4"),
    PaymentMethod.UNIONPAY: Decimal("1.69"),
}


class ApplicantCategory(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    DEPENDENT = "dependent"


FEE_FIELDS = (
    "base_fee",
    "subsequent_fee",
    "non_internet_fee",
    "additional_adult_fee",
    "additional_child_fee",
)


@dataclass(frozen=True)
class FeeScheduleRecord:
    """One row of the visa charge table for a subclass"""

    subclass_code: str
    visa_name: str
    base_fee: int = 0
    subsequent_fee: int = 0
    non_internet_fee: int = 0
    additional_adult_fee: int = 0
    additional_child_fee: int = 0

    def __post_init__(self) -> None:
        # Fees are non-negative whole amounts; anything else is no charge
        for name in FEE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                object.__setattr__(self, name, 0)


@dataclass(frozen=True)
class ApplicantGroup:
    """Applicants of one category sharing onshore status"""

    count: int = 0
    is_onshore: bool = False
    prior_visa: str = NO_PRIOR_VISA


@dataclass(frozen=True)
class ApplicantComposition:
    """Who is included in the application"""

    primary: ApplicantGroup = field(default_factory=lambda: ApplicantGroup(count=1))
    secondary: ApplicantGroup = field(default_factory=ApplicantGroup)
    dependent: ApplicantGroup = field(default_factory=ApplicantGroup)

    def group(self, category: ApplicantCategory) -> ApplicantGroup:
        return getattr(self, ApplicantCategory(category).value)


@dataclass(frozen=True)
class FeeCalculationInput:
    """Everything the engine needs besides the schedule itself"""

    subclass_code: str
    composition: ApplicantComposition = field(default_factory=ApplicantComposition)
    lodgement: LodgementMode = LodgementMode.ONLINE
    payment: PaymentMethod = PaymentMethod.BPAY


@dataclass(frozen=True)
class FeeBreakdown:
    """Itemized output of a fee calculation, amounts rounded to cents"""

    base_fee: Decimal = Decimal("0.00")
    non_internet_fee: Decimal = Decimal("0.00")
    subsequent_fee_primary: Decimal = Decimal("0.00")
    subsequent_fee_secondary: Decimal = Decimal("0.00")
    subsequent_fee_dependent: Decimal = Decimal("0.00")
    additional_adult_fee: Decimal = Decimal("0.00")
    additional_child_fee: Decimal = Decimal("0.00")
    subtotal: Decimal = Decimal("0.00")
    surcharge_rate: Decimal = Decimal("0")
    surcharge: Decimal = Decimal("0.00")
    total: Decimal = Decimal("0.00")
