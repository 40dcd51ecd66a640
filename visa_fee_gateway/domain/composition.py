"""Applicant composition state transitions"""

from dataclasses import replace

from visa_fee_gateway.domain.models import (
    NO_PRIOR_VISA,
    PRIOR_VISA_OPTIONS,
    ApplicantCategory,
    ApplicantComposition,
    ApplicantGroup,
)

ADJUSTABLE_CATEGORIES = (ApplicantCategory.SECONDARY, ApplicantCategory.DEPENDENT)


def _with_group(
    composition: ApplicantComposition, category: ApplicantCategory, group: ApplicantGroup
) -> ApplicantComposition:
    return replace(composition, **{ApplicantCategory(category).value: group})


def increment(composition: ApplicantComposition, category: ApplicantCategory) -> ApplicantComposition:
    """Add one applicant to secondary or dependent; primary is fixed at one"""
    if category not in ADJUSTABLE_CATEGORIES:
        return composition
    group = composition.group(category)
    return _with_group(composition, category, replace(group, count=group.count + 1))


def decrement(composition: ApplicantComposition, category: ApplicantCategory) -> ApplicantComposition:
    """Remove one applicant; at zero this is a no-op"""
    if category not in ADJUSTABLE_CATEGORIES:
        return composition
    group = composition.group(category)
    return _with_group(composition, category, replace(group, count=max(group.count - 1, 0)))


def set_onshore(
    composition: ApplicantComposition, category: ApplicantCategory, is_onshore: bool
) -> ApplicantComposition:
    """
    Set whether a category is in-country at lodgement.

    Any change of the flag, and every switch to offshore, clears the prior
    visa selection so a stale selection never reaches a later calculation.
    """
    group = composition.group(category)
    if is_onshore and group.is_onshore:
        return composition
    return _with_group(
        composition,
        category,
        replace(group, is_onshore=is_onshore, prior_visa=NO_PRIOR_VISA),
    )


def set_prior_visa(
    composition: ApplicantComposition, category: ApplicantCategory, prior_visa: str
) -> ApplicantComposition:
    """Select the prior visa for an onshore category; ignored while offshore"""
    group = composition.group(category)
    if not group.is_onshore:
        return composition
    return _with_group(
        composition, category, replace(group, prior_visa=normalize_prior_visa(prior_visa))
    )


def normalize_prior_visa(prior_visa: str | None) -> str:
    """Unknown codes collapse to "none" so they can never add a charge"""
    if prior_visa in PRIOR_VISA_OPTIONS:
        return prior_visa
    return NO_PRIOR_VISA


def build_composition(
    secondary_count: int = 0,
    dependent_count: int = 0,
    primary_onshore: bool = False,
    primary_prior_visa: str = NO_PRIOR_VISA,
    secondary_onshore: bool = False,
    secondary_prior_visa: str = NO_PRIOR_VISA,
    dependent_onshore: bool = False,
    dependent_prior_visa: str = NO_PRIOR_VISA,
) -> ApplicantComposition:
    """Build a composition from boundary input through the same transitions"""
    composition = ApplicantComposition(
        primary=ApplicantGroup(count=1),
        secondary=ApplicantGroup(count=max(secondary_count, 0)),
        dependent=ApplicantGroup(count=max(dependent_count, 0)),
    )

    for category, onshore, prior_visa in (
        (ApplicantCategory.PRIMARY, primary_onshore, primary_prior_visa),
        (ApplicantCategory.SECONDARY, secondary_onshore, secondary_prior_visa),
        (ApplicantCategory.DEPENDENT, dependent_onshore, dependent_prior_visa),
    ):
        composition = set_onshore(composition, category, onshore)
        composition = set_prior_visa(composition, category, prior_visa)

    return composition
