"""Relevant income (unterhaltsrechtlich bereinigtes Nettoeinkommen).

Derivation for one parent, in this order:
  1. Gross minus taxes, mandatory social security and health insurance
  2. Job-related expenses: flat rate of that net (default 5%) or an
     absolute amount, if one is given
  3. Real estate: rented holdings add their surplus or deficit after loan
     costs; owner-occupied holdings add a housing advantage (Wohnvorteil)
     that never goes below zero
  4. Regular tax refunds and other net income
  5. Voluntary additional pension, capped at a share of gross (default 4%)

The result is signed and unrounded. Nothing is floored here; callers clamp
to zero where they need an available amount.
"""

import logging
from decimal import Decimal

from .models import IncomeBreakdown, ParentFinancialProfile, PropertyHolding
from .money import ZERO

logger = logging.getLogger(__name__)


def property_delta(holding: PropertyHolding) -> Decimal:
    """Signed monthly contribution of one property to relevant income.

    Examples:
        rented,  rent=1000, costs=200, loan=500 → +300
        rented,  rent=500,  costs=100, loan=700 → −300 (deficit)
        owner,   imputed=800, loan=500         → +300
        owner,   imputed=800, loan=1000        → 0
    """
    if not holding.owner_occupied:
        rent_net = holding.rent_income - holding.operating_costs
        return rent_net - holding.loan_costs
    advantage = holding.imputed_rent - min(holding.loan_costs, holding.imputed_rent)
    return max(advantage, ZERO)


def job_expenses(profile: ParentFinancialProfile, net: Decimal) -> Decimal:
    """Job-related expenses: the absolute override if present, else net × rate."""
    if profile.job_expenses_absolute is not None:
        return profile.job_expenses_absolute
    return net * profile.job_expense_rate


def pension_deduction(profile: ParentFinancialProfile) -> Decimal:
    """Voluntary pension contribution, capped at gross × cap rate."""
    cap = profile.gross * profile.additional_pension_cap_rate
    return min(profile.additional_pension, cap)


def income_breakdown(profile: ParentFinancialProfile) -> IncomeBreakdown:
    """Derive the relevant income and keep every intermediate value."""
    net_before = (
        profile.gross
        - profile.taxes
        - profile.mandatory_social_security
        - profile.health_insurance
    )
    job_costs = job_expenses(profile, net_before)
    delta = sum((property_delta(p) for p in profile.properties), ZERO)
    refunds_and_other = profile.tax_refund + profile.other_net_income
    pension = pension_deduction(profile)

    relevant = net_before - job_costs + delta + refunds_and_other - pension
    logger.debug(
        "Relevant income %s (net %s, job costs %s, property %s, pension %s)",
        relevant, net_before, job_costs, delta, pension,
    )
    return IncomeBreakdown(
        net_before_job_costs=net_before,
        job_costs=job_costs,
        property_delta=delta,
        refunds_and_other=refunds_and_other,
        pension_deduction=pension,
        relevant_income=relevant,
    )


def relevant_income(profile: ParentFinancialProfile) -> Decimal:
    """Relevant monthly income of one parent (may be negative)."""
    return income_breakdown(profile).relevant_income
