"""Data models for the child-support calculator.

All amounts are monthly EUR values. Every model is frozen: instances are
built once per calculation and never mutated.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from .money import ZERO

#: Age below which a pupil in general schooling counts as privileged — § 1603 Abs. 2 Satz 2 BGB
PRIVILEGED_AGE_LIMIT = 21


class ResidenceStatus(str, Enum):
    WITH_FATHER = "with_father"
    WITH_MOTHER = "with_mother"
    OWN_HOUSEHOLD = "own_household"


@dataclass(frozen=True)
class PropertyHolding:
    """A piece of real estate held by a parent.

    Rented holdings use rent_income and operating_costs; owner-occupied
    holdings use imputed_rent (Wohnvorteil). Loan interest and principal
    apply to both.
    """
    owner_occupied: bool = False
    rent_income: Decimal = ZERO
    operating_costs: Decimal = ZERO
    interest: Decimal = ZERO
    principal: Decimal = ZERO
    imputed_rent: Decimal = ZERO
    label: str = ""

    @property
    def loan_costs(self) -> Decimal:
        return self.interest + self.principal


@dataclass(frozen=True)
class ParentFinancialProfile:
    """Raw monthly financial facts of one parent."""
    gross: Decimal = ZERO
    taxes: Decimal = ZERO
    mandatory_social_security: Decimal = ZERO
    health_insurance: Decimal = ZERO
    job_expense_rate: Decimal = Decimal("0.05")  # pauschale berufsbedingte Aufwendungen
    job_expenses_absolute: Optional[Decimal] = None  # replaces the rate when set
    additional_pension: Decimal = ZERO
    additional_pension_cap_rate: Decimal = Decimal("0.04")  # of gross
    tax_refund: Decimal = ZERO
    other_net_income: Decimal = ZERO
    properties: tuple[PropertyHolding, ...] = ()

    @classmethod
    def from_net_income(cls, net_income: Decimal) -> "ParentFinancialProfile":
        """Profile for a parent whose adjusted net income is already known.

        Every deduction is zeroed, so the relevant income equals net_income.
        """
        return cls(
            gross=net_income,
            job_expense_rate=ZERO,
            job_expenses_absolute=ZERO,
            additional_pension_cap_rate=ZERO,
        )


@dataclass(frozen=True)
class Child:
    name: str
    age: int
    in_general_school: bool = False
    is_student: bool = False
    residence: ResidenceStatus = ResidenceStatus.WITH_MOTHER
    child_benefit_active: bool = True
    mini_job_income: Decimal = ZERO

    @property
    def lives_independently(self) -> bool:
        return self.residence == ResidenceStatus.OWN_HOUSEHOLD

    @property
    def is_privileged(self) -> bool:
        """Privileged adult child: under 21, in general schooling, living with a parent."""
        return (
            self.age < PRIVILEGED_AGE_LIMIT
            and self.in_general_school
            and not self.lives_independently
        )


@dataclass(frozen=True)
class ParentRelevantIncome:
    father: Decimal
    mother: Decimal

    @property
    def combined(self) -> Decimal:
        return self.father + self.mother


@dataclass(frozen=True)
class IncomeBreakdown:
    """Intermediate values of the relevant-income derivation."""
    net_before_job_costs: Decimal = ZERO
    job_costs: Decimal = ZERO
    property_delta: Decimal = ZERO
    refunds_and_other: Decimal = ZERO
    pension_deduction: Decimal = ZERO
    relevant_income: Decimal = ZERO


@dataclass(frozen=True)
class Quote:
    """Liability quote (Haftungsquote) of each parent."""
    father_share: Decimal
    mother_share: Decimal

    @classmethod
    def from_available(cls, father_available: Decimal, mother_available: Decimal) -> "Quote":
        total = father_available + mother_available
        if total <= 0:
            return cls(ZERO, ZERO)
        return cls(father_available / total, mother_available / total)


@dataclass(frozen=True)
class ChildNeedResult:
    child: Child
    table_need: Decimal
    child_benefit: Decimal
    net_after_benefit: Decimal
    own_contribution: Decimal
    net_after_own_income: Decimal


@dataclass(frozen=True)
class PaymentSplit:
    father_pays: Decimal = ZERO
    mother_pays: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        return self.father_pays + self.mother_pays


@dataclass(frozen=True)
class ChildSupportResult:
    child: Child
    need: ChildNeedResult
    split: PaymentSplit
    reduced_self_support: bool = False

    @property
    def shortfall(self) -> Decimal:
        """Part of the net need neither parent is liable for."""
        return max(self.need.net_after_own_income - self.split.total, ZERO)


@dataclass(frozen=True)
class HouseholdResult:
    incomes: ParentRelevantIncome
    children: tuple[ChildSupportResult, ...] = ()

    @property
    def father_total(self) -> Decimal:
        return sum((c.split.father_pays for c in self.children), ZERO)

    @property
    def mother_total(self) -> Decimal:
        return sum((c.split.mother_pays for c in self.children), ZERO)
