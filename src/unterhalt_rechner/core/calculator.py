"""Household calculation — relevant incomes, need and split per child."""

import logging
from typing import Iterable, Optional

from .child_need import ChildNeedResolver
from .income import relevant_income
from .liability import LiabilitySplitter
from .models import (
    Child,
    ChildNeedResult,
    ChildSupportResult,
    HouseholdResult,
    ParentFinancialProfile,
    ParentRelevantIncome,
    PaymentSplit,
)
from .tables import get_need_table
from .tables.need_table import NeedTable

logger = logging.getLogger(__name__)


class SupportCalculator:
    """Runs the full pipeline for one household against one table edition.

    The table is shared read-only; a calculator holds no other state and
    can be reused for any number of households.
    """

    def __init__(self, table: NeedTable):
        self.table = table
        self.resolver = ChildNeedResolver(table)
        self.splitter = LiabilitySplitter(table)

    def parents_relevant_income(
        self, father: ParentFinancialProfile, mother: ParentFinancialProfile
    ) -> ParentRelevantIncome:
        return ParentRelevantIncome(
            father=relevant_income(father),
            mother=relevant_income(mother),
        )

    def child_need(self, child: Child, incomes: ParentRelevantIncome) -> ChildNeedResult:
        return self.resolver.resolve(child, incomes.father, incomes.mother)

    def split(
        self,
        need: ChildNeedResult,
        incomes: ParentRelevantIncome,
        uses_reduced_self_support: bool = False,
    ) -> PaymentSplit:
        return self.splitter.split(need, incomes.father, incomes.mother, uses_reduced_self_support)

    def calculate(
        self,
        father: ParentFinancialProfile,
        mother: ParentFinancialProfile,
        children: Iterable[Child],
    ) -> HouseholdResult:
        """Calculate support for every child, in input order.

        Privileged children (under 21, general schooling, living with a
        parent) are split against the reduced self-support threshold.
        """
        incomes = self.parents_relevant_income(father, mother)
        results = []
        for child in children:
            need = self.child_need(child, incomes)
            reduced = child.is_privileged
            split = self.split(need, incomes, uses_reduced_self_support=reduced)
            results.append(ChildSupportResult(
                child=child,
                need=need,
                split=split,
                reduced_self_support=reduced,
            ))
        logger.debug(
            "Household (table %s): incomes %s/%s, %d children",
            self.table.edition, incomes.father, incomes.mother, len(results),
        )
        return HouseholdResult(incomes=incomes, children=tuple(results))


def calculate_child_support(
    father: ParentFinancialProfile,
    mother: ParentFinancialProfile,
    children: Iterable[Child],
    table: Optional[NeedTable] = None,
) -> HouseholdResult:
    """Calculate child support for a household.

    Args:
        father: Raw financial facts of the father.
        mother: Raw financial facts of the mother.
        children: Children in the order results should be returned.
        table: Need table edition. Reads the configured edition if not
            provided (ur setup run).

    Returns:
        HouseholdResult with both relevant incomes and one
        ChildSupportResult per child.
    """
    if table is None:
        table = get_need_table()
    return SupportCalculator(table).calculate(father, mother, children)
