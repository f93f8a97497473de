"""Split of a child's net need between both parents (§ 1606 Abs. 3 Satz 1 BGB).

  1. Available income = relevant income − self-support, floored at 0.
     The reduced (notwendiger) self-support applies to privileged children.
  2. Liability quote = available income / sum of both available incomes.
  3. Raw share = net need × quote, rounded to cents half away from zero.
  4. Liability cap: no parent pays more than they would owe alone, i.e. the
     table need for their own income minus child benefit and the child's
     own contribution, cut down to whole cents.

A capped share is not shifted to the other parent. The two shares can add
up to less than the net need; that shortfall stays uncovered.
"""

import logging
from decimal import Decimal

from .models import ChildNeedResult, PaymentSplit, Quote
from .money import ZERO, floor_cents, round_cents
from .tables.need_table import NeedTable

logger = logging.getLogger(__name__)


def available_income(income: Decimal, self_support: int) -> Decimal:
    """Income above the self-support threshold, never negative."""
    return max(income - self_support, ZERO)


class LiabilitySplitter:
    def __init__(self, table: NeedTable):
        self.table = table

    def self_support(self, uses_reduced_self_support: bool) -> int:
        if uses_reduced_self_support:
            return self.table.self_support_reduced
        return self.table.self_support_standard

    def solo_cap(self, need: ChildNeedResult, income: Decimal) -> Decimal:
        """Most a parent with this income would owe as the only payer."""
        solo_need = Decimal(self.table.need_for_single_income(income))
        return max(solo_need - need.child_benefit - need.own_contribution, ZERO)

    def quote(self, father_income: Decimal, mother_income: Decimal, uses_reduced_self_support: bool) -> Quote:
        threshold = self.self_support(uses_reduced_self_support)
        return Quote.from_available(
            available_income(father_income, threshold),
            available_income(mother_income, threshold),
        )

    def split(
        self,
        need: ChildNeedResult,
        father_income: Decimal,
        mother_income: Decimal,
        uses_reduced_self_support: bool = False,
    ) -> PaymentSplit:
        quote = self.quote(father_income, mother_income, uses_reduced_self_support)
        father_raw = round_cents(need.net_after_own_income * quote.father_share)
        mother_raw = round_cents(need.net_after_own_income * quote.mother_share)

        # Caps are cut down to cents so a share never exceeds its cap
        father_cap = floor_cents(self.solo_cap(need, father_income))
        mother_cap = floor_cents(self.solo_cap(need, mother_income))

        split = PaymentSplit(
            father_pays=min(father_raw, father_cap),
            mother_pays=min(mother_raw, mother_cap),
        )
        if split.total < need.net_after_own_income:
            logger.info(
                "%s: uncovered need %s (raw %s/%s, caps %s/%s)",
                need.child.name, need.net_after_own_income - split.total,
                father_raw, mother_raw, father_cap, mother_cap,
            )
        return split
