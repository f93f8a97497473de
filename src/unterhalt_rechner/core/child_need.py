"""Net need of an adult child.

  1. Table need: flat student rate for a student in an own household,
     otherwise the table value for both parents' combined income
  2. Child benefit is credited in full (§ 1612b Abs. 1 Nr. 2 BGB)
  3. The child's own mini-job income reduces the need; pupils and
     students keep an allowance of €100

The own-income contribution is not capped by the need left after child
benefit. A large mini-job income therefore zeroes the net need and is still
reported at its full amount.
"""

import logging
from decimal import Decimal

from .models import Child, ChildNeedResult
from .money import ZERO
from .tables.need_table import NeedTable

logger = logging.getLogger(__name__)

#: Part of a pupil's or student's own income left to the child
MINI_JOB_ALLOWANCE = Decimal("100")


def child_own_contribution(child: Child) -> Decimal:
    """Part of the child's mini-job income that reduces the need.

    Examples:
        student, income=450 → 350
        trainee, income=450 → 450   (no allowance)
        pupil,   income=80  → 0
        income ≤ 0          → 0
    """
    if child.mini_job_income <= 0:
        return ZERO
    allowance = MINI_JOB_ALLOWANCE if (child.in_general_school or child.is_student) else ZERO
    return max(child.mini_job_income - allowance, ZERO)


class ChildNeedResolver:
    def __init__(self, table: NeedTable):
        self.table = table

    def table_need(self, child: Child, father_income: Decimal, mother_income: Decimal) -> Decimal:
        if child.is_student and child.lives_independently:
            return Decimal(self.table.student_own_household_need)
        return Decimal(self.table.need_for_combined_income(father_income + mother_income))

    def resolve(self, child: Child, father_income: Decimal, mother_income: Decimal) -> ChildNeedResult:
        table_need = self.table_need(child, father_income, mother_income)
        benefit = Decimal(self.table.child_benefit) if child.child_benefit_active else ZERO
        net_after_benefit = max(table_need - benefit, ZERO)

        contribution = child_own_contribution(child)
        net_after_own_income = max(net_after_benefit - contribution, ZERO)

        logger.debug(
            "%s: table need %s, benefit %s, own contribution %s, net need %s",
            child.name, table_need, benefit, contribution, net_after_own_income,
        )
        return ChildNeedResult(
            child=child,
            table_need=table_need,
            child_benefit=benefit,
            net_after_benefit=net_after_benefit,
            own_contribution=contribution,
            net_after_own_income=net_after_own_income,
        )
