"""Need table (Bedarfstabelle) for adult children.

A NeedTable is one edition of the Düsseldorfer Tabelle reduced to what the
calculator needs:

  - income tiers: ascending (ceiling, need) pairs for the 4th age tier (18+)
  - flat need of a student living in an own household
  - child benefit (Kindergeld) per child
  - self-support thresholds: standard (angemessener Selbstbehalt) and
    reduced (notwendiger Selbstbehalt, privileged children only)

Editions differ only in their data. A new edition is added as a constant
in this package or as a JSON file loaded with load_need_table().

Income is rounded to a whole euro before the lookup. Income above the top
ceiling returns the top tier's need; the table's percentage extrapolation
for very high incomes is not modelled.
"""

import json
import logging
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import NamedTuple

from ..exceptions import InvalidNeedTableError
from ..money import round_euro

logger = logging.getLogger(__name__)


class NeedTier(NamedTuple):
    ceiling: int  #: highest relevant income (EUR, inclusive) of this tier
    need: int     #: monthly need of the child in this tier


@dataclass(frozen=True)
class NeedTable:
    edition: int
    tiers: tuple[NeedTier, ...]
    student_own_household_need: int
    child_benefit: int
    self_support_standard: int
    self_support_reduced: int

    def __post_init__(self):
        if not self.tiers:
            raise InvalidNeedTableError(f"Edition {self.edition}: no income tiers")
        ceilings = [t.ceiling for t in self.tiers]
        for lower, upper in zip(ceilings, ceilings[1:]):
            if upper <= lower:
                raise InvalidNeedTableError(
                    f"Edition {self.edition}: ceilings must be strictly ascending "
                    f"({lower} followed by {upper})"
                )

    def income_group(self, income: Decimal) -> int:
        """1-based income group (Einkommensgruppe) for an income.

        Income above the highest ceiling falls into the top group, income
        at or below the lowest ceiling into group 1. Only incomes between
        the two are rounded, so arbitrarily large or infinite amounts
        never reach quantize().
        """
        if income > self.tiers[-1].ceiling:
            return len(self.tiers)
        if income <= self.tiers[0].ceiling:
            return 1
        rounded = round_euro(income)
        for group, tier in enumerate(self.tiers, start=1):
            if rounded <= tier.ceiling:
                return group
        return len(self.tiers)

    def need_for_combined_income(self, combined_income: Decimal) -> int:
        """Need of an adult child based on both parents' relevant income."""
        return self.tiers[self.income_group(combined_income) - 1].need

    def need_for_single_income(self, single_income: Decimal) -> int:
        """Need based on one parent's income alone (liability cap)."""
        return self.tiers[self.income_group(single_income) - 1].need

    @classmethod
    def from_dict(cls, data: dict) -> "NeedTable":
        """Build a table from plain data (e.g. parsed JSON).

        Expected keys: edition, tiers ([[ceiling, need], ...]),
        student_own_household_need, child_benefit, self_support_standard,
        self_support_reduced.
        """
        try:
            return cls(
                edition=int(data["edition"]),
                tiers=tuple(NeedTier(int(c), int(n)) for c, n in data["tiers"]),
                student_own_household_need=int(data["student_own_household_need"]),
                child_benefit=int(data["child_benefit"]),
                self_support_standard=int(data["self_support_standard"]),
                self_support_reduced=int(data["self_support_reduced"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidNeedTableError(f"Malformed need table data: {e}") from e

    def to_dict(self) -> dict:
        return {
            "edition": self.edition,
            "tiers": [[t.ceiling, t.need] for t in self.tiers],
            "student_own_household_need": self.student_own_household_need,
            "child_benefit": self.child_benefit,
            "self_support_standard": self.self_support_standard,
            "self_support_reduced": self.self_support_reduced,
        }


def load_need_table(path: Path | str) -> NeedTable:
    """Load a table edition from a JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidNeedTableError(f"Cannot read need table {path}: {e}") from e
    table = NeedTable.from_dict(data)
    logger.debug("Loaded need table edition %s from %s", table.edition, path)
    return table
