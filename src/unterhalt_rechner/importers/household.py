"""Household JSON importer.

Turns a household file into the value objects the calculator consumes.
This is the only place where raw input is normalized:

  - money fields are either a monthly number or {"amount": ..., "period":
    "monthly" | "yearly"}; yearly amounts are divided by 12
  - a parent with "mode": "net" is given by an already adjusted net income
  - missing money fields are 0; missing rates come from config.json

Example:
    {
      "table_edition": 2025,
      "father": {"gross": 5200, "taxes": {"amount": 10800, "period": "yearly"}},
      "mother": {"mode": "net", "net_income": 2100},
      "children": [{"name": "Anna", "age": 19, "general_school": true,
                    "residence": "with_mother", "mini_job_income": 0}]
    }
"""

import json
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from pathlib import Path
from typing import Optional

from ..core.config import get_config
from ..core.exceptions import HouseholdFileError
from ..core.models import Child, ParentFinancialProfile, PropertyHolding, ResidenceStatus
from ..core.money import ZERO, to_decimal

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = Decimal("12")


class Period(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


class IncomeEntryMode(str, Enum):
    DETAILED = "detailed"
    NET = "net"


@dataclass(frozen=True)
class Household:
    father: ParentFinancialProfile
    mother: ParentFinancialProfile
    children: tuple[Child, ...] = ()
    table_edition: Optional[int] = None


def to_monthly(amount: Decimal, period: Period) -> Decimal:
    if period == Period.YEARLY:
        return amount / MONTHS_PER_YEAR
    return amount


def _enum(enum_cls, raw, field: str):
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = ", ".join(e.value for e in enum_cls)
        raise HouseholdFileError(f"{field}: unknown value {raw!r} (expected one of: {allowed})") from None


def _number(raw, field: str) -> Decimal:
    if isinstance(raw, bool):
        raise HouseholdFileError(f"{field}: expected a number, got {raw!r}")
    try:
        value = to_decimal(raw)
    except (InvalidOperation, ValueError, TypeError):
        raise HouseholdFileError(f"{field}: expected a number, got {raw!r}") from None
    if not value.is_finite():
        raise HouseholdFileError(f"{field}: expected a finite number, got {raw!r}")
    return value


def _flag(data: dict, key: str, field: str, default: bool) -> bool:
    raw = data.get(key, default)
    if not isinstance(raw, bool):
        raise HouseholdFileError(f"{field}.{key}: expected true or false, got {raw!r}")
    return raw


def parse_money(raw, field: str) -> Decimal:
    """Parse a money field into a monthly amount."""
    if raw is None:
        return ZERO
    if isinstance(raw, dict):
        if "amount" not in raw:
            raise HouseholdFileError(f"{field}: missing 'amount'")
        period = _enum(Period, raw.get("period", Period.MONTHLY.value), f"{field}.period")
        return to_monthly(_number(raw["amount"], field), period)
    return _number(raw, field)


def parse_property(data: dict, field: str) -> PropertyHolding:
    if not isinstance(data, dict):
        raise HouseholdFileError(f"{field}: expected an object")

    def money(key: str) -> Decimal:
        return parse_money(data.get(key), f"{field}.{key}")

    return PropertyHolding(
        owner_occupied=_flag(data, "owner_occupied", field, False),
        rent_income=money("rent_income"),
        operating_costs=money("operating_costs"),
        interest=money("interest"),
        principal=money("principal"),
        imputed_rent=money("imputed_rent"),
        label=str(data.get("label", "")),
    )


def parse_parent(data: dict, field: str) -> ParentFinancialProfile:
    if not isinstance(data, dict):
        raise HouseholdFileError(f"{field}: expected an object")

    def money(key: str) -> Decimal:
        return parse_money(data.get(key), f"{field}.{key}")

    mode = _enum(IncomeEntryMode, data.get("mode", IncomeEntryMode.DETAILED.value), f"{field}.mode")
    if mode == IncomeEntryMode.NET:
        return ParentFinancialProfile.from_net_income(money("net_income"))

    cfg = get_config()
    raw_absolute = data.get("job_expenses_absolute")
    properties = data.get("properties") or []
    if not isinstance(properties, list):
        raise HouseholdFileError(f"{field}.properties: expected a list")

    return ParentFinancialProfile(
        gross=money("gross"),
        taxes=money("taxes"),
        mandatory_social_security=money("mandatory_social_security"),
        health_insurance=money("health_insurance"),
        job_expense_rate=_number(data.get("job_expense_rate", cfg.job_expense_rate), f"{field}.job_expense_rate"),
        job_expenses_absolute=(
            None if raw_absolute is None
            else parse_money(raw_absolute, f"{field}.job_expenses_absolute")
        ),
        additional_pension=money("additional_pension"),
        additional_pension_cap_rate=_number(
            data.get("additional_pension_cap_rate", cfg.additional_pension_cap_rate),
            f"{field}.additional_pension_cap_rate",
        ),
        tax_refund=money("tax_refund"),
        other_net_income=money("other_net_income"),
        properties=tuple(
            parse_property(p, f"{field}.properties[{i}]") for i, p in enumerate(properties)
        ),
    )


def parse_child(data: dict, index: int) -> Child:
    field = f"children[{index}]"
    if not isinstance(data, dict):
        raise HouseholdFileError(f"{field}: expected an object")
    try:
        age = int(data["age"])
    except KeyError:
        raise HouseholdFileError(f"{field}: missing 'age'") from None
    except (TypeError, ValueError):
        raise HouseholdFileError(f"{field}.age: expected an integer, got {data['age']!r}") from None

    # A mini job only counts when it is switched on (default: on if an income is given)
    mini_job = parse_money(data.get("mini_job_income"), f"{field}.mini_job_income")
    if not _flag(data, "has_mini_job", field, True):
        mini_job = ZERO

    return Child(
        name=str(data.get("name") or f"Kind {index + 1}"),
        age=age,
        in_general_school=_flag(data, "general_school", field, False),
        is_student=_flag(data, "student", field, False),
        residence=_enum(ResidenceStatus, data.get("residence", ResidenceStatus.WITH_MOTHER.value), f"{field}.residence"),
        child_benefit_active=_flag(data, "child_benefit_active", field, True),
        mini_job_income=mini_job,
    )


def parse_household(data: dict) -> Household:
    if not isinstance(data, dict):
        raise HouseholdFileError("Household file must contain a JSON object")
    for key in ("father", "mother"):
        if key not in data:
            raise HouseholdFileError(f"Missing '{key}'")
    children = data.get("children") or []
    if not isinstance(children, list):
        raise HouseholdFileError("children: expected a list")

    edition = data.get("table_edition")
    try:
        edition = int(edition) if edition is not None else None
    except (TypeError, ValueError):
        raise HouseholdFileError(f"table_edition: expected a year, got {edition!r}") from None

    return Household(
        father=parse_parent(data["father"], "father"),
        mother=parse_parent(data["mother"], "mother"),
        children=tuple(parse_child(c, i) for i, c in enumerate(children)),
        table_edition=edition,
    )


def load_household(path: Path | str) -> Household:
    """Read and parse a household JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise HouseholdFileError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise HouseholdFileError(f"{path}: invalid JSON ({e})") from e
    household = parse_household(data)
    logger.debug("Loaded household %s with %d children", path, len(household.children))
    return household
