"""Integration tests for the household JSON importer."""

import json
from decimal import Decimal

import pytest

from unterhalt_rechner.core.config import AppConfig, save_config
from unterhalt_rechner.core.exceptions import HouseholdFileError
from unterhalt_rechner.core.income import relevant_income
from unterhalt_rechner.core.models import ResidenceStatus
from unterhalt_rechner.importers.household import (
    Period,
    load_household,
    parse_household,
    parse_money,
    to_monthly,
)

D = Decimal

MINIMAL = {
    "father": {"mode": "net", "net_income": 3000},
    "mother": {"mode": "net", "net_income": 2000},
}


def _write(tmp_path, data, name="household.json"):
    p = tmp_path / name
    p.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return p


class TestMoneyFields:
    def test_plain_number_is_monthly(self):
        assert parse_money(450, "x") == D("450")

    def test_missing_is_zero(self):
        assert parse_money(None, "x") == D("0")

    def test_yearly_divided_by_twelve(self):
        assert parse_money({"amount": 10800, "period": "yearly"}, "x") == D("900")

    def test_explicit_monthly(self):
        assert parse_money({"amount": "12.34", "period": "monthly"}, "x") == D("12.34")

    def test_yearly_not_rounded(self):
        assert to_monthly(D("1000"), Period.YEARLY) == D("1000") / D("12")

    def test_float_without_artefacts(self):
        assert parse_money(0.1, "x") == D("0.1")

    @pytest.mark.parametrize("raw", ["abc", True, [1], {"period": "yearly"}, "NaN", "Infinity"])
    def test_invalid(self, raw):
        with pytest.raises(HouseholdFileError):
            parse_money(raw, "x")

    def test_unknown_period(self):
        with pytest.raises(HouseholdFileError, match="period"):
            parse_money({"amount": 1, "period": "weekly"}, "x")


class TestParents:
    def test_detailed_entry(self):
        data = dict(MINIMAL, father={
            "gross": 5200,
            "taxes": {"amount": 10800, "period": "yearly"},
            "mandatory_social_security": 850,
            "health_insurance": 450,
            "additional_pension": 250,
            "tax_refund": {"amount": 1200, "period": "yearly"},
            "properties": [
                {"rent_income": 900, "operating_costs": 150, "interest": 300, "principal": 250},
            ],
        })
        household = parse_household(data)
        assert household.father.taxes == D("900")
        assert household.father.tax_refund == D("100")
        assert relevant_income(household.father) == D("2942")

    def test_net_mode(self):
        household = parse_household(MINIMAL)
        assert relevant_income(household.father) == D("3000")
        assert relevant_income(household.mother) == D("2000")

    def test_rates_default_from_config(self):
        save_config(AppConfig(job_expense_rate=D("0.1"), additional_pension_cap_rate=D("0.02")))
        data = dict(MINIMAL, father={"gross": 2000})
        father = parse_household(data).father
        assert father.job_expense_rate == D("0.1")
        assert father.additional_pension_cap_rate == D("0.02")
        assert relevant_income(father) == D("1800")

    def test_explicit_rate_wins(self):
        save_config(AppConfig(job_expense_rate=D("0.1")))
        data = dict(MINIMAL, father={"gross": 2000, "job_expense_rate": 0})
        assert relevant_income(parse_household(data).father) == D("2000")

    def test_absolute_job_expenses(self):
        data = dict(MINIMAL, father={"gross": 2000, "job_expenses_absolute": {"amount": 2400, "period": "yearly"}})
        father = parse_household(data).father
        assert father.job_expenses_absolute == D("200")
        assert relevant_income(father) == D("1800")

    def test_owner_occupied_property(self):
        data = dict(MINIMAL, mother={
            "gross": 2000,
            "job_expense_rate": 0,
            "properties": [{"owner_occupied": True, "imputed_rent": 800, "interest": 300, "principal": 200}],
        })
        assert relevant_income(parse_household(data).mother) == D("2300")

    def test_unknown_mode(self):
        with pytest.raises(HouseholdFileError, match="mode"):
            parse_household(dict(MINIMAL, father={"mode": "guess"}))

    def test_properties_must_be_list(self):
        with pytest.raises(HouseholdFileError):
            parse_household(dict(MINIMAL, father={"gross": 1, "properties": {"rent_income": 1}}))

    def test_property_must_be_object(self):
        with pytest.raises(HouseholdFileError, match=r"properties\[0\]"):
            parse_household(dict(MINIMAL, father={"gross": 1, "properties": [900]}))

    def test_owner_occupied_must_be_bool(self):
        with pytest.raises(HouseholdFileError, match="owner_occupied"):
            parse_household(dict(MINIMAL, father={"gross": 1, "properties": [{"owner_occupied": "yes"}]}))


class TestChildren:
    def test_fields(self):
        data = dict(MINIMAL, children=[{
            "name": "Ben",
            "age": 22,
            "student": True,
            "residence": "own_household",
            "mini_job_income": 520,
        }])
        (ben,) = parse_household(data).children
        assert ben.name == "Ben"
        assert ben.is_student is True
        assert ben.in_general_school is False
        assert ben.residence == ResidenceStatus.OWN_HOUSEHOLD
        assert ben.child_benefit_active is True
        assert ben.mini_job_income == D("520")

    def test_default_name_and_residence(self):
        data = dict(MINIMAL, children=[{"age": 18}, {"age": 20}])
        children = parse_household(data).children
        assert [c.name for c in children] == ["Kind 1", "Kind 2"]
        assert children[0].residence == ResidenceStatus.WITH_MOTHER

    def test_mini_job_switched_off(self):
        data = dict(MINIMAL, children=[{"age": 19, "has_mini_job": False, "mini_job_income": 520}])
        assert parse_household(data).children[0].mini_job_income == D("0")

    def test_missing_age(self):
        with pytest.raises(HouseholdFileError, match="age"):
            parse_household(dict(MINIMAL, children=[{"name": "Anna"}]))

    def test_bad_age(self):
        with pytest.raises(HouseholdFileError, match="age"):
            parse_household(dict(MINIMAL, children=[{"age": "nineteen"}]))

    def test_unknown_residence(self):
        with pytest.raises(HouseholdFileError, match="residence"):
            parse_household(dict(MINIMAL, children=[{"age": 19, "residence": "abroad"}]))

    @pytest.mark.parametrize("key", ["student", "general_school", "child_benefit_active", "has_mini_job"])
    def test_flags_must_be_bool(self, key):
        # "false" as a string would otherwise count as true
        with pytest.raises(HouseholdFileError, match=key):
            parse_household(dict(MINIMAL, children=[{"age": 19, key: "false"}]))

    def test_child_must_be_object(self):
        with pytest.raises(HouseholdFileError, match=r"children\[0\]"):
            parse_household(dict(MINIMAL, children=["Anna"]))


class TestHousehold:
    def test_missing_parent(self):
        with pytest.raises(HouseholdFileError, match="mother"):
            parse_household({"father": MINIMAL["father"]})

    def test_not_an_object(self):
        with pytest.raises(HouseholdFileError):
            parse_household([1, 2])

    def test_table_edition(self):
        assert parse_household(dict(MINIMAL, table_edition=2025)).table_edition == 2025
        assert parse_household(MINIMAL).table_edition is None

    def test_bad_table_edition(self):
        with pytest.raises(HouseholdFileError):
            parse_household(dict(MINIMAL, table_edition="latest"))

    def test_no_children(self):
        assert parse_household(MINIMAL).children == ()


class TestLoadHousehold:
    def test_load(self, tmp_path):
        household = load_household(_write(tmp_path, dict(MINIMAL, children=[{"age": 19}])))
        assert len(household.children) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(HouseholdFileError, match="Cannot read"):
            load_household(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        with pytest.raises(HouseholdFileError, match="invalid JSON"):
            load_household(_write(tmp_path, "{ father: "))
