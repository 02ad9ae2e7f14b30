"""Tests for the EmployeeIn validation schema and error grouping."""
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.errors import group_errors, is_malformed
from app.models.hr import Gender
from app.schemas.hr import EmployeeIn


VALID = {
    "firstname": "Ada",
    "lastname": "Lovelace",
    "gender": "female",
    "birthday": "1815-12-10",
    "monthly_salary": 1000,
}


def test_valid_payload_is_parsed():
    parsed = EmployeeIn(**VALID)
    assert parsed.firstname == "Ada"
    assert parsed.gender is Gender.FEMALE
    assert parsed.birthday == date(1815, 12, 10)
    assert parsed.monthly_salary == Decimal("1000")


def test_names_are_trimmed():
    parsed = EmployeeIn(**{**VALID, "firstname": "  Ada  ", "lastname": "\tLovelace\n"})
    assert parsed.firstname == "Ada"
    assert parsed.lastname == "Lovelace"


def test_all_failures_are_reported_together():
    with pytest.raises(ValidationError) as exc_info:
        EmployeeIn(firstname="", gender="robot", birthday="1815-13-01", monthly_salary="abc")

    fields = {err["loc"][0] for err in exc_info.value.errors()}
    assert fields == {"firstname", "lastname", "gender", "birthday", "monthly_salary"}


def test_salary_is_rounded_to_cents():
    assert EmployeeIn(**{**VALID, "monthly_salary": "10.125"}).monthly_salary == Decimal("10.13")
    assert EmployeeIn(**{**VALID, "monthly_salary": 0.1 + 0.2}).monthly_salary == Decimal("0.30")


def test_salary_magnitude_is_bounded():
    with pytest.raises(ValidationError) as exc_info:
        EmployeeIn(**{**VALID, "monthly_salary": "10000000000"})
    assert exc_info.value.errors()[0]["loc"] == ("monthly_salary",)


@pytest.mark.parametrize("value", [0, 86400, "86400", "10/12/1815"])
def test_birthday_must_be_iso_date_string(value):
    with pytest.raises(ValidationError) as exc_info:
        EmployeeIn(**{**VALID, "birthday": value})
    assert exc_info.value.errors()[0]["loc"] == ("birthday",)


def test_group_errors_by_field():
    errors = [
        {"type": "missing", "loc": ("body", "firstname"), "msg": "Field required"},
        {"type": "enum", "loc": ("body", "gender"), "msg": "Input should be 'male'"},
        {"type": "string_too_short", "loc": ("body", "firstname"), "msg": "Too short"},
    ]
    assert group_errors(errors) == {
        "firstname": ["Field required", "Too short"],
        "gender": ["Input should be 'male'"],
    }


def test_group_errors_whole_body():
    errors = [{"type": "json_invalid", "loc": ("body", 12), "msg": "JSON decode error"}]
    assert group_errors(errors) == {"body": ["JSON decode error"]}


def test_is_malformed():
    assert is_malformed([{"type": "json_invalid", "loc": ("body", 3), "msg": "x"}])
    assert is_malformed([{"type": "int_parsing", "loc": ("path", "id"), "msg": "x"}])
    assert not is_malformed([{"type": "missing", "loc": ("body", "firstname"), "msg": "x"}])


def test_names_longer_than_column_are_rejected():
    assert EmployeeIn(**{**VALID, "firstname": "A" * 100}).firstname == "A" * 100
    with pytest.raises(ValidationError) as exc_info:
        EmployeeIn(**{**VALID, "lastname": "L" * 101})
    assert exc_info.value.errors()[0]["loc"] == ("lastname",)
