from __future__ import annotations

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.hr import Gender

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_CENT = Decimal("0.01")
# Largest magnitude that fits the Numeric(12, 2) column.
MAX_SALARY = Decimal("9999999999.99")


class EmployeeIn(BaseModel):
    """
    Request body for both POST and PUT /employees.

    Every business field is required on both verbs (PUT is a full replacement).
    Strings are trimmed first, so whitespace-only names count as empty.
    Unknown keys are dropped.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    firstname: str = Field(min_length=1, max_length=100)
    lastname: str = Field(min_length=1, max_length=100)
    gender: Gender
    birthday: date
    monthly_salary: Decimal = Field(ge=-MAX_SALARY, le=MAX_SALARY)

    @field_validator("birthday", mode="before")
    @classmethod
    def _birthday_is_iso_string(cls, value: Any) -> Any:
        # Numbers would otherwise be read as Unix timestamps.
        if not isinstance(value, str) or not _ISO_DATE.match(value.strip()):
            raise ValueError("Birthday must be a date formatted as YYYY-MM-DD")
        return value.strip()

    @field_validator("monthly_salary")
    @classmethod
    def _salary_to_cents(cls, value: Decimal) -> Decimal:
        return value.quantize(_CENT, rounding=ROUND_HALF_UP)


class EmployeeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    firstname: str
    lastname: str
    gender: Gender
    birthday: date
    monthly_salary: float
    created_at: datetime
    updated_at: datetime
