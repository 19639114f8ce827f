"""Employee models: caller-facing resource, creation input and upstream record."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, StrictInt, StrictStr, field_validator


class Employee(BaseModel):
    """Employee resource returned to callers."""

    id: str | None = None
    name: str | None = None
    salary: int | None = None
    age: int | None = None
    title: str | None = None
    email: str | None = None


class CreateEmployeeInput(BaseModel):
    """Creation request. Business rules are checked by the gateway, not here."""

    name: StrictStr | None = None
    salary: StrictInt | None = None
    age: StrictInt | None = None
    title: StrictStr | None = None


def _int_or_none(value: Any) -> int | None:
    # bool is an int subclass; floats are not accepted either
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


class UpstreamEmployee(BaseModel):
    """Employee record as found inside the upstream ``data`` envelope.

    Every field is decoded leniently: a value of the wrong type becomes
    ``None`` instead of failing the whole record.
    """

    id: str | None = None
    employee_name: str | None = None
    employee_salary: int | None = None
    employee_age: int | None = None
    employee_title: str | None = None
    employee_email: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str | None:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return _str_or_none(value)

    @field_validator("employee_name", "employee_title", "employee_email", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str | None:
        return _str_or_none(value)

    @field_validator("employee_salary", "employee_age", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> int | None:
        return _int_or_none(value)
