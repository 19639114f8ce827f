"""Decoding of upstream ``{"data": ...}`` envelopes into typed records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from app.models.employee import Employee, UpstreamEmployee

DATA_KEY = "data"

T = TypeVar("T")


@dataclass(frozen=True)
class DecodeOk(Generic[T]):
    value: T


@dataclass(frozen=True)
class DecodeError:
    reason: str


DecodeResult = Union[DecodeOk[T], DecodeError]


def _unwrap(body: Any) -> DecodeOk[Any] | DecodeError:
    if body is None:
        return DecodeError("empty response body")
    if not isinstance(body, dict):
        return DecodeError(f"envelope is {type(body).__name__}, expected object")
    payload = body.get(DATA_KEY)
    if payload is None:
        return DecodeError(f"envelope has no '{DATA_KEY}'")
    return DecodeOk(payload)


def decode_employee(body: Any) -> DecodeResult[UpstreamEmployee]:
    unwrapped = _unwrap(body)
    if isinstance(unwrapped, DecodeError):
        return unwrapped
    if not isinstance(unwrapped.value, dict):
        return DecodeError("employee payload is not an object")
    return DecodeOk(UpstreamEmployee.model_validate(unwrapped.value))


def decode_employee_list(body: Any) -> DecodeResult[list[UpstreamEmployee]]:
    """Decode a collection envelope.

    Elements that are not JSON objects are dropped; everything else maps to a
    (possibly partial) record, in upstream order.
    """
    unwrapped = _unwrap(body)
    if isinstance(unwrapped, DecodeError):
        return unwrapped
    if not isinstance(unwrapped.value, list):
        return DecodeError("employee collection payload is not a list")
    return DecodeOk(
        [UpstreamEmployee.model_validate(item) for item in unwrapped.value if isinstance(item, dict)]
    )


def decode_delete_result(body: Any) -> DecodeResult[bool]:
    unwrapped = _unwrap(body)
    if isinstance(unwrapped, DecodeError):
        return unwrapped
    if not isinstance(unwrapped.value, bool):
        return DecodeError("delete payload is not a boolean")
    return DecodeOk(unwrapped.value)


def to_employee(record: UpstreamEmployee) -> Employee:
    return Employee(
        id=record.id,
        name=record.employee_name,
        salary=record.employee_salary,
        age=record.employee_age,
        title=record.employee_title,
        email=record.employee_email,
    )
