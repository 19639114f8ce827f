from __future__ import annotations

from app.models.employee import Employee, UpstreamEmployee
from app.services.employee_codec import (
    DecodeError,
    DecodeOk,
    decode_delete_result,
    decode_employee,
    decode_employee_list,
    to_employee,
)
from tests.conftest import upstream_record


def test_decode_employee_maps_all_fields():
    result = decode_employee({"data": upstream_record()})

    assert isinstance(result, DecodeOk)
    assert result.value == UpstreamEmployee(
        id="1",
        employee_name="John Doe",
        employee_salary=1000,
        employee_age=30,
        employee_title="Engineer",
        employee_email="john@company.com",
    )


def test_decode_employee_keeps_partial_record():
    result = decode_employee({"data": {"id": "7", "employee_salary": "lots", "employee_age": 41.5}})

    assert isinstance(result, DecodeOk)
    assert result.value.id == "7"
    assert result.value.employee_name is None
    assert result.value.employee_salary is None
    assert result.value.employee_age is None


def test_decode_employee_rejects_booleans_as_integers():
    result = decode_employee({"data": upstream_record(salary=True, age=False)})

    assert isinstance(result, DecodeOk)
    assert result.value.employee_salary is None
    assert result.value.employee_age is None


def test_decode_employee_renders_integer_id_as_string():
    result = decode_employee({"data": upstream_record(employee_id=42)})

    assert isinstance(result, DecodeOk)
    assert result.value.id == "42"


def test_decode_employee_errors_on_missing_envelope_data():
    assert isinstance(decode_employee(None), DecodeError)
    assert isinstance(decode_employee({}), DecodeError)
    assert isinstance(decode_employee({"data": None}), DecodeError)
    assert isinstance(decode_employee({"data": "nope"}), DecodeError)
    assert isinstance(decode_employee(["not", "an", "envelope"]), DecodeError)


def test_decode_employee_list_preserves_order_and_drops_non_objects():
    body = {"data": [upstream_record("1", "A"), None, upstream_record("2", "B"), 5]}

    result = decode_employee_list(body)

    assert isinstance(result, DecodeOk)
    assert [r.employee_name for r in result.value] == ["A", "B"]


def test_decode_employee_list_errors_when_payload_not_a_list():
    result = decode_employee_list({"data": upstream_record()})

    assert isinstance(result, DecodeError)
    assert "not a list" in result.reason


def test_decode_delete_result():
    assert decode_delete_result({"data": True}) == DecodeOk(True)
    assert decode_delete_result({"data": False}) == DecodeOk(False)
    assert isinstance(decode_delete_result({"data": "true"}), DecodeError)
    assert isinstance(decode_delete_result(None), DecodeError)


def test_to_employee_renames_upstream_fields():
    record = UpstreamEmployee.model_validate(upstream_record())

    assert to_employee(record) == Employee(
        id="1",
        name="John Doe",
        salary=1000,
        age=30,
        title="Engineer",
        email="john@company.com",
    )
