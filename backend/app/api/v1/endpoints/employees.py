from __future__ import annotations

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.dependencies import get_employee_gateway
from app.core.errors import (
    EmployeeGatewayError,
    EmployeeNotFoundError,
    InvalidEmployeeInputError,
    RateLimitedError,
    UpstreamFailureError,
)
from app.models.employee import CreateEmployeeInput, Employee
from app.services.employee_gateway import EmployeeGateway

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employee", tags=["employee"])

_STATUS_BY_ERROR: list[tuple[type[EmployeeGatewayError], int]] = [
    (RateLimitedError, status.HTTP_429_TOO_MANY_REQUESTS),
    (EmployeeNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidEmployeeInputError, status.HTTP_400_BAD_REQUEST),
    (UpstreamFailureError, status.HTTP_400_BAD_REQUEST),
]


def _raise_http(err: EmployeeGatewayError) -> NoReturn:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(err, error_type):
            raise HTTPException(status_code=status_code, detail=str(err)) from err
    logger.error("Unmapped gateway error: %s", err)
    raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(err)) from err


@router.get("", response_model=list[Employee])
async def get_all_employees(gateway: EmployeeGateway = Depends(get_employee_gateway)):  # noqa: B008
    try:
        return await gateway.list_employees()
    except EmployeeGatewayError as err:
        _raise_http(err)


@router.get("/search/{search_string}", response_model=list[Employee])
async def get_employees_by_name_search(
    search_string: str,
    gateway: EmployeeGateway = Depends(get_employee_gateway),  # noqa: B008
):
    try:
        return await gateway.search_by_name(search_string)
    except EmployeeGatewayError as err:
        _raise_http(err)


@router.get("/highestSalary", response_model=int)
async def get_highest_salary_of_employees(gateway: EmployeeGateway = Depends(get_employee_gateway)):  # noqa: B008
    try:
        return await gateway.highest_salary()
    except EmployeeGatewayError as err:
        _raise_http(err)


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str])
async def get_top_ten_highest_earning_employee_names(
    gateway: EmployeeGateway = Depends(get_employee_gateway),  # noqa: B008
):
    try:
        return await gateway.top_ten_earner_names()
    except EmployeeGatewayError as err:
        _raise_http(err)


@router.get("/{employee_id}", response_model=Employee)
async def get_employee_by_id(
    employee_id: str,
    gateway: EmployeeGateway = Depends(get_employee_gateway),  # noqa: B008
):
    try:
        return await gateway.get_by_id(employee_id)
    except EmployeeGatewayError as err:
        _raise_http(err)


@router.post("", response_model=Employee)
async def create_employee(
    employee_input: CreateEmployeeInput,
    gateway: EmployeeGateway = Depends(get_employee_gateway),  # noqa: B008
):
    try:
        return await gateway.create(employee_input)
    except EmployeeGatewayError as err:
        _raise_http(err)


@router.delete("/{employee_id}", response_model=str)
async def delete_employee_by_id(
    employee_id: str,
    gateway: EmployeeGateway = Depends(get_employee_gateway),  # noqa: B008
):
    try:
        return await gateway.delete_by_id(employee_id)
    except EmployeeGatewayError as err:
        _raise_http(err)
