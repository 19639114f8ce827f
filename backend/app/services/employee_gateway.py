"""Employee gateway: proxies employee CRUD to the upstream mock employee API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import aiohttp

from app.core.config import Settings
from app.core.errors import (
    EmployeeCreationError,
    EmployeeDeletionError,
    EmployeeNotFoundError,
    InvalidEmployeeInputError,
    InvalidEmployeeStateError,
    RateLimitedError,
)
from app.models.employee import CreateEmployeeInput, Employee
from app.services.employee_codec import (
    DecodeError,
    decode_delete_result,
    decode_employee,
    decode_employee_list,
    to_employee,
)

logger = logging.getLogger(__name__)

TOP_EARNERS_LIMIT = 10
MIN_AGE = 16
MAX_AGE = 75

_TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, ValueError)


def validate_create_input(employee_input: CreateEmployeeInput) -> list[str]:
    problems: list[str] = []
    if employee_input.name is None or not employee_input.name.strip():
        problems.append("name must not be blank")
    if employee_input.salary is None or employee_input.salary <= 0:
        problems.append("salary must be a positive integer")
    if employee_input.age is None or not MIN_AGE <= employee_input.age <= MAX_AGE:
        problems.append(f"age must be between {MIN_AGE} and {MAX_AGE}")
    if employee_input.title is None or not employee_input.title.strip():
        problems.append("title must not be blank")
    return problems


class EmployeeGateway:
    def __init__(self, session: aiohttp.ClientSession, base_url: str, timeout_seconds: float = 10.0) -> None:
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    @classmethod
    def from_settings(cls, session: aiohttp.ClientSession, settings: Settings) -> EmployeeGateway:
        return cls(
            session,
            settings.EMPLOYEE_API_BASE_URL,
            timeout_seconds=settings.EMPLOYEE_API_TIMEOUT_SECONDS,
        )

    def _employee_url(self, employee_id: str) -> str:
        return f"{self.base_url}/{quote(employee_id, safe='')}"

    async def _call(self, method: str, url: str, payload: dict[str, Any] | None = None) -> tuple[int, Any]:
        """Issue one upstream request and return ``(status, json_body)``.

        The body is only read for 2xx responses; 429 raises ``RateLimitedError``.
        """
        async with self.session.request(method, url, json=payload, timeout=self.timeout) as response:
            if response.status == 429:
                logger.error("Rate limited by employee API: %s %s", method, url)
                raise RateLimitedError()
            if not 200 <= response.status < 300:
                return response.status, None
            return response.status, await response.json(content_type=None)

    async def list_employees(self) -> list[Employee]:
        logger.info("Fetching all employees")
        try:
            status, body = await self._call("GET", self.base_url)
        except _TRANSPORT_ERRORS as err:
            logger.warning("Employee list request failed: %s", err)
            return []

        decoded = decode_employee_list(body)
        if isinstance(decoded, DecodeError):
            logger.warning("No employee data found (status=%s): %s", status, decoded.reason)
            return []

        return [to_employee(record) for record in decoded.value]

    async def search_by_name(self, query: str) -> list[Employee]:
        logger.info("Searching employees by name: %s", query)
        needle = query.lower()
        return [e for e in await self.list_employees() if e.name is not None and needle in e.name.lower()]

    async def get_by_id(self, employee_id: str) -> Employee:
        logger.info("Fetching employee by id: %s", employee_id)
        try:
            status, body = await self._call("GET", self._employee_url(employee_id))
        except _TRANSPORT_ERRORS as err:
            logger.error("Error fetching employee by id %s: %s", employee_id, err)
            raise EmployeeNotFoundError(employee_id) from err

        decoded = decode_employee(body)
        if isinstance(decoded, DecodeError):
            logger.warning("Employee not found for id %s (status=%s): %s", employee_id, status, decoded.reason)
            raise EmployeeNotFoundError(employee_id)

        return to_employee(decoded.value)

    async def highest_salary(self) -> int:
        logger.info("Getting highest salary")
        employees = await self.list_employees()
        return max((e.salary for e in employees if e.salary is not None), default=0)

    async def top_ten_earner_names(self) -> list[str]:
        logger.info("Getting top %d highest earning employee names", TOP_EARNERS_LIMIT)
        salaried = [e for e in await self.list_employees() if e.salary is not None]
        # sorted() is stable with reverse=True, so equal salaries keep upstream order
        ranked = sorted(salaried, key=lambda e: e.salary, reverse=True)[:TOP_EARNERS_LIMIT]
        return [e.name for e in ranked if e.name is not None]

    async def create(self, employee_input: CreateEmployeeInput) -> Employee:
        logger.info("Creating employee: %s", employee_input.name)
        problems = validate_create_input(employee_input)
        if problems:
            logger.warning("Invalid employee input %s: %s", employee_input, problems)
            raise InvalidEmployeeInputError(problems)

        payload = {
            "name": employee_input.name,
            "salary": employee_input.salary,
            "age": employee_input.age,
            "title": employee_input.title,
        }
        try:
            status, body = await self._call("POST", self.base_url, payload)
        except _TRANSPORT_ERRORS as err:
            logger.error("Error creating employee: %s", err)
            raise EmployeeCreationError("Error creating employee") from err

        decoded = decode_employee(body)
        if isinstance(decoded, DecodeError):
            logger.error("Employee API did not return a created employee (status=%s): %s", status, decoded.reason)
            raise EmployeeCreationError("Error creating employee")

        return to_employee(decoded.value)

    async def delete_by_id(self, employee_id: str) -> str:
        """Delete an employee and return its name.

        Upstream deletes by name, so the record is looked up by id first.
        """
        logger.info("Deleting employee by id: %s", employee_id)
        employee = await self.get_by_id(employee_id)
        name = employee.name
        if name is None or not name.strip():
            logger.error("Employee %s has a blank name, cannot delete", employee_id)
            raise InvalidEmployeeStateError(f"Employee '{employee_id}' has a blank name")

        try:
            status, body = await self._call("DELETE", self.base_url, {"name": name})
        except _TRANSPORT_ERRORS as err:
            logger.error("Error deleting employee %s: %s", name, err)
            raise EmployeeDeletionError("Error deleting employee") from err

        decoded = decode_delete_result(body)
        if isinstance(decoded, DecodeError) or decoded.value is not True:
            logger.error("Failed to delete employee %s (status=%s)", name, status)
            raise EmployeeDeletionError("Failed to delete employee")

        return name

    async def check_connection(self) -> bool:
        try:
            async with self.session.request("GET", self.base_url, timeout=self.timeout) as response:
                return response.status < 500
        except Exception:
            logger.exception("Employee API connection check failed")
            return False
