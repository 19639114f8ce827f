from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.core.dependencies import get_employee_gateway
from app.main import app
from app.services.employee_gateway import EmployeeGateway

BASE_URL = "http://mock-api.test/api/v1/employee"


def upstream_record(
    employee_id: str = "1",
    name: str | None = "John Doe",
    salary: Any = 1000,
    age: Any = 30,
    title: str | None = "Engineer",
    email: str | None = "john@company.com",
) -> dict[str, Any]:
    return {
        "id": employee_id,
        "employee_name": name,
        "employee_salary": salary,
        "employee_age": age,
        "employee_title": title,
        "employee_email": email,
    }


def mock_response(status: int = 200, body: Any = None) -> AsyncMock:
    """An ``async with session.request(...)`` context yielding a canned response."""
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=body)

    context = AsyncMock()
    context.__aenter__.return_value = response
    context.__aexit__.return_value = None
    return context


def mock_session(*contexts: AsyncMock) -> MagicMock:
    session = MagicMock()
    session.request.side_effect = list(contexts)
    return session


def make_gateway(*contexts: AsyncMock) -> EmployeeGateway:
    return EmployeeGateway(mock_session(*contexts), BASE_URL, timeout_seconds=5)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def mock_gateway():
    gateway = MagicMock(spec=EmployeeGateway)
    gateway.list_employees = AsyncMock(return_value=[])
    gateway.search_by_name = AsyncMock(return_value=[])
    gateway.get_by_id = AsyncMock()
    gateway.highest_salary = AsyncMock(return_value=0)
    gateway.top_ten_earner_names = AsyncMock(return_value=[])
    gateway.create = AsyncMock()
    gateway.delete_by_id = AsyncMock()
    gateway.check_connection = AsyncMock(return_value=True)
    return gateway


@pytest.fixture
def gateway_client(mock_gateway):
    app.dependency_overrides[get_employee_gateway] = lambda: mock_gateway
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
