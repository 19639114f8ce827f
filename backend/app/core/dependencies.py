from __future__ import annotations

from fastapi import HTTPException, Request, status

from app.services.employee_gateway import EmployeeGateway


def get_employee_gateway(request: Request) -> EmployeeGateway:
    gateway: EmployeeGateway | None = getattr(request.app.state, "employee_gateway", None)
    if gateway is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee gateway not initialized",
        )
    return gateway
