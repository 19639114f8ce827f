"""Errors raised by the employee gateway."""

from __future__ import annotations


class EmployeeGatewayError(Exception):
    """Base class for gateway failures."""


class RateLimitedError(EmployeeGatewayError):
    """Upstream answered 429 Too Many Requests."""

    def __init__(self, message: str = "Rate limited by employee API") -> None:
        super().__init__(message)


class EmployeeNotFoundError(EmployeeGatewayError):
    def __init__(self, employee_id: str) -> None:
        super().__init__(f"Employee '{employee_id}' not found")
        self.employee_id = employee_id


class InvalidEmployeeInputError(EmployeeGatewayError):
    def __init__(self, problems: list[str]) -> None:
        super().__init__("Invalid employee input: " + "; ".join(problems))
        self.problems = problems


class UpstreamFailureError(EmployeeGatewayError):
    """Any non-throttling upstream failure on the create and delete paths."""


class EmployeeCreationError(UpstreamFailureError):
    pass


class EmployeeDeletionError(UpstreamFailureError):
    pass


class InvalidEmployeeStateError(UpstreamFailureError):
    """The resolved employee record cannot be acted upon (e.g. blank name)."""
