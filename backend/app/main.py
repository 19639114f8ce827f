from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import aiohttp
from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.endpoints import employees
from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging_config import setup_logging
from app.services.employee_gateway import EmployeeGateway

setup_logging(settings.LOG_LEVEL)

logger = logging.getLogger(__name__)

_CREATE_EMPLOYEE_PATH = api_router.prefix + employees.router.prefix


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    session = aiohttp.ClientSession()
    application.state.employee_gateway = EmployeeGateway.from_settings(session, settings)
    logger.info("EmployeeGateway initialized (base_url=%s)", settings.EMPLOYEE_API_BASE_URL)
    try:
        yield
    finally:
        application.state.employee_gateway = None
        await session.close()


app = FastAPI(
    title="Employee Gateway API",
    description="Employee CRUD proxy over the mock employee API",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # an unparseable creation body is invalid input like any other
    if request.method == "POST" and request.url.path.rstrip("/") == _CREATE_EMPLOYEE_PATH:
        logger.warning("Rejected malformed employee input: %s", exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid employee input"},
        )
    return await request_validation_exception_handler(request, exc)


@app.get("/")
async def root():
    return {"message": "Employee Gateway API"}
