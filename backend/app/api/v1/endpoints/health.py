from __future__ import annotations

from fastapi import APIRouter, Request

from app.core.config import settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(request: Request):
    services: dict[str, str] = {}

    gateway = getattr(request.app.state, "employee_gateway", None)
    if gateway is None:
        services["employee_api"] = "not_configured"
    else:
        try:
            ok = await gateway.check_connection()
            services["employee_api"] = "ok" if ok else "error"
        except Exception:
            services["employee_api"] = "error"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
