"""Health, readiness, and version endpoints."""

from fastapi import APIRouter, Depends, Request

from lumen.config import Settings
from lumen.dependencies import get_app_settings

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe. Returns 200 if the process is alive."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness(request: Request) -> dict[str, object]:
    """Readiness probe. Checks the store is bound and reachable."""
    checks: dict[str, object] = {}

    store = getattr(request.app.state, "store", None)
    if store is None:
        checks["store"] = "unbound"
    else:
        try:
            checks["store"] = "ok" if await store.ping() else "error: ping failed"
        except Exception as exc:
            checks["store"] = f"error: {exc}"

    all_ok = all(v == "ok" for v in checks.values())
    return {"status": "ready" if all_ok else "degraded", "checks": checks}


@router.get("/version")
async def version(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    """Return API version and environment."""
    return {
        "version": settings.app_version,
        "environment": settings.environment,
    }
