from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Request, status

router = APIRouter(tags=["health"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health")
def health_check():
    return {"status": "healthy", "timestamp": _now()}


@router.get("/ready")
def readiness_check(request: Request):
    """503 with the same payload as detail when SELECT 1 fails."""
    connected = request.app.state.database.check_connection()
    body = {
        "status": "ready" if connected else "not_ready",
        "database": "connected" if connected else "disconnected",
        "timestamp": _now(),
    }
    if not connected:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=body)
    return body
