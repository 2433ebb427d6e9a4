"""Health and readiness routes."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from teams_api.database import check_db, get_db

router = APIRouter()


@router.get("")
def health_check() -> dict[str, str]:
    """Liveness check. Returns 200 while the process is up."""
    return {"status": "healthy"}


@router.get("/ready")
def readiness_check(db: Session = Depends(get_db)):
    """Readiness check, includes database connectivity."""
    if not check_db(db):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready"}
