"""Health check endpoint with database connectivity and schema checks."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db, missing_tables
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Session = Depends(get_db)) -> HealthResponse:
    """
    Report database reachability and whether the roles/users tables exist.
    Status is 'degraded' when either check fails.
    """
    if not check_db_connected(db):
        return HealthResponse(
            status="degraded",
            environment=settings.APP_ENV,
            database="disconnected",
        )

    absent = missing_tables(db)
    return HealthResponse(
        status="degraded" if absent else "ok",
        environment=settings.APP_ENV,
        database="connected",
        missing_tables=absent,
    )
