"""Dashboard API — weekly color-coded metrics per client."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from account_tracker.core.storage import JsonFileStorage, get_storage
from account_tracker.schemas.dashboard import Dashboard
from account_tracker.services.reporting import ReportingService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=Dashboard)
def get_dashboard(
    week: Optional[str] = Query(None, description="Week start YYYY-MM-DD, defaults to the current week"),
    storage: JsonFileStorage = Depends(get_storage),
):
    return ReportingService(storage.load()).dashboard(week)


@router.get("/weeks", response_model=List[str])
def get_available_weeks(storage: JsonFileStorage = Depends(get_storage)):
    """Weeks that have at least one response, most recent first."""
    return ReportingService(storage.load()).available_weeks()
