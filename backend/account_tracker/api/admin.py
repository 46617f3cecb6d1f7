"""Admin API — raw responses and submission stats for a week."""
import re
from typing import Optional

from fastapi import APIRouter, Depends, Query

from account_tracker.core.storage import JsonFileStorage, get_storage
from account_tracker.schemas.dashboard import AdminStats
from account_tracker.services.reporting import ReportingService

router = APIRouter(prefix="/api/admin", tags=["admin"])

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_client_id(value: Optional[str]) -> Optional[int]:
    """Leading integer of the query value ("12abc" -> 12); anything else means no filter."""
    if not value:
        return None
    match = LEADING_INT.match(value)
    return int(match.group(1)) if match else None


@router.get("/responses")
def list_responses(
    week: Optional[str] = Query(None, description="Week start YYYY-MM-DD, defaults to the current week"),
    client_id: Optional[str] = Query(None, description="Client id; non-numeric or 0 lists every client"),
    storage: JsonFileStorage = Depends(get_storage),
):
    """Responses with their client name, grouped by client, newest first."""
    service = ReportingService(storage.load())
    return service.admin_responses(week, parse_client_id(client_id))


@router.get("/stats", response_model=AdminStats)
def get_stats(
    week: Optional[str] = Query(None, description="Week start YYYY-MM-DD, defaults to the current week"),
    storage: JsonFileStorage = Depends(get_storage),
):
    return ReportingService(storage.load()).admin_stats(week)
