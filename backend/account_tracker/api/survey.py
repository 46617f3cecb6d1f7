"""Survey API — weekly status ratings submitted by team members."""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from account_tracker.core.storage import JsonFileStorage, get_storage
from account_tracker.schemas.survey import SurveySubmission, SurveySubmitted
from account_tracker.services.weeks import current_week

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/survey", tags=["survey"])


@router.post("", status_code=201, response_model=SurveySubmitted)
def submit_survey(payload: SurveySubmission, storage: JsonFileStorage = Depends(get_storage)):
    """
    Store one response per rated client.

    All responses in a submission share the submitter, the current week and
    the same submission timestamp. client_id is not checked against the
    client list.
    """
    email = (payload.email or "").strip()
    if not email:
        raise HTTPException(status_code=400, detail="Email required")
    if not payload.responses:
        raise HTTPException(status_code=400, detail="No responses provided")

    week_start = current_week()
    submitted_at = datetime.now(timezone.utc)

    with storage.transaction() as dataset:
        for item in payload.responses:
            dataset.add_response(
                email=email,
                week_start=week_start,
                submitted_at=submitted_at,
                **item.model_dump(),
            )

    logger.info(f"Survey submitted: email={email}, week={week_start}, responses={len(payload.responses)}")
    return {"success": True, "count": len(payload.responses)}
