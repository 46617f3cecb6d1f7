"""Survey response model — one team member's weekly rating of one client."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class SurveyResponse(BaseModel):
    """Immutable once stored. Ratings are expected on a 1-5 scale but not range-checked."""

    id: int
    email: str
    client_id: Optional[int] = None  # not required to reference an existing client

    objective_clarity: Optional[float] = None
    next_week_plan: Optional[float] = None
    resourcing_load: Optional[float] = None
    momentum: Optional[float] = None
    quality: Optional[float] = None
    organic_growth: Optional[float] = None

    week_start: str  # YYYY-MM-DD of the Monday
    submitted_at: datetime
