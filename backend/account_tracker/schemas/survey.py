from pydantic import BaseModel, Field
from typing import List, Optional


class SurveyItem(BaseModel):
    """One client's ratings within a submission. Every rating may be left blank."""

    client_id: Optional[int] = None
    objective_clarity: Optional[float] = None
    next_week_plan: Optional[float] = None
    resourcing_load: Optional[float] = None
    momentum: Optional[float] = None
    quality: Optional[float] = None
    organic_growth: Optional[float] = None


class SurveySubmission(BaseModel):
    email: Optional[str] = None
    responses: List[SurveyItem] = Field(default_factory=list)


class SurveySubmitted(BaseModel):
    success: bool = True
    count: int
