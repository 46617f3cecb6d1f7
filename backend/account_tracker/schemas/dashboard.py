from pydantic import BaseModel
from typing import Dict, List, Optional


class MetricSummary(BaseModel):
    avg: Optional[float] = None
    color: str


class ClientWeekSummary(BaseModel):
    client_id: int
    client_name: str
    response_count: int
    metrics: Dict[str, MetricSummary]


class Dashboard(BaseModel):
    week: str
    clients: List[ClientWeekSummary]


class AdminStats(BaseModel):
    week: str
    unique_respondents: int
    clients_covered: int
    total_active_clients: int
    total_responses: int
