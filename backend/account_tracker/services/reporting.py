from typing import List, Optional

from account_tracker.models.client import Client
from account_tracker.models.dataset import Dataset
from account_tracker.models.survey import SurveyResponse
from account_tracker.services.aggregation import aggregate_week
from account_tracker.services.weeks import current_week

UNKNOWN_CLIENT = "Unknown"


def name_sort_key(name: str):
    """Case-insensitive collation, raw name as tie-breaker so the order is stable."""
    return (name.casefold(), name)


class ReportingService:
    """
    Read-side queries over one loaded dataset:
    1. Client listings (active for the survey form, all for admin)
    2. Weekly dashboard aggregates
    3. Admin response listing and weekly stats
    """

    def __init__(self, dataset: Dataset):
        self.dataset = dataset

    # ── Clients ──────────────────────────────────────────────────────

    def all_clients(self) -> List[Client]:
        return sorted(self.dataset.clients, key=lambda c: name_sort_key(c.name))

    def active_clients(self) -> List[Client]:
        return [c for c in self.all_clients() if c.active]

    def client_name(self, client_id: Optional[int]) -> str:
        client = self.dataset.find_client(client_id) if client_id is not None else None
        return client.name if client else UNKNOWN_CLIENT

    # ── Dashboard ────────────────────────────────────────────────────

    def dashboard(self, week: Optional[str] = None) -> dict:
        week = week or current_week()
        return {
            "week": week,
            "clients": aggregate_week(self.active_clients(), self.dataset.responses, week),
        }

    def available_weeks(self) -> List[str]:
        """Distinct week keys, most recent first (YYYY-MM-DD sorts as text)."""
        return sorted({r.week_start for r in self.dataset.responses}, reverse=True)

    # ── Admin ────────────────────────────────────────────────────────

    def week_responses(self, week: str) -> List[SurveyResponse]:
        return [r for r in self.dataset.responses if r.week_start == week]

    def admin_responses(self, week: Optional[str] = None, client_id: Optional[int] = None) -> List[dict]:
        """
        Every response for the week annotated with its client name.

        Ordered by client name, newest submission first within a client.
        A client_id of 0 or None means no filter.
        """
        week = week or current_week()
        responses = self.week_responses(week)
        if client_id:
            responses = [r for r in responses if r.client_id == client_id]

        rows = []
        for r in responses:
            row = r.model_dump(mode="json")
            row["client_name"] = self.client_name(r.client_id)
            rows.append((r.submitted_at, row))

        # Two stable passes: time descending, then name ascending on top
        rows.sort(key=lambda item: item[0], reverse=True)
        rows.sort(key=lambda item: name_sort_key(item[1]["client_name"]))
        return [row for _, row in rows]

    def admin_stats(self, week: Optional[str] = None) -> dict:
        week = week or current_week()
        responses = self.week_responses(week)
        return {
            "week": week,
            "unique_respondents": len({r.email for r in responses}),
            "clients_covered": len({r.client_id for r in responses}),
            "total_active_clients": sum(1 for c in self.dataset.clients if c.active),
            "total_responses": len(responses),
        }
