"""
Weekly metric aggregation for the dashboard.

Each client's responses for a week are averaged field by field and every
average is mapped onto a color tier:

- Higher is better (clarity, plan, momentum, quality, growth):
  < 1.5 red, < 2.5 orange, < 3.5 blue, otherwise green
- Lower is better (burn / resourcing load):
  <= 1.5 green, <= 2.5 blue, <= 3.5 orange, otherwise red

A field nobody answered has a null average and the "none" color.
"""
import enum
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional

from account_tracker.models.client import Client
from account_tracker.models.survey import SurveyResponse


class ColorTier(str, enum.Enum):
    RED = "red"
    ORANGE = "orange"
    BLUE = "blue"
    GREEN = "green"
    NONE = "none"


class Polarity(str, enum.Enum):
    HIGHER_IS_BETTER = "higher_is_better"
    LOWER_IS_BETTER = "lower_is_better"


# Dashboard key -> (response field, polarity)
DASHBOARD_METRICS = {
    "clarity": ("objective_clarity", Polarity.HIGHER_IS_BETTER),
    "plan": ("next_week_plan", Polarity.HIGHER_IS_BETTER),
    "burn": ("resourcing_load", Polarity.LOWER_IS_BETTER),
    "momentum": ("momentum", Polarity.HIGHER_IS_BETTER),
    "quality": ("quality", Polarity.HIGHER_IS_BETTER),
    "growth": ("organic_growth", Polarity.HIGHER_IS_BETTER),
}

TWO_PLACES = Decimal("0.01")


def get_color_code(avg: Optional[float]) -> ColorTier:
    if avg is None:
        return ColorTier.NONE
    if avg < 1.5:
        return ColorTier.RED
    if avg < 2.5:
        return ColorTier.ORANGE
    if avg < 3.5:
        return ColorTier.BLUE
    return ColorTier.GREEN


def get_inverted_color_code(avg: Optional[float]) -> ColorTier:
    if avg is None:
        return ColorTier.NONE
    if avg <= 1.5:
        return ColorTier.GREEN
    if avg <= 2.5:
        return ColorTier.BLUE
    if avg <= 3.5:
        return ColorTier.ORANGE
    return ColorTier.RED


def color_for(avg: Optional[float], polarity: Polarity) -> ColorTier:
    if polarity == Polarity.LOWER_IS_BETTER:
        return get_inverted_color_code(avg)
    return get_color_code(avg)


def field_average(responses: Iterable[SurveyResponse], field: str) -> Optional[float]:
    """Mean of the non-null values of one field; None when nobody answered it."""
    values = [getattr(r, field) for r in responses if getattr(r, field) is not None]
    if not values:
        return None
    return sum(values) / len(values)


def round_average(avg: Optional[float]) -> Optional[float]:
    """
    Two decimals, half-up on the exact binary value.

    A true 0 average is returned as 0.0. Earlier dashboards showed it as
    null because zero was treated as "no value".
    """
    if avg is None:
        return None
    return float(Decimal(avg).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def summarize_metrics(responses: List[SurveyResponse]) -> Dict[str, dict]:
    metrics = {}
    for key, (field, polarity) in DASHBOARD_METRICS.items():
        avg = field_average(responses, field)
        # Color is taken from the unrounded mean
        metrics[key] = {
            "avg": round_average(avg),
            "color": color_for(avg, polarity).value,
        }
    return metrics


def summarize_client_week(client: Client, responses: List[SurveyResponse]) -> Optional[dict]:
    """Dashboard row for one client, or None if it has no responses that week."""
    if not responses:
        return None
    return {
        "client_id": client.id,
        "client_name": client.name,
        "response_count": len(responses),
        "metrics": summarize_metrics(responses),
    }


def aggregate_week(
    clients: Iterable[Client],
    responses: Iterable[SurveyResponse],
    week: str,
) -> List[dict]:
    """
    Dashboard rows for ``week``, in the order ``clients`` is given.

    Responses are matched on (client_id, week_start); clients without any
    match are left out.
    """
    by_client: Dict[int, List[SurveyResponse]] = {}
    for r in responses:
        if r.week_start == week:
            by_client.setdefault(r.client_id, []).append(r)

    rows = []
    for client in clients:
        row = summarize_client_week(client, by_client.get(client.id, []))
        if row is not None:
            rows.append(row)
    return rows
