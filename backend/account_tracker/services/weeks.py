"""Week bucketing — responses are grouped by the Monday that starts their week."""
from datetime import date, datetime, timedelta
from typing import Optional, Union

import pytz

from account_tracker.core.config import settings

WEEK_FORMAT = "%Y-%m-%d"


def today() -> date:
    """Current calendar date in the configured timezone."""
    return datetime.now(pytz.timezone(settings.TIMEZONE)).date()


def get_week_start(ref: Optional[Union[date, datetime]] = None) -> str:
    """
    Monday of the week containing ``ref`` as YYYY-MM-DD.

    Sunday belongs to the week that started six days earlier, not the
    following one. Datetimes are bucketed by their own calendar date.
    """
    if ref is None:
        ref = today()
    elif isinstance(ref, datetime):
        ref = ref.date()
    monday = ref - timedelta(days=ref.weekday())  # Mon=0 .. Sun=6
    return monday.strftime(WEEK_FORMAT)


def current_week() -> str:
    return get_week_start()
