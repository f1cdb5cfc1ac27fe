"""Timezone and calendar-day helpers."""

from datetime import date, datetime
from typing import Union

import pytz
from dateutil import parser as date_parser

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def parse_date(value: Union[str, date, datetime]) -> date:
    """
    Normalize a calendar day.

    Accepts ``date``/``datetime`` objects or any string dateutil understands;
    the time component, if any, is dropped.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.parse(value).date()
