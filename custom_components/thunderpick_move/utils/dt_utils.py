# File: utils/dt_utils.py
"""Local-calendar helpers for Thunderpick Move.

No `homeassistant.*` imports here: the integration hands its timezone over
once at setup (set_default_timezone) and everything else is plain datetime,
zoneinfo and dateutil, testable without a running instance.

"Today" always means the local calendar day in that timezone. Stored
timestamps are ISO 8601 strings; naive ones are read as local time.
"""

from __future__ import annotations

from datetime import date, datetime
import logging
from zoneinfo import ZoneInfo

from dateutil import parser as dateutil_parser
from dateutil.relativedelta import relativedelta

_LOGGER = logging.getLogger(__name__)

# Replaced with the Home Assistant timezone during setup
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")


def set_default_timezone(tz: ZoneInfo) -> None:
    """Use `tz` for every local-day computation from now on."""
    global DEFAULT_TIME_ZONE  # noqa: PLW0603
    DEFAULT_TIME_ZONE = tz


def dt_now_local(tz: ZoneInfo | None = None) -> datetime:
    """Aware `now` in the local (or given) timezone."""
    return datetime.now(tz or DEFAULT_TIME_ZONE)


def _to_local(moment: datetime, tz: ZoneInfo | None) -> datetime:
    # Naive datetimes are local time, as in dt_parse
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=DEFAULT_TIME_ZONE)
    return moment.astimezone(tz or DEFAULT_TIME_ZONE)


# ==============================================================================
# Parsing & Day Keys
# ==============================================================================


def dt_parse(dt_input: str | datetime | None) -> datetime | None:
    """Normalize a stored timestamp into a timezone-aware datetime.

    Accepts ISO 8601 strings (with or without offset) and datetime objects.
    Naive values are interpreted in DEFAULT_TIME_ZONE.

    Returns:
        Aware datetime, or None when the input is empty or unparseable.
    """
    if dt_input is None or dt_input == "":
        return None

    if isinstance(dt_input, datetime):
        parsed = dt_input
    elif isinstance(dt_input, str):
        try:
            parsed = dateutil_parser.isoparse(dt_input)
        except (ValueError, OverflowError):
            _LOGGER.debug("Unparseable timestamp ignored: %s", dt_input)
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=DEFAULT_TIME_ZONE)
    return parsed


def dt_local_date(
    dt_input: str | datetime | None, tz: ZoneInfo | None = None
) -> date | None:
    """Return the local calendar date of a stored timestamp, or None."""
    parsed = dt_parse(dt_input)
    if parsed is None:
        return None
    return _to_local(parsed, tz).date()


def dt_day_key(day: date | datetime, tz: ZoneInfo | None = None) -> str:
    """Return the ISO date key (YYYY-MM-DD) of the local calendar day.

    Datetimes are first converted to local time, so two moments on the same
    local day always produce the same key.
    """
    if isinstance(day, datetime):
        return _to_local(day, tz).date().isoformat()
    return day.isoformat()


def dt_day_of_year(day: date | datetime, tz: ZoneInfo | None = None) -> int:
    """Return the ordinal day within the year (1..366) of the local day."""
    if isinstance(day, datetime):
        day = _to_local(day, tz).date()
    return day.timetuple().tm_yday


def dt_is_same_local_day(
    dt_input: str | datetime | None, reference: datetime, tz: ZoneInfo | None = None
) -> bool:
    """Check whether a stored timestamp falls on the local day of `reference`."""
    stored_day = dt_local_date(dt_input, tz)
    if stored_day is None:
        return False
    return stored_day == _to_local(reference, tz).date()


def dt_recent_days(today: date, count: int) -> list[date]:
    """Return the last `count` calendar days ending with `today`, oldest first.

    Example:
        dt_recent_days(date(2026, 3, 2), 3) → [2026-02-28, 2026-03-01, 2026-03-02]
    """
    if count <= 0:
        return []
    return [today + relativedelta(days=offset) for offset in range(1 - count, 1)]
