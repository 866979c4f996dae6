"""
Row conversion at the import boundary.

Raw rows arrive either from the bundled JSON assets or from a spreadsheet
read through pandas, so a value may be a str, int, float, NaN, a Timestamp or
already a list. Everything is turned into CapacityRecord / JobRecord here;
nothing past this module sees loosely-typed rows.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Optional, Sequence

import pandas as pd

from capacity_chart.data.models import (
    DAYS_PER_WEEK,
    DEFAULT_DAILY_HOURS,
    CapacityRecord,
    JobRecord,
    default_week,
)

# External field names (JSON asset keys / spreadsheet headers)
JOB_FIELD = "Job"
OPERATION_FIELD = "Opr"
GROUP_FIELD = "resourceGroupId"
PLANNED_START_FIELD = "plannedStartDate"
SCHEDULED_START_FIELD = "scheduledStartDate"
PROCESS_TIME_FIELD = "standardProcessTimeHours"
PLANNED_BREAKDOWN_FIELD = "plannedMultiDayBreakdown"
SCHEDULED_BREAKDOWN_FIELD = "scheduledMultiDayBreakdown"
CAPACITIES_FIELD = "dailyCapacities"


def is_missing(value: Any) -> bool:
    """None, blank text and pandas NaN/NaT all count as an empty cell."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def to_hours(value: Any, default: float = DEFAULT_DAILY_HOURS) -> float:
    if is_missing(value) or isinstance(value, bool):
        return default
    try:
        hours = float(value)
    except (TypeError, ValueError):
        return default
    return default if pd.isna(hours) else hours


def to_int(value: Any) -> int:
    if is_missing(value) or isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"expected an integer, got {value!r}")
    return int(number)


def parse_timestamp(value: Any) -> datetime:
    """
    Millisecond epoch (as str or number) -> local datetime.

    Spreadsheet cells that pandas already parsed as dates, and ISO date
    strings, are accepted as well.
    """
    if is_missing(value):
        raise ValueError("timestamp is missing")
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        raise ValueError(f"not a timestamp: {value!r}")

    try:
        millis = float(value)
    except (TypeError, ValueError):
        return datetime.fromisoformat(str(value).strip())

    try:
        return datetime.fromtimestamp(millis / 1000)
    except (OverflowError, OSError, ValueError):
        # inf / nan / outside the platform's time_t range
        raise ValueError(f"not a timestamp: {value!r}") from None


def parse_optional_timestamp(value: Any) -> Optional[datetime]:
    if is_missing(value):
        return None
    return parse_timestamp(value)


def parse_breakdown(value: Any) -> Optional[List[float]]:
    """
    Per-day hours list. Excel cells carry it as "[4, 4]" or "4,4".
    """
    if is_missing(value):
        return None

    if isinstance(value, str):
        text = value.strip()
        if text.startswith("["):
            items = json.loads(text)
        else:
            items = text.split(",")
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        # single number in a cell = one-day breakdown
        items = [value]

    return [to_hours(v, default=0.0) for v in items]


# ------------------------------------------------------------
# Jobs
# ------------------------------------------------------------
def job_from_row(row: Mapping[str, Any]) -> JobRecord:
    """
    Build a JobRecord from a named-field row.

    Raises ValueError/TypeError/KeyError when a required field is missing or
    unusable; optional fields fall back to None.
    """
    group = row.get(GROUP_FIELD)
    if is_missing(group):
        raise ValueError(f"{GROUP_FIELD} is missing")

    return JobRecord(
        job=to_int(row.get(JOB_FIELD)),
        operation=to_int(row.get(OPERATION_FIELD)),
        resource_group_id=str(group).strip(),
        planned_start_date=parse_timestamp(row.get(PLANNED_START_FIELD)),
        scheduled_start_date=parse_optional_timestamp(row.get(SCHEDULED_START_FIELD)),
        standard_process_time_hours=to_hours(row.get(PROCESS_TIME_FIELD), default=0.0),
        planned_multi_day_breakdown=parse_breakdown(row.get(PLANNED_BREAKDOWN_FIELD)),
        scheduled_multi_day_breakdown=parse_breakdown(row.get(SCHEDULED_BREAKDOWN_FIELD)),
    )


def default_capacities_for_jobs(jobs: Iterable[JobRecord]) -> List[CapacityRecord]:
    """One all-default capacity record per distinct group, first-seen order."""
    seen = dict.fromkeys(j.resource_group_id for j in jobs)
    return [CapacityRecord(resource_group_id=g, daily_capacities=default_week()) for g in seen]


# ------------------------------------------------------------
# Capacities
# ------------------------------------------------------------
def _row_values(row: Any) -> List[Any]:
    if isinstance(row, Mapping):
        return list(row.values())
    if isinstance(row, (str, bytes)):
        return [row]
    return list(row)


def capacity_from_row(row: Any) -> Optional[CapacityRecord]:
    """
    Positional row: field 0 = group id, fields 1..7 = hours per day.

    Returns None when the id cell is blank. Any other shape problem resolves
    to default hours rather than an error.
    """
    values = _row_values(row)
    if not values or is_missing(values[0]):
        return None

    group_id = str(values[0]).strip()
    day_values = values[1:]

    if len(day_values) != DAYS_PER_WEEK:
        return CapacityRecord(resource_group_id=group_id, daily_capacities=default_week())

    return CapacityRecord(
        resource_group_id=group_id,
        daily_capacities=[to_hours(v) for v in day_values],
    )


def capacity_from_json(item: Mapping[str, Any]) -> CapacityRecord:
    """Strict variant for the bundled asset; malformed items raise ValueError."""
    group = item.get(GROUP_FIELD)
    days = item.get(CAPACITIES_FIELD)

    if is_missing(group):
        raise ValueError(f"{GROUP_FIELD} is missing")
    if not isinstance(days, Sequence) or isinstance(days, str) or len(days) != DAYS_PER_WEEK:
        raise ValueError(f"{CAPACITIES_FIELD} for {group!r} must hold {DAYS_PER_WEEK} values")

    return CapacityRecord(
        resource_group_id=str(group),
        daily_capacities=[float(v) for v in days],
    )


def unwrap_records(payload: Any) -> List[Mapping[str, Any]]:
    """Accept a bare array or a {"data": [...]} wrapper."""
    if isinstance(payload, Mapping):
        payload = payload.get("data")
    if not isinstance(payload, list):
        raise ValueError("expected a list of records or a {'data': [...]} object")
    return payload
