"""
Capacity Calculator

Rules:
- Pure functions only
- Calendar-day granularity (time of day is dropped)
- Not-found lookups resolve to 0, never raise
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional, Union

from capacity_chart.data.models import CapacityRecord, JobRecord
from capacity_chart.data.store import CapacityStore

DateLike = Union[date, datetime]


def to_day(value: DateLike) -> date:
    """Strip time of day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def day_of_week(value: DateLike) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return to_day(value).isoweekday() % 7


# ----------------------------
# Single job
# ----------------------------

def effective_start(job: JobRecord, use_scheduled: bool) -> date:
    if use_scheduled and job.scheduled_start_date is not None:
        return to_day(job.scheduled_start_date)
    return to_day(job.planned_start_date)


def effective_breakdown(job: JobRecord, use_scheduled: bool) -> Optional[List[float]]:
    # Independent of effective_start: a scheduled date may pair with the planned breakdown
    if use_scheduled and job.scheduled_multi_day_breakdown is not None:
        return job.scheduled_multi_day_breakdown
    return job.planned_multi_day_breakdown


def hours_for_date(job: JobRecord, target: DateLike, use_scheduled: bool = False) -> float:
    """
    Hours of `job` that fall on the calendar day `target`.

    Without a breakdown the whole process time lands on the start day.
    With one, day N after the start gets breakdown[N]; days outside the
    breakdown get 0 (the array is not extrapolated).
    """
    day = to_day(target)
    start = effective_start(job, use_scheduled)
    breakdown = effective_breakdown(job, use_scheduled)

    if breakdown is None:
        return job.standard_process_time_hours if day == start else 0.0

    offset = (day - start).days
    if 0 <= offset < len(breakdown):
        return breakdown[offset]
    return 0.0


# ----------------------------
# Aggregation
# ----------------------------

def group_capacity_for_date(
    store: CapacityStore,
    resource_group_id: str,
    target: DateLike,
    use_scheduled: bool = False,
) -> float:
    return sum(
        (hours_for_date(j, target, use_scheduled) for j in store.jobs_for_group(resource_group_id)),
        0.0,
    )


def job_capacity_for_date(
    store: CapacityStore,
    job_id: int,
    target: DateLike,
    use_scheduled: bool = False,
) -> float:
    """Summed over every operation of the job."""
    return sum(
        (hours_for_date(j, target, use_scheduled) for j in store.jobs_for_job(job_id)),
        0.0,
    )


def weekly_capacity(record: CapacityRecord, target: DateLike) -> float:
    """
    Hours available on `target` according to its day of week.
    """
    return record.daily_capacities[day_of_week(target)]
