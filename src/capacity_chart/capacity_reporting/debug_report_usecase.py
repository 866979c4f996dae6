"""
Capacity Debug Report Use Case

Purpose:
- Planned vs scheduled hours per resource group, per day
- Fixed 21-day window from a reference date
- Optional focus on one job (jobUsage)

Important:
- Available capacity is the group's day-0 value for EVERY day of the
  window, not the matching day of week. weekly_capacity() is the
  day-of-week-aware lookup; the report does not use it.
- Unknown groups/jobs resolve to 0, never raise
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, List, Optional, Union

from capacity_chart.capacity.calculator import (
    group_capacity_for_date,
    job_capacity_for_date,
    to_day,
)
from capacity_chart.capacity_reporting.debug_report_models import (
    DailyReportEntry,
    DebugReport,
    JobUsage,
)
from capacity_chart.data.rows import to_int
from capacity_chart.data.store import CapacityStore
from capacity_chart.utils.logger import get_logger

logger = get_logger(__name__)

REPORT_WINDOW_DAYS = 21


def report_dates(start_date: date, days: int = REPORT_WINDOW_DAYS) -> List[date]:
    return [start_date + timedelta(days=i) for i in range(days)]


def _utilization(planned: float, available: float) -> float:
    return planned / available if available else 0.0


def _resolve_job_id(selected_job_id: Union[int, str]) -> Optional[int]:
    try:
        return to_int(selected_job_id)
    except (TypeError, ValueError):
        logger.warning("Selected job id %r is not numeric; usage will be 0", selected_job_id)
        return None


def _job_usage(
    store: CapacityStore,
    job_id: Optional[int],
    day: date,
    use_scheduled: bool,
) -> JobUsage:
    operations = store.jobs_for_job(job_id) if job_id is not None else []
    first = operations[0] if operations else None

    return JobUsage(
        usage=job_capacity_for_date(store, job_id, day, use_scheduled) if first else 0.0,
        operation=first.operation if first else 0,
        process_time=first.standard_process_time_hours if first else 0.0,
    )


def build_report(
    store: CapacityStore,
    selected_job_id: Optional[Union[int, str]] = None,
    use_scheduled: bool = False,
    start_date: Optional[date] = None,
) -> DebugReport:
    """
    Build the debug data report for every resource group in the store.
    """
    start = to_day(start_date) if start_date is not None else date.today()
    dates = report_dates(start)

    job_key = str(selected_job_id) if selected_job_id is not None else None
    job_id = _resolve_job_id(selected_job_id) if selected_job_id is not None else None

    logger.info(
        "Building capacity debug report | start=%s groups=%d job=%s scheduled=%s",
        start,
        len(store.resource_groups),
        job_key,
        use_scheduled,
    )

    groups: Dict[str, List[DailyReportEntry]] = {}

    for group_id in store.resource_groups:
        record = store.capacity_for_group(group_id)
        available = record.daily_capacities[0] if record else 0.0

        entries: List[DailyReportEntry] = []
        for day in dates:
            planned = group_capacity_for_date(store, group_id, day, use_scheduled=False)
            scheduled = group_capacity_for_date(store, group_id, day, use_scheduled=True)

            job_usage: Dict[str, JobUsage] = {}
            if job_key is not None:
                job_usage[job_key] = _job_usage(store, job_id, day, use_scheduled)

            entries.append(
                DailyReportEntry(
                    date=day,
                    available_capacity=available,
                    planned_capacity=planned,
                    scheduled_capacity=scheduled,
                    utilization=_utilization(planned, available),
                    job_usage=job_usage,
                )
            )

        groups[group_id] = entries

    return DebugReport(
        start_date=start,
        days=len(dates),
        use_scheduled=use_scheduled,
        groups=groups,
        selected_job_id=job_key,
    )
