"""
Shared test fixtures for the capacity chart tests.
"""
from datetime import date, datetime, timedelta

import pytest

from capacity_chart.data.models import CapacityRecord, JobRecord
from capacity_chart.data.store import CapacityStore

# Monday
DAY0 = date(2026, 10, 19)


def at(day: date, hour: int = 9) -> datetime:
    return datetime(day.year, day.month, day.day, hour)


def millis(day: date, hour: int = 9) -> str:
    """Local-time epoch milliseconds as a string, the way the asset encodes dates."""
    return str(int(at(day, hour).timestamp() * 1000))


@pytest.fixture
def day0():
    return DAY0


@pytest.fixture
def days():
    """days(n) -> DAY0 + n days"""
    return lambda n: DAY0 + timedelta(days=n)


@pytest.fixture
def to_millis():
    return millis


@pytest.fixture
def make_job():
    def _make(job=1, operation=1, group="A", start=DAY0, hours=8.0, **kwargs):
        return JobRecord(
            job=job,
            operation=operation,
            resource_group_id=group,
            planned_start_date=at(start),
            standard_process_time_hours=hours,
            **kwargs,
        )

    return _make


@pytest.fixture
def store(make_job):
    """Two groups, three jobs, a mix of single-day and multi-day work."""
    capacities = [
        CapacityRecord("A", [10, 20, 20, 20, 20, 20, 5]),
        CapacityRecord("B", [0, 8, 8, 8, 8, 8, 0]),
    ]
    jobs = [
        make_job(job=1, operation=10, group="A", hours=3),
        make_job(job=1, operation=20, group="B", hours=6,
                 planned_multi_day_breakdown=[2, 2, 2],
                 scheduled_start_date=at(DAY0 + timedelta(days=2))),
        make_job(job=2, operation=10, group="A", hours=3),
        make_job(job=2, operation=20, group="A", start=DAY0 + timedelta(days=1), hours=4,
                 scheduled_start_date=at(DAY0 + timedelta(days=3))),
    ]
    return CapacityStore(capacities=capacities, jobs=jobs)


@pytest.fixture
def empty_store(tmp_path):
    return CapacityStore(
        capacity_path=tmp_path / "capacity-data.json",
        job_path=tmp_path / "job-data.json",
    )
