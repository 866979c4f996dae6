from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

DAYS_PER_WEEK = 7
DEFAULT_DAILY_HOURS = 24.0


def default_week() -> List[float]:
    return [DEFAULT_DAILY_HOURS] * DAYS_PER_WEEK


# ------------------------------------------------------------
# Hours available per day for one resource group
# ------------------------------------------------------------
@dataclass
class CapacityRecord:
    resource_group_id: str
    # index 0 = Sunday ... 6 = Saturday
    daily_capacities: List[float] = field(default_factory=default_week)


# ------------------------------------------------------------
# One operation of a job, booked against a resource group
# ------------------------------------------------------------
@dataclass
class JobRecord:
    job: int
    operation: int
    resource_group_id: str
    planned_start_date: datetime
    standard_process_time_hours: float = 0.0

    # Optional schedule revision; None means "not yet scheduled"
    scheduled_start_date: Optional[datetime] = None

    # Hours per calendar day from the matching start date
    planned_multi_day_breakdown: Optional[List[float]] = None
    scheduled_multi_day_breakdown: Optional[List[float]] = None
