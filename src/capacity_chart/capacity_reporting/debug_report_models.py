from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional


# ------------------------------------------------------------
# Selected-job usage for one day
# ------------------------------------------------------------
@dataclass
class JobUsage:
    usage: float
    operation: int
    process_time: float


# ------------------------------------------------------------
# One resource group on one day
# ------------------------------------------------------------
@dataclass
class DailyReportEntry:
    date: date
    available_capacity: float
    planned_capacity: float
    scheduled_capacity: float
    utilization: float
    job_usage: Dict[str, JobUsage] = field(default_factory=dict)


# ------------------------------------------------------------
# Final report object (debug data export)
# ------------------------------------------------------------
@dataclass
class DebugReport:
    start_date: date
    days: int
    use_scheduled: bool
    groups: Dict[str, List[DailyReportEntry]]

    selected_job_id: Optional[str] = None

    @property
    def end_date(self) -> date:
        return self.start_date + timedelta(days=max(self.days - 1, 0))
