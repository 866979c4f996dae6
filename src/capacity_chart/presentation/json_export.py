from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd

from capacity_chart.capacity_reporting.debug_report_models import DebugReport
from capacity_chart.utils.config import config
from capacity_chart.utils.logger import get_logger

log = get_logger(__name__)


def report_to_dict(report: DebugReport) -> Dict[str, Any]:
    """camelCase keys, ISO dates; the shape the chart's debug download uses."""
    return {
        "startDate": report.start_date.isoformat(),
        "days": report.days,
        "useScheduled": report.use_scheduled,
        "selectedJobId": report.selected_job_id,
        "resourceGroups": {
            group_id: [
                {
                    "date": e.date.isoformat(),
                    "availableCapacity": e.available_capacity,
                    "plannedCapacity": e.planned_capacity,
                    "scheduledCapacity": e.scheduled_capacity,
                    "utilization": e.utilization,
                    "jobUsage": {
                        job_id: {
                            "usage": u.usage,
                            "operation": u.operation,
                            "processTime": u.process_time,
                        }
                        for job_id, u in e.job_usage.items()
                    },
                }
                for e in entries
            ]
            for group_id, entries in report.groups.items()
        },
    }


def report_to_json(report: DebugReport) -> str:
    return json.dumps(report_to_dict(report), indent=2)


def report_to_frame(report: DebugReport) -> pd.DataFrame:
    """One row per group x day. Job usage columns only when a job is selected."""
    rows = []
    for group_id, entries in report.groups.items():
        for e in entries:
            row = {
                "resource_group": group_id,
                "date": e.date,
                "available_capacity": e.available_capacity,
                "planned_capacity": e.planned_capacity,
                "scheduled_capacity": e.scheduled_capacity,
                "utilization": e.utilization,
            }
            for job_id, u in e.job_usage.items():
                row["job"] = job_id
                row["job_usage"] = u.usage
                row["job_operation"] = u.operation
                row["job_process_time"] = u.process_time
            rows.append(row)

    columns = [
        "resource_group",
        "date",
        "available_capacity",
        "planned_capacity",
        "scheduled_capacity",
        "utilization",
    ]
    if report.selected_job_id is not None:
        columns += ["job", "job_usage", "job_operation", "job_process_time"]

    return pd.DataFrame(rows, columns=columns)


def write_debug_report(report: DebugReport, output_dir: Optional[Path] = None) -> Path:
    """Write capacity-debug-data.json and return its path."""
    output_dir = Path(output_dir or config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    file_path = output_dir / config.debug_export_filename
    file_path.write_text(report_to_json(report), encoding="utf-8")

    log.info(f"Debug data written to: {file_path}")
    return file_path
