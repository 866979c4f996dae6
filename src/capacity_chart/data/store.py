"""
Capacity data store.

Holds the two record sets the chart works from. Both are replaced wholesale
on every load/update; derived values are recomputed on access.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

from capacity_chart.data.models import CapacityRecord, JobRecord
from capacity_chart.data.rows import (
    capacity_from_json,
    capacity_from_row,
    default_capacities_for_jobs,
    job_from_row,
    unwrap_records,
)
from capacity_chart.utils.config import config
from capacity_chart.utils.logger import get_logger

logger = get_logger(__name__)


def _read_asset(path: Path) -> List[Mapping[str, Any]]:
    with open(path, encoding="utf-8") as fh:
        return unwrap_records(json.load(fh))


class CapacityStore:
    def __init__(
        self,
        capacities: Optional[List[CapacityRecord]] = None,
        jobs: Optional[List[JobRecord]] = None,
        capacity_path: Optional[Path] = None,
        job_path: Optional[Path] = None,
    ):
        self.capacities: List[CapacityRecord] = list(capacities or [])
        self.jobs: List[JobRecord] = list(jobs or [])
        self.capacity_path = Path(capacity_path or config.capacity_data_path)
        self.job_path = Path(job_path or config.job_data_path)

    # ------------------------------------------------------------
    # Loading / replacing
    # ------------------------------------------------------------
    def load(self) -> None:
        """
        Replace both record sets from the bundled JSON assets.

        Failures are logged, never raised: a bad asset leaves the store empty.
        """
        try:
            capacities = [capacity_from_json(item) for item in _read_asset(self.capacity_path)]
            jobs = [job_from_row(item) for item in _read_asset(self.job_path)]
        except Exception:
            logger.exception(
                "Failed to load bundled capacity data | capacity=%s jobs=%s",
                self.capacity_path,
                self.job_path,
            )
            self.capacities = []
            self.jobs = []
            return

        self.capacities = capacities
        self.jobs = jobs
        logger.info(
            "Loaded bundled data | groups=%d jobs=%d", len(self.capacities), len(self.jobs)
        )

    def set_jobs(self, rows: Iterable[Mapping[str, Any]]) -> None:
        """
        Replace job records from imported rows.

        Capacity is reset too: every group found in the rows gets a default
        24h-per-day record.
        """
        jobs: List[JobRecord] = []
        for i, row in enumerate(rows):
            try:
                jobs.append(job_from_row(row))
            except (ValueError, TypeError, KeyError, AttributeError) as exc:
                logger.warning("Skipping job row %d: %s", i, exc)

        self.jobs = jobs
        self.capacities = default_capacities_for_jobs(jobs)
        logger.info(
            "Jobs imported | jobs=%d groups=%d", len(self.jobs), len(self.capacities)
        )

    def set_capacities(self, rows: Iterable[Any]) -> None:
        capacities: List[CapacityRecord] = []
        for i, row in enumerate(rows):
            record = capacity_from_row(row)
            if record is None:
                logger.warning("Skipping capacity row %d: blank resource group id", i)
                continue
            capacities.append(record)

        self.capacities = capacities
        logger.info("Capacities imported | groups=%d", len(self.capacities))

    # ------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------
    @property
    def resource_groups(self) -> List[str]:
        """Distinct group ids in first-seen order."""
        return list(dict.fromkeys(c.resource_group_id for c in self.capacities))

    @property
    def max_capacity(self) -> float:
        return max((h for c in self.capacities for h in c.daily_capacities), default=0.0)

    def capacity_for_group(self, resource_group_id: str) -> Optional[CapacityRecord]:
        for record in self.capacities:
            if record.resource_group_id == resource_group_id:
                return record
        return None

    def jobs_for_group(self, resource_group_id: str) -> List[JobRecord]:
        return [j for j in self.jobs if j.resource_group_id == resource_group_id]

    def jobs_for_job(self, job_id: int) -> List[JobRecord]:
        return [j for j in self.jobs if j.job == job_id]

    def __repr__(self):
        return f"<CapacityStore groups={len(self.resource_groups)} jobs={len(self.jobs)}>"
