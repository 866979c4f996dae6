from __future__ import annotations

import io
from typing import List, Sequence

from capacity_chart.capacity_reporting.debug_report_models import DebugReport


def _format_table(rows: Sequence[Sequence[object]], headers: List[str]) -> str:
    output = io.StringIO()
    rows = list(rows)

    widths = [len(h) for h in headers]
    for row in rows:
        for i, v in enumerate(row):
            widths[i] = max(widths[i], len(str(v)))

    def fmt(r):
        return " ".join(str(r[i]).ljust(widths[i]) for i in range(len(headers)))

    print(fmt(headers), file=output)
    print(" ".join("-" * w for w in widths), file=output)
    for row in rows:
        print(fmt(row), file=output)

    return output.getvalue()


def render_debug_report(report: DebugReport) -> str:
    out = io.StringIO()

    print("=" * 80, file=out)
    print("CAPACITY DEBUG DATA", file=out)
    print("=" * 80, file=out)
    print(f"Window: {report.start_date.isoformat()} to {report.end_date.isoformat()} ({report.days} days)", file=out)
    print(f"Resource Groups: {len(report.groups)}", file=out)
    print(f"Job Usage Timeline: {'scheduled' if report.use_scheduled else 'planned'}", file=out)
    if report.selected_job_id is not None:
        print(f"Selected Job: {report.selected_job_id}", file=out)
    print(file=out)

    if not report.groups:
        print("No resource groups loaded.", file=out)
        return out.getvalue()

    headers = ["date", "available", "planned", "scheduled", "utilization"]
    if report.selected_job_id is not None:
        headers += ["job_usage", "operation", "process_time"]

    for group_id, entries in report.groups.items():
        print(f"== {group_id} ==\n", file=out)

        rows = []
        for e in entries:
            row = [
                e.date.isoformat(),
                f"{e.available_capacity:.2f}",
                f"{e.planned_capacity:.2f}",
                f"{e.scheduled_capacity:.2f}",
                f"{e.utilization:.1%}",
            ]
            usage = e.job_usage.get(report.selected_job_id) if report.selected_job_id is not None else None
            if usage is not None:
                row += [f"{usage.usage:.2f}", usage.operation, f"{usage.process_time:.2f}"]
            rows.append(row)

        print(_format_table(rows, headers), file=out)

    return out.getvalue()
