import json
from datetime import timedelta

import pandas as pd

from capacity_chart.capacity_reporting.debug_report_usecase import build_report
from capacity_chart.presentation.console import render_debug_report
from capacity_chart.presentation.excel_builder import SHEET_NAME, write_excel_report
from capacity_chart.presentation.json_export import (
    report_to_dict,
    report_to_frame,
    report_to_json,
    write_debug_report,
)


def test_report_dict_uses_camel_case_keys(store, day0):
    data = report_to_dict(build_report(store, selected_job_id="2", start_date=day0))

    assert data["startDate"] == day0.isoformat()
    assert data["days"] == 21
    assert data["selectedJobId"] == "2"
    first = data["resourceGroups"]["A"][0]
    assert first == {
        "date": day0.isoformat(),
        "availableCapacity": 10,
        "plannedCapacity": 6,
        "scheduledCapacity": 6,
        "utilization": 0.6,
        "jobUsage": {"2": {"usage": 3, "operation": 10, "processTime": 3}},
    }


def test_json_is_indented(store, day0):
    text = report_to_json(build_report(store, start_date=day0))
    assert text.startswith("{\n  ")
    assert json.loads(text)["resourceGroups"]["B"][0]["jobUsage"] == {}


def test_write_debug_report_file_name(store, day0, tmp_path):
    report = build_report(store, start_date=day0)
    path = write_debug_report(report, tmp_path / "out")

    assert path == tmp_path / "out" / "capacity-debug-data.json"
    assert json.loads(path.read_text(encoding="utf-8")) == report_to_dict(report)


def test_frame_has_one_row_per_group_and_day(store, day0):
    df = report_to_frame(build_report(store, start_date=day0))

    assert len(df) == 42
    assert list(df.columns) == [
        "resource_group",
        "date",
        "available_capacity",
        "planned_capacity",
        "scheduled_capacity",
        "utilization",
    ]
    assert df.groupby("resource_group")["planned_capacity"].sum().to_dict() == {"A": 10, "B": 6}


def test_frame_includes_job_columns_when_selected(store, day0):
    df = report_to_frame(build_report(store, selected_job_id="1", start_date=day0))
    assert {"job", "job_usage", "job_operation", "job_process_time"} <= set(df.columns)
    assert (df["job"] == "1").all()


def test_write_excel_report(store, day0, tmp_path):
    path = write_excel_report(build_report(store, start_date=day0), tmp_path)

    assert path.name == "capacity-debug-data.xlsx"
    df = pd.read_excel(path, sheet_name=SHEET_NAME)
    assert len(df) == 42
    assert df.loc[0, "resource_group"] == "A"


def test_console_render(store, day0):
    text = render_debug_report(build_report(store, selected_job_id="1", start_date=day0))

    assert "CAPACITY DEBUG DATA" in text
    assert "== A ==" in text
    assert "== B ==" in text
    assert "Selected Job: 1" in text
    assert "60.0%" in text


def test_console_render_empty(day0):
    from capacity_chart.data.store import CapacityStore

    text = render_debug_report(build_report(CapacityStore(), start_date=day0))
    assert "No resource groups loaded." in text
    assert f"Window: {day0.isoformat()} to {(day0 + timedelta(days=20)).isoformat()} (21 days)" in text


def test_console_render_blank_job_id(store, day0):
    report = build_report(store, selected_job_id="", start_date=day0)
    text = render_debug_report(report)

    assert "Selected Job: " in text
    assert "job_usage" in text
    assert report.groups["A"][0].job_usage[""].usage == 0
