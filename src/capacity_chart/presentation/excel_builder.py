from pathlib import Path
from typing import Optional

import pandas as pd
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from capacity_chart.capacity_reporting.debug_report_models import DebugReport
from capacity_chart.presentation.json_export import report_to_frame
from capacity_chart.utils.config import config

SHEET_NAME = "Capacity Debug"
OVER_CAPACITY_FONT = Font(bold=True, color="C00000")


def _autosize_columns(ws):
    """
    Autosize Excel columns based on content length.
    """
    for col in ws.columns:
        max_len = max((len(str(cell.value)) for cell in col if cell.value is not None), default=0)
        col_letter = get_column_letter(col[0].column)
        ws.column_dimensions[col_letter].width = min(max_len + 2, 30)


def _freeze_panes(ws):
    """
    Freeze header row and first column.
    """
    ws.freeze_panes = "B2"


def _flag_over_capacity(ws, utilization_col: int):
    """
    Bold red utilization above 100%.
    """
    for r in range(2, ws.max_row + 1):
        cell = ws.cell(row=r, column=utilization_col)
        if isinstance(cell.value, (int, float)) and cell.value > 1:
            cell.font = OVER_CAPACITY_FONT


def write_excel_report(report: DebugReport, output_dir: Optional[Path] = None) -> Path:
    """
    Write the flat per-group, per-day report to capacity-debug-data.xlsx.
    """
    output_dir = Path(output_dir or config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    file_path = output_dir / config.excel_export_filename
    df_out = report_to_frame(report)

    with pd.ExcelWriter(file_path, engine="openpyxl") as writer:
        df_out.to_excel(writer, sheet_name=SHEET_NAME, index=False)

        ws = writer.book[SHEET_NAME]

        _freeze_panes(ws)
        _autosize_columns(ws)
        _flag_over_capacity(ws, df_out.columns.get_loc("utilization") + 1)

    return file_path
