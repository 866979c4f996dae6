"""
Spreadsheet import.

Reads an Excel or CSV export into plain row dicts (column order preserved)
for CapacityStore.set_jobs / set_capacities. No conversion happens here.

By default the first row is the header. Positional capacity sheets without
one are read with header=False; their columns are then numbered 0..n.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Union

import pandas as pd

from capacity_chart.utils.logger import get_logger

logger = get_logger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}


def read_frame(path: Union[str, Path], header: bool = True) -> pd.DataFrame:
    path = Path(path)
    suffix = path.suffix.lower()
    header_row = 0 if header else None

    if suffix in EXCEL_SUFFIXES:
        return pd.read_excel(path, sheet_name=0, header=header_row)
    if suffix == ".csv":
        return pd.read_csv(path, header=header_row)

    raise ValueError(f"Unsupported import file type: {path.name}")


def read_rows(path: Union[str, Path], header: bool = True) -> List[Dict[str, Any]]:
    """Rows as dicts; empty cells stay NaN and are handled by the row converters."""
    df = read_frame(path, header=header)
    logger.info("Read %d rows from %s", len(df), path)
    return df.to_dict(orient="records")
