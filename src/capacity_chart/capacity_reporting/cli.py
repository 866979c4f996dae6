import argparse
import sys
from datetime import date, datetime
from pathlib import Path

from capacity_chart.capacity_reporting.debug_report_usecase import build_report
from capacity_chart.data.importers import read_rows
from capacity_chart.data.store import CapacityStore
from capacity_chart.presentation.console import render_debug_report
from capacity_chart.presentation.excel_builder import write_excel_report
from capacity_chart.presentation.json_export import write_debug_report
from capacity_chart.utils.config import config
from capacity_chart.utils.logger import get_logger

logger = get_logger(__name__)


def _parse_date(value: str) -> date:
    return datetime.strptime(value, "%Y-%m-%d").date()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Capacity Debug Data (planned vs scheduled hours per resource group)"
    )

    parser.add_argument(
        "--jobs",
        type=Path,
        default=None,
        help="Job/operation import file (.xlsx or .csv). Resets capacities to 24h/day.",
    )

    parser.add_argument(
        "--capacities",
        type=Path,
        default=None,
        help="Capacity import file (.xlsx or .csv): group id then 7 daily hour columns.",
    )

    parser.add_argument(
        "--capacities-no-header",
        action="store_true",
        help="The capacity file has no header row (first row is already a group).",
    )

    parser.add_argument(
        "--job",
        type=str,
        default=None,
        help="Job id to report usage for.",
    )

    parser.add_argument(
        "--scheduled",
        action="store_true",
        help="Use the scheduled timeline for job usage (default: planned).",
    )

    parser.add_argument(
        "--start",
        type=_parse_date,
        default=None,
        help="First day of the 21-day window (YYYY-MM-DD). Defaults to today.",
    )

    parser.add_argument(
        "--export",
        action="store_true",
        help=f"Write {config.debug_export_filename} to the output directory.",
    )

    parser.add_argument(
        "--excel",
        action="store_true",
        help=f"Write {config.excel_export_filename} to the output directory.",
    )

    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output_dir,
        help="Directory for exported files.",
    )

    return parser


def populate_store(args: argparse.Namespace) -> CapacityStore:
    store = CapacityStore()

    if args.jobs is None and args.capacities is None:
        store.load()
        return store

    if args.jobs is not None:
        # set_jobs resets capacities, so capacities are applied after it
        store.set_jobs(read_rows(args.jobs))
    if args.capacities is not None:
        store.set_capacities(read_rows(args.capacities, header=not args.capacities_no_header))

    return store


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        store = populate_store(args)
    except (OSError, ValueError):
        logger.error("Failed to import data", exc_info=True)
        return 1

    report = build_report(
        store,
        selected_job_id=args.job,
        use_scheduled=args.scheduled,
        start_date=args.start,
    )

    # Always print (useful for runs + golden capture)
    print(render_debug_report(report))

    if args.export:
        path = write_debug_report(report, args.output_dir)
        print(f"Debug data written to {path}")

    if args.excel:
        path = write_excel_report(report, args.output_dir)
        print(f"Excel report written to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
