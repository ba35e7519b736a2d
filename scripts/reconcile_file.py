from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_reconciler.attendance_reconciler.container import build_container
from src.attendance_reconciler.attendance_reconciler.core.exceptions import DomainError


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Reconcile a time-clock CSV export and print per-employee totals.")
    parser.add_argument("csv_file", type=Path)
    parser.add_argument("--employee", help="write an Excel report for this employee")
    parser.add_argument("--out", type=Path, default=Path("."), help="directory for the Excel report")
    args = parser.parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    container = build_container(settings={k: getattr(settings, k) for k in dir(settings) if k.isupper()})

    try:
        container.attendance_service.load_csv(args.csv_file.read_text(encoding="utf-8-sig"))
        for row in container.report_service.build_overview():
            print(
                f"{row['name']:<30} workable={row['workableDays']:>3} present={row['presentDays']:>3} "
                f"absent={row['absentDays']:>3} short/half={row['shortHoursDays']}/{row['halfDays']} "
                f"hours={row['totalWorkedHoursText']}"
            )

        if args.employee:
            filename, content = container.report_service.export_excel(employee_name=args.employee)
            target = args.out / filename
            target.write_bytes(content)
            print(f"OK: wrote {target}")
    except DomainError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
