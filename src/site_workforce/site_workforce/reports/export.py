from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ..common.formatting import format_money
from ..core.constants import CURRENCY_SYMBOL, EXPORT_FILENAME_PREFIX
from ..core.exceptions import NoDataError
from .service import ReportRow

log = logging.getLogger(__name__)

HEADERS = [
    "Employee Name",
    "Employee ID",
    "Job Category",
    "Site Location",
    "Date",
    "Attendance Type",
    f"Daily Wage ({CURRENCY_SYMBOL})",
    f"Calculated Wage ({CURRENCY_SYMBOL})",
]


def export_filename(today: date) -> str:
    return f"{EXPORT_FILENAME_PREFIX}{today.isoformat()}.csv"


def _fields(r: ReportRow) -> list[str]:
    return [
        r.employee_name,
        r.employee_code,
        r.job_category,
        r.site_location,
        r.work_date.isoformat(),
        r.attendance_type,
        format_money(r.daily_wage),
        format_money(r.calculated_wage),
    ]


def write_report_csv(rows: Sequence[ReportRow]) -> str:
    """Serialize report rows to comma-separated text.

    Fields are joined as-is: a value containing a comma is not quoted.
    Raises NoDataError when there is nothing to export.
    """

    if not rows:
        raise NoDataError("No data available for the selected filters.")

    lines = [",".join(HEADERS)]
    lines.extend(",".join(_fields(r)) for r in rows)

    log.info("exported %d report rows", len(rows))
    return "\n".join(lines) + "\n"
