from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..registry.repository import ReadOnlyRegistry
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]
    total_pay: float


def _fmt_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


class PayrollReportService:
    """Use case: payroll across all sessions of a registry.

    Only attendees marked present are paid. Pay uses the rate snapshot
    taken at enrollment, not the person's current rate.
    """

    def __init__(
        self,
        registry: ReadOnlyRegistry,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._registry = registry
        self._calculator = calculator or StandardPayrollCalculator()

    def build_report(
        self,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> ReportData:
        sessions = sorted(
            s for s in self._registry.session_list
            if (start is None or s.start.date() >= start) and (end is None or s.start.date() <= end)
        )

        summary_map: dict[str, dict] = {}
        out_rows: list[dict] = []

        for session in sessions:
            minutes = session.duration_minutes()
            for name, present in session.attendance_map.items():
                if not present:
                    continue
                pay = session.pay_for(name, calculator=self._calculator)

                out_rows.append(
                    {
                        "session": session.name,
                        "name": name,
                        "date": session.date(),
                        "start": session.start_date_time,
                        "end": session.end_date_time,
                        "location": session.location,
                        "worked_hours": _fmt_minutes(minutes),
                        "pay_rate": session.pay_rate_map.get(name),
                        "pay": pay,
                    }
                )

                s = summary_map.get(name)
                if not s:
                    s = {"name": name, "sessions": 0, "total_minutes": 0, "total_pay": 0.0}
                    summary_map[name] = s
                s["sessions"] += 1
                s["total_minutes"] += minutes
                s["total_pay"] += pay

        summary = []
        for s in summary_map.values():
            summary.append(
                {
                    "name": s["name"],
                    "sessions": s["sessions"],
                    "total_hours": _fmt_minutes(int(s["total_minutes"])),
                    "total_pay": s["total_pay"],
                }
            )

        summary.sort(key=lambda x: x["total_pay"], reverse=True)
        return ReportData(rows=out_rows, summary=summary, total_pay=sum(r["pay"] for r in out_rows))
