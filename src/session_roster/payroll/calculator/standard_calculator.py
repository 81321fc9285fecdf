from __future__ import annotations

from ...core.constants import MINUTES_PER_HOUR
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: hourly rate prorated by the minute, never below 0."""

    def pay_for(self, *, pay_rate: int, minutes: int) -> float:
        if minutes <= 0:
            return 0.0
        return pay_rate * minutes / MINUTES_PER_HOUR
