from __future__ import annotations

from abc import ABC, abstractmethod


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def pay_for(self, *, pay_rate: int, minutes: int) -> float:
        raise NotImplementedError
