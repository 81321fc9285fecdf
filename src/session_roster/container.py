from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .payroll.service import PayrollReportService
from .registry.model import Registry


@dataclass(frozen=True)
class Container:
    registry: Registry
    payroll_report_service: PayrollReportService

    # Request threads share one registry; every access goes through this lock.
    lock: threading.RLock = field(default_factory=threading.RLock)


def build_container(*, registry: Registry | None = None) -> Container:
    registry = registry if registry is not None else Registry()
    payroll_report_service = PayrollReportService(registry)

    return Container(
        registry=registry,
        payroll_report_service=payroll_report_service,
    )
