from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_errors, parse_iso_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/payroll", methods=["GET"], endpoint="payroll_report")
    @json_errors
    def payroll_report():
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        start = parse_iso_date(start_s) if start_s else None
        end = parse_iso_date(end_s) if end_s else None

        with container.lock:
            report = container.payroll_report_service.build_report(start=start, end=end)

        return jsonify({"rows": report.rows, "summary": report.summary, "total_pay": report.total_pay})
