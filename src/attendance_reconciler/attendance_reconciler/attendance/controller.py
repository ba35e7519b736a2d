from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import parse_iso_date
from ..common.http import date_arg, json_errors
from ..container import Container
from ..core.enums import ReasonCode
from ..core.exceptions import EnhancementError, ValidationError
from ..reports.service import to_row

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service
    reports = container.report_service

    def _overview() -> dict:
        span = attendance.date_range()
        return {
            "employees": attendance.list_employees(),
            "start": span.start.isoformat() if span else None,
            "end": span.end.isoformat() if span else None,
        }

    def _read_upload() -> str:
        upload = request.files.get("file")
        raw = upload.read() if upload else request.get_data()
        if not raw:
            raise ValidationError("Please upload a CSV file")
        # Excel-saved CSVs come with a BOM
        return raw.decode("utf-8-sig", errors="replace")

    @app.route("/api/upload", methods=["POST"], endpoint="upload")
    @json_errors
    def upload():
        attendance.load_csv(_read_upload())
        return jsonify({"success": True, **_overview()}), 200

    @app.route("/api/employees", methods=["GET"], endpoint="employees")
    @json_errors
    def employees():
        return jsonify({"success": True, **_overview()}), 200

    @app.route("/api/records", methods=["GET"], endpoint="records")
    @json_errors
    def records():
        days = attendance.get_days(
            employee_name=request.args.get("employee") or None,
            start=date_arg("start"),
            end=date_arg("end"),
            work_date=date_arg("date"),
        )
        return jsonify({"success": True, "records": [to_row(d) for d in days]}), 200

    @app.route("/api/records/<employee>/<work_date>", methods=["PATCH"], endpoint="edit_record")
    @json_errors
    def edit_record(employee: str, work_date: str):
        data = request.get_json(silent=True) or {}

        reason_code = None
        if data.get("reasonCode"):
            try:
                reason_code = ReasonCode(data["reasonCode"])
            except ValueError:
                raise ValidationError(f"Unknown reason code '{data['reasonCode']}'")

        day = attendance.edit_day(
            employee_name=employee,
            work_date=parse_iso_date(work_date),
            reason=str(data.get("reason") or ""),
            credited_hours=data.get("creditHours"),
            reason_code=reason_code,
        )
        return jsonify({"success": True, "record": to_row(day)}), 200

    @app.route("/api/reasons", methods=["GET"], endpoint="reasons")
    def reasons():
        return jsonify(
            {
                "success": True,
                "reasons": [{"code": r.value, "creditHours": r.credit_hours} for r in ReasonCode],
            }
        ), 200

    @app.route("/api/summary", methods=["GET"], endpoint="summary")
    @json_errors
    def summary():
        employee = request.args.get("employee")
        if not employee:
            return jsonify({"success": True, "employees": reports.build_overview(start=date_arg("start"), end=date_arg("end"))}), 200

        report = reports.build_employee_report(employee_name=employee, start=date_arg("start"), end=date_arg("end"))
        return jsonify(
            {
                "success": True,
                "employee": report.employee_name,
                "start": report.date_range.start.isoformat(),
                "end": report.date_range.end.isoformat(),
                "summary": report.summary.to_dict(),
            }
        ), 200

    @app.route("/api/enhance", methods=["POST"], endpoint="enhance")
    @json_errors
    def enhance():
        try:
            result = container.enhancement_service.enhance()
        except EnhancementError as e:
            # Non-fatal: the current report stays valid.
            logger.warning("AI enhancement skipped: %s", e)
            return jsonify({"success": False, "warning": str(e), "updated": 0}), 200
        return jsonify(
            {
                "success": True,
                "message": "AI analysis complete! Reasons have been added to relevant records.",
                "updated": result.updated_days,
            }
        ), 200

    @app.route("/api/report.xlsx", methods=["GET"], endpoint="report_xlsx")
    @json_errors
    def report_xlsx():
        employee = request.args.get("employee")
        if not employee:
            raise ValidationError("Please select a specific employee to export their report.")

        filename, content = reports.export_excel(employee_name=employee, start=date_arg("start"), end=date_arg("end"))
        return send_file(io.BytesIO(content), download_name=filename, as_attachment=True, mimetype=XLSX_MIMETYPE)

    @app.route("/api/reset", methods=["POST"], endpoint="reset")
    def reset():
        attendance.reset()
        return jsonify({"success": True}), 200
