from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, date_arg, int_arg, json_body
from ..container import Container
from .model import AttendanceFilter
from .service import parse_status


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance/generate", methods=["POST"], endpoint="attendance_generate")
    @api_errors
    def generate():
        data = json_body()
        employee_id = int_arg(data.get("employee_id"), "employee_id")
        if employee_id is None:
            return jsonify({"success": False, "message": "employee_id is required"}), 400

        result = service.generate(employee_id, data.get("start_date"), data.get("end_date"))
        return jsonify(result), 200

    @app.route("/api/attendance/generate-all", methods=["POST"], endpoint="attendance_generate_all")
    @api_errors
    def generate_all():
        data = json_body()
        return jsonify(service.generate_active(data.get("start_date"), data.get("end_date"))), 200

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @api_errors
    def list_attendance():
        filters = AttendanceFilter(
            employee_id=int_arg(request.args.get("employee_id"), "employee_id"),
            work_date=date_arg("date"),
            status=parse_status(request.args.get("status")),
            department_id=int_arg(request.args.get("department_id"), "department_id"),
            search=(request.args.get("search") or "").strip() or None,
            start=date_arg("start"),
            end=date_arg("end"),
        )
        return jsonify([service.to_dict(r) for r in service.list_records(filters)])

    @app.route("/api/attendance/statistics", methods=["GET"], endpoint="attendance_statistics")
    @api_errors
    def statistics():
        stats = service.statistics(start=date_arg("start"), end=date_arg("end"))
        return jsonify(service.statistics_to_dict(stats))

    @app.route("/api/attendance/<int:attendance_id>", methods=["GET"], endpoint="attendance_detail")
    @api_errors
    def detail(attendance_id: int):
        return jsonify(service.to_dict(service.get_record(attendance_id)))
