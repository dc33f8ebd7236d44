from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, date_arg, filter_arg, int_arg, json_body
from ..container import Container
from .service import NewPunch, parse_punch_status, parse_punch_type


def register(app: Flask, container: Container) -> None:
    service = container.punch_service

    @app.route("/api/punches", methods=["POST"], endpoint="punch_create")
    @api_errors
    def create_punch():
        data = json_body()
        employee_id = int_arg(data.get("employee_id"), "employee_id")
        if employee_id is None:
            return jsonify({"success": False, "message": "employee_id is required"}), 400

        punch = service.record_punch(
            NewPunch(
                employee_id=employee_id,
                punch_type=data.get("punch_type"),
                punch_time=data.get("punch_time"),
                latitude=data.get("latitude"),
                longitude=data.get("longitude"),
                status=data.get("status"),
                geofence_id=int_arg(data.get("geofence_id"), "geofence_id"),
                geofence_name=data.get("geofence_name"),
                project_id=int_arg(data.get("project_id"), "project_id"),
                location=data.get("location"),
                remarks=data.get("remarks"),
            )
        )
        return jsonify(service.to_dict(punch)), 201

    @app.route("/api/punches", methods=["GET"], endpoint="punch_list")
    @api_errors
    def list_punches():
        punches = service.list_punches(
            employee_id=int_arg(request.args.get("employee_id"), "employee_id"),
            punch_type=parse_punch_type(request.args.get("punch_type")),
            status=parse_punch_status(request.args.get("status")),
            project_id=int_arg(filter_arg("project_id"), "project_id"),
            search=request.args.get("search"),
            start=date_arg("start"),
            end=date_arg("end"),
        )
        return jsonify([service.to_dict(p) for p in punches])
