from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import api_errors, int_arg, json_body
from ..container import Container
from .model import Holiday


def _to_dict(h: Holiday) -> dict:
    return {
        "id": h.holiday_id,
        "holiday_date": h.holiday_date.strftime("%Y-%m-%d"),
        "holiday_name": h.name,
        "year": h.year,
        "is_active": h.is_active,
    }


def _bool_arg(value):
    if value is None or value == "":
        return None
    return str(value).strip().lower() in {"1", "true", "yes"}


def register(app: Flask, container: Container) -> None:
    service = container.holiday_service

    @app.route("/api/holidays", methods=["GET"], endpoint="holiday_list")
    @api_errors
    def list_holidays():
        holidays = service.list(
            year=int_arg(request.args.get("year"), "year"),
            active=_bool_arg(request.args.get("active")),
        )
        return jsonify([_to_dict(h) for h in holidays])

    @app.route("/api/holidays", methods=["POST"], endpoint="holiday_create")
    @api_errors
    def create_holiday():
        data = json_body()
        holiday = service.create(
            holiday_date=parse_iso_date(data.get("holiday_date")),
            name=data.get("holiday_name") or "",
            is_active=_bool_arg(data.get("is_active")) is not False,
        )
        return jsonify(_to_dict(holiday)), 201

    @app.route("/api/holidays/<int:holiday_id>/toggle", methods=["POST"], endpoint="holiday_toggle")
    @api_errors
    def toggle_holiday(holiday_id: int):
        return jsonify(_to_dict(service.toggle_active(holiday_id)))

    @app.route("/api/holidays/<int:holiday_id>", methods=["DELETE"], endpoint="holiday_delete")
    @api_errors
    def delete_holiday(holiday_id: int):
        service.delete(holiday_id)
        return "", 204
