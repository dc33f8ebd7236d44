from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    matcher = container.payroll_matcher

    @app.route("/api/payroll-match", methods=["GET"], endpoint="payroll_match")
    @api_errors
    def payroll_match():
        records = matcher.match(
            status=request.args.get("status"),
            month=request.args.get("month"),
            search=request.args.get("search"),
        )
        return jsonify([r.to_dict() for r in records])
