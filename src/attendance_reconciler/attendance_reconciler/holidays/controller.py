from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import date_arg, json_errors
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    holidays = container.holiday_service

    def _listing(items) -> dict:
        return {"success": True, "holidays": [h.to_dict() for h in items]}

    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    @json_errors
    def list_holidays():
        return jsonify(_listing(holidays.list_holidays(start=date_arg("start"), end=date_arg("end")))), 200

    @app.route("/api/holidays", methods=["PUT"], endpoint="replace_holidays")
    @json_errors
    def replace_holidays():
        data = request.get_json(silent=True)
        items = data.get("holidays") if isinstance(data, dict) else data
        if not isinstance(items, list):
            raise ValidationError("Expected a list of holidays")
        return jsonify(_listing(holidays.replace_all(holidays.from_payload(items)))), 200

    @app.route("/api/holidays", methods=["POST"], endpoint="add_holiday")
    @json_errors
    def add_holiday():
        data = request.get_json(silent=True) or {}
        items = holidays.add(
            holiday_date=parse_iso_date(str(data.get("date") or "")),
            name=str(data.get("name") or ""),
        )
        return jsonify(_listing(items)), 201

    @app.route("/api/holidays/<holiday_date>", methods=["DELETE"], endpoint="remove_holiday")
    @json_errors
    def remove_holiday(holiday_date: str):
        return jsonify(_listing(holidays.remove(holiday_date=parse_iso_date(holiday_date)))), 200
