from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import json_body, json_endpoint, json_list, quote_payload
from ..common.validators import parse_class_type, require_int
from ..container import Container
from ..core.exceptions import ValidationError
from .model import QuotationItem, RegistrationEntry


def _as_object(raw, key: str, index: int) -> dict:
    if not isinstance(raw, dict):
        raise ValidationError(f"{key}[{index}] must be an object", field=key)
    return raw


def register(app: Flask, container: Container) -> None:
    svc = container.pricing_service

    def respond(quote):
        return jsonify(quote_payload(quote, svc.to_ui(quote))), 200

    @app.route("/api/courses", methods=["GET"], endpoint="api_courses")
    @json_endpoint
    def api_courses():
        courses = container.courses_repo.list_active()
        return jsonify(
            {
                "success": True,
                "courses": [
                    {
                        "id": c.course_id,
                        "name": c.name,
                        "fee": str(c.fee),
                        "online_rate": str(c.online_rate) if c.online_rate is not None else None,
                        "offline_rate": str(c.offline_rate) if c.offline_rate is not None else None,
                        "private_rate": str(c.private_rate) if c.private_rate is not None else None,
                        "batch_rate": str(c.batch_rate) if c.batch_rate is not None else None,
                        "duration": c.duration,
                    }
                    for c in courses
                ],
            }
        ), 200

    @app.route("/api/pricing/student-fee", methods=["POST"], endpoint="pricing_student_fee")
    @json_endpoint
    def pricing_student_fee():
        data = json_body()
        quote = svc.quote_student_fee(
            require_int(data.get("course_id"), "course_id"),
            discount_percent=data.get("discount_percent", 0),
            amount_paid=data.get("amount_paid"),
            class_type=parse_class_type(data.get("class_type")),
        )
        return respond(quote)

    @app.route("/api/pricing/registration", methods=["POST"], endpoint="pricing_registration")
    @json_endpoint
    def pricing_registration():
        data = json_body()
        entries = []
        for i, raw in enumerate(json_list(data, "courses")):
            raw = _as_object(raw, "courses", i)
            entries.append(
                RegistrationEntry(
                    course_id=require_int(raw.get("course_id"), "course_id"),
                    discount_percent=raw.get("discount_percent", 0),
                )
            )
        quote = svc.quote_course_registration(
            parse_class_type(data.get("class_type")),
            entries,
            amount_paid=data.get("amount_paid"),
        )
        return respond(quote)

    @app.route("/api/pricing/quotation", methods=["POST"], endpoint="pricing_quotation")
    @json_endpoint
    def pricing_quotation():
        data = json_body()
        items = []
        for i, raw in enumerate(json_list(data, "items")):
            raw = _as_object(raw, "items", i)
            items.append(
                QuotationItem(
                    course_id=require_int(raw.get("course_id"), "course_id"),
                    number_of_persons=raw.get("number_of_persons", 1),
                )
            )
        quote = svc.quote_quotation(
            items,
            discount_percent=data.get("discount_percent", 0),
            amount_paid=data.get("amount_paid"),
        )
        return respond(quote)

    @app.route("/api/pricing/proposal", methods=["POST"], endpoint="pricing_proposal")
    @json_endpoint
    def pricing_proposal():
        data = json_body()
        quote = svc.quote_proposal(
            data.get("total_amount"),
            discount_percent=data.get("discount_percent", 0),
            amount_paid=data.get("amount_paid"),
        )
        return respond(quote)

    @app.route("/api/pricing/expense", methods=["POST"], endpoint="pricing_expense")
    @json_endpoint
    def pricing_expense():
        data = json_body()
        quote = svc.quote_expense(data.get("amount"), amount_paid=data.get("amount_paid"))
        return respond(quote)
