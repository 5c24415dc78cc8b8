from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace

import pytest
from flask import Flask

from src.training_office.training_office.courses.model import Course
from src.training_office.training_office.fees.controller import register as register_fees
from src.training_office.training_office.main import create_app
from src.training_office.training_office.pricing.controller import register as register_pricing
from src.training_office.training_office.pricing.service import PricingService


class InMemoryCourses:
    def __init__(self):
        self._courses = {
            1: Course(course_id=1, name="Advanced Excel", fee=Decimal("1000"), online_rate=Decimal("800")),
        }

    def list_active(self):
        return list(self._courses.values())

    def get_by_id(self, course_id):
        return self._courses.get(course_id)


class BrokenPricing(PricingService):
    def quote_expense(self, amount, *, amount_paid=None):
        raise RuntimeError("boom")


def build_client(pricing_cls=PricingService):
    courses = InMemoryCourses()
    container = SimpleNamespace(courses_repo=courses, pricing_service=pricing_cls(courses))
    app = Flask(__name__)
    register_fees(app, container)
    register_pricing(app, container)
    return app.test_client()


@pytest.fixture()
def client():
    return build_client()


def test_ledger_preview(client):
    res = client.post(
        "/api/ledger/preview",
        json={
            "items": [{"unit_price": "1000", "quantity": 1, "discount_percent": 10}],
            "vat_rate": "0.05",
            "amount_paid": "500",
        },
    )

    body = res.get_json()
    assert res.status_code == 200
    assert body["success"] is True
    assert body["summary"]["grand_total"] == "945.00"
    assert body["summary"]["balance_due"] == "445.00"
    assert body["summary"]["payment_status"] == "partial"
    assert body["display"]["grand_total"] == "AED 945.00"


def test_ledger_preview_without_items(client):
    res = client.post("/api/ledger/preview", json={})

    assert res.status_code == 200
    assert res.get_json()["summary"]["payment_status"] == "pending"


def test_ledger_preview_rejects_negative_price(client):
    res = client.post("/api/ledger/preview", json={"items": [{"unit_price": -100}], "vat_rate": "0.05"})

    body = res.get_json()
    assert res.status_code == 400
    assert body["success"] is False
    assert body["field"] == "unit_price"
    assert body["line"] == 0


def test_ledger_preview_rejects_non_object_body(client):
    res = client.post("/api/ledger/preview", json=[1, 2])

    assert res.status_code == 400


def test_courses_listing(client):
    res = client.get("/api/courses")

    course = res.get_json()["courses"][0]
    assert course["fee"] == "1000"
    assert course["online_rate"] == "800"
    assert course["batch_rate"] is None


def test_registration_quote_warns_on_clamped_discount(client):
    res = client.post(
        "/api/pricing/registration",
        json={"class_type": "online", "courses": [{"course_id": 1, "discount_percent": 35}]},
    )

    body = res.get_json()
    assert res.status_code == 200
    assert body["summary"]["discount_amount"] == "160.00"
    assert body["summary"]["grand_total"] == "672.00"
    assert body["warnings"] == ["Maximum discount allowed is 20%"]


def test_registration_quote_unknown_course(client):
    res = client.post("/api/pricing/registration", json={"courses": [{"course_id": 9}]})

    assert res.status_code == 400
    assert res.get_json()["field"] == "course_id"


def test_registration_quote_bad_class_type(client):
    res = client.post("/api/pricing/registration", json={"class_type": "vip", "courses": []})

    assert res.status_code == 400
    assert res.get_json()["field"] == "class_type"


def test_student_fee_quote(client):
    res = client.post("/api/pricing/student-fee", json={"course_id": "1", "amount_paid": "1000"})

    body = res.get_json()
    assert body["summary"]["grand_total"] == "1000.00"
    assert body["summary"]["payment_status"] == "paid"


def test_quotation_quote(client):
    res = client.post(
        "/api/pricing/quotation",
        json={"items": [{"course_id": 1, "number_of_persons": 4}], "discount_percent": 5},
    )

    assert res.get_json()["summary"]["grand_total"] == "3800.00"


def test_proposal_quote(client):
    res = client.post("/api/pricing/proposal", json={"total_amount": "5000", "discount_percent": "10"})

    assert res.get_json()["summary"]["grand_total"] == "4500.00"


def test_expense_quote_rejects_negative_amount(client):
    res = client.post("/api/pricing/expense", json={"amount": "-10"})

    assert res.status_code == 400


def test_unexpected_error_is_a_500():
    res = build_client(BrokenPricing).post("/api/pricing/expense", json={"amount": "10"})

    assert res.status_code == 500
    assert res.get_json()["success"] is False


def test_create_app_registers_routes(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    app = create_app()

    rules = {r.rule for r in app.url_map.iter_rules()}
    assert "/api/ledger/preview" in rules
    assert "/api/pricing/registration" in rules
    assert app.config["TESTING"] is True


def test_ledger_preview_rejects_oversized_price(client):
    res = client.post(
        "/api/ledger/preview",
        json={"items": [{"unit_price": "1e999999"}, {"unit_price": "1e999999"}], "vat_rate": "0.05"},
    )

    body = res.get_json()
    assert res.status_code == 400
    assert body["field"] == "unit_price"
    assert body["line"] == 0


def test_ledger_preview_rejects_oversized_payment(client):
    res = client.post("/api/ledger/preview", json={"items": [{"unit_price": "10"}], "amount_paid": "1e27"})

    assert res.status_code == 400
    assert res.get_json()["field"] == "amount_paid"
