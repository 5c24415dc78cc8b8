from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import json_body, json_endpoint, json_list, quote_payload
from ..container import Container
from ..core.exceptions import ValidationError
from .model import LineItem


def _line_from_json(raw, index: int) -> LineItem:
    if not isinstance(raw, dict):
        raise ValidationError(f"Line {index + 1} must be an object", field="items")
    return LineItem(
        unit_price=raw.get("unit_price"),
        discount_percent=raw.get("discount_percent", 0),
        quantity=raw.get("quantity", 1),
        description=raw.get("description"),
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/ledger/preview", methods=["POST"], endpoint="ledger_preview")
    @json_endpoint
    def ledger_preview():
        """Recompute totals for an arbitrary set of lines (called on every keystroke)."""
        data = json_body()
        lines = [_line_from_json(raw, i) for i, raw in enumerate(json_list(data, "items"))]
        svc = container.pricing_service
        quote = svc.quote_ledger(
            lines,
            vat_rate=data.get("vat_rate", "0"),
            amount_paid=data.get("amount_paid"),
        )
        return jsonify(quote_payload(quote, svc.to_ui(quote))), 200
