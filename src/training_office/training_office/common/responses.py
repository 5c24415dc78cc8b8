from __future__ import annotations

from functools import wraps
from typing import Any, Callable

from flask import jsonify, request

from ..core.exceptions import InvalidLineItem, ValidationError
from .logging_utils import get_logger

logger = get_logger("training_office.http")


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def json_list(data: dict, key: str) -> list:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ValidationError(f"{key} must be a list", field=key)
    return value


def json_endpoint(view: Callable[..., Any]) -> Callable[..., Any]:
    """Translate domain errors into the JSON shape the forms expect.

    ``ValidationError`` -> 400 (the form blocks submission), anything else -> 500.
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except InvalidLineItem as e:
            return jsonify({"success": False, "message": str(e), "field": e.field, "line": e.index}), 400
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e), "field": e.field}), 400
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return jsonify({"success": False, "message": "Internal error while computing totals"}), 500

    return wrapper


def quote_payload(quote, display: dict) -> dict:
    return {
        "success": True,
        "summary": quote.summary.as_dict(),
        "warnings": list(quote.warnings),
        "display": display,
    }
