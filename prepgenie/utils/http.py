from typing import Any, Dict, Optional
from flask import request, jsonify


def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status


def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict() if request.form else {}


def arg_int(name: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    try:
        v = int(request.args.get(name, default))
    except (TypeError, ValueError):
        v = default
    if min_value is not None:
        v = max(min_value, v)
    if max_value is not None:
        v = min(max_value, v)
    return v


def service_error(exc):
    """Render a ServiceError as the JSON error envelope."""
    return error(exc.code, exc.message, exc.status, **exc.extra)


def validation_error(exc):
    """Render a marshmallow ValidationError with its field messages."""
    return error("VALIDATION_ERROR", "Invalid request body", 400, fields=exc.messages)
