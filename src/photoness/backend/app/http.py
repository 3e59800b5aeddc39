"""JSON error bodies shared by the application and its blueprints."""

from __future__ import annotations

from flask import Response, jsonify


def problem_response(
    error: str, *, status: int, message: str | None = None
) -> tuple[Response, int]:
    """Return a ``{"error", "message"}`` body with ``status``.

    ``message`` is omitted from the body when empty.
    """

    payload = {"error": error}
    if message:
        payload["message"] = message
    return jsonify(payload), status


__all__ = ["problem_response"]
