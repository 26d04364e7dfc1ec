from __future__ import annotations

from flask import jsonify

from ..core.exceptions import (
    DomainError,
    DuplicateCheckInError,
    NotFoundError,
    StorageUnavailableError,
    UnboundedTargetError,
    UnreachableTargetError,
    ValidationError,
)

_STATUS_BY_ERROR = (
    (NotFoundError, 404),
    (DuplicateCheckInError, 409),
    (UnreachableTargetError, 422),
    (UnboundedTargetError, 422),
    (ValidationError, 400),
    (StorageUnavailableError, 503),
)


def error_response(exc: Exception):
    """Map a domain/storage error onto a JSON body and HTTP status."""
    status = 400 if isinstance(exc, DomainError) else 500
    for cls, code in _STATUS_BY_ERROR:
        if isinstance(exc, cls):
            status = code
            break
    return (
        jsonify(
            {
                "success": False,
                "error": getattr(exc, "code", "INTERNAL_ERROR"),
                "message": str(exc),
            }
        ),
        status,
    )


def json_body(request) -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
