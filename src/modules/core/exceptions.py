"""Application error base and the DRF exception handler.

Every business-rule violation raised by a service derives from
``AppError``: a single error kind carrying a human-readable message.
The API layer never builds error payloads by hand — the handler below
renders both ``AppError`` and DRF's own exceptions into one envelope::

    {
        "type": "client_error",
        "errors": [{"code": "...", "detail": "...", "attr": null}]
    }
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base application error with a message, a code and a status."""

    status_code: int = 400
    default_code: str = "application_error"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        if status_code is not None:
            self.status_code = status_code


def _error_type(status_code: int) -> str:
    return "server_error" if status_code >= 500 else "client_error"


def _flatten(detail: Any, attr: Optional[str] = None) -> List[Dict[str, Any]]:
    """Turn DRF's nested ``ErrorDetail`` structures into a flat list."""
    if isinstance(detail, dict):
        errors: List[Dict[str, Any]] = []
        for key, value in detail.items():
            nested = key if attr is None else f"{attr}.{key}"
            if key == "non_field_errors":
                nested = attr
            errors.extend(_flatten(value, nested))
        return errors
    if isinstance(detail, list):
        errors = []
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list)) and attr is not None:
                errors.extend(_flatten(value, f"{attr}.{index}"))
            else:
                errors.extend(_flatten(value, attr))
        return errors
    return [
        {
            "code": getattr(detail, "code", "error"),
            "detail": str(detail),
            "attr": attr,
        }
    ]


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """DRF ``EXCEPTION_HANDLER`` producing the standard error envelope.

    Returns ``None`` for anything that is neither an ``AppError`` nor a
    DRF ``APIException`` so Django's default 500 handling takes over.
    """
    if isinstance(exc, AppError):
        logger.warning(
            "api.application_error",
            code=exc.code,
            detail=exc.message,
            status_code=exc.status_code,
        )
        return Response(
            {
                "type": _error_type(exc.status_code),
                "errors": [{"code": exc.code, "detail": exc.message, "attr": None}],
            },
            status=exc.status_code,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, drf_exceptions.APIException):
        errors = _flatten(exc.detail)
    else:
        # Http404 / PermissionDenied arrive already converted to {"detail": ...}
        errors = _flatten(response.data.get("detail", response.data))

    response.data = {"type": _error_type(response.status_code), "errors": errors}
    return response
