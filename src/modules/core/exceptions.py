"""Domain error hierarchy and the API-wide exception handler.

Services raise subclasses of ``ResourceNotFound`` or
``BusinessRuleViolation``; views never catch them.  DRF routes every
exception raised inside a view to ``api_exception_handler`` (configured
via ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``), which is the single place
where error kinds are translated into HTTP status codes and bodies::

    {
        "status": 404,
        "message": "Product not found with id: '7'",
        "path": "/api/products/7",
        "timestamp": "2024-01-01T12:00:00+00:00"
    }

Validation failures carry an extra ``errors`` list of
``{"field": ..., "message": ...}`` entries.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.utils import timezone
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import set_rollback

logger = structlog.get_logger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed"
MALFORMED_REQUEST_MESSAGE = (
    "Invalid request format. Please ensure the request body is valid JSON "
    "and data types are correct."
)
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


# ---------------------------------------------------------------------------
# Domain errors
# ---------------------------------------------------------------------------


class DomainError(Exception):
    """Base class for errors raised by the Service Layer."""


class ResourceNotFound(DomainError):
    """A requested or referenced entity does not exist."""

    def __init__(self, resource: str, field: str, value: Any) -> None:
        self.resource = resource
        self.field = field
        self.value = value
        super().__init__(f"{resource} not found with {field}: '{value}'")


class BusinessRuleViolation(DomainError):
    """A business rule rejected the operation (e.g. insufficient stock)."""


# ---------------------------------------------------------------------------
# Error bodies
# ---------------------------------------------------------------------------


def build_error_body(
    status_code: int,
    message: str,
    path: str,
    errors: Optional[List[Dict[str, str]]] = None,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "status": status_code,
        "message": message,
        "path": path,
        "timestamp": timezone.now().isoformat(),
    }
    if errors is not None:
        body["errors"] = errors
    return body


def _join_path(prefix: str, key: Any) -> str:
    if isinstance(key, int):
        return f"{prefix}[{key}]"
    return f"{prefix}.{key}" if prefix else str(key)


def flatten_field_errors(detail: Any, prefix: str = "") -> List[Dict[str, str]]:
    """Flatten nested DRF error details into ``{field, message}`` entries.

    ``{"order_items": [{}, {"quantity": ["..."]}]}`` becomes
    ``[{"field": "order_items[1].quantity", "message": "..."}]``.  Recent
    DRF releases key nested list errors by index (``{1: {...}}``); both
    shapes flatten to the same path.
    """
    if isinstance(detail, dict):
        entries: List[Dict[str, str]] = []
        for key, value in detail.items():
            field = _join_path(prefix, key)
            entries.extend(flatten_field_errors(value, field))
        return entries
    if isinstance(detail, list):
        if all(not isinstance(item, (dict, list)) for item in detail):
            field = prefix or "non_field_errors"
            return [{"field": field, "message": str(item)} for item in detail]
        entries = []
        for index, item in enumerate(detail):
            entries.extend(flatten_field_errors(item, f"{prefix}[{index}]"))
        return entries
    return [{"field": prefix or "non_field_errors", "message": str(detail)}]


def pydantic_field_errors(exc: PydanticValidationError) -> List[Dict[str, str]]:
    entries = []
    for error in exc.errors():
        field = ""
        for part in error["loc"]:
            field = _join_path(field, part)
        field = field or "non_field_errors"
        entries.append({"field": field, "message": error["msg"]})
    return entries


# ---------------------------------------------------------------------------
# DRF exception handler
# ---------------------------------------------------------------------------


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Translate any exception raised by a view into a structured response."""
    request = context.get("request")
    path = request.path if request is not None else ""
    log = logger.bind(path=path, error_type=type(exc).__name__)

    if isinstance(exc, Http404):
        exc = exceptions.NotFound(str(exc) or "Not found.")
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    if isinstance(exc, ResourceNotFound):
        status_code = status.HTTP_404_NOT_FOUND
        body = build_error_body(status_code, str(exc), path)
        log.info("api.resource_not_found", message=str(exc))
    elif isinstance(exc, BusinessRuleViolation):
        status_code = status.HTTP_400_BAD_REQUEST
        body = build_error_body(status_code, str(exc), path)
        log.info("api.business_rule_violation", message=str(exc))
    elif isinstance(exc, PydanticValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
        body = build_error_body(
            status_code, VALIDATION_FAILED_MESSAGE, path, pydantic_field_errors(exc)
        )
        log.info("api.validation_failed")
    elif isinstance(exc, exceptions.ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
        body = build_error_body(
            status_code,
            VALIDATION_FAILED_MESSAGE,
            path,
            flatten_field_errors(exc.detail),
        )
        log.info("api.validation_failed")
    elif isinstance(exc, exceptions.ParseError):
        status_code = status.HTTP_400_BAD_REQUEST
        body = build_error_body(status_code, MALFORMED_REQUEST_MESSAGE, path, [])
        log.warning("api.malformed_request", detail=str(exc.detail))
    elif isinstance(exc, exceptions.APIException):
        status_code = exc.status_code
        body = build_error_body(status_code, str(exc.detail), path)
        log.info("api.request_rejected", status_code=status_code)
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        body = build_error_body(status_code, UNEXPECTED_ERROR_MESSAGE, path)
        log.exception("api.unhandled_exception")

    set_rollback()
    return Response(body, status=status_code)
