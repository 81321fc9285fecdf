from __future__ import annotations

import logging
from datetime import date, datetime
from functools import wraps

from flask import jsonify

from ..core.exceptions import (
    DomainError,
    DuplicateError,
    ElementNotFoundError,
    MissingPayRateError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def status_for(error: DomainError) -> int:
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, ElementNotFoundError):
        return 404
    if isinstance(error, DuplicateError):
        return 409
    if isinstance(error, MissingPayRateError):
        return 422
    return 400


def json_errors(view):
    """Render domain errors as ``{"error": message}`` with a matching status code."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            logger.warning("%s %s: %s", view.__name__, type(e).__name__, e)
            return jsonify({"error": str(e), "kind": type(e).__name__}), status_for(e)

    return wrapper


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD query parameters."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise ValidationError(f"Dates should be in the format YYYY-MM-DD: {value!r}") from e
