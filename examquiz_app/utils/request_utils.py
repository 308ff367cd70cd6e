"""Helpers for reading and validating request input with marshmallow."""

from typing import Any, Mapping

from marshmallow import Schema
from marshmallow import ValidationError as MarshmallowValidationError

from ..core.error_handlers import ValidationError


def load_or_400(schema: Schema, data: Mapping[str, Any], message: str = None) -> dict:
    """
    Validate ``data`` with ``schema``; raise a 400 ``ValidationError`` on failure.

    ``message`` overrides the generic "Missing required parameters" text.
    """
    try:
        return schema.load(data or {})
    except MarshmallowValidationError as exc:
        raise ValidationError(message or 'Missing required parameters', errors=exc.messages) from exc
