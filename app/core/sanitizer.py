"""
Request body sanitization.

Decodes a JSON object body and renders every value to an HTML-escaped
string so nothing markup-significant reaches validation or storage.
"""

import json
import logging
from typing import Any, Mapping

from app.core.exceptions import MalformedInputError
from app.core.values import FieldValue, Structured, Text

logger = logging.getLogger(__name__)

# Markup characters and ASCII controls become numeric entities (< -> &#60;, newline -> &#10;)
_SPECIAL_CHARS = {code: f"&#{code};" for code in (*range(32), *map(ord, "\"&'<>"))}


def escape(value: str) -> str:
    """Escape &, <, >, quotes and control characters in a single string."""
    return value.translate(_SPECIAL_CHARS)


def stringify(value: Any) -> str:
    """Render a JSON scalar the way it reads in a form field."""
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return str(value)


def sanitize_value(value: Any) -> FieldValue:
    """Decode one JSON value into its sanitized tagged form."""
    if isinstance(value, (list, dict)):
        return Structured(value)
    return Text(escape(stringify(value)))


def sanitize_mapping(data: Mapping[str, Any]) -> dict[str, FieldValue]:
    """Sanitize every value of an already decoded mapping, keeping all keys."""
    return {str(key): sanitize_value(value) for key, value in data.items()}


def sanitize(raw_body: bytes) -> dict[str, FieldValue]:
    """
    Parse a raw request body and sanitize each of its fields.

    Args:
        raw_body: Request body as received

    Returns:
        Mapping of every supplied key to its sanitized value

    Raises:
        MalformedInputError: If the body is not JSON or not a JSON object
    """
    try:
        data = json.loads(raw_body)
    except (ValueError, RecursionError) as e:
        logger.info("Rejected unparseable request body: %s", e)
        raise MalformedInputError() from e

    if not isinstance(data, dict):
        logger.info("Rejected request body of type %s", type(data).__name__)
        raise MalformedInputError()

    return sanitize_mapping(data)
