"""
Per-field validation of sanitized movie input.

Rules run in a fixed order and every rule is evaluated; failures are
accumulated into an error set rather than raised one at a time.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Mapping, Optional

from app.core.exceptions import FieldValidationError
from app.core.sanitizer import sanitize
from app.core.values import MISSING, FieldValue, as_text

UID_PATTERN = re.compile(r"mv[0-9]{3,4}")
NUMERIC_PATTERN = re.compile(
    r"[ \t\n\r\v\f]*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?[ \t\n\r\v\f]*"
)
INTEGER_PATTERN = re.compile(r"[ \t\n\r\v\f]*[+-]?(0|[1-9][0-9]*)[ \t\n\r\v\f]*")
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1

DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d-%m-%Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
)


def is_numeric(text: str) -> bool:
    return NUMERIC_PATTERN.fullmatch(text) is not None


def is_integer(text: str) -> bool:
    if INTEGER_PATTERN.fullmatch(text) is None:
        return False
    if len(text.strip().lstrip("+-")) > 19:
        return False
    return INT64_MIN <= int(text) <= INT64_MAX


def parse_date(text: str) -> Optional[date]:
    """Parse a calendar date from ISO or common written forms."""
    text = text.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


# Each normalizer returns the normalized value, or None when the field fails.

def _uid(value: FieldValue) -> Optional[str]:
    text = as_text(value)
    if text is not None and UID_PATTERN.fullmatch(text):
        return text
    return None


def _non_empty_text(value: FieldValue) -> Optional[str]:
    text = as_text(value)
    return text if text else None


def _year(value: FieldValue) -> Optional[int]:
    text = as_text(value)
    if text is None or not is_numeric(text):
        return None
    try:
        number = Decimal(text.strip())
    except InvalidOperation:
        return None
    # Checked before int() so huge exponents are never expanded
    if number.adjusted() > 18:
        return None
    year = int(number)
    return year if INT64_MIN <= year <= INT64_MAX else None


def _released(value: FieldValue) -> Optional[str]:
    text = as_text(value)
    if text is not None and parse_date(text) is not None:
        return text
    return None


def _runtime(value: FieldValue) -> Optional[str]:
    text = as_text(value)
    if text is not None and is_numeric(text):
        return f"{text} mins"
    return None


def _poster(value: FieldValue) -> str:
    # Poster uploads were never wired up; the stored poster is always blank.
    return ""


def _imdb(value: FieldValue) -> Optional[str]:
    text = as_text(value)
    if text is not None and is_integer(text):
        return f"{text}/10"
    return None


@dataclass(frozen=True)
class FieldRule:
    """A named constraint and normalization for one input field."""

    name: str
    normalize: Callable[[FieldValue], Any]
    message: Optional[str] = None  # None: the field never errors


MOVIE_RULES: tuple[FieldRule, ...] = (
    FieldRule("uid", _uid, "Please pass a valid movie unique id"),
    FieldRule("title", _non_empty_text, "Please pass a valid movie title"),
    FieldRule("year", _year, "Please pass a valid movie year"),
    FieldRule("released", _released, "Please pass a valid movie release date: YYYY-MM-DD"),
    FieldRule("runtime", _runtime, "Please pass a valid movie runtime in minutes"),
    FieldRule("directors", _non_empty_text, "Please pass valid movie director name(s)"),
    FieldRule("actors", _non_empty_text, "Please pass valid movie actor name(s)"),
    FieldRule("country", _non_empty_text, "Please pass a valid movie country"),
    FieldRule("poster", _poster),
    FieldRule("imdb", _imdb, "Please pass a valid movie rating"),
    FieldRule("type", _non_empty_text, "Please pass a valid movie type"),
)

MOVIE_FIELDS = tuple(rule.name for rule in MOVIE_RULES)


class FieldValidator:
    """
    Validates sanitized input against an ordered rule table.

    The validator holds no per-request state, so one instance may serve
    any number of requests.
    """

    def __init__(self, rules: tuple[FieldRule, ...] = MOVIE_RULES):
        self.rules = rules

    def check(self, data: Mapping[str, FieldValue]) -> tuple[dict[str, Any], dict[str, str]]:
        """
        Run every rule and return the passing and failing fields.

        Each rule's field lands in exactly one of the two returned maps.
        Unknown keys in `data` are ignored.
        """
        record: dict[str, Any] = {}
        errors: dict[str, str] = {}
        for rule in self.rules:
            normalized = rule.normalize(data.get(rule.name, MISSING))
            if normalized is None and rule.message is not None:
                errors[rule.name] = rule.message
            else:
                record[rule.name] = normalized
        return record, errors

    def validate(self, data: Mapping[str, FieldValue]) -> tuple[dict[str, Any], dict[str, str]]:
        """
        Validate sanitized input.

        Returns:
            (record, {}) when every field passes, ({}, errors) otherwise
        """
        record, errors = self.check(data)
        if errors:
            return {}, errors
        return record, {}

    def validate_body(self, raw_body: bytes) -> dict[str, Any]:
        """
        Sanitize and validate a raw request body.

        Raises:
            MalformedInputError: If the body is not a JSON object
            FieldValidationError: If any field fails its rule
        """
        record, errors = self.validate(sanitize(raw_body))
        if errors:
            raise FieldValidationError(errors)
        return record
