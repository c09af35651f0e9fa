"""
Tagged field values decoded once from a request body.

Each inbound field is one of:
    Text: a scalar rendered to its escaped string form
    Structured: a JSON array/object, which no field rule accepts
    Missing: the key was not supplied
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Text:
    """Escaped string form of a scalar JSON value."""

    value: str


@dataclass(frozen=True)
class Structured:
    """Nested JSON value that has no string form."""

    raw: Any


@dataclass(frozen=True)
class Missing:
    """Absent key."""


FieldValue = Union[Text, Structured, Missing]

MISSING = Missing()


def as_text(value: FieldValue) -> str | None:
    """
    Return the string carried by a field value.

    Missing values read as the empty string; structured values have no
    string form and return None.
    """
    if isinstance(value, Text):
        return value.value
    if isinstance(value, Missing):
        return ""
    return None
