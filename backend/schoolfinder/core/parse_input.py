"""Input Parsing — explicit parse-and-validate for school fields and query points.

Invariants:
    - Every function returns a typed value or raises ValidationError (never coerces silently)
    - None, "" and whitespace-only strings are MISSING; 0 and "0" are valid coordinates
    - bool is never numeric, even though it subclasses int
    - Strings must be plain ASCII decimals (optional sign and exponent)
    - NaN and infinity are NOT_NUMERIC; finite values beyond the bound are OUT_OF_RANGE
    - Fields are checked in declaration order; the first failure wins

Design Decisions:
    - Raw values accepted as Any: the HTTP layer passes JSON/query values through untouched
      so the missing vs non-numeric distinction is decided here, in one place
"""

import math
import re
from typing import Any

from schoolfinder.core.domain_types import (
    MAX_LATITUDE, MAX_LONGITUDE, MAX_TEXT_LENGTH, NewSchool,
)
from schoolfinder.core.errors import ValidationError, ValidationReason


# ASCII digits only: float() alone would take "1_0" and non-Latin digits
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_text(field: str, value: Any) -> str:
    """Parse a required non-empty text field."""
    if _is_blank(value):
        raise ValidationError(
            f"{field} is required", field, ValidationReason.MISSING,
        )
    if not isinstance(value, str):
        raise ValidationError(
            f"{field} must be a string", field, ValidationReason.INVALID_TEXT,
        )
    text = value.strip()
    if len(text) > MAX_TEXT_LENGTH:
        raise ValidationError(
            f"{field} must be at most {MAX_TEXT_LENGTH} characters",
            field, ValidationReason.INVALID_TEXT,
        )
    return text


def parse_coordinate(field: str, value: Any, bound: float) -> float:
    """Parse a required coordinate given as a number or decimal string."""
    if _is_blank(value):
        raise ValidationError(
            f"{field} is required", field, ValidationReason.MISSING,
        )
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValidationError(
            f"{field} must be a valid number", field, ValidationReason.NOT_NUMERIC,
        )
    if isinstance(value, str):
        value = value.strip()
        if not DECIMAL_PATTERN.fullmatch(value):
            raise ValidationError(
                f"{field} must be a valid number", field, ValidationReason.NOT_NUMERIC,
            )
    try:
        number = float(value)
    except (ValueError, OverflowError):
        raise ValidationError(
            f"{field} must be a valid number", field, ValidationReason.NOT_NUMERIC,
        )
    if not math.isfinite(number):
        raise ValidationError(
            f"{field} must be a valid number", field, ValidationReason.NOT_NUMERIC,
        )
    if abs(number) > bound:
        raise ValidationError(
            f"{field} must be between {-bound:g} and {bound:g}",
            field, ValidationReason.OUT_OF_RANGE,
        )
    return number


def parse_new_school(
    name: Any, address: Any, latitude: Any, longitude: Any,
) -> NewSchool:
    """Validate all four school fields into a NewSchool."""
    return NewSchool(
        name=parse_text("name", name),
        address=parse_text("address", address),
        latitude=parse_coordinate("latitude", latitude, MAX_LATITUDE),
        longitude=parse_coordinate("longitude", longitude, MAX_LONGITUDE),
    )


def parse_query_point(lat: Any, lon: Any) -> tuple[float, float]:
    """Validate the lat/lon query parameters of a proximity listing."""
    return (
        parse_coordinate("lat", lat, MAX_LATITUDE),
        parse_coordinate("lon", lon, MAX_LONGITUDE),
    )
