"""
Default-substitution rules for malformed or missing row values.

Dirty datasets must stay renderable, so no helper in this module raises.
Each field type has exactly one rule:

- numeric: absent, ``None``, ``NaN`` or non-numeric -> ``0``
- categorical: absent, ``None``, ``NaN`` or empty string -> ``"Unknown"``
- text: absent, ``None`` or ``NaN`` -> ``""``
- timestamp: unparseable or absent -> ``0`` (Unix seconds)
"""

import datetime as dt
import math
import numbers
from decimal import Decimal
from typing import Any, Dict, Union

import pandas as pd

from src.chart_pipeline.utils.logger import get_logger

logger = get_logger(__name__)

UNKNOWN_CATEGORY = "Unknown"

Number = Union[int, float]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return value is pd.NaT


def numeric_or_zero(value: Any) -> Number:
    """
    Coerce a cell to a number, substituting ``0`` for anything unusable.

    Numeric strings are parsed ("12.5" -> 12.5), ``Decimal`` values become
    floats and booleans map to 0/1.

    Example:
        >>> numeric_or_zero("12.5")
        12.5
        >>> numeric_or_zero(None)
        0
        >>> numeric_or_zero("n/a")
        0
    """
    if _is_missing(value):
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, Decimal):
        return 0 if value.is_nan() else float(value)
    if isinstance(value, str):
        parsed = pd.to_numeric(value.strip(), errors="coerce")
        if pd.isna(parsed):
            return 0
        return parsed.item() if hasattr(parsed, "item") else parsed
    return 0


def category_or_unknown(value: Any) -> Any:
    """Return the category label, or ``"Unknown"`` when absent or empty."""
    if _is_missing(value) or value == "":
        return UNKNOWN_CATEGORY
    return value


def text_or_empty(value: Any) -> str:
    """Return ``str(value)``, or ``""`` when the value is absent."""
    if _is_missing(value):
        return ""
    return str(value)


def unix_seconds_or_zero(value: Any) -> int:
    """
    Convert a date-like cell to integer Unix seconds (floored).

    Strings, ``date`` and ``datetime`` values are parsed with pandas; naive
    values are read as UTC. Plain numbers (``Decimal`` included) are epoch
    milliseconds, which is how the configuration data stores raw timestamps.
    Any other type (lists, dicts...) maps to 0.

    Example:
        >>> unix_seconds_or_zero("2024-01-01")
        1704067200
        >>> unix_seconds_or_zero("not a date")
        0
    """
    if _is_missing(value) or isinstance(value, bool):
        return 0
    if isinstance(value, (numbers.Real, Decimal)):
        millis = float(value)
        return math.floor(millis / 1000) if math.isfinite(millis) else 0
    if not isinstance(value, (str, dt.date)):
        logger.debug(f"Unsupported timestamp type replaced by 0: {type(value).__name__}")
        return 0

    parsed = pd.to_datetime(value, errors="coerce")
    if pd.isna(parsed):
        logger.debug(f"Invalid timestamp replaced by 0: {value!r}")
        return 0
    return math.floor(parsed.timestamp())


def read_numeric(row: Dict[str, Any], column: str) -> Number:
    """Shortcut for ``numeric_or_zero(row.get(column))``."""
    return numeric_or_zero(row.get(column))


def present_or_zero(value: Any) -> Any:
    """Return ``value`` unchanged, or ``0`` when it is absent or NaN."""
    if _is_missing(value):
        return 0
    return value
