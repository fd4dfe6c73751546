"""
Number formatting used for table cells.
"""

import math
import numbers
from typing import Any, Optional

from src.chart_pipeline.utils.value_defaults import text_or_empty


def format_number_compact(value: float) -> str:
    """
    Format a number compactly: K for thousands, M for millions.

    Args:
        value: Number to format

    Returns:
        Formatted string (e.g. "1.5M", "2.3K", "500")

    Example:
        >>> format_number_compact(1500000)
        '1.5M'
        >>> format_number_compact(2300)
        '2.3K'
        >>> format_number_compact(12.25)
        '12.25'
    """
    abs_value = abs(value)

    if abs_value >= 1_000_000:
        formatted_value = value / 1_000_000
        suffix = "M"
    elif abs_value >= 1_000:
        formatted_value = value / 1_000
        suffix = "K"
    else:
        # Small values keep up to 2 decimals
        if abs(value - round(value)) < 0.005:
            return f"{int(round(value))}"
        return f"{value:.2f}".rstrip("0").rstrip(".")

    # Drop trailing zeros (float comparison with tolerance)
    if abs(formatted_value - round(formatted_value)) < 0.01:
        return f"{int(round(formatted_value))}{suffix}"
    return f"{formatted_value:.1f}{suffix}"


def format_cell(value: Any, unit: Optional[str] = None) -> str:
    """
    Format a table cell according to the axis unit.

    - currency: "$" prefix
    - percent: "%" suffix
    - non-numeric values: ``str(value)``, or "" when absent

    Example:
        >>> format_cell(2300, "currency")
        '$2.3K'
        >>> format_cell(12.5, "percent")
        '12.5%'
        >>> format_cell(None, "currency")
        ''
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return text_or_empty(value)
    if not math.isfinite(value):
        return text_or_empty(value)

    prefix = "$" if unit == "currency" else ""
    suffix = "%" if unit == "percent" else ""
    return f"{prefix}{format_number_compact(value)}{suffix}"
