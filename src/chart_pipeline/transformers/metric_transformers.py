"""
Metric transformers for derived series.

Pure functions that compute derived values over an ordered row sequence.
They never mutate their input: every returned row is a new dict.

Note the asymmetry between the two transformers:
- ``percentage_change`` overwrites the target column in place (destructive)
- ``ratio`` adds a new ``<numerator>_ratio`` column (additive)
"""

from typing import Any, Dict, List, Sequence

import pandas as pd

from src.chart_pipeline.utils.logger import get_logger
from src.chart_pipeline.utils.value_defaults import numeric_or_zero

logger = get_logger(__name__)

Row = Dict[str, Any]


def percentage_change(rows: Sequence[Row], column: str) -> List[Row]:
    """
    Replace ``column`` with its period-over-period percentage change.

    For row ``i > 0`` the value is ``(v[i] - v[i-1]) / v[i-1] * 100`` where
    ``v[i-1]`` is the raw value of the previous row (not its transformed
    value). Row 0 is always ``0``, and a previous value of ``0`` yields ``0``
    instead of an undefined change. Absent or non-numeric values count as 0.

    Args:
        rows: Ordered rows (order is the temporal order)
        column: Column to transform

    Returns:
        New rows, same length and order, with only ``column`` replaced

    Example:
        >>> rows = [{"v": 100}, {"v": 150}, {"v": 75}]
        >>> [row["v"] for row in percentage_change(rows, "v")]
        [0.0, 50.0, -50.0]
    """
    if not rows:
        return []

    values = pd.Series([row.get(column) for row in rows], dtype="object")
    values = values.map(numeric_or_zero).astype(float)
    previous = values.shift(1)

    changes = ((values - previous) / previous * 100).where(previous != 0, 0.0)
    changes.iloc[0] = 0.0

    logger.debug(f"percentage_change applied to '{column}' ({len(rows)} rows)")

    return [
        {**row, column: float(change)}
        for row, change in zip(rows, changes.tolist())
    ]


def ratio(rows: Sequence[Row], numerator_column: str, denominator_column: str) -> List[Row]:
    """
    Add ``<numerator_column>_ratio`` = numerator / denominator to every row.

    The numerator defaults to ``0`` and the denominator to ``1`` when absent.
    A denominator that is exactly ``0`` yields ``0`` (never inf/NaN).
    Original columns are preserved.

    Example:
        >>> rows = [{"a": 10, "b": 0}, {"a": 6, "b": 3}]
        >>> [row["a_ratio"] for row in ratio(rows, "a", "b")]
        [0, 2.0]
    """
    target = f"{numerator_column}_ratio"
    result: List[Row] = []

    for row in rows:
        numerator = numeric_or_zero(row.get(numerator_column))
        raw_denominator = row.get(denominator_column)
        denominator = 1 if raw_denominator is None else numeric_or_zero(raw_denominator)

        value = numerator / denominator if denominator != 0 else 0
        result.append({**row, target: value})

    logger.debug(
        f"ratio '{numerator_column}'/'{denominator_column}' -> '{target}' "
        f"({len(result)} rows)"
    )
    return result
