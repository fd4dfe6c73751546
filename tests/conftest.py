"""Pytest fixtures shared across chart pipeline tests."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from src.chart_pipeline.models.schema import ChartDTO


@pytest.fixture
def make_dto():
    """Return a factory building a ChartDTO from camelCase config keys."""

    def _make(
        chart_type: str,
        data: list[dict[str, Any]] | None = None,
        **config: Any,
    ) -> ChartDTO:
        config.setdefault("xAxis", {"dataColumn": "date", "label": "Date"})
        return ChartDTO.model_validate(
            {
                "data": data if data is not None else [],
                "config": {"id": "chart-1", "title": "Chart", "chartType": chart_type, **config},
            }
        )

    return _make


@pytest.fixture
def daily_rows() -> list[dict[str, Any]]:
    """Return three daily rows with two metrics."""

    return [
        {"date": "2024-01-01", "tvl": 100, "fees": 10},
        {"date": "2024-01-02", "tvl": 150, "fees": 0},
        {"date": "2024-01-03", "tvl": 75, "fees": 5},
    ]


@pytest.fixture
def two_axes() -> list[dict[str, Any]]:
    """Return two y-axis declarations (TVL in dollars, fees in dollars)."""

    return [
        {"dataColumn": "tvl", "label": "TVL", "unit": "currency"},
        {"dataColumn": "fees", "label": "Fees", "unit": "currency", "chartType": "bar"},
    ]


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test carries the `unit` marker.

    The pipeline is pure computation, so the whole suite is expected to run
    without I/O. Tests touching anything else must be marked explicitly.
    """

    missing = [item.nodeid for item in items if item.get_closest_marker("unit") is None]
    if missing:
        joined = "\n".join(f"- {nodeid}" for nodeid in missing)
        raise pytest.UsageError(
            "Each test must carry the `@pytest.mark.unit` marker.\n"
            f"Offending tests:\n{joined}"
        )
