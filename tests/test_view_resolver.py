"""Unit tests for active view resolution."""

from __future__ import annotations

import pytest

from src.chart_pipeline.models.schema import ViewSpec
from src.chart_pipeline.views import is_percentage_view, is_ratio_view, resolve_view

pytestmark = pytest.mark.unit

VIEWS = [
    {"viewId": "absolute", "yAxis": {"dataColumn": "tvl", "label": "TVL", "unit": "currency"}},
    {
        "viewId": "percentage-change",
        "yAxis": {"dataColumn": "tvl", "label": "TVL change", "unit": "percent"},
    },
    {"viewId": "fee-ratio", "yAxis": {"dataColumn": "tvl_ratio", "label": "Ratio", "unit": "ratio"}},
]


def test_without_active_view_returns_raw_rows_and_primary_axis(make_dto, daily_rows) -> None:
    """No active view: raw rows, primary axis and its symbol."""

    dto = make_dto(
        "line",
        daily_rows,
        yAxis={"dataColumn": "tvl", "label": "TVL", "unit": "percent"},
        availableViews=VIEWS,
    )

    resolved = resolve_view(dto)

    assert resolved.data is dto.data
    assert resolved.y_axis_config.data_column == "tvl"
    assert resolved.value_symbol == "%"
    assert resolved.view_id is None


def test_unset_unit_defaults_to_currency_symbol(make_dto, daily_rows) -> None:
    """An axis without unit displays the currency symbol."""

    dto = make_dto("bar", daily_rows, yAxes=[{"dataColumn": "tvl", "label": "TVL"}])

    assert resolve_view(dto).value_symbol == "$"


def test_unknown_view_falls_back_to_default(make_dto, daily_rows) -> None:
    """A view id missing from availableViews falls back without raising."""

    dto = make_dto(
        "line",
        daily_rows,
        yAxis={"dataColumn": "tvl", "label": "TVL", "unit": "currency"},
        availableViews=VIEWS,
    )

    first = resolve_view(dto, "does-not-exist")
    second = resolve_view(dto, "does-not-exist")

    assert first == second
    assert first.data is dto.data
    assert first.y_axis_config == dto.config.y_axis


def test_percentage_view_transforms_view_column(make_dto, daily_rows) -> None:
    """A percent view whose id contains 'percentage' applies percentage_change."""

    dto = make_dto(
        "line",
        daily_rows,
        yAxis={"dataColumn": "tvl", "label": "TVL", "unit": "currency"},
        availableViews=VIEWS,
    )

    resolved = resolve_view(dto, "percentage-change")

    assert [row["tvl"] for row in resolved.data] == [0, 50, -50]
    assert resolved.value_symbol == "%"
    assert resolved.view_id == "percentage-change"
    assert [row["tvl"] for row in dto.data] == [100, 150, 75]


def test_percent_unit_without_naming_convention_is_not_transformed(make_dto, daily_rows) -> None:
    """Both signals must agree: a percent unit alone does nothing."""

    dto = make_dto(
        "line",
        daily_rows,
        yAxis={"dataColumn": "tvl", "label": "TVL"},
        availableViews=[
            {"viewId": "share", "yAxis": {"dataColumn": "tvl", "label": "Share", "unit": "percent"}}
        ],
    )

    resolved = resolve_view(dto, "share")

    assert [row["tvl"] for row in resolved.data] == [100, 150, 75]
    assert resolved.value_symbol == "%"


def test_ratio_view_uses_first_two_y_axes(make_dto, daily_rows, two_axes) -> None:
    """A ratio view divides yAxes[0] by yAxes[1] into a new column."""

    dto = make_dto("line", daily_rows, yAxes=two_axes, availableViews=VIEWS)

    resolved = resolve_view(dto, "fee-ratio")

    assert [row["tvl_ratio"] for row in resolved.data] == [10, 0, 15]
    assert [row["tvl"] for row in resolved.data] == [100, 150, 75]
    assert resolved.y_axis_config.data_column == "tvl_ratio"


def test_ratio_view_with_single_axis_skips_transformation(make_dto, daily_rows) -> None:
    """Fewer than two yAxes: no ratio column, no error."""

    dto = make_dto(
        "line",
        daily_rows,
        yAxis={"dataColumn": "tvl", "label": "TVL"},
        availableViews=VIEWS,
    )

    resolved = resolve_view(dto, "fee-ratio")

    assert all("tvl_ratio" not in row for row in resolved.data)
    assert resolved.view_id == "fee-ratio"


def test_view_predicates_need_unit_and_identifier() -> None:
    """The predicates check the unit and the view id together."""

    percent = ViewSpec.model_validate(VIEWS[1])
    ratio_view = ViewSpec.model_validate(VIEWS[2])
    mislabeled = ViewSpec.model_validate(
        {"viewId": "percentage", "yAxis": {"dataColumn": "x", "unit": "ratio"}}
    )

    assert is_percentage_view(percent) is True
    assert is_ratio_view(percent) is False
    assert is_ratio_view(ratio_view) is True
    assert is_percentage_view(mislabeled) is False
    assert is_ratio_view(mislabeled) is False
