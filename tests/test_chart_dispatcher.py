"""Unit tests for chart type dispatch and result tagging."""

from __future__ import annotations

import pytest

from src.chart_pipeline.chart_dispatcher import (
    DISPATCHER_CHART_TYPES,
    ChartDispatcher,
    route_chart_type,
)
from src.chart_pipeline.mappers.base import BaseChartMapper
from src.chart_pipeline.mappers.router import MapperRouter
from src.chart_pipeline.models.props import (
    AreaChartProps,
    ErrorResult,
    HiddenResult,
    MixedChartProps,
    RenderResult,
    UnsupportedResult,
)
from src.chart_pipeline.models.schema import KNOWN_CHART_TYPES

pytestmark = pytest.mark.unit

ROWS = [{"date": "2024-01-01", "v": 10}, {"date": "2024-01-02", "v": 20}]


@pytest.fixture
def dispatcher() -> ChartDispatcher:
    """Return a dispatcher with its own router and memoization enabled."""

    return ChartDispatcher(router=MapperRouter(), cache_enabled=True)


def test_every_known_chart_type_is_routed() -> None:
    """Each known chart type has a mapper or is handled by the dispatcher."""

    router = MapperRouter()

    for chart_type in KNOWN_CHART_TYPES:
        assert router.is_supported(chart_type) or chart_type in DISPATCHER_CHART_TYPES

    routed = set(router.get_supported_chart_types()) | DISPATCHER_CHART_TYPES
    assert routed == KNOWN_CHART_TYPES


def test_line_end_to_end(dispatcher, make_dto) -> None:
    """A line chart renders as an area result with timestamp pairs."""

    dto = make_dto("line", ROWS, yAxis={"dataColumn": "v", "label": "V", "unit": "none"})

    result = dispatcher.dispatch(dto)

    assert isinstance(result, RenderResult)
    assert result.kind == "area"
    assert result.chart_type == "line"
    assert isinstance(result.props, AreaChartProps)
    assert result.props.chart_data == [[1704067200, 10], [1704153600, 20]]
    assert all(isinstance(point[0], int) for point in result.props.chart_data)


@pytest.mark.parametrize(
    "chart_type",
    sorted(KNOWN_CHART_TYPES - {"table", "none"}),
)
def test_missing_y_axis_is_reported_as_error(dispatcher, make_dto, chart_type: str) -> None:
    """Every type that needs a y axis returns an error instead of raising."""

    dto = make_dto(chart_type, ROWS)

    result = dispatcher.dispatch(dto)

    assert isinstance(result, ErrorResult)
    assert result.kind == "error"
    assert result.error_type == "ConfigurationError"
    assert result.chart_type == chart_type


def test_table_renders_without_y_axis(dispatcher, make_dto) -> None:
    """Tables do not need a y axis."""

    result = dispatcher.dispatch(make_dto("table", ROWS))

    assert isinstance(result, RenderResult)
    assert result.kind == "table"


def test_none_chart_type_is_hidden(dispatcher, make_dto) -> None:
    """Type 'none' never reaches a mapper."""

    result = dispatcher.dispatch(make_dto("none", ROWS))

    assert isinstance(result, HiddenResult)
    assert result.kind == "none"


def test_unknown_chart_type_returns_preview(dispatcher, make_dto) -> None:
    """Unsupported types carry the raw rows and config for inspection."""

    dto = make_dto("heatmap", ROWS, yAxis={"dataColumn": "v"})

    result = dispatcher.dispatch(dto)

    assert isinstance(result, UnsupportedResult)
    assert result.chart_type == "heatmap"
    assert result.preview["data"] == ROWS
    assert result.preview["config"]["chartType"] == "heatmap"
    assert result.preview["config"]["yAxis"]["dataColumn"] == "v"


def test_comparison_routes_by_axis_count(dispatcher, make_dto, daily_rows, two_axes) -> None:
    """comparison maps as mixed with several axes, else as bar."""

    multi = make_dto("comparison", daily_rows, yAxes=two_axes)
    single = make_dto("comparison", daily_rows, yAxis={"dataColumn": "tvl"})

    assert route_chart_type(multi) == "mixed"
    assert route_chart_type(single) == "bar"

    multi_result = dispatcher.dispatch(multi)
    single_result = dispatcher.dispatch(single)

    assert multi_result.kind == "mixed"
    assert isinstance(multi_result.props, MixedChartProps)
    assert multi_result.chart_type == "comparison"
    assert single_result.kind == "bar"


def test_mixed_with_one_axis_is_error_result(dispatcher, make_dto) -> None:
    """The mixed-axis requirement surfaces as an error result."""

    dto = make_dto("mixed", ROWS, yAxes=[{"dataColumn": "v"}])

    result = dispatcher.dispatch(dto)

    assert isinstance(result, ErrorResult)
    assert "multiple yAxes" in result.error


def test_dict_input_is_validated(dispatcher) -> None:
    """Dict input with camelCase keys is accepted."""

    result = dispatcher.dispatch(
        {
            "data": ROWS,
            "config": {
                "chartType": "bar",
                "xAxis": {"dataColumn": "date"},
                "yAxis": {"dataColumn": "v"},
            },
        }
    )

    assert isinstance(result, RenderResult)
    assert result.props.chart_data == [["2024-01-01", 10], ["2024-01-02", 20]]


def test_invalid_dict_input_is_validation_error(dispatcher) -> None:
    """Malformed input never raises out of the dispatcher."""

    result = dispatcher.dispatch({"data": ROWS, "config": {"chartType": "bar"}})

    assert isinstance(result, ErrorResult)
    assert result.error_type == "ValidationError"
    assert result.chart_type == "bar"


def test_unexpected_mapper_failure_becomes_error(make_dto) -> None:
    """Exceptions other than configuration errors are also contained."""

    class ExplodingMapper(BaseChartMapper):
        def validate(self, dto) -> None:
            pass

        def map(self, dto, resolved):
            raise RuntimeError("boom")

    router = MapperRouter()
    router.register("line", ExplodingMapper, "area")
    dispatcher = ChartDispatcher(router=router, cache_enabled=False)

    result = dispatcher.dispatch(make_dto("line", ROWS, yAxis={"dataColumn": "v"}))

    assert isinstance(result, ErrorResult)
    assert result.error_type == "RuntimeError"
    assert "boom" in result.error


def test_result_is_memoized_for_same_dto_and_view(dispatcher, make_dto) -> None:
    """Same object and view reuse the result; a new view recomputes."""

    dto = make_dto(
        "line",
        ROWS,
        yAxis={"dataColumn": "v"},
        availableViews=[
            {"viewId": "percentage", "yAxis": {"dataColumn": "v", "unit": "percent"}}
        ],
    )

    first = dispatcher.dispatch(dto)
    second = dispatcher.dispatch(dto)
    third = dispatcher.dispatch(dto, "percentage")

    assert second == first
    assert second is not first
    assert third != first
    assert [point[1] for point in third.props.chart_data] == [0, 100]
    assert dispatcher.get_statistics()["cache_hits"] == 1

    dispatcher.clear_cache()
    assert dispatcher.dispatch(dto, "percentage") == third
    assert dispatcher.get_statistics()["cache_hits"] == 1


def test_mutating_a_returned_result_does_not_leak_into_cache(dispatcher, make_dto) -> None:
    """Callers own the props they receive; cache hits stay pristine."""

    dto = make_dto("line", ROWS, yAxis={"dataColumn": "v"})

    first = dispatcher.dispatch(dto)
    first.props.chart_data.append("junk")
    second = dispatcher.dispatch(dto)
    second.props.chart_data.append("more junk")
    third = dispatcher.dispatch(dto)

    assert third.props.chart_data == [[1704067200, 10], [1704153600, 20]]
    assert dispatcher.get_statistics()["cache_hits"] == 2


@pytest.mark.parametrize("bad_date", [[1, 2], {"a": 1}, object()])
def test_container_x_values_render_with_zero_timestamp(dispatcher, make_dto, bad_date) -> None:
    """Lists, dicts or other objects in the x column never fail the chart."""

    dto = make_dto(
        "line",
        [{"date": bad_date, "v": 3}, {"date": "2024-01-01", "v": 4}],
        yAxis={"dataColumn": "v"},
    )

    result = dispatcher.dispatch(dto)

    assert isinstance(result, RenderResult)
    assert result.props.chart_data == [[0, 3], [1704067200, 4]]


def test_default_view_id_is_used_when_no_view_selected(dispatcher, make_dto) -> None:
    """config.defaultViewId applies when the caller passes no view."""

    dto = make_dto(
        "bar",
        ROWS,
        yAxis={"dataColumn": "v"},
        defaultViewId="percentage",
        availableViews=[
            {"viewId": "percentage", "yAxis": {"dataColumn": "v", "unit": "percent"}}
        ],
    )

    result = dispatcher.dispatch(dto)

    assert result.props.value_symbol == "%"
    assert [pair[1] for pair in result.props.chart_data] == [0, 100]


def test_statistics_count_outcomes(make_dto) -> None:
    """Counters track each outcome and successes by kind."""

    dispatcher = ChartDispatcher(cache_enabled=False)

    dispatcher.dispatch(make_dto("line", ROWS, yAxis={"dataColumn": "v"}))
    dispatcher.dispatch(make_dto("pie", ROWS))
    dispatcher.dispatch(make_dto("heatmap", ROWS))
    dispatcher.dispatch(make_dto("none", ROWS))

    stats = dispatcher.get_statistics()

    assert stats["total_dispatches"] == 4
    assert stats["successful_dispatches"] == 1
    assert stats["failed_dispatches"] == 1
    assert stats["unsupported_dispatches"] == 1
    assert stats["hidden_dispatches"] == 1
    assert stats["charts_by_kind"] == {"area": 1}
