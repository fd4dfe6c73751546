"""
Finalized props handed to the external renderer, and the dispatcher result.

Each chart family has its own props structure. The dispatcher returns a
tagged union (``ChartResult``): a ``RenderResult`` per family, or
``ErrorResult`` / ``UnsupportedResult`` / ``HiddenResult``.

``to_dict()`` returns the camelCase shape consumed by the renderer.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Literal, Optional, Union

from src.chart_pipeline.core.settings import CHART_HEIGHT


def _camel(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def _plain(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


class _PropsMixin:
    """Shared serialization: camelCase field names, None values omitted."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            _camel(f.name): _plain(getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class AreaChartProps(_PropsMixin):
    """
    Props for line / area / stacked-area.

    With a single series, ``chart_data`` is ``[[timestamp, value], ...]`` and
    ``stacks`` is empty. With several series, each entry is
    ``{"date": timestamp, label: value, ...}``.
    """

    title: str
    chart_data: List[Any]
    stacks: List[str]
    stack_colors: Dict[str, str]
    value_symbol: str
    is_stacked_chart: bool = False
    y_axis_scale: str = "linear"
    height: str = CHART_HEIGHT
    hide_download_button: bool = False
    hide_data_zoom: bool = False
    tooltip_sort: bool = True
    tooltip: Optional[Dict[str, Any]] = None


@dataclass
class BarChartProps(_PropsMixin):
    """Props for bar / stacked-bar: ``chart_data`` is ``[[category, y], ...]``."""

    title: str
    chart_data: List[List[Any]]
    value_symbol: str
    color: str
    stacks: Optional[Dict[str, str]] = None
    height: str = CHART_HEIGHT
    tooltip: Optional[Dict[str, Any]] = None


@dataclass
class ClusteredBarChartProps(_PropsMixin):
    """
    Props for clustered-bar.

    ``chart_data`` has one entry per category with one key per cluster label.
    Each cluster gets its own y axis when rendered.
    """

    title: str
    chart_data: List[Dict[str, Any]]
    clusters: List[str]
    stack_colors: Dict[str, str]
    value_symbol: str
    height: str = CHART_HEIGHT
    group_by: str = "category"


@dataclass
class MixedSeries(_PropsMixin):
    """One series of a mixed chart (one y axis)."""

    points: List[List[Any]]
    series_type: str
    name: str
    stack_group: str
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": [list(point) for point in self.points],
            "type": self.series_type,
            "name": self.name,
            "stack": self.stack_group,
            "color": self.color,
        }


@dataclass
class MixedChartProps(_PropsMixin):
    """Props for mixed / multi-axis: axis identifier -> series."""

    charts: Dict[str, MixedSeries]
    value_symbol: str
    title: str = ""
    height: str = CHART_HEIGHT
    group_by: Optional[str] = None


@dataclass
class PieChartProps(_PropsMixin):
    """Props for pie: ``chart_data`` is ``[{"name": ..., "value": ...}, ...]``."""

    title: str
    chart_data: List[Dict[str, Any]]
    stack_colors: Dict[str, str]
    usd_format: bool
    height: str = CHART_HEIGHT
    show_legend: bool = True


@dataclass
class ScatterChartProps(_PropsMixin):
    """Props for scatter: ``chart_data`` is ``[[x, y], ...]``."""

    title: str
    chart_data: List[List[Any]]
    value_symbol: str
    height: str = CHART_HEIGHT


@dataclass
class TableColumn(_PropsMixin):
    """Table column: row key, header and the unit used for formatting."""

    key: str
    header: str
    unit: Optional[str] = None


@dataclass
class TableProps(_PropsMixin):
    """Props for table: raw rows and inferred columns."""

    title: str
    rows: List[Dict[str, Any]]
    columns: List[TableColumn] = field(default_factory=list)
    description: str = ""

    @property
    def headers(self) -> List[str]:
        return [column.header for column in self.columns]


ChartProps = Union[
    AreaChartProps,
    BarChartProps,
    ClusteredBarChartProps,
    MixedChartProps,
    PieChartProps,
    ScatterChartProps,
    TableProps,
]

RenderKind = Literal["area", "bar", "clustered-bar", "mixed", "pie", "scatter", "table"]


# ============================================================================
# DISPATCHER RESULT
# ============================================================================


@dataclass(frozen=True)
class RenderResult:
    """Successfully mapped chart."""

    kind: RenderKind
    props: ChartProps
    chart_type: str


@dataclass(frozen=True)
class ErrorResult:
    """Configuration error (or unexpected failure) caught by the dispatcher."""

    error: str
    chart_type: Optional[str] = None
    error_type: str = "ConfigurationError"
    kind: Literal["error"] = "error"


@dataclass(frozen=True)
class UnsupportedResult:
    """Chart type without a mapper; ``preview`` carries the raw input."""

    chart_type: str
    preview: Dict[str, Any]
    kind: Literal["unsupported"] = "unsupported"


@dataclass(frozen=True)
class HiddenResult:
    """Type ``none``: intentional signal not to render the chart."""

    chart_type: str = "none"
    kind: Literal["none"] = "none"


ChartResult = Union[RenderResult, ErrorResult, UnsupportedResult, HiddenResult]
