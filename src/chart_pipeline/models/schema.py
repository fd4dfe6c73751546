"""
Pydantic schemas for the chart pipeline input.

This module defines the data structures for:
- Axis, view and tooltip specifications
- The declarative chart configuration (ChartConfig)
- The complete immutable pipeline input (ChartDTO)

Configuration data arrives with camelCase keys (``dataColumn``, ``yAxes``...),
so every field accepts its camelCase alias as well as its Python name.
"""

from typing import Any, Dict, List, Literal, Optional, get_args

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from src.chart_pipeline.core.settings import DEFAULT_VALUE_SYMBOL


# ============================================================================
# LITERALS
# ============================================================================

ChartTypeLiteral = Literal[
    "line",
    "area",
    "stacked-area",
    "bar",
    "stacked-bar",
    "clustered-bar",
    "multi-axis",
    "mixed",
    "pie",
    "scatter",
    "table",
    "comparison",
    "none",
]

KNOWN_CHART_TYPES = frozenset(get_args(ChartTypeLiteral))

UnitLiteral = Literal["currency", "percent", "count", "ratio", "none"]

ScaleLiteral = Literal["linear", "logarithmic"]

StackingLiteral = Literal["none", "normal", "percent"]

SeriesChartTypeLiteral = Literal["line", "bar"]

# Legacy values found in stored configurations
_UNIT_ALIASES = {"$": "currency", "%": "percent"}
_SCALE_ALIASES = {"value": "linear", "log": "logarithmic"}

UNIT_SYMBOLS: Dict[str, str] = {
    "currency": "$",
    "percent": "%",
    "count": "",
    "ratio": "",
    "none": "",
}


def unit_symbol(unit: Optional[str]) -> str:
    """Return the display symbol for a unit, defaulting to the currency symbol."""

    if not unit:
        return DEFAULT_VALUE_SYMBOL
    return UNIT_SYMBOLS.get(unit, DEFAULT_VALUE_SYMBOL)


_MODEL_CONFIG = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


# ============================================================================
# AXES AND VIEWS
# ============================================================================


class AxisSpec(BaseModel):
    """Which column of a Row an axis reads and how its values are displayed."""

    model_config = _MODEL_CONFIG

    data_column: str = Field(
        ...,
        min_length=1,
        alias="dataColumn",
        description="Row key the axis reads",
    )

    label: str = Field(default="", description="Display label of the axis/series")

    unit: Optional[UnitLiteral] = Field(
        default=None, description="Unit of the values; None means currency"
    )

    axis_id: Optional[str] = Field(
        default=None, alias="axisId", description="Stable axis identifier"
    )

    series_chart_type: Optional[SeriesChartTypeLiteral] = Field(
        default=None,
        validation_alias=AliasChoices("series_chart_type", "seriesChartType", "chartType"),
        serialization_alias="seriesChartType",
        description="Series type inside mixed charts",
    )

    scale: Optional[ScaleLiteral] = Field(default=None, description="Y scale")

    stacking_mode: Optional[StackingLiteral] = Field(
        default=None,
        validation_alias=AliasChoices("stacking_mode", "stackingMode", "stacking"),
        serialization_alias="stackingMode",
        description="Stacking group for mixed charts",
    )

    color: Optional[str] = Field(
        default=None, description="Explicit color override, wins over palettes"
    )

    @field_validator("unit", mode="before")
    @classmethod
    def normalize_unit(cls, v: Any) -> Any:
        """Accept the legacy ``$`` / ``%`` unit symbols."""
        if v is None or v == "":
            return None
        return _UNIT_ALIASES.get(v, v)

    @field_validator("scale", mode="before")
    @classmethod
    def normalize_scale(cls, v: Any) -> Any:
        """Accept the legacy ``value`` / ``log`` scale names."""
        if v is None or v == "":
            return None
        return _SCALE_ALIASES.get(v, v)

    @property
    def symbol(self) -> str:
        return unit_symbol(self.unit)

    @property
    def identifier(self) -> str:
        """Key used by mixed charts: ``axis_id`` when present, else ``label``."""
        return self.axis_id or self.label


class ViewSpec(BaseModel):
    """One selectable lens over the same dataset (absolute, % change, ratio...)."""

    model_config = _MODEL_CONFIG

    view_id: str = Field(..., min_length=1, alias="viewId")

    y_axis: AxisSpec = Field(..., alias="yAxis")


class TooltipSpec(BaseModel):
    """Tooltip hints passed through to the renderer."""

    model_config = _MODEL_CONFIG

    trigger: Literal["item", "axis"] = "axis"

    formatter_template: Optional[str] = Field(default=None, alias="formatterTemplate")

    value_formatter_type: Optional[
        Literal["currency", "percent", "abbreviate", "none"]
    ] = Field(default=None, alias="valueFormatterType")


# ============================================================================
# CHART CONFIG AND DTO
# ============================================================================


class ChartConfig(BaseModel):
    """
    Declarative chart definition.

    ``chart_type`` is a free string on purpose: an unknown type must reach the
    dispatcher, which reports it as unsupported instead of failing validation.
    Y-axis presence is checked by the mappers for the same reason.
    """

    model_config = _MODEL_CONFIG

    id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("id", "chartId")
    )

    chart_type: str = Field(
        ...,
        validation_alias=AliasChoices("chart_type", "chartType"),
        serialization_alias="chartType",
    )

    title: str = ""

    description: str = ""

    x_axis: AxisSpec = Field(..., alias="xAxis")

    y_axis: Optional[AxisSpec] = Field(default=None, alias="yAxis")

    y_axes: Optional[List[AxisSpec]] = Field(default=None, alias="yAxes")

    default_view_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("default_view_id", "defaultViewId", "defaultView"),
        serialization_alias="defaultViewId",
    )

    available_views: Optional[List[ViewSpec]] = Field(
        default=None, alias="availableViews"
    )

    tooltip: Optional[TooltipSpec] = None

    @model_validator(mode="after")
    def check_unique_view_ids(self) -> "ChartConfig":
        """View identifiers must be unique within ``available_views``."""

        if self.available_views:
            seen = set()
            for view in self.available_views:
                if view.view_id in seen:
                    raise ValueError(f"Duplicate viewId '{view.view_id}' in availableViews")
                seen.add(view.view_id)
        return self

    @property
    def declared_y_axes(self) -> List[AxisSpec]:
        """``y_axes`` when non-empty, else the singleton ``y_axis``, else []."""

        if self.y_axes:
            return list(self.y_axes)
        if self.y_axis is not None:
            return [self.y_axis]
        return []

    @property
    def primary_y_axis(self) -> Optional[AxisSpec]:
        """``y_axis`` if set, else the first entry of ``y_axes``."""

        if self.y_axis is not None:
            return self.y_axis
        if self.y_axes:
            return self.y_axes[0]
        return None

    def find_view(self, view_id: Optional[str]) -> Optional[ViewSpec]:
        """Return the view with ``view_id``, or None when absent."""

        if not view_id or not self.available_views:
            return None
        for view in self.available_views:
            if view.view_id == view_id:
                return view
        return None


class ChartDTO(BaseModel):
    """
    Complete immutable input to the pipeline for one chart instance.

    The pipeline never mutates ``data`` or ``config``; every downstream
    structure is a new derivation.
    """

    model_config = _MODEL_CONFIG

    data: List[Dict[str, Any]] = Field(default_factory=list)

    config: ChartConfig
