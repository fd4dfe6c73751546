"""
View resolution: picks the active y axis and applies view transformations.

A view is activated by two signals that must agree: the unit of the view's
axis and a substring of its ``view_id``. That convention comes from the
configuration data and is kept as-is. ``is_percentage_view`` and
``is_ratio_view`` are the only places that know about it.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from src.chart_pipeline.core.settings import DEFAULT_VALUE_SYMBOL
from src.chart_pipeline.models.schema import AxisSpec, ChartDTO, ViewSpec, unit_symbol
from src.chart_pipeline.transformers.metric_transformers import percentage_change, ratio
from src.chart_pipeline.utils.logger import get_logger

logger = get_logger(__name__)

PERCENTAGE_VIEW_MARKER = "percentage"
RATIO_VIEW_MARKER = "ratio"


@dataclass(frozen=True)
class ResolvedView:
    """
    Result of view resolution, valid for one render pass.

    Attributes:
        data: Rows to map (the raw rows, or transformed copies)
        value_symbol: Display symbol of the active axis unit
        y_axis_config: Active y axis (None when the config declares none)
        view_id: Matched view identifier, None when the default view is used
    """

    data: List[Dict[str, Any]]
    value_symbol: str
    y_axis_config: Optional[AxisSpec]
    view_id: Optional[str] = None


def is_percentage_view(view: ViewSpec) -> bool:
    """True when the view asks for the percentage-change transformation."""

    return view.y_axis.unit == "percent" and PERCENTAGE_VIEW_MARKER in view.view_id


def is_ratio_view(view: ViewSpec) -> bool:
    """True when the view asks for the ratio transformation."""

    return view.y_axis.unit == "ratio" and RATIO_VIEW_MARKER in view.view_id


def _default_view(dto: ChartDTO) -> ResolvedView:
    axis = dto.config.primary_y_axis
    return ResolvedView(
        data=dto.data,
        value_symbol=axis.symbol if axis is not None else DEFAULT_VALUE_SYMBOL,
        y_axis_config=axis,
    )


def resolve_view(dto: ChartDTO, active_view_id: Optional[str] = None) -> ResolvedView:
    """
    Resolve which axis and transformation are active for the current render.

    - No ``active_view_id`` or no ``available_views``: raw rows and the
      primary y axis (``y_axis``, else the first of ``y_axes``).
    - Unknown ``active_view_id``: same fallback, silently.
    - Matching view: its axis and unit symbol, plus the percentage-change or
      ratio transformation when the view asks for one.

    Args:
        dto: Chart input (never mutated)
        active_view_id: Identifier of the selected view

    Returns:
        ResolvedView for this render pass
    """
    config = dto.config

    if not active_view_id or not config.available_views:
        return _default_view(dto)

    view = config.find_view(active_view_id)
    if view is None:
        logger.debug(
            f"View '{active_view_id}' not declared for chart '{config.id}', "
            f"using default view"
        )
        return _default_view(dto)

    data = list(dto.data)

    if is_percentage_view(view):
        data = percentage_change(data, view.y_axis.data_column)

    if is_ratio_view(view):
        if config.y_axes and len(config.y_axes) >= 2:
            data = ratio(data, config.y_axes[0].data_column, config.y_axes[1].data_column)
        else:
            logger.debug(
                f"Ratio view '{view.view_id}' needs 2 yAxes, transformation skipped"
            )

    return ResolvedView(
        data=data,
        value_symbol=unit_symbol(view.y_axis.unit),
        y_axis_config=view.y_axis,
        view_id=view.view_id,
    )
