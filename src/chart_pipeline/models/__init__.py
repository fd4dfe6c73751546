"""
Pipeline models: input schemas (pydantic) and output props (dataclasses).
"""

from src.chart_pipeline.models.schema import (
    AxisSpec,
    ChartConfig,
    ChartDTO,
    TooltipSpec,
    ViewSpec,
)

__all__ = ["AxisSpec", "ChartConfig", "ChartDTO", "TooltipSpec", "ViewSpec"]
