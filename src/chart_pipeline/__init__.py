"""
Chart Pipeline

Turns a generic tabular dataset and a declarative chart configuration into
the finalized props consumed by the renderer.

Modules:
    - core: Pipeline settings
    - models: Input schemas and output props
    - views: Active view resolution
    - transformers: Derived metrics (percentage change, ratio)
    - mappers: Data mappers (one per chart family)
    - utils: Reusable utilities (colors, formatting, logging)
"""

from src.chart_pipeline.chart_dispatcher import ChartDispatcher, dispatch
from src.chart_pipeline.exceptions import ChartPipelineError, ConfigurationError
from src.chart_pipeline.models.schema import AxisSpec, ChartConfig, ChartDTO, ViewSpec
from src.chart_pipeline.views.view_resolver import ResolvedView, resolve_view

__version__ = "1.0.0"
__all__ = [
    "AxisSpec",
    "ChartConfig",
    "ChartDTO",
    "ChartDispatcher",
    "ChartPipelineError",
    "ConfigurationError",
    "ResolvedView",
    "ViewSpec",
    "dispatch",
    "resolve_view",
    "__version__",
]
