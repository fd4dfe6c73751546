"""
View resolution for runtime chart lenses.
"""

from src.chart_pipeline.views.view_resolver import (
    ResolvedView,
    is_percentage_view,
    is_ratio_view,
    resolve_view,
)

__all__ = ["ResolvedView", "is_percentage_view", "is_ratio_view", "resolve_view"]
