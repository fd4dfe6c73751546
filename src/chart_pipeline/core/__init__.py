"""
Core module - Chart Pipeline configuration and settings.
"""

from src.chart_pipeline.core.settings import (
    CHART_HEIGHT,
    DEFAULT_VALUE_SYMBOL,
    DISPATCH_CACHE_ENABLED,
    validate_settings
)

__all__ = [
    "CHART_HEIGHT",
    "DEFAULT_VALUE_SYMBOL",
    "DISPATCH_CACHE_ENABLED",
    "validate_settings"
]
