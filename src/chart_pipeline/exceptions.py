"""
Exceptions raised by the chart pipeline.

Only mapper-level configuration problems are raised. Malformed row values are
recovered locally (see ``utils.value_defaults``) and unknown chart types are a
terminal dispatch result, not an exception.
"""

from typing import Optional


class ChartPipelineError(Exception):
    """Base exception for the chart pipeline."""

    pass


class ConfigurationError(ChartPipelineError, ValueError):
    """
    Exception raised when a chart configuration cannot satisfy its mapper.

    Raised when:
    - No y axis is declared for a chart type that needs one
    - A mixed / multi-axis chart declares fewer than 2 y axes

    Attributes:
        message: Error message
        chart_type: Chart type being mapped when the error happened
        requirement: Short name of the unmet requirement (e.g. "yAxis")
    """

    def __init__(
        self,
        message: str,
        chart_type: Optional[str] = None,
        requirement: Optional[str] = None,
    ):
        self.message = message
        self.chart_type = chart_type
        self.requirement = requirement
        super().__init__(self.message)
