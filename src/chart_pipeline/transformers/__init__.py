"""
Metric transformers: derived series computed without mutating the source rows.
"""

from src.chart_pipeline.transformers.metric_transformers import percentage_change, ratio

__all__ = ["percentage_change", "ratio"]
