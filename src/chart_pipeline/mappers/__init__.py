"""
Mappers: um por familia de grafico, selecionados pelo MapperRouter.
"""

from src.chart_pipeline.mappers.base import BaseChartMapper
from src.chart_pipeline.mappers.router import MapperRouter

__all__ = ["BaseChartMapper", "MapperRouter"]
