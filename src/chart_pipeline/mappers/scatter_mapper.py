"""
ScatterChartMapper - Mapper para graficos de dispersao.

Pares ``[x, y]``: X repassado como esta (datas, categorias ou numeros),
Y numerico. Sem logica de cores ou empilhamento.
"""

from src.chart_pipeline.models.props import ScatterChartProps
from src.chart_pipeline.models.schema import ChartDTO
from src.chart_pipeline.mappers.base import BaseChartMapper
from src.chart_pipeline.utils.value_defaults import present_or_zero, read_numeric
from src.chart_pipeline.views.view_resolver import ResolvedView


class ScatterChartMapper(BaseChartMapper):
    """Mapper para scatter. Valores ausentes (ou NaN) em X ou Y viram 0."""

    def validate(self, dto: ChartDTO) -> None:
        self._require_y_axis(dto)

    def map(self, dto: ChartDTO, resolved: ResolvedView) -> ScatterChartProps:
        self.validate(dto)

        axis = self._active_axis(dto, resolved)
        x_column = dto.config.x_axis.data_column

        chart_data = [
            [present_or_zero(row.get(x_column)), read_numeric(row, axis.data_column)]
            for row in resolved.data
        ]

        self.logger.info(f"Grafico scatter mapeado: {len(chart_data)} pontos")

        return ScatterChartProps(
            title=dto.config.title,
            chart_data=chart_data,
            value_symbol=resolved.value_symbol,
        )
