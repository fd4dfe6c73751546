"""
BarChartMapper - Mapper para graficos de barras simples e empilhadas.

- Eixo X: Categoria (valor cru da linha)
- Eixo Y: Metrica quantitativa
- Uso tipico: Comparacao direta entre categorias
"""

from src.chart_pipeline.models.props import BarChartProps
from src.chart_pipeline.models.schema import ChartDTO
from src.chart_pipeline.mappers.base import BaseChartMapper
from src.chart_pipeline.utils.color_manager import PRIMARY_COLOR
from src.chart_pipeline.utils.logger import get_logger
from src.chart_pipeline.utils.value_defaults import category_or_unknown, read_numeric
from src.chart_pipeline.views.view_resolver import ResolvedView

logger = get_logger(__name__)


class BarChartMapper(BaseChartMapper):
    """
    Mapper para bar / stacked-bar.

    Validacao:
    - Pelo menos 1 eixo Y

    Saida: pares ``[categoria, y]`` na ordem das linhas (categoria ausente
    vira "Unknown"). Quando o tipo e
    ``stacked-bar``, ``stacks`` mapeia o label do eixo para sua cor.
    """

    def validate(self, dto: ChartDTO) -> None:
        """
        Valida requisitos de bar.

        Raises:
            ConfigurationError: Se nenhum eixo Y for declarado
        """
        self._require_y_axis(dto)

    def map(self, dto: ChartDTO, resolved: ResolvedView) -> BarChartProps:
        """Gera props de barras a partir da view resolvida."""
        self.validate(dto)

        config = dto.config
        axis = self._active_axis(dto, resolved)
        x_column = config.x_axis.data_column
        color = axis.color or PRIMARY_COLOR

        chart_data = [
            [category_or_unknown(row.get(x_column)), read_numeric(row, axis.data_column)]
            for row in resolved.data
        ]

        stacks = {axis.label: color} if config.chart_type == "stacked-bar" else None

        self.logger.info(f"Grafico {config.chart_type} mapeado: {len(chart_data)} barras")

        return BarChartProps(
            title=config.title,
            chart_data=chart_data,
            value_symbol=resolved.value_symbol,
            color=color,
            stacks=stacks,
            tooltip=self._tooltip(dto),
        )
