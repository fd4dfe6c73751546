"""
PieChartMapper - Mapper para graficos de pizza.

- Sem eixos tradicionais (X/Y)
- Labels: Categoria (coluna do eixo X)
- Values: Metrica quantitativa
- Uso tipico: Distribuicao, proporcao relativa
"""

from src.chart_pipeline.models.props import PieChartProps
from src.chart_pipeline.models.schema import ChartDTO
from src.chart_pipeline.mappers.base import BaseChartMapper
from src.chart_pipeline.utils.value_defaults import category_or_unknown, read_numeric
from src.chart_pipeline.views.view_resolver import ResolvedView


class PieChartMapper(BaseChartMapper):
    """
    Mapper para pie.

    Validacao:
    - Pelo menos 1 eixo Y

    Cada fatia recebe a cor da paleta categorica pelo indice da linha, entao
    o mesmo label tem a mesma cor em qualquer grafico do dashboard que o
    apresente na mesma posicao.

    Exemplo de Uso:
        >>> props = PieChartMapper().map(dto, resolve_view(dto))
        >>> props.chart_data
        [{'name': 'Eletronicos', 'value': 45000}, {'name': 'Roupas', 'value': 30000}]
        >>> props.stack_colors
        {'Eletronicos': '#1f77b4', 'Roupas': '#ff7f0e'}
    """

    def validate(self, dto: ChartDTO) -> None:
        self._require_y_axis(dto)

    def map(self, dto: ChartDTO, resolved: ResolvedView) -> PieChartProps:
        """Gera props de pizza: fatias ``{name, value}`` e mapa nome -> cor."""
        self.validate(dto)

        axis = self._active_axis(dto, resolved)
        x_column = dto.config.x_axis.data_column

        chart_data = [
            {
                "name": category_or_unknown(row.get(x_column)),
                "value": read_numeric(row, axis.data_column),
            }
            for row in resolved.data
        ]

        stack_colors = self.color_manager.get_color_sequence(
            [item["name"] for item in chart_data], "category"
        )

        self.logger.info(f"Grafico pie mapeado: {len(chart_data)} fatias")

        return PieChartProps(
            title=dto.config.title,
            chart_data=chart_data,
            stack_colors=stack_colors,
            usd_format=resolved.value_symbol == "$",
        )
