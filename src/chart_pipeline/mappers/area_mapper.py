"""
AreaChartMapper - Mapper para graficos de linha, area e area empilhada.

- Eixo X: Tempo (convertido para timestamp Unix em segundos)
- Eixo Y: Uma ou mais metricas (uma serie por eixo declarado)
- Uso tipico: Tendencias temporais, composicao ao longo do tempo
"""

from typing import Any, Dict, List

from src.chart_pipeline.models.props import AreaChartProps
from src.chart_pipeline.models.schema import ChartDTO
from src.chart_pipeline.mappers.base import BaseChartMapper
from src.chart_pipeline.utils.logger import get_logger
from src.chart_pipeline.utils.value_defaults import read_numeric, unix_seconds_or_zero
from src.chart_pipeline.views.view_resolver import ResolvedView

logger = get_logger(__name__)


class AreaChartMapper(BaseChartMapper):
    """
    Mapper para line / area / stacked-area.

    Requisitos:
    - Pelo menos 1 eixo Y (``yAxis`` ou ``yAxes``)
    - Coluna do eixo X com datas parseaveis (invalidas viram timestamp 0)

    Formato de saida:
    - Serie unica: ``[[timestamp, valor], ...]`` sem stacks
    - Multiplas series: ``[{"date": timestamp, label: valor, ...}, ...]``
      com stacks na ordem de ``yAxes`` e cores ciclando a paleta de area

    Exemplo de Uso:
        >>> mapper = AreaChartMapper()
        >>> dto = ChartDTO.model_validate({
        ...     "data": [{"date": "2024-01-01", "v": 10}, {"date": "2024-01-02", "v": 20}],
        ...     "config": {
        ...         "chartType": "line",
        ...         "xAxis": {"dataColumn": "date"},
        ...         "yAxis": {"dataColumn": "v", "label": "V", "unit": "none"},
        ...     },
        ... })
        >>> mapper.map(dto, resolve_view(dto)).chart_data
        [[1704067200, 10], [1704153600, 20]]
    """

    def validate(self, dto: ChartDTO) -> None:
        """
        Valida requisitos de area.

        Raises:
            ConfigurationError: Se nenhum eixo Y for declarado
        """
        self._require_y_axis(dto)
        self.logger.debug(
            f"Validacao OK: {len(dto.config.declared_y_axes)} eixo(s) Y, "
            f"{len(dto.data)} linhas"
        )

    def map(self, dto: ChartDTO, resolved: ResolvedView) -> AreaChartProps:
        """
        Gera props de area.

        Processo:
        1. Validar configuracao
        2. Converter a coluna X em timestamps
        3. Montar pares (serie unica) ou registros por data (multiplas series)
        4. Atribuir cores das series na ordem de declaracao

        Args:
            dto: Entrada completa do grafico
            resolved: View resolvida

        Returns:
            AreaChartProps pronto para o renderer
        """
        self.validate(dto)

        config = dto.config
        y_axes = config.declared_y_axes
        x_column = config.x_axis.data_column
        is_stacked = config.chart_type == "stacked-area"
        scale_axis = resolved.y_axis_config or y_axes[0]

        if len(y_axes) == 1:
            axis = self._active_axis(dto, resolved)
            chart_data: List[Any] = [
                [unix_seconds_or_zero(row.get(x_column)), read_numeric(row, axis.data_column)]
                for row in resolved.data
            ]
            stacks: List[str] = []
            stack_colors: Dict[str, str] = {}
        else:
            chart_data = [
                {
                    "date": unix_seconds_or_zero(row.get(x_column)),
                    **{axis.label: read_numeric(row, axis.data_column) for axis in y_axes},
                }
                for row in resolved.data
            ]
            stacks = [axis.label for axis in y_axes]
            stack_colors = self.color_manager.get_axis_colors(y_axes, "area")

        self.logger.info(
            f"Grafico {config.chart_type} mapeado: {len(stacks) or 1} serie(s), "
            f"{len(chart_data)} pontos"
        )

        return AreaChartProps(
            title=config.title,
            chart_data=chart_data,
            stacks=stacks,
            stack_colors=stack_colors,
            value_symbol=resolved.value_symbol,
            is_stacked_chart=is_stacked,
            y_axis_scale=scale_axis.scale or "linear",
            tooltip=self._tooltip(dto),
        )
