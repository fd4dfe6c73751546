"""
MixedChartMapper - Mapper para graficos mistos / multi-eixo.

- Eixo X: Tempo (timestamp Unix em segundos)
- Eixos Y: Dois ou mais, cada um como serie de linha ou barra
- Uso tipico: Metricas de grandezas diferentes no mesmo periodo
"""

from src.chart_pipeline.exceptions import ConfigurationError
from src.chart_pipeline.models.props import MixedChartProps, MixedSeries
from src.chart_pipeline.models.schema import ChartDTO
from src.chart_pipeline.mappers.base import BaseChartMapper
from src.chart_pipeline.utils.value_defaults import read_numeric, unix_seconds_or_zero
from src.chart_pipeline.views.view_resolver import ResolvedView


class MixedChartMapper(BaseChartMapper):
    """
    Mapper para mixed / multi-axis.

    Validacao:
    - ``yAxes`` com pelo menos 2 eixos (``yAxis`` singular nao basta)

    Saida: mapa identificador do eixo (``axisId`` ou label) -> serie com
    pontos ``[timestamp, valor]``, tipo (line/bar), grupo de empilhamento e
    cor ciclando a paleta mista de 3 cores. Os pontos sao lidos das linhas
    cruas do dto, sem transformacao de view.
    """

    def validate(self, dto: ChartDTO) -> None:
        """
        Raises:
            ConfigurationError: Se houver menos de 2 eixos em ``yAxes``
        """
        y_axes = dto.config.y_axes or []
        if len(y_axes) < 2:
            raise ConfigurationError(
                "Mixed charts require multiple yAxes",
                chart_type=dto.config.chart_type,
                requirement="yAxes>=2",
            )

    def map(self, dto: ChartDTO, resolved: ResolvedView) -> MixedChartProps:
        self.validate(dto)

        config = dto.config
        x_column = config.x_axis.data_column
        timestamps = [unix_seconds_or_zero(row.get(x_column)) for row in dto.data]

        charts = {}
        for index, axis in enumerate(config.y_axes):
            stacking = axis.stacking_mode if axis.stacking_mode != "none" else None
            charts[axis.identifier] = MixedSeries(
                points=[
                    [timestamp, read_numeric(row, axis.data_column)]
                    for timestamp, row in zip(timestamps, dto.data)
                ],
                series_type=axis.series_chart_type or "line",
                name=axis.label,
                stack_group=stacking or "",
                color=axis.color or self.color_manager.color_at(index, "mixed"),
            )

        if len(charts) < len(config.y_axes):
            self.logger.warning(
                f"Identificadores de eixo repetidos: {len(config.y_axes)} eixos, "
                f"{len(charts)} series"
            )

        self.logger.info(f"Grafico {config.chart_type} mapeado: {len(charts)} series")

        return MixedChartProps(
            charts=charts,
            value_symbol=config.y_axes[0].symbol,
            title=config.title,
            group_by="daily" if "date" in x_column else None,
        )
