"""
ClusteredBarChartMapper - Mapper para graficos de barras agrupadas (clusters).

- Eixo X: Categoria
- Clusters: Um por eixo Y declarado, cada um com sua propria escala Y
- Uso tipico: Comparar metricas de grandezas diferentes por categoria
"""

from typing import Any, Dict, List, Optional, Tuple

from src.chart_pipeline.exceptions import ConfigurationError
from src.chart_pipeline.models.props import ClusteredBarChartProps
from src.chart_pipeline.models.schema import ChartDTO
from src.chart_pipeline.mappers.base import BaseChartMapper
from src.chart_pipeline.utils.color_manager import ColorManager
from src.chart_pipeline.utils.value_defaults import category_or_unknown, numeric_or_zero, read_numeric
from src.chart_pipeline.views.view_resolver import ResolvedView

# Deslocamento horizontal entre eixos Y do mesmo lado
AXIS_OFFSET_STEP = 80


class ClusteredBarChartMapper(BaseChartMapper):
    """
    Mapper para clustered-bar.

    Validacao:
    - Pelo menos 1 eixo Y (``yAxes`` ou ``yAxis`` singular)

    Saida: uma entrada ``{"category": ..., label: valor, ...}`` por linha,
    ``clusters`` com os labels dos eixos e cores ciclando a paleta de area.

    Exemplo de Uso:
        >>> props = ClusteredBarChartMapper().map(dto, resolve_view(dto))
        >>> props.clusters
        ['TVL', 'Fees']
        >>> props.chart_data[0]
        {'category': 'Ethereum', 'TVL': 100, 'Fees': 7}
    """

    def validate(self, dto: ChartDTO) -> None:
        """
        Raises:
            ConfigurationError: Se nenhum eixo Y for declarado
        """
        if not dto.config.declared_y_axes:
            raise ConfigurationError(
                "ClusteredBarChart requires at least one yAxis configuration",
                chart_type=dto.config.chart_type,
                requirement="yAxis",
            )

    def map(self, dto: ChartDTO, resolved: ResolvedView) -> ClusteredBarChartProps:
        self.validate(dto)

        config = dto.config
        y_axes = config.declared_y_axes
        x_column = config.x_axis.data_column

        chart_data = [
            {
                "category": category_or_unknown(row.get(x_column)),
                **{axis.label: read_numeric(row, axis.data_column) for axis in y_axes},
            }
            for row in resolved.data
        ]

        self.logger.info(
            f"Grafico clustered-bar mapeado: {len(chart_data)} categorias, "
            f"{len(y_axes)} cluster(s)"
        )

        return ClusteredBarChartProps(
            title=config.title,
            chart_data=chart_data,
            clusters=[axis.label for axis in y_axes],
            stack_colors=self.color_manager.get_axis_colors(y_axes, "area"),
            value_symbol=resolved.value_symbol,
        )


def build_clustered_series(
    props: ClusteredBarChartProps,
    color_manager: Optional[ColorManager] = None,
) -> Tuple[List[Any], List[Dict[str, Any]]]:
    """
    Monta categorias e series de barras, uma serie por cluster.

    Categorias seguem a ordem de primeira aparicao; quando uma categoria se
    repete, vale a primeira linha. Cada serie usa o eixo Y de mesmo indice e
    a cor de ``stack_colors`` (ou a paleta de area, ciclando).

    Returns:
        Tupla (categorias, series)
    """
    color_manager = color_manager or ColorManager()

    first_rows: Dict[Any, Dict[str, Any]] = {}
    for item in props.chart_data:
        first_rows.setdefault(item.get(props.group_by), item)
    categories = list(first_rows)

    series = []
    for index, cluster in enumerate(props.clusters):
        series.append(
            {
                "name": cluster,
                "type": "bar",
                "data": [
                    numeric_or_zero(first_rows[category].get(cluster))
                    for category in categories
                ],
                "yAxisIndex": index,
                "color": props.stack_colors.get(cluster)
                or color_manager.color_at(index, "area"),
            }
        )

    return categories, series


def clustered_y_axis_layout(n_clusters: int) -> List[Dict[str, Any]]:
    """
    Posicao de cada eixo Y: alterna esquerda/direita, deslocando pares.

    Exemplo:
        >>> clustered_y_axis_layout(3)
        [{'position': 'left', 'offset': 0}, {'position': 'right', 'offset': 0}, {'position': 'left', 'offset': 80}]
    """
    return [
        {
            "position": "left" if index % 2 == 0 else "right",
            "offset": (index // 2) * AXIS_OFFSET_STEP,
        }
        for index in range(n_clusters)
    ]
