"""
MapperRouter - Roteador que seleciona o mapper apropriado baseado em chart_type.

Usa pattern Registry para permitir adicionar novos mappers facilmente sem
modificar o codigo existente.
"""

from typing import Dict, Optional, Tuple, Type

from src.chart_pipeline.mappers.area_mapper import AreaChartMapper
from src.chart_pipeline.mappers.bar_mapper import BarChartMapper
from src.chart_pipeline.mappers.base import BaseChartMapper
from src.chart_pipeline.mappers.clustered_bar_mapper import ClusteredBarChartMapper
from src.chart_pipeline.mappers.mixed_mapper import MixedChartMapper
from src.chart_pipeline.mappers.pie_mapper import PieChartMapper
from src.chart_pipeline.mappers.scatter_mapper import ScatterChartMapper
from src.chart_pipeline.mappers.table_mapper import TableMapper
from src.chart_pipeline.models.props import RenderKind
from src.chart_pipeline.utils.color_manager import ColorManager
from src.chart_pipeline.utils.logger import get_logger

logger = get_logger(__name__)


class MapperRouter:
    """
    Roteador que seleciona o mapper apropriado baseado em chart_type.

    Cada chart_type registrado aponta para (classe do mapper, kind do
    resultado). Varios chart_types podem compartilhar o mesmo mapper, por
    exemplo line/area/stacked-area -> AreaChartMapper com kind "area".

    Exemplo:
        >>> router = MapperRouter()
        >>> type(router.get_mapper("stacked-area")).__name__
        'AreaChartMapper'
        >>> router.get_kind("multi-axis")
        'mixed'
    """

    def __init__(self, color_manager: Optional[ColorManager] = None):
        """
        Inicializa o router.

        Args:
            color_manager: ColorManager compartilhado entre os mappers
        """
        self.color_manager = color_manager or ColorManager()
        self._registry: Dict[str, Tuple[Type[BaseChartMapper], RenderKind]] = {}
        self._register_default_mappers()
        logger.info(f"MapperRouter inicializado com {len(self._registry)} chart types")

    def _register_default_mappers(self) -> None:
        """
        Registra os mappers padrao.

        - line, area, stacked-area -> area
        - bar, stacked-bar -> bar
        - clustered-bar -> clustered-bar
        - multi-axis, mixed -> mixed
        - pie, scatter, table
        """
        for chart_type in ("line", "area", "stacked-area"):
            self.register(chart_type, AreaChartMapper, "area")

        for chart_type in ("bar", "stacked-bar"):
            self.register(chart_type, BarChartMapper, "bar")

        self.register("clustered-bar", ClusteredBarChartMapper, "clustered-bar")

        for chart_type in ("multi-axis", "mixed"):
            self.register(chart_type, MixedChartMapper, "mixed")

        self.register("pie", PieChartMapper, "pie")
        self.register("scatter", ScatterChartMapper, "scatter")
        self.register("table", TableMapper, "table")

        logger.debug(f"Mappers registrados: {list(self._registry.keys())}")

    def register(
        self,
        chart_type: str,
        mapper_class: Type[BaseChartMapper],
        kind: RenderKind,
    ) -> None:
        """
        Registra um novo mapper no router.

        Args:
            chart_type: Tipo de grafico declarado na config (ex: "donut")
            mapper_class: Classe do mapper (deve herdar de BaseChartMapper)
            kind: Kind do RenderResult produzido

        Raises:
            TypeError: Se a classe nao herdar de BaseChartMapper
        """
        if not issubclass(mapper_class, BaseChartMapper):
            raise TypeError(
                f"{mapper_class.__name__} deve herdar de BaseChartMapper"
            )

        self._registry[chart_type] = (mapper_class, kind)
        logger.debug(
            f"Mapper registrado: '{chart_type}' -> {mapper_class.__name__} ({kind})"
        )

    def get_mapper(self, chart_type: str) -> BaseChartMapper:
        """
        Retorna instancia do mapper apropriado para o chart_type.

        Raises:
            ValueError: Se chart_type nao estiver registrado
        """
        if chart_type not in self._registry:
            raise ValueError(
                f"Chart type '{chart_type}' nao suportado. "
                f"Tipos suportados: {self.get_supported_chart_types()}"
            )

        mapper_class, _ = self._registry[chart_type]
        return mapper_class(color_manager=self.color_manager)

    def get_kind(self, chart_type: str) -> RenderKind:
        """Retorna o kind do resultado para o chart_type (ValueError se ausente)."""
        if chart_type not in self._registry:
            raise ValueError(f"Chart type '{chart_type}' nao suportado")
        return self._registry[chart_type][1]

    def get_supported_chart_types(self) -> list[str]:
        """Retorna lista de chart_types registrados."""
        return list(self._registry.keys())

    def is_supported(self, chart_type: str) -> bool:
        """
        Verifica se um chart_type esta registrado.

        Exemplo:
            >>> MapperRouter().is_supported("heatmap")
            False
        """
        return chart_type in self._registry
