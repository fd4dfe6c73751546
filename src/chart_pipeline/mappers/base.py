"""
BaseChartMapper - Classe abstrata base para todos os mappers de graficos.

Define a interface comum e metodos utilitarios reutilizaveis por todos os
mappers especificos.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from src.chart_pipeline.exceptions import ConfigurationError
from src.chart_pipeline.models.props import ChartProps
from src.chart_pipeline.models.schema import AxisSpec, ChartDTO
from src.chart_pipeline.utils.color_manager import ColorManager
from src.chart_pipeline.utils.logger import get_logger
from src.chart_pipeline.views.view_resolver import ResolvedView

logger = get_logger(__name__)


class BaseChartMapper(ABC):
    """
    Classe base abstrata para todos os mappers de graficos.

    Define a interface comum que todos os mappers devem implementar:
    - validate(): Valida a configuracao exigida pelo tipo de grafico
    - map(): Converte (dto, view resolvida) nos props finalizados

    Mappers sao funcoes puras das entradas: nao alteram ``dto.data`` nem
    ``dto.config`` e sempre devolvem estruturas novas.

    Fornece metodos utilitarios reutilizaveis:
    - _require_y_axis(): Garante ao menos um eixo Y declarado
    - _active_axis(): Eixo da view ativa, ou o eixo principal da config
    - _tooltip(): Configuracao de tooltip serializada

    Exemplo de Subclasse:
        >>> class ScatterChartMapper(BaseChartMapper):
        ...     def validate(self, dto):
        ...         self._require_y_axis(dto)
        ...
        ...     def map(self, dto, resolved):
        ...         return ScatterChartProps(...)
    """

    def __init__(self, color_manager: Optional[ColorManager] = None):
        """
        Inicializa o mapper.

        Args:
            color_manager: Instancia de ColorManager (uma nova e criada se omitida)
        """
        self.color_manager = color_manager or ColorManager()
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def validate(self, dto: ChartDTO) -> None:
        """
        Valida requisitos especificos do tipo de grafico.

        Args:
            dto: Entrada completa do grafico

        Raises:
            ConfigurationError: Se a configuracao nao atender o mapper
        """
        pass

    @abstractmethod
    def map(self, dto: ChartDTO, resolved: ResolvedView) -> ChartProps:
        """
        Gera os props finalizados do tipo de grafico.

        Args:
            dto: Entrada completa do grafico
            resolved: View resolvida (dados possivelmente transformados)

        Returns:
            Props prontos para o renderer

        Raises:
            ConfigurationError: Se a validacao falhar
        """
        pass

    # Metodos utilitarios compartilhados

    def _require_y_axis(self, dto: ChartDTO) -> AxisSpec:
        """
        Retorna o eixo Y principal ou falha com ConfigurationError.

        Exemplo:
            >>> mapper._require_y_axis(dto_sem_eixo)
            Traceback (most recent call last):
            ...
            ConfigurationError: Missing yAxis config
        """
        axis = dto.config.primary_y_axis
        if axis is None:
            raise ConfigurationError(
                "Missing yAxis config",
                chart_type=dto.config.chart_type,
                requirement="yAxis",
            )
        return axis

    def _active_axis(self, dto: ChartDTO, resolved: ResolvedView) -> AxisSpec:
        """
        Eixo lido pelos mappers de serie unica.

        Sem view selecionada, ``resolved.y_axis_config`` ja e o eixo principal
        da config; com view, e o eixo da view.
        """
        return resolved.y_axis_config or self._require_y_axis(dto)

    def _tooltip(self, dto: ChartDTO) -> Optional[Dict[str, Any]]:
        """Configuracao de tooltip declarada, em camelCase, ou None."""
        if dto.config.tooltip is None:
            return None
        return dto.config.tooltip.model_dump(by_alias=True, exclude_none=True)
