"""
Chart Dispatcher - Main entry point of the chart pipeline.

Turns a ChartDTO (plus the active view id) into a tagged ChartResult:

    ChartDTO + active view
        ↓
    [View Resolver]        picks the axis, applies % change / ratio
        ↓
    [MapperRouter]         selects the mapper for config.chart_type
        ↓
    [Chart Data Mapper]    builds the props for that chart family
        ↓
    RenderResult | ErrorResult | UnsupportedResult | HiddenResult

The dispatcher is the only recovery boundary: mapper failures become an
ErrorResult and are never raised to the caller.
"""

import copy
import time
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from src.chart_pipeline.core.settings import DISPATCH_CACHE_ENABLED
from src.chart_pipeline.exceptions import ConfigurationError
from src.chart_pipeline.mappers.router import MapperRouter
from src.chart_pipeline.models.props import (
    ChartResult,
    ErrorResult,
    HiddenResult,
    RenderResult,
    UnsupportedResult,
)
from src.chart_pipeline.models.schema import ChartDTO
from src.chart_pipeline.utils.logger import get_logger
from src.chart_pipeline.views.view_resolver import resolve_view

logger = get_logger(__name__)

HIDDEN_CHART_TYPE = "none"
COMPARISON_CHART_TYPE = "comparison"

# Chart types resolved by the dispatcher itself, not by a registered mapper
DISPATCHER_CHART_TYPES = frozenset({HIDDEN_CHART_TYPE, COMPARISON_CHART_TYPE})


def route_chart_type(dto: ChartDTO) -> str:
    """
    Return the chart type whose mapper should handle ``dto``.

    ``comparison`` becomes ``mixed`` when more than one y axis is declared,
    otherwise ``bar``. Every other type is returned unchanged.
    """
    chart_type = dto.config.chart_type
    if chart_type == COMPARISON_CHART_TYPE:
        y_axes = dto.config.y_axes or []
        return "mixed" if len(y_axes) > 1 else "bar"
    return chart_type


class ChartDispatcher:
    """
    Selects and runs the mapper for a chart, converting failures to results.

    The last result is memoized per (dto identity, active view id): calling
    ``dispatch`` again with the same ChartDTO object and view returns a copy
    of the cached result without recomputation. The cache keeps its own copy,
    so callers may mutate the props they receive.

    Example Usage:
        >>> dispatcher = ChartDispatcher()
        >>> result = dispatcher.dispatch(dto, active_view_id="absolute")
        >>> if result.kind == "error":
        ...     print(result.error)
    """

    def __init__(
        self,
        router: Optional[MapperRouter] = None,
        cache_enabled: bool = DISPATCH_CACHE_ENABLED,
    ):
        """
        Initialize the dispatcher.

        Args:
            router: MapperRouter to use (a default one is created if omitted)
            cache_enabled: If True, memoizes the last (dto, view) result
        """
        self.router = router or MapperRouter()
        self.cache_enabled = cache_enabled

        self._cached_dto: Optional[ChartDTO] = None
        self._cached_view_id: Optional[str] = None
        self._cached_result: Optional[ChartResult] = None

        self._stats = {
            "total_dispatches": 0,
            "successful_dispatches": 0,
            "failed_dispatches": 0,
            "unsupported_dispatches": 0,
            "hidden_dispatches": 0,
            "cache_hits": 0,
            "total_map_time": 0.0,
            "average_map_time": 0.0,
            "charts_by_kind": {},
        }

        logger.info(f"ChartDispatcher initialized (cache_enabled={cache_enabled})")

    def dispatch(
        self,
        dto: Union[ChartDTO, Dict[str, Any]],
        active_view_id: Optional[str] = None,
    ) -> ChartResult:
        """
        Map a chart to its finalized result.

        Args:
            dto: ChartDTO, or its dict form (camelCase keys accepted)
            active_view_id: Selected view; falls back to config.default_view_id

        Returns:
            RenderResult, ErrorResult, UnsupportedResult or HiddenResult
        """
        if (
            self.cache_enabled
            and self._cached_result is not None
            and dto is self._cached_dto
            and active_view_id == self._cached_view_id
        ):
            self._stats["cache_hits"] += 1
            logger.debug("Returning memoized dispatch result")
            return copy.deepcopy(self._cached_result)

        result = self._dispatch(dto, active_view_id)

        if self.cache_enabled and isinstance(dto, ChartDTO):
            self._cached_dto = dto
            self._cached_view_id = active_view_id
            self._cached_result = copy.deepcopy(result)

        return result

    def clear_cache(self) -> None:
        """Drop the memoized result."""
        self._cached_dto = None
        self._cached_view_id = None
        self._cached_result = None

    def _dispatch(
        self,
        dto: Union[ChartDTO, Dict[str, Any]],
        active_view_id: Optional[str],
    ) -> ChartResult:
        self._stats["total_dispatches"] += 1

        if not isinstance(dto, ChartDTO):
            try:
                dto = ChartDTO.model_validate(dto)
            except ValidationError as e:
                logger.error(f"Invalid chart input: {e}")
                self._stats["failed_dispatches"] += 1
                return ErrorResult(
                    error=f"Invalid chart configuration: {e}",
                    chart_type=self._raw_chart_type(dto),
                    error_type="ValidationError",
                )

        chart_type = dto.config.chart_type
        logger.info(
            f"Dispatching chart '{dto.config.id or dto.config.title}' "
            f"(type={chart_type}, rows={len(dto.data)}, view={active_view_id})"
        )

        if chart_type == HIDDEN_CHART_TYPE:
            self._stats["hidden_dispatches"] += 1
            return HiddenResult()

        target_type = route_chart_type(dto)
        if target_type != chart_type:
            logger.debug(f"Chart type '{chart_type}' routed to '{target_type}'")

        if not self.router.is_supported(target_type):
            logger.warning(f"Chart type '{chart_type}' not supported")
            self._stats["unsupported_dispatches"] += 1
            return UnsupportedResult(chart_type=chart_type, preview=self._preview(dto))

        mapper = self.router.get_mapper(target_type)
        kind = self.router.get_kind(target_type)
        view_id = active_view_id if active_view_id is not None else dto.config.default_view_id

        start_time = time.perf_counter()
        try:
            resolved = resolve_view(dto, view_id)
            props = mapper.map(dto, resolved)
        except ConfigurationError as e:
            logger.error(f"Configuration error for '{chart_type}': {e}")
            self._stats["failed_dispatches"] += 1
            return ErrorResult(error=str(e), chart_type=chart_type)
        except Exception as e:
            logger.error(f"Mapping failed for '{chart_type}': {e}", exc_info=True)
            self._stats["failed_dispatches"] += 1
            return ErrorResult(
                error=f"Failed to map chart: {e}",
                chart_type=chart_type,
                error_type=type(e).__name__,
            )

        self._update_stats(kind, time.perf_counter() - start_time)
        logger.info(f"Chart mapped with {mapper.__class__.__name__} (kind={kind})")

        return RenderResult(kind=kind, props=props, chart_type=chart_type)

    @staticmethod
    def _raw_chart_type(dto: Any) -> Optional[str]:
        if isinstance(dto, dict):
            config = dto.get("config")
            if isinstance(config, dict):
                return config.get("chartType") or config.get("chart_type")
        return None

    @staticmethod
    def _preview(dto: ChartDTO) -> Dict[str, Any]:
        return {
            "data": dto.data,
            "config": dto.config.model_dump(by_alias=True, exclude_none=True),
        }

    def _update_stats(self, kind: str, map_time: float) -> None:
        self._stats["successful_dispatches"] += 1
        self._stats["total_map_time"] += map_time
        self._stats["average_map_time"] = (
            self._stats["total_map_time"] / self._stats["successful_dispatches"]
        )
        by_kind = self._stats["charts_by_kind"]
        by_kind[kind] = by_kind.get(kind, 0) + 1

    def get_statistics(self) -> Dict[str, Any]:
        """
        Return dispatch statistics.

        Returns:
            Dict with counters per outcome, cache hits, timing and a
            per-kind count of successful dispatches
        """
        stats = dict(self._stats)
        stats["charts_by_kind"] = dict(self._stats["charts_by_kind"])
        return stats


_default_dispatcher: Optional[ChartDispatcher] = None


def get_dispatcher() -> ChartDispatcher:
    """Return the shared module-level dispatcher, creating it on first use."""
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = ChartDispatcher()
    return _default_dispatcher


def dispatch(
    dto: Union[ChartDTO, Dict[str, Any]],
    active_view_id: Optional[str] = None,
) -> ChartResult:
    """Dispatch ``dto`` with the shared dispatcher. See ``ChartDispatcher.dispatch``."""
    return get_dispatcher().dispatch(dto, active_view_id)
