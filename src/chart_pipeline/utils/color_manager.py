"""
ColorManager - Color management for series, categories and axes.

Provides:
- Fixed, ordered palettes (shared by every mapper)
- Deterministic color assignment by index (round-robin)
- Explicit color overrides declared on the axis
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from plotly.colors import qualitative

from src.chart_pipeline.utils.logger import get_logger

logger = get_logger(__name__)

# Category palette (pie, categories): D3 qualitative, lower-cased
CATEGORY_PALETTE: Tuple[str, ...] = tuple(color.lower() for color in qualitative.D3)

# Series palette (area, multi-series, clusters)
AREA_PALETTE: Tuple[str, ...] = CATEGORY_PALETTE[:6]

# Axis palette of the mixed chart
MIXED_PALETTE: Tuple[str, ...] = CATEGORY_PALETTE[:3]

PRIMARY_COLOR = CATEGORY_PALETTE[0]


class ColorManager:
    """
    Color manager used by the mappers.

    Centralizes:
    - Palette lookup by name
    - label -> color mapping by position (the i-th label gets palette[i % n])
    - Overrides, which always win over the palette

    The result depends only on label order, so two calls with the same input
    produce exactly the same mapping.

    Example:
        >>> manager = ColorManager()
        >>> manager.get_color_sequence(["A", "B"], "category")
        {'A': '#1f77b4', 'B': '#ff7f0e'}
    """

    PALETTES: Dict[str, Tuple[str, ...]] = {
        "category": CATEGORY_PALETTE,
        "area": AREA_PALETTE,
        "mixed": MIXED_PALETTE,
    }

    DEFAULT_PALETTE = "area"

    def get_palette(self, palette: str = DEFAULT_PALETTE) -> Tuple[str, ...]:
        """
        Return a palette by name.

        Unknown names fall back to the default palette.
        """
        if palette not in self.PALETTES:
            logger.warning(
                f"Unknown palette '{palette}', using '{self.DEFAULT_PALETTE}'"
            )
            palette = self.DEFAULT_PALETTE
        return self.PALETTES[palette]

    def color_at(self, index: int, palette: str = DEFAULT_PALETTE) -> str:
        """Return the color at ``index``, cycling through the palette."""
        colors = self.get_palette(palette)
        return colors[index % len(colors)]

    def get_palette_colors(
        self, palette: str = DEFAULT_PALETTE, n_colors: int = 10
    ) -> List[str]:
        """
        Return ``n_colors`` colors from the palette, cycling if needed.

        Example:
            >>> len(ColorManager().get_palette_colors("mixed", 5))
            5
        """
        return [self.color_at(i, palette) for i in range(n_colors)]

    def get_color_sequence(
        self,
        labels: Iterable[str],
        palette: str = DEFAULT_PALETTE,
        overrides: Optional[Mapping[str, Optional[str]]] = None,
    ) -> Dict[str, str]:
        """
        Build a label -> color mapping.

        Args:
            labels: Labels in declaration order or order of appearance in rows
            palette: Name of the palette to use
            overrides: Explicit colors per label (None values are ignored)

        Returns:
            Dict {label: color}; repeated labels keep the last color
        """
        overrides = overrides or {}
        color_mapping: Dict[str, str] = {}
        for i, label in enumerate(labels):
            color_mapping[label] = overrides.get(label) or self.color_at(i, palette)

        logger.debug(
            f"Mapped {len(color_mapping)} labels with palette '{palette}'"
        )
        return color_mapping

    def get_axis_colors(
        self, axes: Sequence, palette: str = DEFAULT_PALETTE
    ) -> Dict[str, str]:
        """
        Map each axis label to its color, honoring ``axis.color``.

        Args:
            axes: AxisSpec sequence in declaration order
            palette: Name of the palette to use
        """
        mapping: Dict[str, str] = {}
        for i, axis in enumerate(axes):
            mapping[axis.label] = axis.color or self.color_at(i, palette)
        return mapping


def assign_colors(
    labels: Iterable[str],
    palette: Sequence[str],
    overrides: Optional[Mapping[str, Optional[str]]] = None,
) -> Dict[str, str]:
    """
    Assign ``palette[i % len(palette)]`` to the i-th label.

    Functional counterpart of ``ColorManager.get_color_sequence`` for
    arbitrary palettes.
    """
    overrides = overrides or {}
    return {
        label: overrides.get(label) or palette[i % len(palette)]
        for i, label in enumerate(labels)
    }
