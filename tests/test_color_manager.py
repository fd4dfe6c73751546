"""Unit tests for palette contents and deterministic color assignment."""

from __future__ import annotations

import pytest

from src.chart_pipeline.models.schema import AxisSpec
from src.chart_pipeline.utils.color_manager import (
    AREA_PALETTE,
    CATEGORY_PALETTE,
    MIXED_PALETTE,
    ColorManager,
    assign_colors,
)

pytestmark = pytest.mark.unit


def test_palette_literals() -> None:
    """Palettes are fixed, ordered and lower-case."""

    assert CATEGORY_PALETTE == (
        "#1f77b4",
        "#ff7f0e",
        "#2ca02c",
        "#d62728",
        "#9467bd",
        "#8c564b",
        "#e377c2",
        "#7f7f7f",
        "#bcbd22",
        "#17becf",
    )
    assert AREA_PALETTE == CATEGORY_PALETTE[:6]
    assert MIXED_PALETTE == ("#1f77b4", "#ff7f0e", "#2ca02c")


def test_color_sequence_cycles_by_position() -> None:
    """The i-th label gets palette[i % n]."""

    colors = ColorManager().get_color_sequence(["a", "b", "c", "d"], "mixed")

    assert colors == {
        "a": "#1f77b4",
        "b": "#ff7f0e",
        "c": "#2ca02c",
        "d": "#1f77b4",
    }


def test_overrides_win_over_palette() -> None:
    """Explicit colors replace the palette color; None overrides are ignored."""

    colors = assign_colors(["a", "b"], AREA_PALETTE, {"a": "#000000", "b": None})

    assert colors == {"a": "#000000", "b": AREA_PALETTE[1]}


def test_unknown_palette_falls_back_to_default() -> None:
    """An unknown palette name uses the area palette."""

    manager = ColorManager()

    assert manager.get_palette("neon") == AREA_PALETTE
    assert manager.get_palette_colors("mixed", 4) == list(MIXED_PALETTE) + ["#1f77b4"]


def test_axis_colors_use_declared_color() -> None:
    """Axis colors map labels and respect per-axis overrides."""

    axes = [
        AxisSpec(data_column="a", label="A"),
        AxisSpec(data_column="b", label="B", color="#abcdef"),
    ]

    assert ColorManager().get_axis_colors(axes, "category") == {
        "A": CATEGORY_PALETTE[0],
        "B": "#abcdef",
    }
