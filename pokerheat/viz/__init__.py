"""Visualization module."""

from .heatmap import HeatmapDisplay, display_heatmap, preflop_matrix

__all__ = [
    "HeatmapDisplay",
    "display_heatmap",
    "preflop_matrix",
]
