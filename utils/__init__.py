"""
Utility Functions

Provides grid headings and turns, Bresenham wrappers,
figure file I/O, and helper functions used across detectors.
"""

from .geometry import (
    NORTH,
    EAST,
    SOUTH,
    WEST,
    HEADINGS,
    turn_right,
    turn_left,
    reverse,
    classify_turn,
    step,
)
from .bresenham_utils import bres_line, border_cells
from .figure_io import load_figures, figure_name, ensure_output_dir, save_image, save_text

__all__ = [
    "NORTH",
    "EAST",
    "SOUTH",
    "WEST",
    "HEADINGS",
    "turn_right",
    "turn_left",
    "reverse",
    "classify_turn",
    "step",
    "bres_line",
    "border_cells",
    "load_figures",
    "figure_name",
    "ensure_output_dir",
    "save_image",
    "save_text",
]
