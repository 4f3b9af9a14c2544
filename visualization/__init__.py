"""
Visualization Tools

Provides rendering utilities for:
- ASCII rectangles of a decomposed figure
- Face images
- Saving all outputs of one figure
"""

from .rectangle_renderer import render_face, get_figure_rectangles, FigureDecomposition
from .draw_faces import new_canvas, cell_rect, draw_faces, draw_borders
from .save_outputs import (
    save_all_outputs,
    save_rectangles,
    save_face_image,
)

__all__ = [
    "render_face",
    "get_figure_rectangles",
    "FigureDecomposition",
    "new_canvas",
    "cell_rect",
    "draw_faces",
    "draw_borders",
    "save_all_outputs",
    "save_rectangles",
    "save_face_image",
]
