"""
Centralized output-saving utilities for the figure decomposition pipeline.

This module provides:
    • save_all_outputs(...)
    • save_rectangles(...)
    • save_face_image(...)

Uses draw modules to visualize and utils.figure_io for filesystem handling.
"""

from visualization.draw_faces import new_canvas, draw_faces, draw_borders
from visualization.rectangle_renderer import FigureDecomposition
from utils.figure_io import save_image, save_text, ensure_output_dir


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_rectangles(path: str, decomposition: FigureDecomposition):
    """
    Writes every rendered rectangle, separated by a blank line.
    """
    grid = decomposition.grid
    blocks = [text.rstrip("\r\n") for text in decomposition]
    sep = grid.line_ending * 2
    save_text(path, sep.join(blocks) + grid.line_ending)


def save_face_image(path: str, decomposition: FigureDecomposition):
    """
    Draw the faces on a blank canvas and save to disk.
    """
    vis = new_canvas(decomposition.grid)
    draw_faces(vis, decomposition.faces)
    draw_borders(vis, decomposition.faces)
    save_image(path, vis)


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(output_dir: str, figure_id: str, decomposition: FigureDecomposition):
    """
    Saves every output artifact for one processed figure.

    Example output:
        <id>_rectangles.txt
        <id>_faces.png
    """

    ensure_output_dir(output_dir)

    # 1) Rendered rectangles
    save_rectangles(
        f"{output_dir}/{figure_id}_rectangles.txt",
        decomposition
    )

    # 2) Face visualization
    save_face_image(
        f"{output_dir}/{figure_id}_faces.png",
        decomposition
    )
