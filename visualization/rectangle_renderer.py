"""
ASCII rendering of extracted faces.

This module provides:
    • render_face(face, grid)
    • get_figure_rectangles(text, pad)
    • FigureDecomposition

Used by:
    - main.py
    - save_outputs.py
"""

from typing import Iterator, List, Optional

import numpy as np

from models.grid import Grid
from models.face import Face
from detectors.grid_loader import load_grid
from detectors.junction_detector import build_planar_graph
from detectors.face_extractor import extract_faces
from utils.bresenham_utils import border_cells
from config import get_active_params


# ---------------------------------------------------------------------
#  Single face
# ---------------------------------------------------------------------

def render_face(face: Face, grid: Grid) -> str:
    """
    Render one face as ASCII text in the figure's own line-ending style.

    The interior is copied from the grid; the border is drawn fresh, so a
    border shared with neighbouring faces (and any T-junction '+' on it)
    comes out as a plain '-' or '|' run with '+' only at the corners.
    """
    params = get_active_params()

    canvas = np.full((face.height, face.width), params["BLANK_CHAR"], dtype="<U1")

    rs, cs = face.interior_slices()
    canvas[1:-1, 1:-1] = grid.cells[rs, cs]

    sides = border_cells(0, 0, face.height - 1, face.width - 1)
    for r, c in sides["top"] + sides["bottom"]:
        canvas[r, c] = params["HORIZONTAL_CHAR"]
    for r, c in sides["left"] + sides["right"]:
        canvas[r, c] = params["VERTICAL_CHAR"]
    for r, c in (0, 0), (0, -1), (-1, 0), (-1, -1):
        canvas[r, c] = params["CORNER_CHAR"]

    return grid.join(["".join(row) for row in canvas])


# ---------------------------------------------------------------------
#  Whole figure
# ---------------------------------------------------------------------

class FigureDecomposition:
    """
    Elementary rectangles of one figure.

    All faces are extracted and validated up front; iteration renders
    them lazily and can be repeated.
    """

    def __init__(self, grid: Grid, faces: List[Face]):
        self.grid = grid
        self.faces = faces

    def __iter__(self) -> Iterator[str]:
        for face in self.faces:
            yield render_face(face, self.grid)

    def __len__(self):
        return len(self.faces)

    def __repr__(self):
        return f"FigureDecomposition(grid={self.grid!r}, faces={len(self.faces)})"


def get_figure_rectangles(text: str, pad: Optional[bool] = None) -> FigureDecomposition:
    """
    Returns the rectangles a figure is made of, as rendered ASCII texts.

    text → Grid → PlanarGraph → Faces. The order of the rectangles is not
    significant. Raises MalformedFigureError before producing anything if
    the figure cannot be decomposed.

    Example:
        '+------------+\\n'
        '|            |\\n'
        '+------+-----+\\n'
        '|      |     |\\n'
        '+------+-----+\\n'
            → '+------------+\\n|            |\\n+------------+\\n',
              '+------+\\n|      |\\n+------+\\n',
              '+-----+\\n|     |\\n+-----+\\n'
    """
    grid = load_grid(text, pad=pad)
    graph = build_planar_graph(grid)
    faces = extract_faces(graph, grid)
    return FigureDecomposition(grid, faces)
