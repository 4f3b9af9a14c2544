"""
Visualization utilities for rendering decomposed figures as images.

This module provides:
    • new_canvas(grid)
    • cell_rect(row, col)
    • draw_faces(img, faces)
    • draw_borders(img, faces)

Used by:
    - save_outputs.py
"""

from typing import List, Tuple

import cv2
import numpy as np

from models.grid import Grid
from models.face import Face
from utils.bresenham_utils import border_cells
from config import COLOR_BACKGROUND, COLOR_BORDER, FACE_PALETTE, get_active_params


# ---------------------------------------------------------------------
#  Geometry helpers
# ---------------------------------------------------------------------

def new_canvas(grid: Grid) -> np.ndarray:
    """
    Blank BGR image with one CELL_SIZE_PX square per grid cell.
    """
    size = get_active_params()["CELL_SIZE_PX"]
    img = np.empty((grid.height * size, grid.width * size, 3), dtype=np.uint8)
    img[:] = COLOR_BACKGROUND
    return img


def cell_rect(row: int, col: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """
    Pixel corners (x, y) of one character cell.
    """
    size = get_active_params()["CELL_SIZE_PX"]
    return (col * size, row * size), ((col + 1) * size - 1, (row + 1) * size - 1)


# ---------------------------------------------------------------------
#  Faces
# ---------------------------------------------------------------------

def draw_faces(image, faces: List[Face]):
    """
    Fill each face, borders included, with a palette colour.
    Faces are coloured in list order, cycling through FACE_PALETTE.
    """
    for i, face in enumerate(faces):
        color = FACE_PALETTE[i % len(FACE_PALETTE)]
        (x1, y1), _ = cell_rect(face.top, face.left)
        _, (x2, y2) = cell_rect(face.bottom, face.right)
        cv2.rectangle(image, (x1, y1), (x2, y2), color, thickness=-1)
    return image


def draw_borders(image, faces: List[Face], thickness: int = 2):
    """
    Draws the border cells of every face, rasterised with Bresenham lines
    on the character grid, as dark lines through the cell centres.
    """
    size = get_active_params()["CELL_SIZE_PX"]
    half = size // 2

    for face in faces:
        sides = border_cells(face.top, face.left, face.bottom, face.right)
        for cells in sides.values():
            (r1, c1), (r2, c2) = cells[0], cells[-1]
            cv2.line(
                image,
                (c1 * size + half, r1 * size + half),
                (c2 * size + half, r2 * size + half),
                COLOR_BORDER,
                thickness
            )
    return image
