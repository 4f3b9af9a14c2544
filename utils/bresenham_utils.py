"""
Utility wrappers around the pybresenham library.

This module provides:
    • bres_line(x1, y1, x2, y2)
    • border_cells(top, left, bottom, right)

These functions return lists of integer coordinates.
"""

from typing import List, Tuple

import pybresenham as bres


# -----------------------------------------------------------
#   Line drawing wrapper
# -----------------------------------------------------------

def bres_line(x1: int, y1: int, x2: int, y2: int) -> List[Tuple[int, int]]:
    """
    Returns a list of integer (x, y) coordinates forming a Bresenham line,
    both endpoints included.
    """
    return [(int(x), int(y)) for x, y in bres.line(x1, y1, x2, y2)]


# -----------------------------------------------------------
#   Rectangle border on the character grid
# -----------------------------------------------------------

def border_cells(top: int, left: int, bottom: int, right: int):
    """
    Rasterise the four sides of a rectangle on a (row, col) grid.

    Returns:
        dict with "top", "bottom", "left", "right" lists of (row, col),
        each side running corner to corner.
    """
    # pybresenham works in (x, y) = (col, row)
    def side(c1, r1, c2, r2):
        return [(y, x) for x, y in bres_line(c1, r1, c2, r2)]

    return {
        "top": side(left, top, right, top),
        "bottom": side(left, bottom, right, bottom),
        "left": side(left, top, left, bottom),
        "right": side(right, top, right, bottom),
    }
