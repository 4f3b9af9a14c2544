"""
Face extractor for PlanarGraph objects.

This module provides:
    • extract_faces(graph, grid)
    • interior_mask(grid)
    • check_partition(faces, grid)
"""

from typing import List, Optional

import cv2
import numpy as np

from models.grid import Grid
from models.junction import Junction
from models.planar_graph import PlanarGraph
from models.face import Face
from utils.geometry import EAST, SOUTH, turn_right, turn_left, reverse, classify_turn
from errors import MalformedFigureError
from config import get_active_params


# ========================================================================
# 1. BOUNDARY WALK (one face per top-left corner)
# ========================================================================

def _straight(heading):
    return heading


# preferred order keeps the face on the right-hand side of the walk
_TURN_PREFERENCE = (turn_right, _straight, turn_left, reverse)


def _walk_face(graph: PlanarGraph, start: Junction) -> Optional[Face]:
    """
    Walk the boundary of the face lying below-right of `start`, leaving it
    heading east and always taking the rightmost available segment.

    A walk that closes with four right turns and no left turns bounds an
    elementary rectangle. Any other closed walk is the outer boundary of
    the figure (or a non-rectangular region, caught by check_partition)
    and yields None.
    """
    max_steps = 2 * len(graph.segments) + 4

    heading = EAST
    node = graph.neighbor(start, EAST)
    right_turns: List[Junction] = []
    other_turns = 0

    for _ in range(max_steps):
        # reverse always succeeds: we arrived along that segment
        for turn in _TURN_PREFERENCE:
            new_heading = turn(heading)
            if graph.neighbor(node, new_heading) is not None:
                break

        match classify_turn(heading, new_heading):
            case "right":
                right_turns.append(node)
            case "left" | "back":
                other_turns += 1

        if node == start and new_heading == EAST:
            break

        heading = new_heading
        node = graph.neighbor(node, heading)
    else:
        raise MalformedFigureError("face boundary does not close", row=start.row, col=start.col)

    if other_turns or len(right_turns) != 4:
        return None

    # turns happen at top-right, bottom-right, bottom-left, then start
    bottom_right = right_turns[1]
    return Face(start.row, start.col, bottom_right.row, bottom_right.col)


def extract_faces(graph: PlanarGraph, grid: Grid) -> List[Face]:
    """
    Enumerate the elementary rectangles of the figure.

    Every junction with an east and a south segment is the top-left corner
    of at most one face; its boundary walk either closes into a rectangle
    or traces the outside of the figure. The result is then checked to be
    a partition of the figure interior.

    Returns:
        List[Face] sorted by (top, left). Callers should treat it as a set.
    """
    faces = set()

    for j in graph.junctions:
        if graph.neighbor(j, EAST) is None or graph.neighbor(j, SOUTH) is None:
            continue
        face = _walk_face(graph, j)
        if face is not None:
            faces.add(face)

    result = sorted(faces)
    check_partition(result, grid)
    return result


# ========================================================================
# 2. PARTITION CHECK
# ========================================================================

def interior_mask(grid: Grid) -> np.ndarray:
    """
    Boolean mask of the blank cells enclosed by the figure.

    The grid is framed by one blank cell on every side and the outside
    is flood-filled with 4-connectivity; blank cells left unfilled are
    interior.
    """
    params = get_active_params()
    blank = params["BLANK_CHAR"]

    img = np.where(grid.cells == blank, 0, 255).astype(np.uint8)
    img = np.pad(img, 1, mode="constant", constant_values=0)

    cv2.floodFill(img, None, (0, 0), 128, flags=4)

    return img[1:-1, 1:-1] == 0


def check_partition(faces: List[Face], grid: Grid):
    """
    Verifies that the faces tile the interior of the figure:

        - no face interior contains border characters
        - no interior cell is covered twice
        - every interior cell is covered once

    Raises MalformedFigureError at the first offending cell.
    """
    params = get_active_params()
    blank = params["BLANK_CHAR"]

    counts = np.zeros(grid.shape, dtype=np.int32)

    for face in faces:
        rs, cs = face.interior_slices()
        foreign = np.argwhere(grid.cells[rs, cs] != blank)
        if len(foreign):
            r, c = (int(v) for v in foreign[0])
            raise MalformedFigureError(
                f"{face} encloses a detached figure",
                row=face.top + 1 + r, col=face.left + 1 + c,
            )
        counts[rs, cs] += 1

    overlap = np.argwhere(counts > 1)
    if len(overlap):
        r, c = (int(v) for v in overlap[0])
        raise MalformedFigureError("faces overlap", row=r, col=c)

    uncovered = np.argwhere(interior_mask(grid) & (counts == 0))
    if len(uncovered):
        r, c = (int(v) for v in uncovered[0])
        raise MalformedFigureError("enclosed region is not a rectangle", row=r, col=c)
