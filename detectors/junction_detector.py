from typing import List, Optional

import numpy as np

from models.grid import Grid
from models.junction import Junction
from models.segment import Segment, HORIZONTAL, VERTICAL
from models.planar_graph import PlanarGraph
from utils.geometry import NORTH, EAST, SOUTH, WEST, step
from errors import MalformedFigureError
from config import get_active_params


# ----------------------------------------------------------------------
# 1. JUNCTION DETECTION
# ----------------------------------------------------------------------

def detect_junctions(grid: Grid) -> List[Junction]:
    """
    Every corner character of the grid becomes a Junction, in reading order.
    """
    params = get_active_params()
    hits = np.argwhere(grid.cells == params["CORNER_CHAR"])
    return [Junction(int(r), int(c)) for r, c in hits]


# ----------------------------------------------------------------------
# 2. SEGMENT TRACING
# ----------------------------------------------------------------------

def _trace_from(grid: Grid, j: Junction, heading: str, run_char: str) -> Optional[Junction]:
    """
    Follow run_char from j along heading (EAST or SOUTH) until the next
    corner character.

    Returns the junction reached, or None when no segment leaves j in
    that direction. A run that stops on anything but a corner is a
    dangling segment.
    """
    corner = get_active_params()["CORNER_CHAR"]

    r, c = step(j.row, j.col, heading)
    first = grid.at(r, c)
    if first == corner:
        return Junction(r, c)
    if first != run_char:
        return None

    while grid.at(r, c) == run_char:
        r, c = step(r, c, heading)

    if grid.at(r, c) == corner:
        return Junction(r, c)

    # back up onto the last border character of the run
    end_r, end_c = step(r, c, heading, n=-1)
    raise MalformedFigureError(
        f"{'horizontal' if heading == EAST else 'vertical'} segment from {j} "
        f"ends without a '{corner}'",
        row=end_r, col=end_c,
    )


def trace_segments(grid: Grid, junctions: List[Junction]) -> List[Segment]:
    """
    Trace the horizontal and vertical segments leaving every junction.

      - horizontal: scan right through '-' up to the next '+'
      - vertical:   scan down through '|' up to the next '+'
      - every '-' and '|' cell must end up inside a traced segment

    Raises MalformedFigureError on dangling runs or stray border characters.
    """
    params = get_active_params()
    h_char = params["HORIZONTAL_CHAR"]
    v_char = params["VERTICAL_CHAR"]

    segments: List[Segment] = []
    covered_h = np.zeros(grid.shape, dtype=bool)
    covered_v = np.zeros(grid.shape, dtype=bool)

    for j in junctions:
        east = _trace_from(grid, j, EAST, h_char)
        if east is not None:
            seg = Segment(HORIZONTAL, j, east)
            segments.append(seg)
            covered_h[j.row, j.col + 1:east.col] = True

        south = _trace_from(grid, j, SOUTH, v_char)
        if south is not None:
            seg = Segment(VERTICAL, j, south)
            segments.append(seg)
            covered_v[j.row + 1:south.row, j.col] = True

    # ------------------------------
    # stray border characters
    # ------------------------------
    for char, covered, kind in ((h_char, covered_h, "horizontal"),
                                (v_char, covered_v, "vertical")):
        stray = np.argwhere((grid.cells == char) & ~covered)
        if len(stray):
            r, c = (int(v) for v in stray[0])
            raise MalformedFigureError(
                f"'{char}' is not part of any {kind} segment", row=r, col=c
            )

    return segments


# ----------------------------------------------------------------------
# 3. GRAPH ASSEMBLY & JUNCTION VALIDATION
# ----------------------------------------------------------------------

def validate_junctions(graph: PlanarGraph):
    """
    Checks every junction of the graph:

        - at least one horizontal and one vertical segment (corner,
          T or cross junction)
        - in lenient mode a '+' with only collinear segments is accepted
          as long as it has two of them

    Raises MalformedFigureError for the first junction that fails.
    """
    params = get_active_params()
    allow_collinear = params["ALLOW_COLLINEAR_JUNCTIONS"]

    for j in graph.junctions:
        headings = graph.headings(j)
        has_h = any(hd in (EAST, WEST) for hd in headings)
        has_v = any(hd in (NORTH, SOUTH) for hd in headings)

        if has_h and has_v:
            continue
        if allow_collinear and len(headings) == 2:
            continue

        if not headings:
            problem = "isolated junction"
        elif has_h:
            problem = "junction has no vertical segment"
        else:
            problem = "junction has no horizontal segment"
        raise MalformedFigureError(problem, row=j.row, col=j.col)


def build_planar_graph(grid: Grid) -> PlanarGraph:
    """
    Junctions → segments → PlanarGraph, validated.

    Returns
    -------
    PlanarGraph
        Junction set plus typed segments.
    """
    junctions = detect_junctions(grid)
    segments = trace_segments(grid, junctions)
    graph = PlanarGraph(junctions, segments)
    validate_junctions(graph)
    return graph
