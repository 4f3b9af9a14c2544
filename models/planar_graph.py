from typing import Dict, Iterable, List, Optional

from models.junction import Junction
from models.segment import Segment
from utils.geometry import NORTH, EAST, SOUTH, WEST


class PlanarGraph:
    """
    Skeleton of a figure: junctions as nodes, segments as edges.

    Each junction has at most one neighbour per compass heading, since
    segments only run along rows and columns. The graph is built once by
    the junction detector and only read afterwards.
    """

    def __init__(self, junctions: Iterable[Junction], segments: Iterable[Segment]):
        self.junctions: List[Junction] = sorted(junctions)
        self.segments: List[Segment] = list(segments)

        self._neighbors: Dict[Junction, Dict[str, Junction]] = {
            j: {} for j in self.junctions
        }
        for seg in self.segments:
            if seg.is_horizontal:
                self._link(seg.start, EAST, seg.end)
                self._link(seg.end, WEST, seg.start)
            else:
                self._link(seg.start, SOUTH, seg.end)
                self._link(seg.end, NORTH, seg.start)

    def _link(self, a: Junction, heading: str, b: Junction):
        if a not in self._neighbors:
            raise ValueError(f"segment endpoint {a} is not a junction of this graph")
        if heading in self._neighbors[a]:
            raise ValueError(f"{a} already has a {heading} neighbour")
        self._neighbors[a][heading] = b

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def neighbor(self, j: Junction, heading: str) -> Optional[Junction]:
        return self._neighbors[j].get(heading)

    def headings(self, j: Junction) -> List[str]:
        return list(self._neighbors[j])

    def degree(self, j: Junction) -> int:
        return len(self._neighbors[j])

    @property
    def horizontal_segments(self) -> List[Segment]:
        return [s for s in self.segments if s.is_horizontal]

    @property
    def vertical_segments(self) -> List[Segment]:
        return [s for s in self.segments if not s.is_horizontal]

    def __repr__(self):
        return f"PlanarGraph(junctions={len(self.junctions)}, segments={len(self.segments)})"
