from dataclasses import dataclass
from typing import List, Tuple

from models.junction import Junction


HORIZONTAL = "h"
VERTICAL = "v"


@dataclass(frozen=True)
class Segment:
    """
    A straight border run between two junctions.

    Supports:
      - orientation ("h" along a row, "v" along a column)
      - start/end junctions (start is always the upper or left one)
      - length and the interior cells covered by the run
    """

    orientation: str
    start: Junction
    end: Junction

    def __post_init__(self):
        if self.orientation == HORIZONTAL:
            if not self.start.is_left_of(self.end):
                raise ValueError(f"horizontal segment must run left to right: {self.start} -> {self.end}")
        elif self.orientation == VERTICAL:
            if not self.start.is_above(self.end):
                raise ValueError(f"vertical segment must run top to bottom: {self.start} -> {self.end}")
        else:
            raise ValueError(f"unknown orientation {self.orientation!r}")

    @property
    def is_horizontal(self) -> bool:
        return self.orientation == HORIZONTAL

    @property
    def length(self) -> int:
        """Number of cells between the endpoints, endpoints excluded."""
        if self.is_horizontal:
            return self.end.col - self.start.col - 1
        return self.end.row - self.start.row - 1

    def interior_cells(self) -> List[Tuple[int, int]]:
        """
        Cells strictly between the endpoints, as (row, col).
        """
        if self.is_horizontal:
            r = self.start.row
            return [(r, c) for c in range(self.start.col + 1, self.end.col)]
        c = self.start.col
        return [(r, c) for r in range(self.start.row + 1, self.end.row)]

    def other_end(self, j: Junction) -> Junction:
        if j == self.start:
            return self.end
        if j == self.end:
            return self.start
        raise ValueError(f"{j} is not an endpoint of {self}")

    def __repr__(self):
        return f"Segment({self.orientation}, {self.start} -> {self.end})"
