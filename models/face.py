from dataclasses import dataclass
from typing import Tuple

from models.junction import Junction


@dataclass(frozen=True, order=True)
class Face:
    """
    One elementary rectangle of a figure decomposition.

    Handles:
      • the four corner junctions
      • outer size (borders included) and interior cell range
      • translation, used when comparing a rendered face with its source
    """

    top: int
    left: int
    bottom: int
    right: int

    def __post_init__(self):
        if self.bottom <= self.top or self.right <= self.left:
            raise ValueError(f"degenerate face {self.top, self.left, self.bottom, self.right}")

    # -------------------------------------------------------------
    #   Corners
    # -------------------------------------------------------------

    @property
    def top_left(self) -> Junction:
        return Junction(self.top, self.left)

    @property
    def top_right(self) -> Junction:
        return Junction(self.top, self.right)

    @property
    def bottom_left(self) -> Junction:
        return Junction(self.bottom, self.left)

    @property
    def bottom_right(self) -> Junction:
        return Junction(self.bottom, self.right)

    @property
    def corners(self) -> Tuple[Junction, Junction, Junction, Junction]:
        return self.top_left, self.top_right, self.bottom_left, self.bottom_right

    # -------------------------------------------------------------
    #   Size
    # -------------------------------------------------------------

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    def interior_slices(self) -> Tuple[slice, slice]:
        """
        numpy index for the cells strictly inside the border.
        """
        return slice(self.top + 1, self.bottom), slice(self.left + 1, self.right)

    def contains_cell(self, row: int, col: int) -> bool:
        """True if (row, col) lies strictly inside the border."""
        return self.top < row < self.bottom and self.left < col < self.right

    def translated(self, d_row: int, d_col: int) -> "Face":
        return Face(self.top + d_row, self.left + d_col,
                    self.bottom + d_row, self.right + d_col)

    def at_origin(self) -> "Face":
        return self.translated(-self.top, -self.left)

    def __repr__(self):
        return f"Face(({self.top}, {self.left}) -> ({self.bottom}, {self.right}))"
