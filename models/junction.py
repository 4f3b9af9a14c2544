from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, order=True)
class Junction:
    """
    A '+' cell of the figure, where rectangle borders meet.

    Ordered by (row, col), so sorting junctions gives reading order.
    """

    row: int
    col: int

    @property
    def coords(self) -> Tuple[int, int]:
        return self.row, self.col

    def is_left_of(self, other: "Junction") -> bool:
        return self.row == other.row and self.col < other.col

    def is_above(self, other: "Junction") -> bool:
        return self.col == other.col and self.row < other.row

    def __repr__(self):
        return f"Junction({self.row}, {self.col})"
