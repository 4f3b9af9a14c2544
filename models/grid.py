from typing import List

import numpy as np


class Grid:
    """
    Rectangular character grid holding one ASCII figure.

    Supports:
      - cell access by (row, col) with out-of-range reads returning blank
      - row extraction as strings
      - remembering the source line-ending convention for re-rendering

    Notes:
      • `cells` is a 2-D numpy array of single characters, made read-only
        on construction.
      • `line_ending` is "\\n" or "\\r\\n"; `trailing_newline` records whether
        the source text ended with a line break.
    """

    def __init__(self, rows: List[str], line_ending: str = "\n",
                 trailing_newline: bool = False, blank: str = " "):
        self.cells: np.ndarray = np.array([list(r) for r in rows], dtype="<U1")
        self.cells.setflags(write=False)

        self.height: int = self.cells.shape[0]
        self.width: int = self.cells.shape[1] if self.height else 0

        self.line_ending: str = line_ending
        self.trailing_newline: bool = trailing_newline
        self.blank: str = blank

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def shape(self):
        return self.height, self.width

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def at(self, row: int, col: int) -> str:
        """
        Character at (row, col); cells outside the grid read as blank.
        """
        if not self.in_bounds(row, col):
            return self.blank
        return str(self.cells[row, col])

    def rows(self) -> List[str]:
        return ["".join(r) for r in self.cells]

    # ------------------------------------------------------------------
    # Text conversion
    # ------------------------------------------------------------------

    def join(self, rows: List[str]) -> str:
        """
        Join rows using this grid's line-ending convention.
        """
        text = self.line_ending.join(rows)
        if self.trailing_newline:
            text += self.line_ending
        return text

    def __str__(self):
        return self.join(self.rows())

    def __repr__(self):
        return f"Grid(height={self.height}, width={self.width})"
