"""
Exceptions raised by the figure-decomposition pipeline.
"""

from typing import Optional


class MalformedFigureError(ValueError):
    """The figure has no well-defined decomposition into rectangles."""

    def __init__(self, message: str, row: Optional[int] = None, col: Optional[int] = None):
        """
        Args:
            message: description of the structural problem
            row: grid row where the problem was found, if known
            col: grid column where the problem was found, if known
        """
        if row is not None and col is not None:
            message = f"{message} (row {row}, col {col})"
        elif row is not None:
            message = f"{message} (row {row})"
        super().__init__(message)
        self.row = row
        self.col = col
