from typing import List, Optional

from models.grid import Grid
from errors import MalformedFigureError
from config import get_active_params


def load_grid(text: str, pad: Optional[bool] = None) -> Grid:
    """
    Parse an ASCII figure into a rectangular Grid.

      - Splits on line breaks ("\\r\\n" or "\\n"), discarding one trailing
        empty line
      - Rejects empty figures, empty rows and unknown characters
      - Rows of unequal length are right-padded with blanks when padding is
        enabled, and rejected otherwise

    Parameters
    ----------
    text : str
        The figure, optionally ending with a line break.
    pad : bool, optional
        Override the PAD_RAGGED_ROWS parameter of the active mode.

    Returns
    -------
    Grid
        Immutable grid, remembering the source line-ending convention.
    """
    params = get_active_params()
    blank = params["BLANK_CHAR"]
    allowed = params["FIGURE_CHARS"]
    if pad is None:
        pad = params["PAD_RAGGED_ROWS"]

    if not text:
        raise MalformedFigureError("figure is empty")

    line_ending = "\r\n" if "\r\n" in text else "\n"
    rows: List[str] = text.split(line_ending)

    trailing_newline = rows[-1] == ""
    if trailing_newline:
        rows.pop()

    if not any(rows):
        raise MalformedFigureError("figure is empty")

    # ------------------------------
    # Row content checks
    # ------------------------------
    for r, row in enumerate(rows):
        if not row:
            raise MalformedFigureError("empty row inside figure", row=r)
        for c, ch in enumerate(row):
            if ch not in allowed:
                raise MalformedFigureError(f"unexpected character {ch!r}", row=r, col=c)

    # ------------------------------
    # Equal row lengths
    # ------------------------------
    width = max(len(row) for row in rows)
    for r, row in enumerate(rows):
        if len(row) == width:
            continue
        if not pad:
            raise MalformedFigureError(
                f"row has length {len(row)}, expected {width}", row=r
            )
        rows[r] = row.ljust(width, blank)

    return Grid(rows, line_ending=line_ending,
                trailing_newline=trailing_newline, blank=blank)
