"""
This module provides:
    - compass headings on the character grid (N, E, S, W)
    - turn_right / turn_left / reverse
    - step (move one cell along a heading)
    - classify_turn
"""

from typing import Tuple


NORTH = "N"
EAST = "E"
SOUTH = "S"
WEST = "W"

# clockwise order
HEADINGS = [NORTH, EAST, SOUTH, WEST]

# (d_row, d_col); rows grow downward
HEADING_DELTAS = {
    NORTH: (-1, 0),
    EAST: (0, 1),
    SOUTH: (1, 0),
    WEST: (0, -1),
}


# ----------------------------------------------------------------------
#  TURNS
# ----------------------------------------------------------------------

def turn_right(heading: str) -> str:
    return HEADINGS[(HEADINGS.index(heading) + 1) % 4]


def turn_left(heading: str) -> str:
    return HEADINGS[(HEADINGS.index(heading) - 1) % 4]


def reverse(heading: str) -> str:
    return HEADINGS[(HEADINGS.index(heading) + 2) % 4]


def classify_turn(old: str, new: str) -> str:
    """
    Returns "right", "left", "straight" or "back" for a change of heading.
    """
    if new == old:
        return "straight"
    if new == turn_right(old):
        return "right"
    if new == turn_left(old):
        return "left"
    return "back"


# ----------------------------------------------------------------------
#  STEPPING
# ----------------------------------------------------------------------

def step(row: int, col: int, heading: str, n: int = 1) -> Tuple[int, int]:
    """
    Move n cells from (row, col) along heading.
    """
    dr, dc = HEADING_DELTAS[heading]
    return row + n * dr, col + n * dc
