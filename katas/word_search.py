from typing import List

import numpy as np

from utils.geometry import HEADINGS, step


def find_string_in_snaking_puzzle(puzzle: List[str], search_str: str) -> bool:
    """
    True if `search_str` can be traced through `puzzle` moving up, down,
    left or right, using each cell at most once.

    Depth-first search with an explicit stack. Each stack entry is
    (row, col, index, next heading to try); the visited mask is shared and
    cleared again on backtrack.
    """
    rows = len(puzzle)
    cols = len(puzzle[0]) if rows else 0
    if not search_str:
        return True

    visited = np.zeros((rows, cols), dtype=bool)

    for r0 in range(rows):
        for c0 in range(cols):
            if puzzle[r0][c0] != search_str[0]:
                continue

            visited[r0, c0] = True
            stack = [(r0, c0, 0, 0)]

            while stack:
                r, c, idx, h = stack[-1]
                if idx == len(search_str) - 1:
                    return True
                if h == len(HEADINGS):
                    visited[r, c] = False
                    stack.pop()
                    continue

                stack[-1] = (r, c, idx, h + 1)
                nr, nc = step(r, c, HEADINGS[h])
                if not (0 <= nr < rows and 0 <= nc < cols) or visited[nr, nc]:
                    continue
                if puzzle[nr][nc] != search_str[idx + 1]:
                    continue
                visited[nr, nc] = True
                stack.append((nr, nc, idx + 1, 0))

    return False
