"""
Configuration file for the figure-decomposition system.

Contains both STRICT and LENIENT parameter sets.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to False to accept ragged rows and collinear '+' junctions
STRICT_MODE = True


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

FIGURE_PATTERN = "figures/*.txt"
OUTPUT_FOLDER = "output"


# ===============================================================
# STRICT-MODE PARAMETERS
# ===============================================================

STRICT = {
    "PAD_RAGGED_ROWS": False,
    "ALLOW_COLLINEAR_JUNCTIONS": False,
}


# ===============================================================
# LENIENT-MODE PARAMETERS
# ===============================================================

LENIENT = {
    "PAD_RAGGED_ROWS": True,
    "ALLOW_COLLINEAR_JUNCTIONS": True,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

CORNER_CHAR = "+"
HORIZONTAL_CHAR = "-"
VERTICAL_CHAR = "|"
BLANK_CHAR = " "

CELL_SIZE_PX = 12                  # pixels per character cell in images


# ---------------------------------------------------------------
# VISUALIZATION COLORS (BGR)
# ---------------------------------------------------------------

COLOR_BACKGROUND = (255, 255, 255)
COLOR_BORDER = (0, 0, 0)

FACE_PALETTE = [
    (230, 216, 173),  # light blue
    (144, 238, 144),  # light green
    (193, 182, 255),  # pink
    (170, 232, 238),  # pale yellow
    (238, 130, 238),  # violet
    (196, 228, 255),  # bisque
]


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by the loader and detectors so they only import one dictionary.
    """

    base = {
        "CORNER_CHAR": CORNER_CHAR,
        "HORIZONTAL_CHAR": HORIZONTAL_CHAR,
        "VERTICAL_CHAR": VERTICAL_CHAR,
        "BLANK_CHAR": BLANK_CHAR,
        "CELL_SIZE_PX": CELL_SIZE_PX,
    }

    # Merge in strict or lenient mode values
    if STRICT_MODE:
        base.update(STRICT)
    else:
        base.update(LENIENT)

    # Every character a figure may legally contain
    base["FIGURE_CHARS"] = frozenset(
        (CORNER_CHAR, HORIZONTAL_CHAR, VERTICAL_CHAR, BLANK_CHAR)
    )

    return base
