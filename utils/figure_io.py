"""
File I/O utilities for the figure decomposition pipeline.

This module provides:
    • load_figures(path_pattern)
    • figure_name(filename)
    • ensure_output_dir(path)
    • save_image(path, image)
    • save_text(path, text)

Handles all filesystem interaction in a consistent, testable way.
"""

import os
import glob
from typing import List, Tuple

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def figure_name(filename: str) -> str:
    """
    Base name of a figure file without directory or extension.

    Example:
        'figures/t_junction.txt' → 't_junction'
    """
    return os.path.splitext(os.path.basename(filename))[0]


# -------------------------------------------------------------------------
#  FIGURE LOADING
# -------------------------------------------------------------------------

def load_figures(path_pattern: str) -> Tuple[List[str], List[str]]:
    """
    Loads all figure files matching the given glob pattern.

    Returns:
        figures: list of figure texts, line breaks preserved
        names:   list of names derived from the filenames

    Example:
        figures, names = load_figures('figures/*.txt')
    """

    file_list = sorted(glob.glob(path_pattern))
    figures = []
    names = []

    for fname in file_list:
        # newline="" keeps "\r\n" figures intact
        with open(fname, "r", encoding="utf-8", newline="") as fh:
            text = fh.read()
        figures.append(text)
        names.append(figure_name(fname))

    return figures, names


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    cv2.imwrite(path, image)


def save_text(path: str, text: str):
    """
    Save text to disk verbatim, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(text)
