"""
Bank account OCR.

The scanner produces three rows of pipes and underscores, each digit a
3x3 glyph:

     _  _     _  _  _  _  _
   | _| _||_||_ |_   ||_||_|
   ||_  _|  | _||_|  ||_| _|   →  123456789
"""

from typing import List

GLYPH_WIDTH = 3
GLYPH_ROWS = 3

DIGIT_GLYPHS = {
    (" _ ", "| |", "|_|"): "0",
    ("   ", "  |", "  |"): "1",
    (" _ ", " _|", "|_ "): "2",
    (" _ ", " _|", " _|"): "3",
    ("   ", "|_|", "  |"): "4",
    (" _ ", "|_ ", " _|"): "5",
    (" _ ", "|_ ", "|_|"): "6",
    (" _ ", "  |", "  |"): "7",
    (" _ ", "|_|", "|_|"): "8",
    (" _ ", "|_|", " _|"): "9",
}


def parse_bank_account(bank_account: str) -> int:
    """
    Returns the account number drawn in `bank_account`.

    Raises ValueError if the text is not three equally long rows of whole
    glyphs, or if a glyph is not a digit.
    """
    rows: List[str] = [line for line in bank_account.split("\n") if line]
    if len(rows) != GLYPH_ROWS:
        raise ValueError(f"expected {GLYPH_ROWS} glyph rows, got {len(rows)}")

    width = len(rows[0])
    if width == 0 or width % GLYPH_WIDTH or any(len(r) != width for r in rows):
        raise ValueError("glyph rows must share a length that is a multiple of 3")

    digits = []
    for i in range(0, width, GLYPH_WIDTH):
        glyph = tuple(r[i:i + GLYPH_WIDTH] for r in rows)
        if glyph not in DIGIT_GLYPHS:
            raise ValueError(f"unrecognised glyph at column {i}: {glyph!r}")
        digits.append(DIGIT_GLYPHS[glyph])

    return int("".join(digits))
