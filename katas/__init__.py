"""
Katas Package

Small, independent exercises kept alongside the figure decomposition:
- Bank account OCR
- Greedy word wrap
- Poker hand ranking
- Snaking word search
- Permutations
- Stock profit
- URL shortener
"""

from .bank_ocr import parse_bank_account
from .text_wrap import wrap_text
from .poker import PokerRank, get_poker_hand_rank
from .word_search import find_string_in_snaking_puzzle
from .permutations import get_permutations
from .stock_profit import get_most_profit_from_stock_quotes
from .url_shortener import UrlShortener

__all__ = [
    "parse_bank_account",
    "wrap_text",
    "PokerRank",
    "get_poker_hand_rank",
    "find_string_in_snaking_puzzle",
    "get_permutations",
    "get_most_profit_from_stock_quotes",
    "UrlShortener",
]
