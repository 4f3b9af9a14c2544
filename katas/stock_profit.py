from typing import Sequence


def get_most_profit_from_stock_quotes(quotes: Sequence[int]) -> int:
    """
    Returns the most profit from daily stock quotes.

    Each day one unit may be bought, and any units held may be sold. Every
    unit is best sold at the highest later price, so a right-to-left scan
    keeps the running maximum and adds (maximum - price) for each day.

    Example:
        [1, 2, 3, 4, 5, 6]  → 15
        [6, 5, 4, 3, 2, 1]  → 0
        [1, 6, 5, 10, 8, 7] → 18
    """
    max_profit = 0
    max_price = 0
    for price in reversed(quotes):
        max_price = max(max_price, price)
        max_profit += max_price - price
    return max_profit
