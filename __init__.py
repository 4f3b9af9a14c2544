"""
Figure Decomposition Package

This package breaks ASCII figures of axis-aligned rectangles into their
elementary rectangles, including:

- Grid loading
- Junction detection & segment tracing
- Face extraction
- ASCII and image rendering

It also carries a set of small companion katas (bank OCR, word wrap,
poker hands, snaking word search, permutations, stock profit, URL
shortener).
"""
__all__ = [
    "config",
    "errors",
    "main",
    "detectors",
    "katas",
    "models",
    "utils",
    "visualization",
]
