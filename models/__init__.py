"""
Data Models

Defines the core data structures:
- Grid
- Junction
- Segment
- PlanarGraph
- Face
"""

from .grid import Grid
from .junction import Junction
from .segment import Segment, HORIZONTAL, VERTICAL
from .planar_graph import PlanarGraph
from .face import Face

__all__ = ["Grid", "Junction", "Segment", "HORIZONTAL", "VERTICAL", "PlanarGraph", "Face"]
