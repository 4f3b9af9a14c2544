"""
Detectors Package

Contains the main detection modules used in the decomposition pipeline:
- Grid loading
- Junction detection & segment tracing
- Face extraction & partition check
"""

from .grid_loader import load_grid
from .junction_detector import (
    detect_junctions,
    trace_segments,
    validate_junctions,
    build_planar_graph,
)
from .face_extractor import (
    extract_faces,
    interior_mask,
    check_partition,
)

__all__ = [
    "load_grid",
    "detect_junctions",
    "trace_segments",
    "validate_junctions",
    "build_planar_graph",
    "extract_faces",
    "interior_mask",
    "check_partition",
]
