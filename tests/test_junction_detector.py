"""
Tests for junction detection, segment tracing and graph assembly
"""

import pytest

from detectors.grid_loader import load_grid
from detectors.junction_detector import (
    detect_junctions,
    trace_segments,
    build_planar_graph,
)
from models.junction import Junction
from models.segment import Segment, HORIZONTAL, VERTICAL
from utils.geometry import NORTH, EAST, SOUTH, WEST
from errors import MalformedFigureError
from sample_figures import HAT, SINGLE, T_JUNCTION


class TestDetectJunctions:
    def test_single_rectangle(self):
        junctions = detect_junctions(load_grid(SINGLE))
        assert junctions == [Junction(0, 0), Junction(0, 5), Junction(3, 0), Junction(3, 5)]

    def test_reading_order(self):
        junctions = detect_junctions(load_grid(HAT))
        assert junctions == sorted(junctions)
        assert junctions[0] == Junction(0, 3)


class TestTraceSegments:
    def test_single_rectangle(self):
        grid = load_grid(SINGLE)
        segments = trace_segments(grid, detect_junctions(grid))
        assert set(segments) == {
            Segment(HORIZONTAL, Junction(0, 0), Junction(0, 5)),
            Segment(HORIZONTAL, Junction(3, 0), Junction(3, 5)),
            Segment(VERTICAL, Junction(0, 0), Junction(3, 0)),
            Segment(VERTICAL, Junction(0, 5), Junction(3, 5)),
        }

    def test_segments_stop_at_junctions(self):
        grid = load_grid(HAT)
        segments = trace_segments(grid, detect_junctions(grid))
        middle_row = sorted(
            (s.start.col, s.end.col) for s in segments if s.is_horizontal and s.start.row == 2
        )
        assert middle_row == [(0, 3), (3, 9), (9, 14)]

    def test_adjacent_corners_form_segment(self):
        grid = load_grid("++\n++")
        segments = trace_segments(grid, detect_junctions(grid))
        assert len(segments) == 4
        assert all(s.length == 0 for s in segments)

    def test_dangling_vertical_segment(self):
        grid = load_grid("+--+\n|  |\n+-- \n")
        with pytest.raises(MalformedFigureError, match="vertical") as info:
            trace_segments(grid, detect_junctions(grid))
        assert (info.value.row, info.value.col) == (1, 3)

    def test_dangling_horizontal_segment(self):
        grid = load_grid("+--+--\n|  |  \n+--+  \n")
        with pytest.raises(MalformedFigureError, match="horizontal"):
            trace_segments(grid, detect_junctions(grid))

    def test_stray_border_character(self):
        grid = load_grid("+--+ -\n|  |  \n+--+  \n")
        with pytest.raises(MalformedFigureError, match="not part of") as info:
            trace_segments(grid, detect_junctions(grid))
        assert (info.value.row, info.value.col) == (0, 5)


class TestBuildPlanarGraph:
    def test_neighbors(self):
        graph = build_planar_graph(load_grid(T_JUNCTION))
        t = Junction(2, 4)
        assert graph.neighbor(t, WEST) == Junction(2, 0)
        assert graph.neighbor(t, EAST) == Junction(2, 8)
        assert graph.neighbor(t, NORTH) == Junction(0, 4)
        assert graph.neighbor(t, SOUTH) is None
        assert graph.degree(t) == 3

    def test_counts(self):
        graph = build_planar_graph(load_grid(SINGLE))
        assert len(graph.junctions) == 4
        assert len(graph.horizontal_segments) == 2
        assert len(graph.vertical_segments) == 2

    def test_collinear_junction_rejected_in_strict_mode(self):
        with pytest.raises(MalformedFigureError, match="no vertical segment") as info:
            build_planar_graph(load_grid("+--+--+\n|     |\n+-----+\n"))
        assert (info.value.row, info.value.col) == (0, 3)

    def test_collinear_junction_accepted_in_lenient_mode(self, lenient_mode):
        graph = build_planar_graph(load_grid("+--+--+\n|     |\n+-----+\n"))
        assert set(graph.headings(Junction(0, 3))) == {EAST, WEST}

    def test_isolated_junction(self):
        with pytest.raises(MalformedFigureError, match="isolated"):
            build_planar_graph(load_grid("+--+ \n|  | \n+--+ \n    +\n"))
