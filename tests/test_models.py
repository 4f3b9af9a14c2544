"""
Unit tests for models and grid geometry helpers
"""

import pytest

from models.junction import Junction
from models.segment import Segment, HORIZONTAL, VERTICAL
from models.planar_graph import PlanarGraph
from models.face import Face
from utils.geometry import (
    NORTH,
    EAST,
    SOUTH,
    WEST,
    turn_right,
    turn_left,
    reverse,
    classify_turn,
    step,
)
from errors import MalformedFigureError


class TestJunction:
    def test_ordering(self):
        assert sorted([Junction(1, 0), Junction(0, 5), Junction(0, 2)]) == [
            Junction(0, 2), Junction(0, 5), Junction(1, 0)
        ]

    def test_relations(self):
        assert Junction(0, 0).is_left_of(Junction(0, 3))
        assert not Junction(0, 0).is_left_of(Junction(1, 3))
        assert Junction(0, 0).is_above(Junction(4, 0))


class TestSegment:
    def test_interior_cells(self):
        seg = Segment(HORIZONTAL, Junction(2, 1), Junction(2, 4))
        assert seg.length == 2
        assert seg.interior_cells() == [(2, 2), (2, 3)]

    def test_vertical(self):
        seg = Segment(VERTICAL, Junction(0, 3), Junction(3, 3))
        assert seg.interior_cells() == [(1, 3), (2, 3)]
        assert seg.other_end(Junction(0, 3)) == Junction(3, 3)

    def test_direction_enforced(self):
        with pytest.raises(ValueError):
            Segment(HORIZONTAL, Junction(0, 4), Junction(0, 1))
        with pytest.raises(ValueError):
            Segment(VERTICAL, Junction(0, 0), Junction(0, 3))


class TestPlanarGraph:
    def test_duplicate_neighbor_rejected(self):
        a, b, c = Junction(0, 0), Junction(0, 2), Junction(0, 4)
        with pytest.raises(ValueError):
            PlanarGraph([a, b, c], [
                Segment(HORIZONTAL, a, b),
                Segment(HORIZONTAL, a, c),
            ])

    def test_unknown_endpoint_rejected(self):
        with pytest.raises(ValueError):
            PlanarGraph([Junction(0, 0)], [Segment(HORIZONTAL, Junction(0, 0), Junction(0, 2))])


class TestFace:
    def test_corners_and_size(self):
        face = Face(2, 1, 5, 7)
        assert face.corners == (Junction(2, 1), Junction(2, 7), Junction(5, 1), Junction(5, 7))
        assert (face.height, face.width) == (4, 7)

    def test_contains_cell(self):
        face = Face(0, 0, 3, 3)
        assert face.contains_cell(1, 2)
        assert not face.contains_cell(0, 1)
        assert not face.contains_cell(3, 3)

    def test_at_origin(self):
        assert Face(2, 3, 4, 9).at_origin() == Face(0, 0, 2, 6)

    def test_degenerate_rejected(self):
        with pytest.raises(ValueError):
            Face(1, 1, 1, 4)


class TestGeometry:
    def test_turns(self):
        assert turn_right(NORTH) == EAST
        assert turn_right(WEST) == NORTH
        assert turn_left(NORTH) == WEST
        assert reverse(EAST) == WEST

    def test_classify_turn(self):
        assert classify_turn(EAST, SOUTH) == "right"
        assert classify_turn(EAST, NORTH) == "left"
        assert classify_turn(EAST, EAST) == "straight"
        assert classify_turn(EAST, WEST) == "back"

    def test_step(self):
        assert step(2, 2, NORTH) == (1, 2)
        assert step(2, 2, EAST, n=3) == (2, 5)


class TestMalformedFigureError:
    def test_location_in_message(self):
        err = MalformedFigureError("bad", row=1, col=2)
        assert "row 1, col 2" in str(err)
        assert isinstance(err, ValueError)
