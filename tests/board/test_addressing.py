import pytest

from shiftboard.services.board.addressing import (
    adjacency,
    cell_key,
    fusion_edges,
    parse_cell_key,
    slot_label,
)
from shiftboard.services.board.types import Adjacency


ROSTER = ["S1", "S2", "new-1"]


class TestCellKey:

    def test_round_trip(self):
        assert parse_cell_key(cell_key("S1", 9)) == ("S1", 9)

    def test_staff_id_with_separator_round_trips(self):
        key = cell_key("new-12", 3)
        assert key == "new-12-3"
        assert parse_cell_key(key) == ("new-12", 3)

    def test_distinct_inputs_give_distinct_keys(self):
        keys = {cell_key(s, t) for s in ("a", "a-1", "a-10") for t in range(12)}
        assert len(keys) == 36

    @pytest.mark.parametrize("bad", ["S1", "S1-", "S1-x", "-"])
    def test_malformed_key_rejected(self, bad):
        with pytest.raises(ValueError):
            parse_cell_key(bad)


class TestAdjacency:

    def test_horizontal(self):
        assert adjacency("S1-5", "S1-4", ROSTER) == Adjacency.LEFT
        assert adjacency("S1-5", "S1-6", ROSTER) == Adjacency.RIGHT

    def test_vertical_follows_roster_order(self):
        assert adjacency("S2-5", "S1-5", ROSTER) == Adjacency.TOP
        assert adjacency("S2-5", "new-1-5", ROSTER) == Adjacency.BOTTOM

    def test_not_adjacent(self):
        assert adjacency("S1-5", "S1-7", ROSTER) == Adjacency.NONE
        assert adjacency("S1-5", "S2-6", ROSTER) == Adjacency.NONE
        assert adjacency("S1-5", "new-1-5", ROSTER) == Adjacency.NONE

    def test_unknown_staff_not_adjacent(self):
        assert adjacency("S1-5", "ghost-5", ROSTER) == Adjacency.NONE


class TestFusionEdges:

    def test_unselected_cell_has_no_edges(self):
        assert fusion_edges("S1-5", {"S1-4"}, ROSTER) == frozenset()

    def test_block_of_cells(self):
        selected = {"S1-4", "S1-5", "S2-5"}
        assert fusion_edges("S1-5", selected, ROSTER) == {Adjacency.LEFT, Adjacency.BOTTOM}
        assert fusion_edges("S2-5", selected, ROSTER) == {Adjacency.TOP}

    def test_first_slot_has_no_left_neighbour(self):
        assert fusion_edges("S1-0", {"S1-0", "S1-1"}, ROSTER) == {Adjacency.RIGHT}


def test_slot_label():
    assert slot_label(0) == "0~1"
    assert slot_label(23) == "23~24"


def test_negative_slot_has_no_key():
    with pytest.raises(ValueError):
        cell_key("a", -1)
    assert parse_cell_key(cell_key("a-", 1)) == ("a-", 1)
