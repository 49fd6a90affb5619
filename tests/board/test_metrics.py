from shiftboard.services.board import Adjacency, AssignmentRecord, StaffRow, compute_metrics
from shiftboard.services.board.metrics import calculate_efficiency, round_half_up

from conftest import SLOT_COUNT, SLOT_REVENUE, make_rows, select


def metrics_for(schedule, rows=None):
    return compute_metrics(rows or make_rows(), schedule, SLOT_COUNT, SLOT_REVENUE)


class TestComputeMetrics:

    def test_empty_schedule(self):
        m = metrics_for({})
        assert m.active_staff_ids == frozenset()
        assert m.total_hours == 0
        assert m.total_revenue == 9600
        assert m.efficiency is None

    def test_counts_staffed_rows(self):
        m = metrics_for({
            "S1-9": AssignmentRecord("cashier", confirmed=True),
            "S1-10": AssignmentRecord("cashier", confirmed=False),
            "S3-9": AssignmentRecord("pastry", confirmed=True),
        })
        assert m.active_staff_ids == {"S1", "S3"}
        assert m.unconfirmed_staff_ids == {"S1"}
        assert m.active_staff_count == 2
        assert m.unconfirmed_staff_count == 1
        assert m.total_hours == 3
        assert m.efficiency == 3200

    def test_orphan_work_excluded_from_hours(self):
        m = metrics_for({
            "S1-9": AssignmentRecord("cashier"),
            "S2-9": AssignmentRecord("cashier"),
            "S2-10": AssignmentRecord("pastry", confirmed=True),
        })
        assert m.orphan_staff_ids == {"S2"}
        assert m.orphan_cell_keys == {"S2-9", "S2-10"}
        assert "S2" not in m.active_staff_ids
        assert "S2" not in m.unconfirmed_staff_ids
        assert m.total_hours == 1

    def test_records_for_unknown_staff_ignored(self):
        m = metrics_for({"ghost-1": AssignmentRecord("cashier")})
        assert m.total_hours == 0
        assert m.orphan_staff_ids == frozenset()

    def test_whitespace_name_is_placeholder(self):
        rows = [StaffRow(id="S1", name="   ")]
        m = metrics_for({"S1-0": AssignmentRecord("cashier")}, rows=rows)
        assert m.orphan_staff_ids == {"S1"}
        assert m.total_hours == 0

    def test_unconfirmed_subset_of_active(self):
        m = metrics_for({
            "S1-0": AssignmentRecord("cashier"),
            "S2-0": AssignmentRecord("cashier"),
            "S3-0": AssignmentRecord("cashier", confirmed=True),
        })
        assert m.unconfirmed_staff_ids <= m.active_staff_ids
        assert m.active_staff_ids.isdisjoint(m.orphan_staff_ids)


class TestEfficiency:

    def test_rounds_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.49) == 2

    def test_efficiency(self):
        assert calculate_efficiency(9600, 7) == 1371
        assert calculate_efficiency(9600, 0) is None


class TestBoardMetrics:

    def test_recomputed_on_every_read(self, board):
        assert board.metrics().total_hours == 0
        select(board, ("S1", 1))
        board.assign("cashier")
        assert board.metrics().total_hours == 1
        board.undo()
        assert board.metrics().total_hours == 0

    def test_confirm_scenario(self, board):
        select(board, ("S1", 9), ("S1", 10))
        board.assign("iced-latte")
        assert board.metrics().unconfirmed_staff_ids == {"S1"}

        board.confirm_all()
        m = board.metrics()
        assert m.unconfirmed_staff_ids == frozenset()
        assert m.active_staff_ids == {"S1"}
        assert m.efficiency == 4800


class TestCellView:

    def test_selected_cell_fuses_with_neighbours(self, board):
        select(board, ("S1", 4), ("S1", 5))
        view = board.cell_view("S1", 5)
        assert view.selected is True
        assert view.work_type_id is None
        assert view.fusion_edges == {Adjacency.LEFT}

    def test_unconfirmed_row_needs_confirmation(self, board):
        select(board, ("S1", 4))
        board.assign("cashier")
        view = board.cell_view("S1", 4)
        assert view.work_type_id == "cashier"
        assert view.needs_confirmation is True
        assert board.cell_view("S1", 5).needs_confirmation is False

    def test_orphan_cell(self, board, person):
        board.resolve_placeholder("S2", person)
        select(board, ("S2", 4))
        board.assign("cashier")
        board.release_row("S2")

        view = board.cell_view("S2", 4)
        assert view.orphan is True
        assert view.needs_confirmation is True
        assert view.selected is False
