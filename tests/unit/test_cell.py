"""
Unit tests for Cell class.

Tests content generation rules, visibility transitions, and observation
conversion.
"""
import pytest
from minefield import Cell, ContractViolation, EMPTY, MINE, Visibility


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_empty(self) -> None:
        """New cell should have no mine and no count."""
        cell = Cell(2, 3)
        assert cell.content == EMPTY
        assert cell.is_empty is True
        assert cell.is_mine is False

    def test_default_cell_is_closed(self) -> None:
        """New cell should be closed by default."""
        cell = Cell(2, 3)
        assert cell.visibility == Visibility.CLOSED
        assert cell.is_closed is True

    def test_cell_keeps_position(self) -> None:
        """Cell should report the position it was created at."""
        cell = Cell(2, 3)
        assert cell.position == (2, 3)


# ============================================================================
# Cell Content Tests
# ============================================================================

class TestCellContent:
    """Test content changes during generation."""

    def test_place_mine(self, closed_cell: Cell) -> None:
        """Placing a mine should set MINE content."""
        closed_cell.place_mine()
        assert closed_cell.content == MINE
        assert closed_cell.is_mine is True

    def test_place_mine_twice_raises(self, mine_cell: Cell) -> None:
        """A cell cannot receive a second mine."""
        with pytest.raises(ContractViolation):
            mine_cell.place_mine()

    @pytest.mark.parametrize("steps", range(1, 9))
    def test_increment_steps_count(self, steps: int) -> None:
        """Each increment should add one to the count."""
        cell = Cell(0, 0)
        for _ in range(steps):
            cell.increment_count()
        assert cell.content == steps

    def test_increment_past_eight_raises(self, closed_cell: Cell) -> None:
        """Counts stop at 8."""
        for _ in range(8):
            closed_cell.increment_count()
        with pytest.raises(ContractViolation, match="cannot exceed 8"):
            closed_cell.increment_count()

    def test_increment_mine_raises(self, mine_cell: Cell) -> None:
        """A mine has no count to increment."""
        with pytest.raises(ContractViolation, match="mine cell"):
            mine_cell.increment_count()

    def test_sealed_cell_rejects_content_changes(
        self, closed_cell: Cell
    ) -> None:
        """After sealing, content is fixed."""
        closed_cell.seal()
        with pytest.raises(ContractViolation):
            closed_cell.increment_count()
        with pytest.raises(ContractViolation):
            closed_cell.place_mine()
        assert closed_cell.content == EMPTY


# ============================================================================
# Cell Open Tests
# ============================================================================

class TestCellOpen:
    """Test cell open behavior."""

    def test_open_changes_visibility(self, closed_cell: Cell) -> None:
        """Opening a closed cell should make it open."""
        closed_cell.open()
        assert closed_cell.is_open is True

    def test_open_already_open_raises(self, closed_cell: Cell) -> None:
        """Opening an open cell is a contract violation."""
        closed_cell.open()
        with pytest.raises(ContractViolation, match="already open"):
            closed_cell.open()

    def test_flagged_cell_can_be_opened(self, closed_cell: Cell) -> None:
        """Flagged cells are opened by cascades and the final reveal."""
        closed_cell.toggle_flag()
        closed_cell.open()
        assert closed_cell.is_open is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_closed_cell_returns_true(self, closed_cell: Cell) -> None:
        """Flagging a closed cell should report it flagged."""
        assert closed_cell.toggle_flag() is True
        assert closed_cell.visibility == Visibility.FLAGGED

    def test_unflag_returns_to_closed(self, closed_cell: Cell) -> None:
        """Toggling twice should return the cell to closed."""
        closed_cell.toggle_flag()
        assert closed_cell.toggle_flag() is False
        assert closed_cell.is_closed is True

    def test_flag_open_cell_raises(self, closed_cell: Cell) -> None:
        """Cannot flag an open cell."""
        closed_cell.open()
        with pytest.raises(ContractViolation):
            closed_cell.toggle_flag()

    def test_flag_does_not_touch_content(self, mine_cell: Cell) -> None:
        """A flagged mine is still a mine."""
        mine_cell.toggle_flag()
        mine_cell.toggle_flag()
        mine_cell.toggle_flag()
        assert mine_cell.is_mine is True
        assert mine_cell.content == MINE


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_closed_cell_observation_is_negative_one(
        self, closed_cell: Cell
    ) -> None:
        assert closed_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, closed_cell: Cell
    ) -> None:
        closed_cell.toggle_flag()
        assert closed_cell.to_observation() == -2

    def test_closed_mine_observation_hides_mine(self, mine_cell: Cell) -> None:
        """A closed mine looks like any other closed cell."""
        assert mine_cell.to_observation() == -1

    @pytest.mark.parametrize("count", range(1, 9))
    def test_open_cell_observation_matches_count(self, count: int) -> None:
        """Open cell returns its adjacent mine count."""
        cell = Cell(0, 0)
        for _ in range(count):
            cell.increment_count()
        cell.open()
        assert cell.to_observation() == count

    def test_open_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        mine_cell.open()
        assert mine_cell.to_observation() == 9
