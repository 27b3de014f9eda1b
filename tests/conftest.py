"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Cell, Field, FieldConfig


# ============================================================================
# Field Fixtures
# ============================================================================

@pytest.fixture
def default_field() -> Field:
    """Create a seeded 9x9 field with 10 mines."""
    return Field(FieldConfig(9, 9, 10, seed=42))


@pytest.fixture
def center_mine_field() -> Field:
    """Create a 3x3 field with its single mine in the middle."""
    return Field.from_layout(3, 3, [(1, 1)])


@pytest.fixture
def empty_field() -> Field:
    """Create a field with no mines for cascade testing."""
    return Field(FieldConfig(5, 5, 0, seed=1))


@pytest.fixture
def corner_mine_field() -> Field:
    """
    Create a 5x5 field with one mine in the bottom-right corner.

    Opening (0, 0) cascades over everything except the mine and the
    three numbered cells around it.
    """
    return Field.from_layout(5, 5, [(4, 4)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def closed_cell() -> Cell:
    """Create a closed empty cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    cell = Cell(1, 1)
    cell.place_mine()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> FieldConfig:
    """Create a valid field configuration."""
    return FieldConfig(9, 9, 10)
