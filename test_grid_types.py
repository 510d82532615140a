"""Tests for grid_types module."""

import pytest

from grid_types import Cell, Mode


# =============================================================================
# Test Cell
# =============================================================================


class TestCell:
    """Tests for the Cell wrapper."""

    def test_wrap_and_unwrap(self) -> None:
        """Test that wrap stores a value that unwrap returns."""
        cell = Cell.wrap(7)
        assert cell.unwrap() == 7
        assert cell.value == 7

    def test_value_is_writable(self) -> None:
        """Test direct writes to the contained value."""
        cell = Cell("a")
        cell.value = "b"
        assert cell.unwrap() == "b"

    def test_equality_by_value(self) -> None:
        """Test that cells compare by their wrapped value."""
        assert Cell(3) == Cell(3)
        assert Cell(3) != Cell(4)
        assert Cell([1, 2]) == Cell([1, 2])


class TestCellArithmetic:
    """Tests for elementwise arithmetic between cells."""

    def test_add(self) -> None:
        """Test adding two cells."""
        assert Cell(2) + Cell(3) == Cell(5)

    def test_sub(self) -> None:
        """Test subtracting two cells."""
        assert Cell(2) - Cell(3) == Cell(-1)

    def test_mul(self) -> None:
        """Test multiplying two cells."""
        assert Cell(4) * Cell(3) == Cell(12)

    def test_div(self) -> None:
        """Test dividing two cells."""
        assert Cell(9.0) / Cell(2.0) == Cell(4.5)
        assert Cell(9) // Cell(2) == Cell(4)

    def test_strings_concatenate(self) -> None:
        """Test that the lift uses whatever operator the values define."""
        assert Cell("ab") + Cell("cd") == Cell("abcd")

    def test_operands_unchanged(self) -> None:
        """Test that arithmetic has no side effects on its operands."""
        a, b = Cell(1), Cell(2)
        result = a + b
        assert a == Cell(1)
        assert b == Cell(2)
        assert result is not a

    def test_unsupported_operator_raises(self) -> None:
        """Test that values without the operator raise TypeError."""
        with pytest.raises(TypeError):
            Cell("ab") - Cell("cd")

    def test_non_cell_operand_raises(self) -> None:
        """Test that mixing a cell with a bare value is not supported."""
        with pytest.raises(TypeError):
            Cell(1) + 1


class TestMode:
    """Tests for the discipline marker."""

    def test_two_distinct_modes(self) -> None:
        """Test that the two disciplines are distinct members."""
        assert Mode.RECTANGULAR is not Mode.JAGGED
        assert len(Mode) == 2
