"""Unit tests for Sudoku grid and validation."""

import pytest
from sudoku_game.core.board import SudokuGrid
from sudoku_game.core.validator import (
    is_valid,
    find_conflicts,
    count_digit_usage,
    check_win,
    is_solved,
    validate_solution,
)


class TestSudokuGrid:
    """Tests for SudokuGrid class."""

    def test_create_empty_grid(self):
        """Test creating an empty grid."""
        grid = SudokuGrid()
        assert len(grid) == 81
        assert grid.count_empty() == 81
        assert grid.count_filled() == 0
        assert not grid.is_complete()

    def test_set_and_get(self):
        """Test setting and getting values."""
        grid = SudokuGrid()
        grid.set(40, 5)
        assert grid[40] == 5
        assert not grid.is_empty(40)

        grid.clear(40)
        assert grid.is_empty(40)

    def test_set_rejects_out_of_range(self):
        grid = SudokuGrid()
        with pytest.raises(ValueError):
            grid.set(0, 10)
        with pytest.raises(ValueError):
            grid.set(81, 1)
        with pytest.raises(ValueError):
            grid.set(-1, 1)
        assert grid.count_filled() == 0

    def test_wrong_cell_count(self):
        with pytest.raises(ValueError):
            SudokuGrid([0] * 80)

    def test_index_mapping(self):
        """Test row, column and box of cell indices."""
        assert SudokuGrid.row_of(40) == 4
        assert SudokuGrid.col_of(40) == 4
        assert SudokuGrid.box_of(0) == 0
        assert SudokuGrid.box_of(30) == 4
        assert SudokuGrid.box_of(80) == 8
        assert SudokuGrid.box_of(8) == 2

    def test_peers(self):
        """Each cell has 20 peers, never itself."""
        peers = SudokuGrid.peers(0)
        assert len(peers) == 20
        assert 0 not in peers
        assert {8, 72, 20}.issubset(peers)
        assert 30 not in peers

    def test_from_string(self, puzzle_string):
        """Test creating a grid from a string."""
        grid = SudokuGrid.from_string(puzzle_string)
        assert grid[0] == 5
        assert grid[2] == 0
        assert grid.to_string() == puzzle_string

        dotted = SudokuGrid.from_string(puzzle_string.replace("0", "."))
        assert dotted == grid

    def test_from_string_rejects_bad_input(self):
        with pytest.raises(ValueError):
            SudokuGrid.from_string("123")
        with pytest.raises(ValueError):
            SudokuGrid.from_string("x" * 81)

    def test_empty_cells_ascending(self, puzzle):
        empty = puzzle.empty_cells()
        assert empty == sorted(empty)
        assert empty[:3] == [2, 3, 5]
        assert len(empty) == puzzle.count_empty()

    def test_copy(self):
        """Test grid copy."""
        grid = SudokuGrid()
        grid.set(40, 7)
        copy = grid.copy()
        assert copy[40] == 7

        copy.set(40, 8)
        assert grid[40] == 7

    def test_grid_is_unhashable(self):
        """Grids are mutable, so they cannot be used as set members or dict keys."""
        grid = SudokuGrid()
        with pytest.raises(TypeError):
            hash(grid)
        assert grid == SudokuGrid()

    def test_pretty_print(self, puzzle):
        text = str(puzzle)
        assert text.splitlines()[1] == "| 5 3 . | . 7 . | . . . |"


class TestValidator:
    """Tests for validation utilities."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        grid = SudokuGrid()
        grid.set(0, 5)

        # Same row, column, box
        assert not is_valid(grid, 5, 5)
        assert not is_valid(grid, 45, 5)
        assert not is_valid(grid, 10, 5)

        # The cell itself does not count
        assert is_valid(grid, 0, 5)

        assert is_valid(grid, 5, 7)
        assert is_valid(grid, 40, 5)

    def test_is_valid_matches_peers(self, puzzle):
        """is_valid is false exactly when some peer holds the value."""
        for idx in range(81):
            peers = SudokuGrid.peers(idx)
            for num in range(1, 10):
                in_peer = any(puzzle[p] == num for p in peers)
                assert is_valid(puzzle, idx, num) == (not in_peer)

    def test_is_valid_accepts_lists(self, puzzle):
        cells = puzzle.to_list()
        assert is_valid(cells, 2, 4)
        assert not is_valid(cells, 2, 5)

    def test_find_conflicts(self):
        grid = SudokuGrid()
        grid.set(0, 5)
        grid.set(8, 5)
        grid.set(40, 5)
        assert find_conflicts(grid) == {0, 8}

    def test_solution_has_no_conflicts(self, solution, puzzle):
        assert find_conflicts(solution) == set()
        assert is_solved(solution)
        assert not is_solved(puzzle)
        assert validate_solution(puzzle, solution)

    def test_count_digit_usage_skips_conflicts(self):
        grid = SudokuGrid()
        grid.set(0, 5)
        grid.set(8, 5)
        grid.set(40, 5)
        grid.set(41, 3)
        counts = count_digit_usage(grid, find_conflicts(grid))
        assert counts[5] == 1
        assert counts[3] == 1
        assert set(counts) == set(range(1, 10))

    def test_full_solution_counts(self, solution):
        counts = count_digit_usage(solution, set())
        assert all(count == 9 for count in counts.values())

    def test_check_win(self, solution, puzzle):
        assert check_win(solution, solution)
        assert not check_win(puzzle, solution)

    def test_check_win_alternate_completion(self, solution):
        """A valid grid other than the stored solution still wins."""
        relabeled = SudokuGrid([v % 9 + 1 for v in solution.to_list()])
        assert relabeled != solution
        assert check_win(solution, relabeled)

    def test_check_win_full_but_wrong(self, solution):
        cells = solution.to_list()
        cells[0], cells[9] = cells[9], cells[0]
        assert not check_win(SudokuGrid(cells), solution)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
