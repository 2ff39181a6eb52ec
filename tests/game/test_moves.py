"""Tests for legal move generation and swapping."""

from frogs_toads.game.grid import Grid
from frogs_toads.game.moves import MAX_LEGAL_MOVES, legal_moves, swap_with_empty
from frogs_toads.game.types import Cell


def _grid(*rows: str) -> Grid:
    """Build a grid from strings of F/T/- characters."""
    cells = tuple(Cell(ch) for line in rows for ch in line)
    return Grid(rows=len(rows), columns=len(rows[0]), cells=cells)


class TestInitialPositions:
    def test_3x3_all_four_neighbours(self) -> None:
        grid = Grid.initial(3, 3)
        assert legal_moves(grid, (1, 1)) == [(2, 1), (1, 2), (0, 1), (1, 0)]

    def test_5x5_all_four_neighbours(self) -> None:
        grid = Grid.initial(5, 5)
        assert legal_moves(grid, (2, 2)) == [(3, 2), (2, 3), (1, 2), (2, 1)]

    def test_single_row(self) -> None:
        """Only right (toad) and left (frog) are on the board."""
        grid = Grid.initial(1, 5)
        assert legal_moves(grid, (0, 2)) == [(0, 3), (0, 1)]

    def test_single_column(self) -> None:
        grid = Grid.initial(5, 1)
        assert legal_moves(grid, (2, 0)) == [(3, 0), (1, 0)]

    def test_single_cell_has_no_moves(self) -> None:
        grid = Grid.initial(1, 1)
        assert legal_moves(grid, (0, 0)) == []


class TestSlideAndHop:
    def test_hop_over_opposite_token(self) -> None:
        grid = _grid("FT-FT")
        # 右: 隣はカエルなので 2マス先のヒキガエルが飛び越える
        # 左: 隣はヒキガエルなので 2マス先のカエルが飛び越える
        assert legal_moves(grid, (0, 2)) == [(0, 4), (0, 0)]

    def test_slide_takes_priority_over_hop(self) -> None:
        """A direction yields at most one move: the hop is not checked after a slide."""
        grid = _grid("FF-TT")
        moves = legal_moves(grid, (0, 2))
        assert (0, 3) in moves
        assert (0, 4) not in moves
        assert (0, 1) in moves
        assert (0, 0) not in moves

    def test_wrong_kind_cannot_move(self) -> None:
        """Frogs never move up or left, toads never move down or right."""
        grid = _grid("TT-FF")
        assert legal_moves(grid, (0, 2)) == []

    def test_vertical_hop(self) -> None:
        grid = _grid("F", "T", "-", "F", "T")
        assert legal_moves(grid, (2, 0)) == [(4, 0), (0, 0)]

    def test_no_hop_beyond_two(self) -> None:
        grid = _grid("F-FFT")
        # 右: (0,2),(0,3) はカエル → ヒキガエルは 3マス先なので届かない
        assert legal_moves(grid, (0, 1)) == [(0, 0)]

    def test_corner_empty(self) -> None:
        grid = _grid("-TF", "TFF", "TTT")
        # 下: (1,0) ヒキガエル、右: (0,1) ヒキガエル、上・左は盤外
        assert legal_moves(grid, (0, 0)) == [(1, 0), (0, 1)]

    def test_never_more_than_four(self) -> None:
        grid = Grid.initial(9, 9)
        assert len(legal_moves(grid, grid.center)) <= MAX_LEGAL_MOVES

    def test_does_not_mutate(self) -> None:
        grid = Grid.initial(3, 3)
        legal_moves(grid, (1, 1))
        assert grid == Grid.initial(3, 3)


class TestSwapWithEmpty:
    def test_slide(self) -> None:
        grid = Grid.initial(3, 3)
        new_grid = swap_with_empty(grid, (1, 1), (2, 1))
        assert new_grid.cell_at(1, 1) is Cell.TOAD
        assert new_grid.cell_at(2, 1) is Cell.EMPTY
        assert new_grid.count(Cell.EMPTY) == 1

    def test_hop_leaves_middle_untouched(self) -> None:
        grid = _grid("FT-FT")
        new_grid = swap_with_empty(grid, (0, 2), (0, 0))
        assert new_grid == _grid("-TFFT")

    def test_swap_back_restores(self) -> None:
        grid = Grid.initial(3, 3)
        moved = swap_with_empty(grid, (1, 1), (0, 1))
        assert swap_with_empty(moved, (0, 1), (1, 1)) == grid
