"""Grid representation for Frogs and Toads.

盤面のデータ構造。イミュータブル（frozen=True）設計で、
マスを変更するメソッドはすべて新しい Grid オブジェクトを返す。

エンジン（FrogsToadsEngine）は Grid を差し替えることで状態を進めるので、
呼び出し側に Grid を渡しても内部状態を壊されることがない。
"""

from __future__ import annotations

from dataclasses import dataclass

from frogs_toads.game.types import Cell, Coord


class InvalidDimensionError(ValueError):
    """Raised when a board dimension is zero or negative."""


def normalize_dimension(value: int) -> int:
    """Return value promoted to the next odd number.

    偶数が渡されたら 1 を足して奇数にする。
    奇数にすることで中央のマス（空きマス）が一意に決まる。
    0 以下は盤面として成立しないので InvalidDimensionError を送出する。
    """
    if value <= 0:
        msg = f"Board dimension must be positive, got {value}"
        raise InvalidDimensionError(msg)
    if value % 2 == 0:
        return value + 1
    return value


def initial_cell(row: int, col: int, rows: int, columns: int) -> Cell:
    """Return the starting marker of (row, col) on a rows x columns board.

    初期配置のマスの中身を返す。上下の半分ではなく、
    中央の行で左右に分かれる「L字型」の分割になる点に注意。

    Example (5×5):
        F F F F F
        F F F F F
        F F - T T
        T T T T T
        T T T T T
    """
    half_rows = rows // 2
    half_cols = columns // 2
    if row < half_rows or (col < half_cols and row <= half_rows):
        return Cell.FROG
    if row > half_rows or (col > half_cols and row >= half_rows):
        return Cell.TOAD
    return Cell.EMPTY  # 中央の1マスだけがここに来る


@dataclass(frozen=True)  # イミュータブル（変更不可）なデータクラス
class Grid:
    """Immutable rows x columns puzzle grid.

    rows × columns マスの盤面を表すイミュータブルなデータ構造。

    cells: rows * columns 要素のタプル（行優先）。各要素は Cell。
           cells[row * columns + col] でマス(row, col)にアクセス。
    """

    rows: int
    columns: int
    cells: tuple[Cell, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != self.rows * self.columns:
            msg = f"Expected {self.rows * self.columns} cells, got {len(self.cells)}"
            raise ValueError(msg)

    @classmethod
    def initial(cls, rows: int, columns: int) -> Grid:
        """Return the starting grid, promoting even dimensions to odd.

        初期配置の盤面を返す。偶数の行数・列数は奇数に切り上げる。
        """
        rows = normalize_dimension(rows)
        columns = normalize_dimension(columns)
        cells = tuple(
            initial_cell(r, c, rows, columns)
            for r in range(rows)
            for c in range(columns)
        )
        return cls(rows=rows, columns=columns, cells=cells)

    @property
    def center(self) -> Coord:
        """中央のマス（初期配置で空きマスになる位置）。"""
        return (self.rows // 2, self.columns // 2)

    def in_bounds(self, row: int, col: int) -> bool:
        """Return True if (row, col) is on the board."""
        return 0 <= row < self.rows and 0 <= col < self.columns

    def cell_at(self, row: int, col: int) -> Cell:
        """Return the marker at (row, col).

        マス(row, col)の中身を返す。盤外なら IndexError。
        """
        if not self.in_bounds(row, col):
            msg = f"({row}, {col}) is outside a {self.rows}x{self.columns} grid"
            raise IndexError(msg)
        return self.cells[row * self.columns + col]

    def has(self, row: int, col: int, cell: Cell) -> bool:
        """Return True if (row, col) holds cell; False when out of bounds.

        盤外は「何もない」として扱うので、端のマスの隣を調べるときに
        範囲チェックを別に書かなくてよい。
        """
        return self.in_bounds(row, col) and self.cells[row * self.columns + col] is cell

    def set_cell(self, row: int, col: int, cell: Cell) -> Grid:
        """Return a new Grid with (row, col) changed.

        マス(row, col)を変更した新しい Grid を返す。
        元の Grid は変更されない（イミュータブル）。
        """
        idx = row * self.columns + col
        cells = list(self.cells)  # タプルをリストに変換して変更
        cells[idx] = cell
        return Grid(rows=self.rows, columns=self.columns, cells=tuple(cells))

    def find_empty(self) -> Coord | None:
        """Return the coordinate of the first EMPTY cell, or None."""
        for idx, cell in enumerate(self.cells):
            if cell is Cell.EMPTY:
                return (idx // self.columns, idx % self.columns)
        return None

    def count(self, cell: Cell) -> int:
        """Return how many cells hold the given marker."""
        return self.cells.count(cell)
