"""Terminal display for Frogs and Toads grids.

盤面をターミナルやテストの出力用に文字列化するモジュール。
保存形式ではないので、表示の細部は変わってもよい。
"""

from __future__ import annotations

from frogs_toads.game.grid import Grid
from frogs_toads.game.types import Cell

# マスの表示文字
CELL_CHARS: dict[Cell, str] = {
    Cell.FROG: "F",   # カエル
    Cell.TOAD: "T",   # ヒキガエル
    Cell.EMPTY: "-",  # 空きマス
}

# 日本語の名前（ログやデバッグ出力用）
CELL_NAMES_JA: dict[Cell, str] = {
    Cell.FROG: "カエル",
    Cell.TOAD: "ヒキガエル",
    Cell.EMPTY: "空き",
}


def cell_to_char(cell: Cell) -> str:
    """Convert a cell marker to its display character."""
    return CELL_CHARS[cell]


def grid_to_str(grid: Grid) -> str:
    """Convert a grid to a human-readable string.

    盤面を人間が読みやすい文字列に変換する。

    Example output (3×3 initial position):
           0 1 2
        0  F F F
        1  F - T
        2  T T T

    - 1行目: 列番号
    - 各行の先頭: 行番号
    """
    lines: list[str] = []

    # 列ヘッダー（0, 1, 2, ...）
    col_labels = " ".join(str(c) for c in range(grid.columns))
    lines.append(f"   {col_labels}")

    # 盤面の各行
    for r in range(grid.rows):
        row_chars = [cell_to_char(grid.cell_at(r, c)) for c in range(grid.columns)]
        lines.append(f"{r}  {' '.join(row_chars)}")

    return "\n".join(lines)
