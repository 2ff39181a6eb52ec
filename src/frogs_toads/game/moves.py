"""Legal move generation for Frogs and Toads.

合法手の生成と、空きマスとの入れ替え。

ルール（空きマスの視点）:
  下・右: ヒキガエルが1マス先にいれば合法。いなければ2マス先のヒキガエルが
          間の1匹を飛び越えて入れる。
  上・左: 同様にカエルが1マス先、または2マス先にいれば合法。

各方向からは最大1手しか出ない（1マス先が合法なら2マス先は調べない）。
"""

from __future__ import annotations

from frogs_toads.game.grid import Grid
from frogs_toads.game.types import DIRECTIONS, Cell, Coord

# 各方向から最大1手なので、合法手は最大4手
MAX_LEGAL_MOVES = len(DIRECTIONS)


def legal_moves(grid: Grid, empty: Coord) -> list[Coord]:
    """Return the coordinates that may move into the empty cell.

    空きマスに移動できるトークンの座標リストを返す。
    順序は 下・右・上・左 で固定。盤面は変更しない。
    """
    er, ec = empty
    moves: list[Coord] = []

    for dr, dc, mover in DIRECTIONS:
        # 隣接するマスからのスライド
        if grid.has(er + dr, ec + dc, mover):
            moves.append((er + dr, ec + dc))
        # 間の1匹を飛び越えるジャンプ
        elif grid.has(er + 2 * dr, ec + 2 * dc, mover):
            moves.append((er + 2 * dr, ec + 2 * dc))

    return moves


def swap_with_empty(grid: Grid, empty: Coord, target: Coord) -> Grid:
    """Move the marker at target into the empty cell and return the new grid.

    target のトークンを空きマスに移し、target を新しい空きマスにする。
    合法性はここではチェックしない（移動と取り消しの両方で使う）。
    """
    tr, tc = target
    mover = grid.cell_at(tr, tc)
    new_grid = grid.set_cell(empty[0], empty[1], mover)
    return new_grid.set_cell(tr, tc, Cell.EMPTY)
