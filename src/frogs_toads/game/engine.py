"""Puzzle engine for Frogs and Toads.

パズルの対局状態。Grid が盤面データを持ち、FrogsToadsEngine が
手の適用・取り消し・クリア判定を担当する。

エンジンは1つの呼び出し元が専有する前提で、内部でロックは取らない。
UI スレッドと別スレッドから同時に触る場合は呼び出し側で排他制御すること。
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from frogs_toads.game.display import CELL_NAMES_JA, grid_to_str
from frogs_toads.game.grid import Grid, initial_cell
from frogs_toads.game.moves import legal_moves as _legal_moves
from frogs_toads.game.moves import swap_with_empty
from frogs_toads.game.snapshot import EngineSnapshot
from frogs_toads.game.types import DEFAULT_SIZE, Cell, Coord

if TYPE_CHECKING:
    from frogs_toads.config import BoardConfig

logger = logging.getLogger(__name__)


class FrogsToadsEngine:
    """Mutable puzzle state: an immutable Grid plus an undo history.

    盤面（Grid）と手の履歴を持つパズルエンジン。

    - 盤面は手を指すたびに新しい Grid に差し替える（Grid 自体は不変）
    - 履歴には「手を指す前の空きマス座標」を積む。取り消しは末尾から取り出す
    - 不正な手・履歴なしの取り消しは例外ではなく False を返す

    クリア条件: カエルとヒキガエルの位置が初期配置と完全に入れ替わり、
    中央のマスが空いていること。クリア後も手は指せる（ロックしない）。
    """

    def __init__(self, rows: int = DEFAULT_SIZE, columns: int | None = None) -> None:
        # columns 省略時は正方形の盤面
        if columns is None:
            columns = rows
        self._grid = Grid.initial(rows, columns)
        self._empty: Coord = self._grid.center
        self._history: list[Coord] = []

    @classmethod
    def from_config(cls, config: BoardConfig) -> FrogsToadsEngine:
        """Create an engine sized by a board preset."""
        return cls(config.rows, config.columns)

    @classmethod
    def from_snapshot(cls, snapshot: EngineSnapshot) -> FrogsToadsEngine:
        """Restore an engine from a validated snapshot.

        スナップショットからエンジンを復元する。
        スナップショットは pydantic の検証済みなので、ここでは組み立てるだけ。
        """
        engine = cls.__new__(cls)
        engine._grid = snapshot.to_grid()
        engine._empty = snapshot.empty
        engine._history = list(snapshot.history)
        logger.debug(
            "Restored %dx%d engine with %d moves of history",
            engine.rows,
            engine.columns,
            len(engine._history),
        )
        return engine

    def to_snapshot(self) -> EngineSnapshot:
        """Return a snapshot of the full engine state."""
        return EngineSnapshot.from_state(self._grid, self._empty, self._history)

    # --- 盤面の問い合わせ ---

    @property
    def rows(self) -> int:
        """行数（常に奇数）。"""
        return self._grid.rows

    @property
    def columns(self) -> int:
        """列数（常に奇数）。"""
        return self._grid.columns

    @property
    def grid(self) -> Grid:
        """現在の盤面（イミュータブルなので、そのまま渡しても安全）。"""
        return self._grid

    @property
    def empty_cell(self) -> Coord:
        """空きマスの座標。"""
        return self._empty

    @property
    def history(self) -> tuple[Coord, ...]:
        """手の履歴（過去の空きマス座標、古い順）のコピー。"""
        return tuple(self._history)

    @property
    def history_depth(self) -> int:
        """取り消せる手の数。"""
        return len(self._history)

    def frog_at(self, row: int, col: int) -> bool:
        """マス(row, col)にカエルがいれば True。盤外は False。"""
        return self._grid.has(row, col, Cell.FROG)

    def toad_at(self, row: int, col: int) -> bool:
        """マス(row, col)にヒキガエルがいれば True。盤外は False。"""
        return self._grid.has(row, col, Cell.TOAD)

    def empty_at(self, row: int, col: int) -> bool:
        """マス(row, col)が空きマスなら True。盤外は False。"""
        return self._grid.has(row, col, Cell.EMPTY)

    def cell_at(self, row: int, col: int) -> Cell:
        """マス(row, col)の中身。盤外なら IndexError。"""
        return self._grid.cell_at(row, col)

    # --- 合法手 ---

    def legal_moves(self) -> list[Coord]:
        """合法手（空きマスに入れるトークンの座標）のリストを返す。

        毎回盤面から生成し直す。順序は 下・右・上・左。
        """
        return _legal_moves(self._grid, self._empty)

    def can_move(self) -> bool:
        """合法手が1つでもあれば True。"""
        return len(self.legal_moves()) > 0

    # --- 手の適用・取り消し ---

    def move_to(self, row: int, col: int) -> bool:
        """Move the token at (row, col) into the empty cell.

        マス(row, col)のトークンを空きマスへ移動する。

        合法手でなければ何もせず False を返す。不正なマスの指定は
        例外にしない。
        """
        target = (row, col)
        if target not in self.legal_moves():
            logger.debug("Rejected move %s: not legal from empty %s", target, self._empty)
            return False

        mover = self._grid.cell_at(row, col)
        self._grid = swap_with_empty(self._grid, self._empty, target)
        self._history.append(self._empty)  # 移動前の空きマスを記録
        logger.debug("%s moved %s -> %s", CELL_NAMES_JA[mover], target, self._empty)
        self._empty = target
        return True

    def undo(self) -> bool:
        """Revert the most recent successful move.

        直前の手を取り消す。履歴が空なら何もせず False を返す。
        取り出した座標のトークンを現在の空きマスに戻し、その座標を空きマスにする。
        """
        if not self._history:
            logger.debug("Undo requested with empty history")
            return False

        previous = self._history.pop()
        self._grid = swap_with_empty(self._grid, self._empty, previous)
        logger.debug("Undid move: empty %s -> %s", self._empty, previous)
        self._empty = previous
        return True

    # --- クリア判定 ---

    def is_solved(self) -> bool:
        """Return True if frogs and toads have fully swapped sides.

        初期配置と同じ分割を計算し直し、反対のトークンが入っているかを調べる。
        行優先で走査し、最初の不一致で False を返す。
        """
        rows, columns = self.rows, self.columns
        for r in range(rows):
            for c in range(columns):
                # 初期配置の反対（EMPTY の反対は EMPTY）
                expected = initial_cell(r, c, rows, columns).opposite
                if self._grid.cell_at(r, c) is not expected:
                    return False
        return True

    def __str__(self) -> str:
        return grid_to_str(self._grid)

    def __repr__(self) -> str:
        return (
            f"FrogsToadsEngine(rows={self.rows}, columns={self.columns}, "
            f"empty={self._empty}, history_depth={self.history_depth})"
        )
