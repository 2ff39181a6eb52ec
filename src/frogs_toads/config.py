"""Board configuration presets for Frogs and Toads.

盤面サイズの設定定義。
アプリから選べる盤面は 3×3・5×5・7×7・9×9 の4種類なので、プリセットとして持つ。
"""

from __future__ import annotations

from dataclasses import dataclass

from frogs_toads.game.grid import normalize_dimension


@dataclass(frozen=True)
class BoardConfig:
    """Configuration for a Frogs and Toads board.

    盤面の設定パラメータ。

    Attributes:
        rows:    行数（偶数なら盤面生成時に +1 される）
        columns: 列数（偶数なら盤面生成時に +1 される）
    """

    rows: int
    columns: int

    def __post_init__(self) -> None:
        # 0 以下なら InvalidDimensionError（normalize_dimension が送出する）
        normalize_dimension(self.rows)
        normalize_dimension(self.columns)

    @property
    def board_rows(self) -> int:
        """実際に確保される行数（奇数）。"""
        return normalize_dimension(self.rows)

    @property
    def board_cols(self) -> int:
        """実際に確保される列数（奇数）。"""
        return normalize_dimension(self.columns)

    @property
    def token_count(self) -> int:
        """トークンの総数（空きマス以外のマス数）。カエルとヒキガエルは同数ずつ。"""
        return self.board_rows * self.board_cols - 1


# 解答の再生ができるのは 3×3 だけ
SMALL_BOARD = BoardConfig(rows=3, columns=3)

# 既定の盤面（サイズ省略時と同じ 5×5）
DEFAULT_BOARD = BoardConfig(rows=5, columns=5)

LARGE_BOARD = BoardConfig(rows=7, columns=7)

HUGE_BOARD = BoardConfig(rows=9, columns=9)

BOARD_PRESETS: dict[str, BoardConfig] = {
    "small": SMALL_BOARD,
    "default": DEFAULT_BOARD,
    "large": LARGE_BOARD,
    "huge": HUGE_BOARD,
}
