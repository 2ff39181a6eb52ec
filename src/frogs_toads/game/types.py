"""Types and constants for Frogs and Toads.

カエル（Frog）とヒキガエル（Toad）パズルの基本型・定数定義。
盤面は奇数×奇数のマスで、空きマスは常に1つだけ存在する。
"""

from __future__ import annotations

from enum import Enum, unique

# 盤面サイズを省略したときの既定値（5×5）
DEFAULT_SIZE = 5

# 座標は (行, 列) のタプル。0 始まり。
Coord = tuple[int, int]


@unique
class Cell(Enum):
    """Cell markers.

    マスの状態（3種類）。値は表示文字にそのまま使う。
    カエルは上・左側から、ヒキガエルは下・右側からスタートする。
    """

    FROG = "F"   # カエル: 下・右方向へ進む
    TOAD = "T"   # ヒキガエル: 上・左方向へ進む
    EMPTY = "-"  # 空きマス（盤面に常に1つ）

    @property
    def opposite(self) -> Cell:
        """相手側のトークンを返す。FROG↔TOAD、EMPTY は EMPTY のまま。"""
        if self is Cell.FROG:
            return Cell.TOAD
        if self is Cell.TOAD:
            return Cell.FROG
        return Cell.EMPTY


# 合法手を探す方向: (行の変化, 列の変化, 空きマスに入れるトークン)
# 順序は 下・右・上・左 で固定（呼び出し側が「最初の合法手」を選ぶときの決定性のため）
# 下と右からはヒキガエルが、上と左からはカエルが空きマスに入ってくる。
DIRECTIONS: list[tuple[int, int, Cell]] = [
    (1, 0, Cell.TOAD),    # 下
    (0, 1, Cell.TOAD),    # 右
    (-1, 0, Cell.FROG),   # 上
    (0, -1, Cell.FROG),   # 左
]
