"""Scripted solution walkthrough for the 3x3 board.

3×3 盤面の解答を1手ずつ再生・巻き戻しするためのモジュール。

探索はしない。既知の12手の手順を順番に指すだけ。
エンジンには公開インタフェース（move_to / undo / can_move）経由でだけ触る。
"""

from __future__ import annotations

import logging

from frogs_toads.config import SMALL_BOARD
from frogs_toads.game.engine import FrogsToadsEngine
from frogs_toads.game.types import Coord

logger = logging.getLogger(__name__)

# 3×3 の初期局面からクリアまでの手順（各手は「空きマスに入るトークンの座標」）
SOLUTION_3X3: tuple[Coord, ...] = (
    (2, 1),
    (2, 2),
    (0, 2),
    (1, 2),
    (1, 0),
    (0, 0),
    (2, 0),
    (1, 0),
    (1, 1),
    (0, 1),
    (2, 1),
    (1, 1),
)


class SolutionWalkthrough:
    """Step forward and back through the 3x3 solution.

    解答の再生を管理する。steps は再生済みの手数（0〜12）。
    """

    def __init__(self) -> None:
        self.engine = FrogsToadsEngine.from_config(SMALL_BOARD)
        self.steps = 0

    @property
    def total_steps(self) -> int:
        """解答の総手数。"""
        return len(SOLUTION_3X3)

    @property
    def is_finished(self) -> bool:
        """最後の手まで再生済みなら True。"""
        return self.steps >= self.total_steps

    def next_step(self) -> bool:
        """Play the next scripted move.

        次の1手を指す。手が指せない（解答の終わりに達した）場合は False。
        """
        if self.is_finished or not self.engine.can_move():
            return False
        row, col = SOLUTION_3X3[self.steps]
        if not self.engine.move_to(row, col):
            # 手順どおりに進めていれば起こらない
            msg = f"Scripted move {(row, col)} at step {self.steps + 1} was rejected"
            raise RuntimeError(msg)
        self.steps += 1
        logger.debug("Walkthrough step %d/%d", self.steps, self.total_steps)
        return True

    def previous_step(self) -> bool:
        """Take back the last scripted move.

        1手戻す。まだ1手も再生していなければ False。
        """
        if self.steps < 1:
            return False
        self.engine.undo()
        self.steps -= 1
        logger.debug("Walkthrough step %d/%d", self.steps, self.total_steps)
        return True
