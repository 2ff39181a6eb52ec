"""PuzzleEngine protocol: the contract presentation code relies on.

パズルエンジンの共通インタフェース（プロトコル）。

画面描画・保存・解答の再生などエンジン外の処理は、このプロトコルだけに
依存する。FrogsToadsEngine は継承せずに構造的にこれを満たす（ダックタイピング）。
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from frogs_toads.game.snapshot import EngineSnapshot
from frogs_toads.game.types import Coord


@runtime_checkable  # isinstance() でのランタイムチェックを有効にする
class PuzzleEngine(Protocol):
    """Common interface for Frogs and Toads engines.

    重要: move_to() と undo() はエンジン自身を変更する（ミュータブル設計）。
    失敗は例外ではなく False で返る。
    """

    @property
    def rows(self) -> int:
        """行数を返す。"""
        ...

    @property
    def columns(self) -> int:
        """列数を返す。"""
        ...

    def frog_at(self, row: int, col: int) -> bool:
        """カエルがいれば True（盤外は False）。"""
        ...

    def toad_at(self, row: int, col: int) -> bool:
        """ヒキガエルがいれば True（盤外は False）。"""
        ...

    def empty_at(self, row: int, col: int) -> bool:
        """空きマスなら True（盤外は False）。"""
        ...

    def legal_moves(self) -> list[Coord]:
        """合法手の座標リストを返す（下・右・上・左の順）。"""
        ...

    def can_move(self) -> bool:
        """合法手があれば True を返す。"""
        ...

    def move_to(self, row: int, col: int) -> bool:
        """手を適用する。不正な手なら False。"""
        ...

    def undo(self) -> bool:
        """直前の手を取り消す。履歴が空なら False。"""
        ...

    def is_solved(self) -> bool:
        """カエルとヒキガエルが入れ替わっていれば True。"""
        ...

    def to_snapshot(self) -> EngineSnapshot:
        """保存用のスナップショットを返す。"""
        ...
