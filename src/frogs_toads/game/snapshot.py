"""Serializable snapshot of a Frogs and Toads engine.

エンジンの状態（盤面・空きマス・手の履歴）を保存・復元するためのスキーマ。
pydantic の BaseModel を使うので、JSON への変換と検証はそのまま任せられる。

JSON の例（3×3 の初期局面）:
    {"rows": 3, "columns": 3, "cells": ["FFF", "F-T", "TTT"],
     "empty": [1, 1], "history": []}
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from frogs_toads.game.grid import Grid
from frogs_toads.game.types import Cell, Coord

# 表示文字 → Cell の逆引き表
_CHAR_TO_CELL: dict[str, Cell] = {cell.value: cell for cell in Cell}


class EngineSnapshot(BaseModel):
    """Snapshot schema: grid rows as strings, empty cell and move history.

    保存用のスナップショット。

    Attributes:
        rows:    行数（奇数）
        columns: 列数（奇数）
        cells:   1行につき1文字列。"F"=カエル、"T"=ヒキガエル、"-"=空き
        empty:   空きマスの座標 (行, 列)
        history: 過去の空きマス座標（古い順）。取り消しで末尾から使う
    """

    model_config = ConfigDict(frozen=True)

    rows: int = Field(gt=0)
    columns: int = Field(gt=0)
    cells: list[str]
    empty: Coord
    history: list[Coord] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_consistency(self) -> EngineSnapshot:
        """Reject snapshots that would break the engine invariants.

        復元したエンジンの不変条件（空きマスは1つ・座標が一致する）を
        壊すスナップショットを弾く。ValueError は pydantic が
        ValidationError に包んで送出する。
        """
        if self.rows % 2 == 0 or self.columns % 2 == 0:
            msg = f"Dimensions must be odd, got {self.rows}x{self.columns}"
            raise ValueError(msg)
        if len(self.cells) != self.rows:
            msg = f"Expected {self.rows} rows of cells, got {len(self.cells)}"
            raise ValueError(msg)
        for r, line in enumerate(self.cells):
            if len(line) != self.columns:
                msg = f"Row {r} has {len(line)} cells, expected {self.columns}"
                raise ValueError(msg)
            unknown = set(line) - _CHAR_TO_CELL.keys()
            if unknown:
                msg = f"Row {r} has unknown markers: {sorted(unknown)}"
                raise ValueError(msg)

        empties = sum(line.count(Cell.EMPTY.value) for line in self.cells)
        if empties != 1:
            msg = f"Expected exactly one empty cell, found {empties}"
            raise ValueError(msg)
        er, ec = self.empty
        if not self._in_bounds(self.empty) or self.cells[er][ec] != Cell.EMPTY.value:
            msg = f"Empty coordinate {self.empty} does not hold the empty cell"
            raise ValueError(msg)

        # 履歴の各座標は盤内で、直後の空きマス位置とは異なるはず
        # （空きマスに入ってきたトークンは、必ず別のマスから来ている）
        successors = [*self.history[1:], self.empty]
        for coord, after in zip(self.history, successors):
            if not self._in_bounds(coord):
                msg = f"History coordinate {coord} is out of bounds"
                raise ValueError(msg)
            if coord == after:
                msg = f"History coordinate {coord} repeats its successor"
                raise ValueError(msg)
        return self

    def _in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord[0] < self.rows and 0 <= coord[1] < self.columns

    def to_grid(self) -> Grid:
        """Decode the cell strings into a Grid."""
        cells = tuple(_CHAR_TO_CELL[ch] for line in self.cells for ch in line)
        return Grid(rows=self.rows, columns=self.columns, cells=cells)

    @classmethod
    def from_state(
        cls,
        grid: Grid,
        empty: Coord,
        history: list[Coord],
    ) -> EngineSnapshot:
        """Encode engine state into a snapshot.

        エンジンの内部状態からスナップショットを作る。
        リストはコピーされるので、元の履歴を書き換えても影響しない。
        """
        cells = [
            "".join(grid.cell_at(r, c).value for c in range(grid.columns))
            for r in range(grid.rows)
        ]
        return cls(
            rows=grid.rows,
            columns=grid.columns,
            cells=cells,
            empty=empty,
            history=list(history),
        )
