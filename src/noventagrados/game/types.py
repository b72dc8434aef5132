"""Types and constants for Noventagrados.

ノベンタグラドスの基本型・定数定義。
盤面は 7×7（49マス）で、駒は2種類（ポーンとクイーン）。
"""

from __future__ import annotations

from enum import Enum, IntEnum, unique
from typing import NamedTuple

# 盤面のサイズ: 7×7（行数 = 列数）
BOARD_SIZE = 7

# 捕獲ボックスの容量（1色あたりの最大駒数）
BOX_CAPACITY = 7


@unique
class Color(IntEnum):
    """Side identifiers.

    白（WHITE）が先手。初期配置では白のクイーンが (0, 0)、黒のクイーンが (6, 6)。
    """

    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> Color:
        """相手の色を返す。0↔1 の切り替え。"""
        return Color(1 - self.value)


@unique
class PieceKind(IntEnum):
    """Piece kinds. 移動ルールは駒種によらず同じ。"""

    PAWN = 0
    QUEEN = 1


@unique
class Direction(Enum):
    """The four axis-aligned directions with their (row, col) deltas.

    移動方向（縦横4方向）。値は (行の変化, 列の変化)。
    """

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)

    @property
    def row_delta(self) -> int:
        return self.value[0]

    @property
    def col_delta(self) -> int:
        return self.value[1]

    @property
    def is_horizontal(self) -> bool:
        """東西方向（同じ行の中の移動）なら True。"""
        return self.row_delta == 0


class Coordinate(NamedTuple):
    """A (row, col) position. Value equality and ordering come from the tuple."""

    row: int
    col: int

    def shifted(self, direction: Direction, distance: int = 1) -> Coordinate:
        """Return the coordinate `distance` steps away in `direction`.

        盤外になる座標もそのまま返す（盤内判定は Board の役割）。
        """
        return Coordinate(
            self.row + direction.row_delta * distance,
            self.col + direction.col_delta * distance,
        )

    def to_text(self) -> str:
        """棋譜表記用の2桁文字列（例: (0, 3) → "03"）。"""
        return f"{self.row}{self.col}"
