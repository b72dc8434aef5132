"""Capture box: where a side's pieces go when pushed off the board.

盤外に押し出された駒を入れておく箱（色ごとに1つ）。
"""

from __future__ import annotations

from noventagrados.game.board import Piece
from noventagrados.game.types import BOX_CAPACITY, Color, PieceKind


class CaptureBox:
    """Bounded, ordered store of one side's ejected pieces.

    箱の色と違う駒、または容量（7個）を超える駒は黙って捨てる。
    """

    def __init__(self, color: Color) -> None:
        if not isinstance(color, Color):
            raise ValueError(f"Capture box color must be a Color, got {color!r}")
        self._color = color
        self._pieces: list[Piece] = []

    @property
    def color(self) -> Color:
        return self._color

    @property
    def pieces(self) -> tuple[Piece, ...]:
        """入った順の駒（読み取り専用のスナップショット）。"""
        return tuple(self._pieces)

    @property
    def is_full(self) -> bool:
        return len(self._pieces) >= BOX_CAPACITY

    def add(self, piece: Piece | None) -> None:
        if piece is None or piece.color != self._color or self.is_full:
            return
        self._pieces.append(piece)

    def count_all(self) -> int:
        return len(self._pieces)

    def count_of_kind(self, kind: PieceKind) -> int:
        return sum(1 for piece in self._pieces if piece.kind == kind)

    def clone(self) -> CaptureBox:
        clone = CaptureBox(self._color)
        clone._pieces = list(self._pieces)
        return clone

    def __len__(self) -> int:
        return len(self._pieces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CaptureBox):
            return NotImplemented
        return self._color == other._color and self._pieces == other._pieces

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CaptureBox({self._color.name}, {self._pieces!r})"
