"""Terminal display for Noventagrados boards.

ノベンタグラドスの盤面をターミナルに表示するためのモジュール。
"""

from __future__ import annotations

from noventagrados.game.board import Board, Piece
from noventagrados.game.capture_box import CaptureBox
from noventagrados.game.moves import Move
from noventagrados.game.types import BOX_CAPACITY, Color, Coordinate, PieceKind

# 駒種の表示文字
PIECE_CHARS: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.QUEEN: "Q",
}

# 色の表示文字
COLOR_CHARS: dict[Color, str] = {
    Color.WHITE: "W",
    Color.BLACK: "B",
}

EMPTY_CELL = "--"


def piece_to_str(piece: Piece) -> str:
    """Two-character piece code: kind letter + side letter (e.g. "PW")."""
    return PIECE_CHARS[piece.kind] + COLOR_CHARS[piece.color]


def board_to_str(board: Board) -> str:
    """Convert a board to a human-readable string.

    盤面を人間が読みやすい文字列に変換する。

    Example output (initial position):
        0 QW PW PW PW -- -- --
        1 PW -- -- -- -- -- --
        2 PW -- -- -- -- -- --
        3 PW -- -- -- -- -- PB
        4 -- -- -- -- -- -- PB
        5 -- -- -- -- -- -- PB
        6 -- -- -- PB PB PB QB
          0  1  2  3  4  5  6

    - 行ラベル: 左端の数字
    - 列ラベル: 最下段の数字
    - "--" = 空マス
    """
    lines: list[str] = []
    for row in range(board.size):
        codes: list[str] = []
        for col in range(board.size):
            piece = board.piece_at(Coordinate(row, col))
            codes.append(EMPTY_CELL if piece is None else piece_to_str(piece))
        lines.append(f"{row} {' '.join(codes)}")

    # 列ヘッダー（2文字幅のマスに揃える）
    lines.append("  " + " ".join(f"{col:<2}" for col in range(board.size)).rstrip())
    return "\n".join(lines)


def box_to_str(box: CaptureBox) -> str:
    """Convert a capture box to a one-line summary. 空なら "-"。"""
    contents = " ".join(piece_to_str(p) for p in box.pieces) or "-"
    return f"{box.color.name} box ({box.count_all()}/{BOX_CAPACITY}): {contents}"


def format_move(move: Move) -> str:
    return move.to_text()
