"""Read-only board queries.

盤面を読み取るだけの計算（状態を持たない関数群）。
合法手判定・押し出し処理・勝敗判定から使われる。
"""

from __future__ import annotations

from noventagrados.game.board import Board
from noventagrados.game.types import Color, Coordinate, Direction, PieceKind


def direction_between(origin: Coordinate, destination: Coordinate) -> Direction | None:
    """Return the direction from origin to destination.

    同じ行なら東（列が増える）か西、同じ列なら南（行が増える）か北。
    斜め、または同じ座標なら None。
    """
    d_row = destination.row - origin.row
    d_col = destination.col - origin.col
    if d_row == 0 and d_col != 0:
        return Direction.EAST if d_col > 0 else Direction.WEST
    if d_col == 0 and d_row != 0:
        return Direction.SOUTH if d_row > 0 else Direction.NORTH
    return None


def horizontal_distance(origin: Coordinate, destination: Coordinate) -> int:
    """列方向の距離。同じ行でなければ -1。"""
    if origin.row != destination.row:
        return -1
    return abs(destination.col - origin.col)


def vertical_distance(origin: Coordinate, destination: Coordinate) -> int:
    """行方向の距離。同じ列でなければ -1。"""
    if origin.col != destination.col:
        return -1
    return abs(destination.row - origin.row)


def count_pieces_in_row(board: Board, coordinate: Coordinate) -> int:
    """Number of occupied cells in the row through `coordinate`."""
    return sum(
        1 for col in range(board.size)
        if board.piece_at(Coordinate(coordinate.row, col)) is not None
    )


def count_pieces_in_column(board: Board, coordinate: Coordinate) -> int:
    """Number of occupied cells in the column through `coordinate`."""
    return sum(
        1 for row in range(board.size)
        if board.piece_at(Coordinate(row, coordinate.col)) is not None
    )


def count_pieces(board: Board, kind: PieceKind, color: Color) -> int:
    """Number of pieces of one kind and side on the board."""
    return sum(
        1 for cell in board.occupied()
        if cell.piece.kind == kind and cell.piece.color == color
    )


def center(board: Board) -> Coordinate:
    """中央のマス。7×7 なら (3, 3)。"""
    return Coordinate(board.size // 2, board.size // 2)


def has_queen(board: Board, color: Color) -> bool:
    """その色のクイーンが盤上に残っていれば True。"""
    return count_pieces(board, PieceKind.QUEEN, color) > 0


def is_queen_centered(board: Board, color: Color) -> bool:
    """その色のクイーンが中央のマスにいれば True（勝利条件）。"""
    piece = board.piece_at(center(board))
    return piece is not None and piece.kind == PieceKind.QUEEN and piece.color == color
