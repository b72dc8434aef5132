"""Moves, move notation and push geometry for Noventagrados.

手の表現と、押し出し処理の幾何計算。

移動距離のルール:
  駒は縦横どちらかに一直線に動く。移動距離は「移動方向と垂直な線上にある駒の数」
  （移動する駒自身を含む）とちょうど等しくなければならない。
    横に動く → 移動元の列にある駒の数
    縦に動く → 移動元の行にある駒の数

棋譜表記:
  移動元と移動先の座標を2桁ずつ並べる。例: (0, 0) → (1, 1) は "00-11"
"""

from __future__ import annotations

from dataclasses import dataclass

from noventagrados.game.board import Board
from noventagrados.game.queries import (
    count_pieces_in_column,
    count_pieces_in_row,
    direction_between,
    horizontal_distance,
    vertical_distance,
)
from noventagrados.game.types import Color, Coordinate, Direction


@dataclass(frozen=True)
class Move:
    """A proposed move: origin and destination coordinates.

    手の「要求」を表すだけで、審判（Referee）はこれを保存しない。
    """

    origin: Coordinate
    destination: Coordinate

    def to_text(self) -> str:
        return f"{self.origin.to_text()}-{self.destination.to_text()}"


def parse_move(text: str) -> Move:
    """Parse move notation such as "01-02" (the dash is optional).

    盤内かどうかはここでは確認しない（合法手判定は Referee の役割）。
    """
    digits = text.replace(" ", "").replace("-", "")
    if len(digits) != 4 or not digits.isdigit():
        raise ValueError(f"Invalid move notation: {text!r} (expected e.g. 01-02)")
    rows_cols = [int(ch) for ch in digits]
    return Move(
        Coordinate(rows_cols[0], rows_cols[1]),
        Coordinate(rows_cols[2], rows_cols[3]),
    )


def move_distance(origin: Coordinate, destination: Coordinate) -> int:
    """Distance along the shared axis, or -1 if the points are not aligned."""
    if origin.row == destination.row:
        return horizontal_distance(origin, destination)
    return vertical_distance(origin, destination)


def perpendicular_count(board: Board, origin: Coordinate, direction: Direction) -> int:
    """Number of pieces on the line through `origin` perpendicular to `direction`.

    この値がその方向への移動距離になる。
    """
    if direction.is_horizontal:
        return count_pieces_in_column(board, origin)
    return count_pieces_in_row(board, origin)


def has_piece_on_path(board: Board, origin: Coordinate, destination: Coordinate) -> bool:
    """True if any cell after `origin`, up to and including `destination`, is occupied."""
    direction = direction_between(origin, destination)
    if direction is None:
        return False
    distance = move_distance(origin, destination)
    return any(
        board.piece_at(origin.shifted(direction, step)) is not None
        for step in range(1, distance + 1)
    )


def push_path(
    board: Board,
    origin: Coordinate,
    direction: Direction,
    budget: int,
) -> list[Coordinate]:
    """Collect the coordinates of the pieces a move from `origin` will push.

    移動元の隣のマスから盤端に向かって走査し、駒のあるマスの座標を集める。
    空きマスを budget 個数えた時点で走査を打ち切る（駒のあるマスは数えない）。
    返すリストは移動元に近い順。
    """
    found: list[Coordinate] = []
    empties = 0
    current = origin.shifted(direction)
    while board.is_in_bounds(current):
        if board.piece_at(current) is not None:
            found.append(current)
        else:
            empties += 1
        if empties == budget:
            break
        current = current.shifted(direction)
    return found


def candidate_moves(board: Board, color: Color) -> list[Move]:
    """Generate the geometrically possible moves for `color`'s pieces.

    手番や終局は考慮しない（それは Referee.is_legal_move の役割）。
    各駒・各方向について移動距離は1通りに決まるので、盤内に収まるものだけを返す。
    """
    moves: list[Move] = []
    for cell in board.occupied():
        if cell.piece.color != color:
            continue
        origin = cell.coordinate
        for direction in Direction:
            distance = perpendicular_count(board, origin, direction)
            destination = origin.shifted(direction, distance)
            if board.is_in_bounds(destination):
                moves.append(Move(origin, destination))
    return sorted(moves, key=lambda m: (m.origin, m.destination))
