"""Referee: game state and rule enforcement for Noventagrados.

ノベンタグラドスの審判。盤面・手番・手数・捕獲ボックスを持ち、
合法手判定、押し出し処理、勝敗判定を担当する。

Board が盤面データを持ち、Referee がルールを適用する。
1手（プライ）は push() と end_turn() の組み合わせで完了する。

Terminal conditions（終局条件）:
1. クイーン除去: 相手のクイーンが盤上にない → 残った側の勝ち
2. 中央到達: 自分のクイーンが中央 (3, 3) にいる → その側の勝ち
3. 両方のクイーンがない → 引き分け（勝者なしで終局）
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from noventagrados.game.board import Board, Piece
from noventagrados.game.capture_box import CaptureBox
from noventagrados.game.moves import (
    Move,
    candidate_moves,
    has_piece_on_path,
    move_distance,
    perpendicular_count,
    push_path,
)
from noventagrados.game.queries import direction_between, has_queen, is_queen_centered
from noventagrados.game.types import Color, Coordinate, PieceKind

logger = logging.getLogger(__name__)


def initial_layout() -> list[tuple[Piece, Coordinate]]:
    """Return the standard opening position as (piece, coordinate) pairs.

    標準的な初期配置を返す。

    白: クイーン (0,0)、ポーンは上端 (0,1)〜(0,3) と左端 (1,0)〜(3,0)
    黒: クイーン (6,6)、ポーンは右端 (3,6)〜(5,6) と下端 (6,3)〜(6,5)
    """
    white_queen = Piece(PieceKind.QUEEN, Color.WHITE)
    black_queen = Piece(PieceKind.QUEEN, Color.BLACK)
    white_pawn = Piece(PieceKind.PAWN, Color.WHITE)
    black_pawn = Piece(PieceKind.PAWN, Color.BLACK)

    layout = [
        (white_queen, Coordinate(0, 0)),
        (black_queen, Coordinate(6, 6)),
    ]
    # 白のポーン: クイーンの隣の2辺
    for i in range(1, 4):
        layout.append((white_pawn, Coordinate(0, i)))
    for i in range(1, 4):
        layout.append((white_pawn, Coordinate(i, 0)))
    # 黒のポーン: 白と点対称
    for i in range(3, 6):
        layout.append((black_pawn, Coordinate(i, 6)))
    for i in range(3, 6):
        layout.append((black_pawn, Coordinate(6, i)))
    return layout


class Referee:
    """Game state machine: board, turn, move counter and both capture boxes.

    手番は駒を配置するまで None。渡された盤面はコピーして保持する。
    読み出し系（board, capture_box, clone）はすべて独立したコピーを返す。
    """

    def __init__(self, board: Board) -> None:
        if board is None:
            raise ValueError("Referee requires a board")
        self._board = board.clone()
        self._move_count = 0
        self._current_turn: Color | None = None
        self._boxes: dict[Color, CaptureBox] = {
            Color.WHITE: CaptureBox(Color.WHITE),
            Color.BLACK: CaptureBox(Color.BLACK),
        }

    # ------------------------------------------------------------------
    # Setup

    def place_pieces(
        self,
        pieces: Sequence[Piece],
        coordinates: Sequence[Coordinate],
        starting_color: Color,
    ) -> None:
        """Place each piece at its paired coordinate and set the first turn.

        同じ座標が重複した場合は後のものが勝つ。
        """
        if pieces is None or coordinates is None or starting_color is None:
            raise ValueError("pieces, coordinates and starting_color are required")
        if len(pieces) != len(coordinates):
            raise ValueError(
                f"Got {len(pieces)} pieces for {len(coordinates)} coordinates"
            )
        for piece, coordinate in zip(pieces, coordinates):
            self._board.place(piece, coordinate)
        self._current_turn = starting_color

    def place_initial_layout(self) -> None:
        """Set up the opening position with White to move."""
        pieces, coordinates = zip(*initial_layout())
        self.place_pieces(pieces, coordinates, Color.WHITE)

    # ------------------------------------------------------------------
    # Queries

    @property
    def board(self) -> Board:
        """盤面のコピー。"""
        return self._board.clone()

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def current_turn(self) -> Color | None:
        return self._current_turn

    def capture_box(self, color: Color) -> CaptureBox:
        """Return a copy of `color`'s capture box."""
        if not isinstance(color, Color):
            raise ValueError(f"Invalid color: {color!r}")
        return self._boxes[color].clone()

    @property
    def winner(self) -> Color | None:
        """勝者を返す。対局中または引き分けは None。

        判定順序:
        1. クイーン除去 → クイーンを失った側の負け
        2. 中央到達 → 白、黒の順に確認（中央は1マスなので順序は結果に影響しない）
        """
        white_alive = has_queen(self._board, Color.WHITE)
        black_alive = has_queen(self._board, Color.BLACK)
        if not white_alive and not black_alive:
            return None  # 両方のクイーンが消えた → 引き分け
        if not white_alive:
            return Color.BLACK
        if not black_alive:
            return Color.WHITE
        for color in Color:
            if is_queen_centered(self._board, color):
                return color
        return None

    @property
    def is_game_over(self) -> bool:
        """勝者がいるか、両方のクイーンが盤上にない（引き分け）なら True。"""
        if self.winner is not None:
            return True
        return not has_queen(self._board, Color.WHITE) and not has_queen(
            self._board, Color.BLACK
        )

    def is_legal_move(self, move: Move) -> bool:
        """Check whether `move` is legal for the side to move.

        状態は変更しない。判定順序:
        1. 終局していれば不可
        2. 移動元・移動先のどちらかが盤外なら不可
        3. 移動元が空なら不可
        4. 移動元の駒が手番の色でなければ不可
        5. 縦か横の一直線でなければ不可（斜め・移動なしは不可）
        6. 移動距離 == 垂直方向の駒数 のときだけ合法
        """
        origin, destination = move.origin, move.destination
        if self.is_game_over:
            return False
        if not (self._board.is_in_bounds(origin) and self._board.is_in_bounds(destination)):
            return False
        piece = self._board.piece_at(origin)
        if piece is None or piece.color != self._current_turn:
            return False
        direction = direction_between(origin, destination)
        if direction is None:
            return False
        required = perpendicular_count(self._board, origin, direction)
        return move_distance(origin, destination) == required

    def legal_moves(self) -> list[Move]:
        """Return all legal moves for the side to move, sorted by origin."""
        if self._current_turn is None:
            return []
        return [
            move for move in candidate_moves(self._board, self._current_turn)
            if self.is_legal_move(move)
        ]

    # ------------------------------------------------------------------
    # Transitions

    def end_turn(self) -> None:
        """手番を交代する。他の状態は変わらない。"""
        if self._current_turn is None:
            self._current_turn = Color.WHITE
        else:
            self._current_turn = self._current_turn.opponent

    def push(self, move: Move) -> None:
        """Execute `move`, pushing any pieces in its way.

        呼び出し側が is_legal_move() で合法性を確認済みであることが前提。
        手番の確認はせず、幾何計算だけをやり直す。手番の交代もしない。

        押し出し処理:
        1. 移動元から盤端に向かって、押される駒の座標を集める
        2. 移動先に近い駒から順に（逆順に）距離ぶんずらす
           → 先に動かした駒のマスは空いているので、読む前に上書きされることはない
        3. 盤外に出た駒は、その駒の色の捕獲ボックスに入れる
        4. 最後に移動元の駒を移動先に置く
        """
        origin, destination = move.origin, move.destination
        mover = self._board.piece_at(origin)
        if mover is None:
            raise ValueError(f"No piece at {origin.to_text()}")
        direction = direction_between(origin, destination)
        if direction is None:
            raise ValueError(f"Move {move.to_text()} is not horizontal or vertical")
        distance = move_distance(origin, destination)

        if has_piece_on_path(self._board, origin, destination):
            budget = perpendicular_count(self._board, origin, direction)
            path = push_path(self._board, origin, direction, budget)
            for coordinate in reversed(path):
                pushed = self._board.piece_at(coordinate)
                target = coordinate.shifted(direction, distance)
                self._board.remove_piece(coordinate)
                if self._board.is_in_bounds(target):
                    self._board.place(pushed, target)
                else:
                    self._eject(pushed)

        self._board.remove_piece(origin)
        self._board.place(mover, destination)
        self._move_count += 1
        logger.debug("Move %d: %s", self._move_count, move.to_text())

    def _eject(self, piece: Piece) -> None:
        # 盤外に出た駒は自分の色の箱へ（満杯なら捨てられる）
        box = self._boxes[piece.color]
        box.add(piece)
        logger.debug(
            "Ejected %s %s (%s box: %d)",
            piece.color.name, piece.kind.name, piece.color.name, box.count_all(),
        )

    # ------------------------------------------------------------------
    # Copying and comparison

    def clone(self) -> Referee:
        """Return a fully independent copy of this referee."""
        clone = Referee(self._board.clone())
        clone._move_count = self._move_count
        clone._current_turn = self._current_turn
        clone._boxes = {color: box.clone() for color, box in self._boxes.items()}
        return clone

    def _state_key(self) -> tuple:
        return (
            tuple((cell.coordinate, cell.piece) for cell in self._board.occupied()),
            self._boxes[Color.WHITE].pieces,
            self._boxes[Color.BLACK].pieces,
            self._move_count,
            self._current_turn,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Referee):
            return NotImplemented
        return self._state_key() == other._state_key()

    def __hash__(self) -> int:
        # 可変オブジェクトなので、ハッシュ値は状態を変更するまでしか有効でない
        return hash(self._state_key())

    def __repr__(self) -> str:
        turn = self._current_turn.name if self._current_turn is not None else None
        return (
            f"Referee(move_count={self._move_count}, turn={turn}, "
            f"board={self._board!r})"
        )
