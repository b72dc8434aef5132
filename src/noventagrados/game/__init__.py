"""Noventagrados 7x7 push game rules engine."""

from noventagrados.game.board import Board, Cell, Piece
from noventagrados.game.capture_box import CaptureBox
from noventagrados.game.display import board_to_str, box_to_str
from noventagrados.game.moves import Move, parse_move
from noventagrados.game.referee import Referee, initial_layout
from noventagrados.game.types import (
    BOARD_SIZE,
    BOX_CAPACITY,
    Color,
    Coordinate,
    Direction,
    PieceKind,
)

__all__ = [
    "BOARD_SIZE",
    "BOX_CAPACITY",
    "Board",
    "CaptureBox",
    "Cell",
    "Color",
    "Coordinate",
    "Direction",
    "Move",
    "Piece",
    "PieceKind",
    "Referee",
    "board_to_str",
    "box_to_str",
    "initial_layout",
    "parse_move",
]
