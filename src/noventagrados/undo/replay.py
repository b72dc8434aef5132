"""Replay history: keeps the list of moves and re-simulates from the opening.

手の列だけを保存し、現在局面が必要になるたびに初期配置から再生する方式。
メモリは少なくて済むが、current_referee() は手数に比例して O(n)。
"""

from __future__ import annotations

import logging
from datetime import datetime

from noventagrados.game.board import Board
from noventagrados.game.moves import Move
from noventagrados.game.referee import Referee

logger = logging.getLogger(__name__)


class ReplayHistory:
    """History that stores moves and replays them on demand."""

    def __init__(self, started_at: datetime) -> None:
        if started_at is None:
            raise ValueError("started_at is required")
        self._started_at = started_at
        self._moves: list[Move] = []

    @property
    def started_at(self) -> datetime:
        return self._started_at

    @property
    def move_count(self) -> int:
        return len(self._moves)

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    def current_referee(self) -> Referee:
        """Rebuild the current position from the opening layout."""
        referee = Referee(Board())
        referee.place_initial_layout()
        for move in self._moves:
            # 保存時に合法性を確認済みなので、再生は必ず成功する
            referee.push(move)
            referee.end_turn()
        return referee

    def play(self, move: Move) -> None:
        # 保存する手は必ず合法手
        if not self.current_referee().is_legal_move(move):
            raise ValueError(f"Illegal move: {move.to_text()}")
        self._moves.append(move)
        logger.debug("Recorded move %d: %s", self.move_count, move.to_text())

    def undo(self) -> None:
        if self._moves:
            undone = self._moves.pop()
            logger.debug("Undo: dropped %s", undone.to_text())
