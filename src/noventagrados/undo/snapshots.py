"""Snapshot history: keeps one referee clone per ply.

1手ごとに審判のコピーを積んでいく方式。
取り消しは最後のコピーを捨てるだけなので O(1)。その代わりメモリは手数に比例する。
"""

from __future__ import annotations

import logging
from datetime import datetime

from noventagrados.game.board import Board
from noventagrados.game.moves import Move
from noventagrados.game.referee import Referee

logger = logging.getLogger(__name__)


class SnapshotHistory:
    """History that stores full referee snapshots, starting from the opening."""

    def __init__(self, started_at: datetime) -> None:
        if started_at is None:
            raise ValueError("started_at is required")
        self._started_at = started_at
        opening = Referee(Board())
        opening.place_initial_layout()
        self._snapshots: list[Referee] = [opening]

    @property
    def started_at(self) -> datetime:
        return self._started_at

    @property
    def move_count(self) -> int:
        # 先頭の初期局面は手に数えない
        return len(self._snapshots) - 1

    def current_referee(self) -> Referee:
        return self._snapshots[-1].clone()

    def play(self, move: Move) -> None:
        referee = self._snapshots[-1].clone()
        if not referee.is_legal_move(move):
            raise ValueError(f"Illegal move: {move.to_text()}")
        referee.push(move)
        referee.end_turn()
        self._snapshots.append(referee)
        logger.debug("Snapshot %d stored after %s", self.move_count, move.to_text())

    def undo(self) -> None:
        if len(self._snapshots) > 1:
            self._snapshots.pop()
            logger.debug("Undo: back to snapshot %d", self.move_count)
