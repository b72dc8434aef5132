"""UndoMechanism protocol: all history strategies implement this interface.

「待った」（手を戻す）機能の共通インタフェース（プロトコル）。

局面のスナップショットを積む方式と、手の列を保存して再生する方式の2つがあり、
どちらもこのプロトコルを満たすので CLI はどちらを使っているかを意識しない。
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from noventagrados.game.moves import Move
from noventagrados.game.referee import Referee


@runtime_checkable  # isinstance() でのランタイムチェックを有効にする
class UndoMechanism(Protocol):
    """Common interface for game histories with undo."""

    @property
    def started_at(self) -> datetime:
        """対局開始時刻。"""
        ...

    @property
    def move_count(self) -> int:
        """履歴に記録されている手数。"""
        ...

    def current_referee(self) -> Referee:
        """現在の局面の審判を返す（呼び出し側が変更しても履歴には影響しない）。"""
        ...

    def play(self, move: Move) -> None:
        """手番の側の手を指す。非合法手なら ValueError。"""
        ...

    def undo(self) -> None:
        """最後の1手を取り消す。履歴が空なら何もしない。"""
        ...
