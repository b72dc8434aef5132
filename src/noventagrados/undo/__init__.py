"""Game histories with undo (snapshot and replay strategies)."""

from __future__ import annotations

from datetime import datetime

from noventagrados.undo.protocol import UndoMechanism
from noventagrados.undo.replay import ReplayHistory
from noventagrados.undo.snapshots import SnapshotHistory

# 戻し方式の名前 → 実装クラス
UNDO_MODES: dict[str, type] = {
    "snapshots": SnapshotHistory,
    "replay": ReplayHistory,
}


def create_history(mode: str, started_at: datetime | None = None) -> UndoMechanism:
    """Create a history using the named strategy ("snapshots" or "replay").

    started_at を省略すると現在時刻を使う。
    """
    if mode not in UNDO_MODES:
        raise ValueError(f"Unknown undo mode: {mode!r} (choose from {sorted(UNDO_MODES)})")
    return UNDO_MODES[mode](started_at if started_at is not None else datetime.now())


__all__ = [
    "ReplayHistory",
    "SnapshotHistory",
    "UNDO_MODES",
    "UndoMechanism",
    "create_history",
]
