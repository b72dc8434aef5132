"""Console game configuration.

コンソール対局の設定定義。
盤面サイズ（7）と捕獲ボックスの容量（7）はルールの一部なので設定には含めない。
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Configuration for a console game.

    Attributes:
        undo_mode:        「待った」の方式。"snapshots"（局面を積む）か "replay"（手を再生）
        show_legal_moves: 毎手、合法手の一覧を表示するか
    """

    undo_mode: str = "snapshots"
    show_legal_moves: bool = True


# 標準設定: スナップショット方式、合法手を表示
DEFAULT_CONFIG = GameConfig()

# 手の再生方式（メモリは少ないが、局面の取得は手数に比例して遅くなる）
REPLAY_CONFIG = GameConfig(undo_mode="replay")
