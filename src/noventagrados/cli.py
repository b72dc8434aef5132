"""CLI entry point for noventagrados: two humans at one console.

コマンドラインで動くノベンタグラドス対局プログラム。
1台の端末で白と黒が交互に手を入力する（AI 対戦はない）。

起動方法: `noventagrados`（オプションは --help を参照）
"""

from __future__ import annotations

import argparse
import logging

from noventagrados.config import GameConfig
from noventagrados.game.display import board_to_str, box_to_str, format_move
from noventagrados.game.moves import parse_move
from noventagrados.game.referee import Referee
from noventagrados.game.types import Color
from noventagrados.undo import UNDO_MODES, UndoMechanism, create_history

UNDO_COMMANDS = {"u", "undo"}
QUIT_COMMANDS = {"q", "quit"}


class OptionUnavailableError(Exception):
    """The console input is neither a move nor a known command."""


def _print_position(referee: Referee, config: GameConfig) -> None:
    """盤面・両方の捕獲ボックス・手番（と合法手一覧）を表示する。"""
    print(board_to_str(referee.board))
    for color in Color:
        print(box_to_str(referee.capture_box(color)))
    print()
    turn = referee.current_turn
    print(f"Move {referee.move_count + 1}, {turn.name if turn is not None else '?'} to play.")
    if config.show_legal_moves:
        moves = referee.legal_moves()
        print("Legal moves: " + (" ".join(format_move(m) for m in moves) or "-"))


def _handle_command(history: UndoMechanism, command: str) -> bool:
    """Apply one console command. Returns False when the player quits.

    手の入力は履歴経由で指す。非合法手は ValueError、未知の入力は
    OptionUnavailableError になり、どちらも呼び出し側のループで表示する。
    """
    text = command.strip().lower()
    if text in QUIT_COMMANDS:
        return False
    if text in UNDO_COMMANDS:
        if history.move_count == 0:
            print("Nothing to undo.")
        else:
            history.undo()
        return True
    if not text or not any(ch.isdigit() for ch in text):
        raise OptionUnavailableError(f"Unknown option: {command.strip()!r}")
    history.play(parse_move(text))
    return True


def play(config: GameConfig) -> int:
    """Run one console game.

    ゲームの流れ:
    1. 盤面を表示
    2. 手（例: 01-02）、u（待った）、q（終了）のいずれかを入力
    3. 終局まで繰り返す
    """
    history = create_history(config.undo_mode)
    print("=== Noventagrados ===")
    print("Enter moves as origin-destination (e.g. 01-02), 'u' to undo, 'q' to quit.")
    print()

    referee = history.current_referee()
    while not referee.is_game_over:
        _print_position(referee, config)

        # 入力検証ループ（受け付けられる入力が来るまで繰り返す）
        while True:
            try:
                command = input("> ")
                if not _handle_command(history, command):
                    print("Game aborted.")
                    return 1
                break
            except (ValueError, OptionUnavailableError) as exc:
                print(exc)
            except (EOFError, KeyboardInterrupt):
                print("\nGame aborted.")
                return 1

        referee = history.current_referee()
        print()

    # 終局: 結果を表示
    print(board_to_str(referee.board))
    print()
    winner = referee.winner
    if winner is None:
        print("Draw!")
    else:
        print(f"{winner.name} wins!")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="noventagrados")
    parser.add_argument(
        "--undo",
        choices=sorted(UNDO_MODES),
        default=GameConfig.undo_mode,
        help="History strategy used for undo (default: snapshots).",
    )
    parser.add_argument(
        "--no-legal-moves",
        action="store_true",
        help="Do not list the legal moves before each turn.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = GameConfig(undo_mode=args.undo, show_legal_moves=not args.no_legal_moves)
    return play(config)


if __name__ == "__main__":
    raise SystemExit(main())
