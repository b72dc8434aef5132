"""Tests for the console front-end."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

import pytest

from noventagrados import cli
from noventagrados.config import DEFAULT_CONFIG, REPLAY_CONFIG, GameConfig
from noventagrados.game.board import Board, Piece
from noventagrados.game.referee import Referee
from noventagrados.game.types import Color, Coordinate, PieceKind


def _feed(monkeypatch: pytest.MonkeyPatch, lines: Iterable[str]) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


class TestPlay:
    def test_move_undo_quit(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        _feed(monkeypatch, ["01-02", "u", "q"])
        assert cli.play(DEFAULT_CONFIG) == 1
        out = capsys.readouterr().out
        assert "Legal moves:" in out
        assert "0 QW -- PW PW PW -- --" in out  # 01-02 を指した後の局面
        assert "BLACK to play" in out
        assert "Game aborted." in out

    def test_unknown_option(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        _feed(monkeypatch, ["hello", "q"])
        cli.play(DEFAULT_CONFIG)
        assert "Unknown option: 'hello'" in capsys.readouterr().out

    def test_illegal_move(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        _feed(monkeypatch, ["01-03", "q"])
        cli.play(DEFAULT_CONFIG)
        assert "Illegal move: 01-03" in capsys.readouterr().out

    def test_malformed_move(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        _feed(monkeypatch, ["1-2", "q"])
        cli.play(DEFAULT_CONFIG)
        assert "Invalid move notation" in capsys.readouterr().out

    def test_nothing_to_undo(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        _feed(monkeypatch, ["u", "q"])
        cli.play(REPLAY_CONFIG)
        assert "Nothing to undo." in capsys.readouterr().out

    def test_eof_aborts(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        _feed(monkeypatch, [])
        assert cli.play(DEFAULT_CONFIG) == 1
        assert "Game aborted." in capsys.readouterr().out

    def test_hidden_legal_moves(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        _feed(monkeypatch, ["q"])
        cli.play(GameConfig(show_legal_moves=False))
        assert "Legal moves:" not in capsys.readouterr().out

    def test_finished_game(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        referee = Referee(Board())
        referee.place_pieces(
            [Piece(PieceKind.QUEEN, Color.WHITE), Piece(PieceKind.QUEEN, Color.BLACK)],
            [Coordinate(3, 3), Coordinate(6, 6)],
            Color.BLACK,
        )

        class FinishedHistory:
            started_at = datetime(2024, 1, 1)
            move_count = 0

            def current_referee(self) -> Referee:
                return referee.clone()

        monkeypatch.setattr(cli, "create_history", lambda mode: FinishedHistory())
        assert cli.play(DEFAULT_CONFIG) == 0
        assert "WHITE wins!" in capsys.readouterr().out


class TestMain:
    def test_replay_without_legal_moves(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        _feed(monkeypatch, ["01-02", "q"])
        assert cli.main(["--undo", "replay", "--no-legal-moves"]) == 1
        out = capsys.readouterr().out
        assert "Legal moves:" not in out
        assert "BLACK to play" in out

    def test_rejects_unknown_undo_mode(self) -> None:
        with pytest.raises(SystemExit):
            cli.main(["--undo", "tape"])


def test_config_presets() -> None:
    assert DEFAULT_CONFIG.undo_mode == "snapshots"
    assert REPLAY_CONFIG.undo_mode == "replay"
    assert DEFAULT_CONFIG.show_legal_moves
