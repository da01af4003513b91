"""Tests for the move log and its cursor."""

import pytest

from chessrules.core.enums import Color, GameResult, PieceType, RejectionReason
from chessrules.core.errors import IllegalMoveError
from chessrules.core.move import Move
from chessrules.core.notation import position_from_fen, position_to_fen
from chessrules.core.options import RuleOptions
from chessrules.core.position import initial_position
from chessrules.core.types import parse_square
from chessrules.game.history import MoveLog


def _log(*uci: str) -> MoveLog:
    log = MoveLog()
    for text in uci:
        log = log.push(Move.from_uci(text))
    return log


class TestRecording:
    def test_empty_log(self) -> None:
        log = MoveLog()
        assert len(log) == 0
        assert log.cursor == -1
        assert log.current_position == initial_position()
        assert not log.is_previewing

    def test_push_advances_cursor(self) -> None:
        log = _log("e2e4", "e7e5")
        assert len(log) == 2
        assert log.cursor == 1
        assert log.ply_count == 2
        assert log.current_position.side_to_move == Color.WHITE
        assert log.current_position.piece_at(parse_square("e5")) is not None

    def test_push_rejects_illegal_move(self) -> None:
        with pytest.raises(IllegalMoveError) as exc_info:
            _log("e2e4", "e2e3")
        assert exc_info.value.reason == RejectionReason.EMPTY_SOURCE

    def test_log_is_immutable(self) -> None:
        log = _log("e2e4")
        log.push(Move.from_uci("e7e5"))
        assert len(log) == 1

    def test_record_after_previous_truncates(self) -> None:
        log = _log("e2e4", "e7e5", "g1f3").previous().previous()
        log = log.push(Move.from_uci("d7d5"))
        assert [m.uci for m in log.moves] == ["e2e4", "d7d5"]
        assert log.cursor == 1
        assert not log.is_previewing

    def test_invalid_cursor_rejected(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            MoveLog(moves=(Move.from_uci("e2e4"),), cursor=1)


class TestNavigation:
    def test_previous_and_next(self) -> None:
        log = _log("e2e4", "e7e5")
        back = log.previous()
        assert back.cursor == 0
        assert back.is_previewing
        assert back.current_position.side_to_move == Color.BLACK
        assert back.latest_position == log.current_position
        assert back.next() == log

    def test_out_of_range_is_a_no_op(self) -> None:
        log = _log("e2e4")
        assert log.next() is log
        assert log.jump_to(5) is log
        assert log.jump_to(-2) is log
        start = log.jump_to(-1)
        assert start.current_position == initial_position()
        assert start.previous() is start

    def test_undo_keeps_moves_for_redo(self) -> None:
        log = _log("e2e4", "e7e5")
        undone = log.undo()
        assert len(undone) == 2
        assert undone.cursor == 0
        assert undone.current_position == log.position_at(0)
        assert undone.next().current_position == log.current_position
        assert undone.next() == log

    def test_undo_stops_at_start(self) -> None:
        log = _log("e2e4").undo()
        assert log.cursor == -1
        assert log.current_position == initial_position()
        assert log.undo() is log

    def test_move_after_undo_discards_the_tail(self) -> None:
        log = _log("e2e4", "e7e5", "g1f3").undo().undo()
        replayed = log.push(Move.from_uci("d7d5"))
        assert len(replayed) == 2
        assert replayed.cursor == 1
        assert replayed.moves[-1] == Move.from_uci("d7d5")
        assert not replayed.is_previewing

    def test_position_at(self) -> None:
        log = _log("e2e4", "e7e5")
        assert log.position_at(-1) == initial_position()
        assert log.position_at(0).side_to_move == Color.BLACK
        with pytest.raises(IndexError):
            log.position_at(2)

    def test_reset(self) -> None:
        log = _log("e2e4").reset()
        assert len(log) == 0
        assert log.current_position == initial_position()


class TestReplay:
    def test_positions_match_engine(self) -> None:
        log = _log("e2e4", "e7e5", "g1f3", "b8c6", "f1b5")
        assert position_to_fen(log.current_position) == (
            "r1bqkbnr/pppp1ppp/2n5/1B2p3/4P3/5N2/PPPP1PPP/RNBQK2R b KQkq - 3 3"
        )

    def test_custom_start(self) -> None:
        start = position_from_fen("4k3/8/8/8/8/8/4P3/4K3 b - - 0 1")
        log = MoveLog(start=start).push(Move.from_uci("e8f7"))
        assert log.current_position.side_to_move == Color.WHITE
        assert log.position_at(-1) == start

    def test_basic_options_allow_pinned_moves(self) -> None:
        start = position_from_fen("4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1")
        with pytest.raises(IllegalMoveError):
            MoveLog(start=start).push(Move.from_uci("e2d3"))
        log = MoveLog(start=start, options=RuleOptions.basic()).push(Move.from_uci("e2d3"))
        assert len(log) == 1

    def test_result(self) -> None:
        log = _log("f2f3", "e7e5", "g2g4", "d8h4")
        assert log.result() == GameResult.BLACK_WINS
        assert _log("e2e4").result() == GameResult.IN_PROGRESS

    def test_promotion_is_replayed(self) -> None:
        start = position_from_fen("7k/4P3/8/8/8/8/8/4K3 w - - 0 1")
        log = MoveLog(start=start).push(Move.from_uci("e7e8n"))
        piece = log.current_position.piece_at(parse_square("e8"))
        assert piece is not None and piece.piece_type == PieceType.KNIGHT


class TestExport:
    def test_sans_and_movetext(self) -> None:
        log = _log("e2e4", "e7e5", "g1f3")
        assert log.sans() == ["e4", "e5", "Nf3"]
        assert log.movetext() == "1. e4 e5 2. Nf3"

    def test_movetext_covers_whole_log_while_previewing(self) -> None:
        log = _log("e2e4", "e7e5").jump_to(-1)
        assert log.movetext() == "1. e4 e5"

    def test_to_pgn(self) -> None:
        text = _log("f2f3", "e7e5", "g2g4", "d8h4").to_pgn({"White": "Alice"})
        assert '[White "Alice"]' in text
        assert '[Result "0-1"]' in text
        assert text.splitlines()[-1] == "1. f3 e5 2. g4 Qh4# 0-1"

    def test_to_pgn_from_custom_start(self) -> None:
        start = position_from_fen("4k3/8/8/8/8/8/4P3/4K3 b - - 0 12")
        text = MoveLog(start=start).push(Move.from_uci("e8d7")).to_pgn()
        assert '[SetUp "1"]' in text
        assert text.splitlines()[-1] == "12... Kd7 *"
