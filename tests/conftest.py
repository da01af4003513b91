"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.move import Move
from chessrules.core.notation import position_from_fen
from chessrules.core.options import RuleOptions
from chessrules.core.position import Position, initial_position
from chessrules.core.validator import play

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


def _play_uci(
    position: Position, *moves: str, options: RuleOptions | None = None
) -> Position:
    opts = options if options is not None else RuleOptions.standard()
    for text in moves:
        position = play(position, Move.from_uci(text), opts)
    return position


@pytest.fixture
def play_uci() -> Callable[..., Position]:
    """Validate and apply a sequence of UCI moves: ``play_uci(pos, "e2e4", ...)``."""
    return _play_uci


@pytest.fixture
def start() -> Position:
    return initial_position()


@pytest.fixture
def after_e4_e5() -> Position:
    return _play_uci(initial_position(), "e2e4", "e7e5")


@pytest.fixture
def kiwipete() -> Position:
    return position_from_fen(KIWIPETE)


@pytest.fixture(params=[RuleOptions.standard(), RuleOptions.basic()], ids=["standard", "basic"])
def options(request: pytest.FixtureRequest) -> RuleOptions:
    """Both rule presets; core movement properties must hold under each."""
    return request.param
