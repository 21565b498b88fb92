"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from kibitzer.config import ENV_LOG_LEVEL, ENV_SEARCH_DEPTH, ENV_TOP_MOVES
from kibitzer.core.notation import STARTING_FEN, position_from_fen
from kibitzer.core.position import Position
from kibitzer.engine.analysis import AnalysisEngine


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer shell settings out of the tests."""
    for name in (ENV_SEARCH_DEPTH, ENV_TOP_MOVES, ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def start_position() -> Position:
    return position_from_fen(STARTING_FEN)


@pytest.fixture
def engine() -> AnalysisEngine:
    return AnalysisEngine()
