"""Engine settings resolved from defaults and environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_SEARCH_DEPTH = 4
DEFAULT_TOP_MOVES = 5
DEFAULT_LOG_LEVEL = "WARNING"

ENV_SEARCH_DEPTH = "KIBITZER_SEARCH_DEPTH"
ENV_TOP_MOVES = "KIBITZER_TOP_MOVES"
ENV_LOG_LEVEL = "KIBITZER_LOG_LEVEL"


def _positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


@dataclass(slots=True, frozen=True)
class EngineSettings:
    """Defaults applied when a caller does not pass explicit limits."""

    search_depth: int = DEFAULT_SEARCH_DEPTH
    top_moves: int = DEFAULT_TOP_MOVES
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.search_depth < 1:
            raise ValueError(f"search_depth must be >= 1, got {self.search_depth}")
        if self.top_moves < 1:
            raise ValueError(f"top_moves must be >= 1, got {self.top_moves}")
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EngineSettings:
        env = os.environ if environ is None else environ
        depth = env.get(ENV_SEARCH_DEPTH)
        top = env.get(ENV_TOP_MOVES)
        return cls(
            search_depth=(
                _positive_int(ENV_SEARCH_DEPTH, depth)
                if depth
                else DEFAULT_SEARCH_DEPTH
            ),
            top_moves=_positive_int(ENV_TOP_MOVES, top) if top else DEFAULT_TOP_MOVES,
            log_level=env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper(),
        )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level.upper()]
