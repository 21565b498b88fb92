"""Engine layer: static evaluation, heuristic ranking, minimax search.

Quick start::

    from kibitzer.engine import AnalysisEngine

    engine = AnalysisEngine()
    print(engine.analyze_position(fen, depth=3).to_formatted_string())
"""

from kibitzer.engine.analysis import AnalysisEngine
from kibitzer.engine.evaluation import (
    MATE_SCORE,
    MATE_THRESHOLD,
    PIECE_VALUES,
    evaluate,
    format_evaluation,
)
from kibitzer.engine.heuristic import MoveScorer
from kibitzer.engine.minimax import MinimaxSearch
from kibitzer.engine.search import (
    EngineAnalysis,
    ScoredMove,
    SearchLimits,
    SearchResult,
)

__all__ = [
    "AnalysisEngine",
    "EngineAnalysis",
    "MATE_SCORE",
    "MATE_THRESHOLD",
    "MinimaxSearch",
    "MoveScorer",
    "PIECE_VALUES",
    "ScoredMove",
    "SearchLimits",
    "SearchResult",
    "evaluate",
    "format_evaluation",
]
