"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import replace
from pathlib import Path

from kibitzer.config import EngineSettings
from kibitzer.core.display import render_board
from kibitzer.core.notation import position_to_fen, replay_pgn
from kibitzer.engine.analysis import AnalysisEngine

_LOGGER = logging.getLogger(__name__)

Handler = Callable[[argparse.Namespace, AnalysisEngine], int]


# ── Sub-command handlers ─────────────────────────────────────────────────────


def _cmd_moves(args: argparse.Namespace, engine: AnalysisEngine) -> int:
    moves = engine.legal_moves(args.fen, pseudo=args.pseudo)
    print(" ".join(moves))
    return 0


def _cmd_best(args: argparse.Namespace, engine: AnalysisEngine) -> int:
    best = engine.find_best_move(args.fen)
    if best is None:
        print("No legal moves")
        return 1
    print(best)
    return 0


def _cmd_top(args: argparse.Namespace, engine: AnalysisEngine) -> int:
    top = engine.get_top_moves(args.fen, args.count)
    if not top:
        print("No legal moves")
        return 1
    for idx, scored in enumerate(top, start=1):
        print(f"{idx}. {scored}")
    return 0


def _cmd_analyze(args: argparse.Namespace, engine: AnalysisEngine) -> int:
    report = engine.analyze_position(args.fen, args.depth)
    sys.stdout.write(report.to_formatted_string())
    return 0


def _cmd_board(args: argparse.Namespace, engine: AnalysisEngine) -> int:
    print(engine.describe_position(args.fen))
    return 0


def _cmd_pgn(args: argparse.Namespace, engine: AnalysisEngine) -> int:
    if args.file is None:
        text = sys.stdin.read()
    else:
        text = Path(args.file).read_text(encoding="utf-8")

    replay = replay_pgn(text)
    if replay.skipped:
        _LOGGER.info("Skipped %d PGN tokens: %s", len(replay.skipped), replay.skipped)
    print(position_to_fen(replay.position))
    print(render_board(replay.position.board))
    return 0


# ── Parser ───────────────────────────────────────────────────────────────────


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a value >= 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kibitzer",
        description="Inspect chess positions: legal moves, move ranking, analysis.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to $KIBITZER_LOG_LEVEL or WARNING).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    moves = subparsers.add_parser("moves", help="List the moves of a position.")
    moves.add_argument("fen", help="Position in FEN.")
    moves.add_argument(
        "--pseudo",
        action="store_true",
        help="List pseudo-legal moves instead of legal ones.",
    )
    moves.set_defaults(handler=_cmd_moves)

    best = subparsers.add_parser("best", help="Heuristic best move.")
    best.add_argument("fen", help="Position in FEN.")
    best.set_defaults(handler=_cmd_best)

    top = subparsers.add_parser("top", help="Heuristic top-N moves.")
    top.add_argument("fen", help="Position in FEN.")
    top.add_argument(
        "-n",
        "--count",
        type=_positive_int,
        default=None,
        help="Number of moves (defaults to the configured top_moves).",
    )
    top.set_defaults(handler=_cmd_top)

    analyze = subparsers.add_parser("analyze", help="Full engine analysis.")
    analyze.add_argument("fen", help="Position in FEN.")
    analyze.add_argument(
        "--depth",
        type=_positive_int,
        default=None,
        help="Minimax depth in plies (defaults to the configured search_depth).",
    )
    analyze.set_defaults(handler=_cmd_analyze)

    board = subparsers.add_parser("board", help="Describe a position.")
    board.add_argument("fen", help="Position in FEN.")
    board.set_defaults(handler=_cmd_board)

    pgn = subparsers.add_parser("pgn", help="Reconstruct the final position of a PGN.")
    pgn.add_argument("file", nargs="?", default=None, help="PGN file (stdin if omitted).")
    pgn.set_defaults(handler=_cmd_pgn)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        settings = EngineSettings.from_env()
        if args.log_level is not None:
            settings = replace(settings, log_level=args.log_level.upper())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level_number,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handler: Handler = args.handler
    try:
        return handler(args, AnalysisEngine(settings))
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
