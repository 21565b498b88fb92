"""Chess rules and analysis toolkit: FEN/PGN, move generation, search."""

__version__ = "0.1.0"
