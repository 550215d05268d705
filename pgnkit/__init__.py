"""Parser for chess games in Portable Game Notation, with a board to resolve SAN moves."""

__version__ = "0.1.0"
__all__ = ["bitboard", "chessboard", "cli", "errors", "movetext", "parser", "san", "tags", "tokenizer"]