"""Chess position with the move-making needed to follow a PGN game."""

from dataclasses import dataclass
from enum import Enum, IntEnum

from .bitboard import (
    file_of,
    rank_of,
    square_bit,
    xray_bishop_attacks,
    xray_rook_attacks,
)


class PieceType(Enum):
    NONE = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    def other(self):
        """Return the opposite side."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE


@dataclass(frozen=True)
class Piece:
    """A piece of a given type and color; the default is an empty square."""

    type: PieceType = PieceType.NONE
    color: Color = Color.WHITE


class BadFenError(ValueError):
    """The FEN string does not describe a valid position."""

    def __init__(self, message="Invalid FEN string."):
        super().__init__(message)


class InvalidMakeMoveError(ValueError):
    """A move cannot be played on the board."""


_CHAR_PIECES = {
    char: Piece(piece_type, color)
    for letter, piece_type in (
        ("r", PieceType.ROOK),
        ("n", PieceType.KNIGHT),
        ("b", PieceType.BISHOP),
        ("q", PieceType.QUEEN),
        ("k", PieceType.KING),
        ("p", PieceType.PAWN),
    )
    for char, color in ((letter.upper(), Color.WHITE), (letter, Color.BLACK))
}

_CASTLING_CHARS = frozenset("KQkq")
_KING_SIDE = {Color.WHITE: "K", Color.BLACK: "k"}
_QUEEN_SIDE = {Color.WHITE: "Q", Color.BLACK: "q"}

_BACK_RANK = (
    PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
    PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
)

_EMPTY = Piece()


def _lowest_square(bitboard):
    return (bitboard & -bitboard).bit_length() - 1


def _squares_of(bitboard):
    while bitboard:
        yield _lowest_square(bitboard)
        bitboard &= bitboard - 1


def _between(a, b):
    """Squares strictly between ``a`` and ``b`` when they share a line."""
    df = file_of(b) - file_of(a)
    dr = rank_of(b) - rank_of(a)
    if not (df == 0 or dr == 0 or abs(df) == abs(dr)) or a == b:
        return 0
    step_f = (df > 0) - (df < 0)
    step_r = (dr > 0) - (dr < 0)
    result = 0
    f, r = file_of(a) + step_f, rank_of(a) + step_r
    while (f, r) != (file_of(b), rank_of(b)):
        result |= square_bit(r * 8 + f)
        f += step_f
        r += step_r
    return result


class Chessboard:
    """A chess position: pieces, side to move, castling and en passant."""

    def __init__(self, fen=None):
        self._clear()
        if fen is None:
            self._setup_initial()
        else:
            self._load_fen(fen)

    def _clear(self):
        self.next_to_move = Color.WHITE
        self._board = [_EMPTY] * 64
        self._pieces = {}
        self._colors = {Color.WHITE: 0, Color.BLACK: 0}
        self.castling = set()
        self.en_passant_column = None

    def _setup_initial(self):
        self.castling = set(_CASTLING_CHARS)
        for file_index, piece_type in enumerate(_BACK_RANK):
            self._add_piece(file_index, Piece(piece_type, Color.WHITE))
            self._add_piece(56 + file_index, Piece(piece_type, Color.BLACK))
            self._add_piece(8 + file_index, Piece(PieceType.PAWN, Color.WHITE))
            self._add_piece(48 + file_index, Piece(PieceType.PAWN, Color.BLACK))

    def _load_fen(self, fen):
        fields = fen.split()
        if len(fields) < 3:
            raise BadFenError("A FEN string needs at least three fields.")

        pos = 0
        for char in fields[0]:
            if char == "/":
                continue
            if char.isdigit():
                pos += int(char)
                if pos > 64:
                    raise BadFenError("Too many squares in piece placement.")
                continue
            if pos > 63:
                raise BadFenError("Too many squares in piece placement.")
            piece = _CHAR_PIECES.get(char)
            if piece is None:
                raise BadFenError(f"Unknown piece character {char!r}.")
            self._add_piece(56 - (pos // 8) * 8 + pos % 8, piece)
            pos += 1

        if fields[1] == "w":
            self.next_to_move = Color.WHITE
        elif fields[1] == "b":
            self.next_to_move = Color.BLACK
        else:
            raise BadFenError(f"Invalid side to move {fields[1]!r}.")

        if fields[2] != "-":
            for char in fields[2]:
                if char not in _CASTLING_CHARS:
                    raise BadFenError(f"Invalid castling character {char!r}.")
                self.castling.add(char)

        if len(fields) >= 4 and fields[3] != "-":
            square = fields[3]
            if len(square) == 2 and "a" <= square[0] <= "h" and "0" <= square[1] <= "8":
                self.en_passant_column = ord(square[0]) - ord("a")
            else:
                raise BadFenError(f"Invalid en passant square {square!r}.")

    def _add_piece(self, position, piece):
        if piece.type is PieceType.NONE:
            return
        bit = square_bit(position)
        self._board[position] = piece
        self._pieces[piece] = self._pieces.get(piece, 0) | bit
        self._colors[piece.color] |= bit

    def _remove_piece(self, position):
        piece = self._board[position]
        if piece.type is PieceType.NONE:
            return
        bit = square_bit(position)
        self._board[position] = _EMPTY
        self._pieces[piece] &= ~bit
        self._colors[piece.color] &= ~bit

    def __getitem__(self, position):
        if not 0 <= position < 64:
            raise IndexError(f"square {position} is off the board")
        return self._board[position]

    def copy(self):
        """Return an independent copy of the position."""
        other = Chessboard.__new__(Chessboard)
        other.next_to_move = self.next_to_move
        other._board = list(self._board)
        other._pieces = dict(self._pieces)
        other._colors = dict(self._colors)
        other.castling = set(self.castling)
        other.en_passant_column = self.en_passant_column
        return other

    @property
    def occupancy(self):
        """Bitboard of every occupied square."""
        return self._colors[Color.WHITE] | self._colors[Color.BLACK]

    def pieces_of(self, piece):
        """Bitboard of the squares holding ``piece``."""
        return self._pieces.get(piece, 0)

    def color_mask(self, color):
        """Bitboard of the squares holding pieces of ``color``."""
        return self._colors[color]

    def make_move(self, from_square, to_square, promotion=PieceType.NONE):
        """Play a move given by its squares, updating all position state."""
        piece = self._board[from_square]
        if piece.type is PieceType.NONE:
            raise InvalidMakeMoveError("No piece on the from square")
        if piece.color != self.next_to_move:
            raise InvalidMakeMoveError("Piece from the wrong side")

        first_rank = int(piece.color) * 7
        rank_from, file_from = rank_of(from_square), file_of(from_square)
        rank_to, file_to = rank_of(to_square), file_of(to_square)

        if (
            piece.type is PieceType.PAWN
            and abs(file_from - file_to) == 1
            and self._board[to_square].type is PieceType.NONE
            and file_to == self.en_passant_column
        ):
            self._remove_piece(to_square - 8 + 16 * int(piece.color))

        if self._board[to_square].type is not PieceType.NONE:
            self._remove_piece(to_square)

        if piece.type is PieceType.KING and abs(from_square - to_square) == 2:
            base = rank_to * 8
            if file_to == 2:
                self._add_piece(base + 3, self._board[base])
                self._remove_piece(base)
            elif file_to == 6:
                self._add_piece(base + 5, self._board[base + 7])
                self._remove_piece(base + 7)
            else:
                raise InvalidMakeMoveError("Invalid king (castle?) move")

        self._remove_piece(from_square)
        self._add_piece(to_square, piece)

        if promotion is not PieceType.NONE:
            self._remove_piece(to_square)
            self._add_piece(to_square, Piece(promotion, piece.color))

        if piece.type is PieceType.PAWN and abs(from_square - to_square) == 16:
            self.en_passant_column = file_from
        else:
            self.en_passant_column = None

        if rank_from == first_rank:
            if file_from in (0, 4):
                self.castling.discard(_QUEEN_SIDE[piece.color])
            if file_from in (7, 4):
                self.castling.discard(_KING_SIDE[piece.color])

        self.next_to_move = self.next_to_move.other()


def get_pinned_pieces(board, color):
    """Bitboard of the pieces of ``color`` pinned against their king."""
    king = board.pieces_of(Piece(PieceType.KING, color))
    if not king:
        return 0
    king_position = _lowest_square(king)
    opponent = color.other()
    queens = board.pieces_of(Piece(PieceType.QUEEN, opponent))
    rook_like = board.pieces_of(Piece(PieceType.ROOK, opponent)) | queens
    bishop_like = board.pieces_of(Piece(PieceType.BISHOP, opponent)) | queens
    own = board.color_mask(color)

    pinned = 0
    pinners = xray_rook_attacks(board.occupancy, own, king_position) & rook_like
    pinners |= xray_bishop_attacks(board.occupancy, own, king_position) & bishop_like
    for square in _squares_of(pinners):
        pinned |= _between(square, king_position) & own
    return pinned