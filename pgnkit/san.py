"""Resolve moves in standard algebraic notation against a position."""

from .bitboard import FULL_BOARD, bishop_attacks, file_of, rank_of, rook_attacks, square_bit
from .chessboard import Color, Piece, PieceType, get_pinned_pieces
from .errors import InvalidMoveError
from .movetext import Move

_LETTER_PIECES = {
    "K": PieceType.KING,
    "Q": PieceType.QUEEN,
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "N": PieceType.KNIGHT,
    "P": PieceType.PAWN,
}

_FILE_A = 0x0101010101010101
_FILE_H = _FILE_A << 7


def _step_table(offsets):
    table = []
    for square in range(64):
        mask = 0
        for df, dr in offsets:
            f, r = file_of(square) + df, rank_of(square) + dr
            if 0 <= f < 8 and 0 <= r < 8:
                mask |= square_bit(r * 8 + f)
        table.append(mask)
    return tuple(table)


_KNIGHT_ATTACKS = _step_table(
    ((1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1), (-2, 1), (-1, 2))
)
_KING_ATTACKS = _step_table(
    ((1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1))
)


def _lowest_square(bitboard):
    return (bitboard & -bitboard).bit_length() - 1


def _squares_of(bitboard):
    while bitboard:
        yield _lowest_square(bitboard)
        bitboard &= bitboard - 1


def _line(a, b):
    """The unoriented line through ``a`` and ``b``, or None if not aligned."""
    df = file_of(b) - file_of(a)
    dr = rank_of(b) - rank_of(a)
    if a == b:
        return None
    if dr == 0:
        return "rank"
    if df == 0:
        return "file"
    if df == dr:
        return "diagonal"
    if df == -dr:
        return "anti-diagonal"
    return None


def _file_mask(file_index):
    return _FILE_A << file_index


def _rank_mask(rank_index):
    return 0xFF << (rank_index * 8)


def find_origin(board, piece, to_square, is_capture, from_mask):
    """Return the single square ``piece`` can move to ``to_square`` from.

    Candidates are limited to ``from_mask``; pinned pieces that would
    leave their pin line are discarded. Raise InvalidMoveError unless
    exactly one candidate remains.
    """
    own = board.pieces_of(piece)
    occupancy = board.occupancy
    target = square_bit(to_square)
    black = piece.color is Color.BLACK

    if piece.type is PieceType.ROOK:
        candidates = rook_attacks(occupancy, to_square) & own
    elif piece.type is PieceType.BISHOP:
        candidates = bishop_attacks(occupancy, to_square) & own
    elif piece.type is PieceType.QUEEN:
        candidates = (rook_attacks(occupancy, to_square) | bishop_attacks(occupancy, to_square)) & own
    elif piece.type is PieceType.KNIGHT:
        candidates = _KNIGHT_ATTACKS[to_square] & own
    elif piece.type is PieceType.KING:
        candidates = _KING_ATTACKS[to_square] & own
    elif piece.type is PieceType.PAWN:
        if is_capture:
            left = target & ~_FILE_A
            candidates = (left << 7) if black else (left >> 9)
            right = target & ~_FILE_H
            candidates |= (right << 9) if black else (right >> 7)
            candidates &= own & FULL_BOARD
        else:
            step = ((target << 8) if black else (target >> 8)) & FULL_BOARD
            candidates = step & own
            step &= ~occupancy
            step = ((step << 8) if black else (step >> 8)) & FULL_BOARD
            candidates |= step & own
    else:
        raise InvalidMoveError()

    candidates &= from_mask

    pinned = get_pinned_pieces(board, piece.color) & candidates
    if pinned:
        king_position = _lowest_square(board.pieces_of(Piece(PieceType.KING, piece.color)))
        for square in _squares_of(pinned):
            if _line(square, to_square) != _line(square, king_position):
                candidates ^= square_bit(square)

    if candidates == 0 or candidates & (candidates - 1):
        raise InvalidMoveError()
    return _lowest_square(candidates)


def parse_san_move(board, san):
    """Parse ``san`` in the position ``board`` and return the Move."""
    side = board.next_to_move
    white = side is Color.WHITE

    if san.startswith("O-O-O"):
        return Move(4 if white else 60, 2 if white else 58)
    if san.startswith("O-O"):
        return Move(4 if white else 60, 6 if white else 62)

    start, end = 0, len(san) - 1
    promotion = PieceType.NONE

    if end >= 0 and san[end] in ("#", "+"):
        end -= 1

    if end >= 0 and "A" <= san[end] <= "Z":
        promotion = _LETTER_PIECES.get(san[end])
        if promotion is None:
            raise InvalidMoveError()
        end -= 2

    if end < 1:
        raise InvalidMoveError()
    rank_index = ord(san[end]) - ord("1")
    file_index = ord(san[end - 1]) - ord("a")
    end -= 2
    if not (0 <= rank_index < 8 and 0 <= file_index < 8):
        raise InvalidMoveError()
    to_square = rank_index * 8 + file_index

    if start <= end and "A" <= san[start] <= "Z":
        piece_type = _LETTER_PIECES.get(san[start])
        if piece_type is None:
            raise InvalidMoveError()
        piece = Piece(piece_type, side)
        start += 1
    else:
        piece = Piece(PieceType.PAWN, side)

    is_capture = False
    if start <= end and san[end] == "x":
        if (
            piece.type is PieceType.PAWN
            and file_index == board.en_passant_column
            and rank_index == 5 - int(side) * 3
        ):
            captured = Piece(PieceType.PAWN, side.other())
        else:
            captured = board[to_square]
        is_capture = True
        end -= 1
        if captured.type is PieceType.NONE or captured.color == side:
            raise InvalidMoveError()

    from_mask = FULL_BOARD
    if start <= end and "a" <= san[start] <= "h":
        from_mask = _file_mask(ord(san[start]) - ord("a"))
        start += 1

    if start <= end and "1" <= san[start] <= "8":
        from_mask &= _rank_mask(ord(san[start]) - ord("1"))
        start += 1

    if start <= end:
        raise InvalidMoveError()

    from_square = find_origin(board, piece, to_square, is_capture, from_mask)
    return Move(from_square, to_square, promotion)