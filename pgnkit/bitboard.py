"""Bitboard helpers: squares are numbered 0 (a1) to 63 (h8)."""

FULL_BOARD = (1 << 64) - 1

_ROOK_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_BISHOP_DIRECTIONS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


def square_bit(position):
    """Return the bitboard with only ``position`` set."""
    return 1 << position


def file_of(position):
    """Return the file (column) index of ``position``."""
    return position & 0x7


def rank_of(position):
    """Return the rank (row) index of ``position``."""
    return position >> 3


def _slide(occupancy, position, directions):
    attacks = 0
    start_file, start_rank = file_of(position), rank_of(position)
    for df, dr in directions:
        f, r = start_file + df, start_rank + dr
        while 0 <= f < 8 and 0 <= r < 8:
            bit = 1 << (r * 8 + f)
            attacks |= bit
            if occupancy & bit:
                break
            f += df
            r += dr
    return attacks


def rook_attacks(occupancy, position):
    """Squares a rook on ``position`` attacks, stopping at occupied squares."""
    return _slide(occupancy, position, _ROOK_DIRECTIONS)


def bishop_attacks(occupancy, position):
    """Squares a bishop on ``position`` attacks, stopping at occupied squares."""
    return _slide(occupancy, position, _BISHOP_DIRECTIONS)


def xray_rook_attacks(occupancy, blockers, position):
    """Squares a rook attacks through the first of ``blockers`` on each ray."""
    attacks = rook_attacks(occupancy, position)
    blockers &= attacks
    return attacks ^ rook_attacks(occupancy ^ blockers, position)


def xray_bishop_attacks(occupancy, blockers, position):
    """Squares a bishop attacks through the first of ``blockers`` on each ray."""
    attacks = bishop_attacks(occupancy, position)
    blockers &= attacks
    return attacks ^ bishop_attacks(occupancy ^ blockers, position)