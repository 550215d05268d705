from functools import reduce

import pytest

from pgnkit.bitboard import (
    bishop_attacks,
    file_of,
    rank_of,
    rook_attacks,
    square_bit,
    xray_bishop_attacks,
    xray_rook_attacks,
)


def squares(*positions):
    return reduce(lambda acc, p: acc | square_bit(p), positions, 0)


def test_file_and_rank_round_trip():
    for position in range(64):
        assert rank_of(position) * 8 + file_of(position) == position


def test_rook_attacks_empty_board():
    expected = squares(24, 25, 26, 28, 29, 30, 31, 3, 11, 19, 35, 43, 51, 59)
    assert rook_attacks(0, 27) == expected


def test_rook_attacks_some_occupied_squares():
    occ = squares(24, 51, 29, 19, 36)
    expected = squares(24, 25, 26, 28, 29, 19, 35, 43, 51)
    assert rook_attacks(occ, 27) == expected


def test_bishop_attacks_empty_board():
    expected = squares(0, 9, 18, 36, 45, 54, 63, 48, 41, 34, 20, 13, 6)
    assert bishop_attacks(0, 27) == expected


def test_bishop_attacks_some_occupied_squares():
    occ = squares(48, 63, 54, 20, 28, 26)
    expected = squares(0, 9, 18, 36, 45, 54, 48, 41, 34, 20)
    assert bishop_attacks(occ, 27) == expected


@pytest.mark.parametrize("position", range(64))
def test_rook_on_empty_board_sees_whole_file_and_rank(position):
    attacks = rook_attacks(0, position)
    assert not attacks & square_bit(position)
    assert bin(attacks).count("1") == 14


@pytest.mark.parametrize("position", range(64))
def test_attacks_symmetric(position):
    occ = squares(9, 27, 36, 50)
    bit = square_bit(position)

    rook_seen = {t for t in range(64) if rook_attacks(occ, position) & square_bit(t)}
    rook_seen_by = {t for t in range(64) if rook_attacks(occ, t) & bit}
    assert rook_seen == rook_seen_by

    bishop_seen = {t for t in range(64) if bishop_attacks(occ, position) & square_bit(t)}
    bishop_seen_by = {t for t in range(64) if bishop_attacks(occ, t) & bit}
    assert bishop_seen == bishop_seen_by


def test_xray_rook_sees_past_blocker():
    occ = squares(27, 29, 31)
    assert xray_rook_attacks(occ, square_bit(29), 27) == squares(30, 31)


def test_xray_bishop_sees_past_blocker():
    occ = squares(27, 36, 54)
    assert xray_bishop_attacks(occ, square_bit(36), 27) == squares(45, 54)


def test_xray_without_blockers_is_empty():
    occ = squares(27, 36, 29)
    assert xray_rook_attacks(occ, 0, 27) == 0
    assert xray_bishop_attacks(occ, 0, 27) == 0