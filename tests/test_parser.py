import io

import pytest

from pgnkit.errors import (
    InvalidItemError,
    InvalidMoveError,
    UnexpectedEofError,
    UnexpectedTokenError,
)
from pgnkit.movetext import Comment, Move, Nag, NagValue, Variation
from pgnkit.parser import Game, PgnParser, Result, parse_games
from pgnkit.tags import SEVEN_TAG_ROSTER


def parse_one(text):
    return PgnParser(io.StringIO(text)).parse_game()


def test_suffix_annotation():
    game = parse_one("1. e4!! e5? 2. f4 *")
    assert len(game) == 5
    nag = game[1]
    assert isinstance(nag, Nag)
    assert nag.value == NagValue.VERY_GOOD_MOVE
    assert game[3].value == NagValue.POOR_MOVE


def test_sub_variation():
    game = parse_one("1. e4 (1. Nc3 e5) e5 2. f4 *")
    assert len(game) == 4
    variation = game[1]
    assert isinstance(variation, Variation)
    move = variation[0]
    assert isinstance(move, Move)
    assert move.to_square == 18


def test_comments():
    game = parse_one("1. e4 {wow} e5 2. f4 ; super\nf5 *")
    assert len(game) == 6
    assert isinstance(game[1], Comment)
    assert game[1].text == "wow"
    assert isinstance(game[4], Comment)
    assert game[4].text == " super"


def test_tags_and_result():
    text = '[Event "Test"]\n[Date "2010.02.21"]\n[Annotator "Someone"]\n\n1. e4 e5 1-0\n'
    game = parse_one(text)
    assert game.tags["Date"] == "2010.02.21"
    assert game.tags["Event"] == "Test"
    assert game.tags["Annotator"] == "Someone"
    assert len(game.tags) == len(SEVEN_TAG_ROSTER) + 1
    assert game.result is Result.WHITE_WIN
    assert game[0].to_square == 28


@pytest.mark.parametrize(
    "token, expected",
    [("1-0", Result.WHITE_WIN), ("0-1", Result.BLACK_WIN), ("1/2-1/2", Result.DRAW), ("*", Result.UNKNOWN)],
)
def test_results(token, expected):
    assert parse_one(f"1. e4 {token}").result is expected


def test_castling_move():
    game = parse_one("1. e4 e5 2. Nf3 Nc6 3. Bc4 Bc5 4. O-O *")
    assert game[-1] == Move(4, 6)


def test_black_first_sub_variation():
    game = parse_one("1. e4 e5 (1... c5) 2. Nf3 *")
    variation = game[2]
    assert isinstance(variation, Variation)
    assert variation.first_move_number == 1
    assert variation.first_move_white is False
    assert variation[0].to_square == parse_one("1. e4 c5 *")[1].to_square


def test_several_games():
    text = "1. e4 e5 1-0\n\n1. d4 d5 0-1\n"
    games = list(parse_games(text))
    assert len(games) == 2
    assert [game.result for game in games] == [Result.WHITE_WIN, Result.BLACK_WIN]


def test_parser_iteration_reaches_eof():
    parser = PgnParser(io.StringIO("1. e4 *\n1. d4 *\n"))
    games = list(parser)
    assert len(games) == 2
    assert parser.eof()


def test_empty_stream():
    parser = PgnParser(io.StringIO("   \n"))
    assert parser.eof()
    with pytest.raises(UnexpectedEofError):
        parser.parse_game()


def test_missing_result():
    with pytest.raises(UnexpectedEofError):
        parse_one("1. e4 e5")


def test_invalid_move_reports_line():
    with pytest.raises(InvalidMoveError) as info:
        parse_one("1. Nc4 *")
    assert info.value.line_number == 1


def test_nag_out_of_range():
    with pytest.raises(UnexpectedTokenError):
        parse_one("1. e4 $300 *")


def test_numeric_nag():
    game = parse_one("1. e4 $14 *")
    assert game[1] == Nag(14)


def test_string_in_movetext_is_rejected():
    with pytest.raises(UnexpectedTokenError):
        parse_one('1. e4 "text" *')


def test_game_cannot_be_nested():
    with pytest.raises(InvalidItemError):
        Variation().append(Game())


def test_game_copy_is_independent():
    game = parse_one('[Event "Test"]\n1. e4 e5 *')
    copied = game.copy()
    copied.tags["Event"] = "Changed"
    del copied[0]
    assert game.tags["Event"] == "Test"
    assert len(game) == len(copied) + 1