"""Parse PGN text into games made of tags, movetext items and a result."""

from enum import Enum

from .chessboard import Chessboard
from .errors import PgnParserError, UnexpectedEofError, UnexpectedTokenError
from .movetext import Comment, Nag, NagValue, Variation
from .san import parse_san_move
from .tags import Tags
from .tokenizer import Tokenizer, TokenType


class Result(Enum):
    """Outcome of a game as written at the end of its movetext."""

    WHITE_WIN = "1-0"
    BLACK_WIN = "0-1"
    DRAW = "1/2-1/2"
    UNKNOWN = "*"


_RESULTS = {
    "1-0": Result.WHITE_WIN,
    "1-O": Result.WHITE_WIN,
    "0-1": Result.BLACK_WIN,
    "O-1": Result.BLACK_WIN,
    "1/2-1/2": Result.DRAW,
    "*": Result.UNKNOWN,
}

_DOUBLE_SUFFIXES = {
    ("!", "!"): NagValue.VERY_GOOD_MOVE,
    ("!", "?"): NagValue.SPECULATIVE_MOVE,
    ("?", "!"): NagValue.QUESTIONABLE_MOVE,
    ("?", "?"): NagValue.VERY_POOR_MOVE,
}

_SINGLE_SUFFIXES = {
    "!": NagValue.GOOD_MOVE,
    "?": NagValue.POOR_MOVE,
}


class Game(Variation):
    """A parsed game: its tags, its main line and its result.

    A game is a variation of its own, but may not be nested in another one.
    """

    _nestable = False

    def __init__(self):
        super().__init__()
        self.tags = Tags()
        self.result = Result.UNKNOWN

    def copy(self):
        """Return a deep copy of the game, tags included."""
        other = super().copy()
        other.tags = Tags()
        other.tags.update(self.tags)
        return other

    def __repr__(self):
        return (
            f"Game(tags={self.tags!r}, result={self.result!r}, "
            f"items={list(self)!r})"
        )


class PgnParser:
    """Reads PGN games one at a time from a text stream or a string."""

    def __init__(self, stream):
        self._tokenizer = Tokenizer(stream)
        self._token = None
        self._read_next()

    def _read_next(self):
        self._token = None if self._tokenizer.eof() else self._tokenizer.next_token()

    def eof(self):
        """True when no game is left on the stream."""
        return self._token is None

    def _is_symbol(self, value):
        token = self._token
        return token is not None and token.type is TokenType.SYMBOL and token.value == value

    def _check_eof(self):
        if self._token is None:
            raise UnexpectedEofError()

    def _expect_type(self, token_type):
        self._check_eof()
        if self._token.type is not token_type:
            raise UnexpectedTokenError()
        return self._token.value

    def _skip_expected(self, token_type, value):
        self._check_eof()
        if self._token.type is not token_type or self._token.value != value:
            raise UnexpectedTokenError()
        self._read_next()

    def _parse_tags(self, tags):
        while self._is_symbol("["):
            self._read_next()
            name = self._expect_type(TokenType.WORD)
            self._read_next()
            value = self._expect_type(TokenType.STRING)
            self._read_next()
            self._skip_expected(TokenType.SYMBOL, "]")
            tags[name] = value

    def _parse_nag(self):
        self._skip_expected(TokenType.SYMBOL, "$")
        text = self._expect_type(TokenType.NUMBER)
        try:
            value = int(text)
        except ValueError:
            raise UnexpectedTokenError() from None
        if value > 255:
            raise UnexpectedTokenError()
        self._read_next()
        return Nag(value)

    def _parse_suffix_annotation(self):
        first = self._token.value
        if first not in _SINGLE_SUFFIXES:
            raise UnexpectedTokenError()
        self._read_next()
        token = self._token
        if token is not None and token.type is TokenType.SYMBOL:
            double = _DOUBLE_SUFFIXES.get((first, token.value))
            if double is not None:
                self._read_next()
                return Nag(double)
        return Nag(_SINGLE_SUFFIXES[first])

    def _parse_variation(self, board, first_move_number, first_move_white, variation):
        board = board.copy()
        is_sub_variation = False
        if self._is_symbol("("):
            self._read_next()
            is_sub_variation = True

        moves_parsed = 0
        # The last move is only played once the next one comes, so that a
        # sub variation still sees the position before it.
        last_move = None

        while (
            self._token is not None
            and self._token.type is not TokenType.RESULT
            and not self._is_symbol(")")
        ):
            token = self._token
            if token.type is TokenType.NUMBER:
                if moves_parsed == 0:
                    variation.first_move_number = int(token.value)
                    variation.first_move_white = True
                self._read_next()
            elif token.type is TokenType.WORD:
                if last_move is not None:
                    board.make_move(last_move.from_square, last_move.to_square, last_move.promotion)
                move = parse_san_move(board, token.value)
                self._read_next()
                variation.append(move)
                moves_parsed += 1
                last_move = move
            elif token.type is TokenType.COMMENT:
                variation.append(Comment(token.value))
                self._read_next()
            elif token.type is TokenType.SYMBOL:
                value = token.value
                if value == ".":
                    self._read_next()
                elif value == "...":
                    if moves_parsed == 0:
                        variation.first_move_white = False
                    self._read_next()
                elif value == "$":
                    variation.append(self._parse_nag())
                elif value[0] in "!?":
                    variation.append(self._parse_suffix_annotation())
                elif value == "(":
                    first_index = first_move_number * 2 - (1 if first_move_white else 0)
                    next_index = first_index + moves_parsed - 1
                    sub_variation = Variation()
                    self._parse_variation(
                        board, (next_index + 1) // 2, next_index % 2 != 0, sub_variation
                    )
                    variation.append(sub_variation)
                else:
                    # Unknown symbols are skipped so that slightly broken
                    # files can still be read.
                    self._read_next()
            else:
                raise UnexpectedTokenError()

        if is_sub_variation:
            self._skip_expected(TokenType.SYMBOL, ")")

    def _parse_result(self):
        value = self._expect_type(TokenType.RESULT)
        result = _RESULTS.get(value)
        if result is None:
            raise UnexpectedTokenError()
        self._read_next()
        return result

    def parse_game(self):
        """Parse and return the next game on the stream."""
        game = Game()
        try:
            self._check_eof()
            self._parse_tags(game.tags)
            self._parse_variation(Chessboard(), 1, True, game)
            game.result = self._parse_result()
        except PgnParserError as error:
            error.line_number = self._tokenizer.current_line()
            raise
        return game

    def __iter__(self):
        while not self.eof():
            yield self.parse_game()


def parse_games(stream):
    """Yield every game read from ``stream`` (a text stream or a string)."""
    yield from PgnParser(stream)