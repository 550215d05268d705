"""Split a PGN text stream into tokens."""

import io
from dataclasses import dataclass
from enum import Enum

from .errors import EndOfStreamError, UnexpectedEofError


class TokenType(Enum):
    SYMBOL = 0
    WORD = 1
    STRING = 2
    COMMENT = 3
    NUMBER = 4
    RESULT = 5


@dataclass(frozen=True)
class Token:
    """A token read from a PGN stream."""

    type: TokenType
    value: str


def _is_letter(char):
    return char is not None and char.isascii() and char.isalpha()


def _is_digit(char):
    return char is not None and "0" <= char <= "9"


def _is_result_char(char):
    return _is_digit(char) or char in ("*", "-", "/")


def _is_word_char(char):
    return _is_letter(char) or _is_digit(char) or char in ("+", "#", "-", "=")


class Tokenizer:
    """Reads PGN tokens one at a time from a text stream (or a string)."""

    def __init__(self, stream):
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        self._stream = stream
        self._line = 1
        self._value = []
        self._current = None
        self._lookahead = self._read_raw()
        self._advance()
        self._skip_whitespace()

    def _read_raw(self):
        char = self._stream.read(1)
        if not char or char == "\0":
            return None
        return char

    def _advance(self):
        self._current = self._lookahead
        if self._current is not None:
            self._lookahead = self._read_raw()
        if self._current == "\n":
            self._line += 1

    def _store_advance(self):
        self._value.append(self._current)
        self._advance()

    def _skip_whitespace(self):
        while self._current is not None and (
            self._current == "%" or "\0" < self._current <= " "
        ):
            if self._current == "%":
                while self._current is not None and self._current not in ("\n", "\r"):
                    self._advance()
            else:
                self._advance()

    def _finish(self, token_type):
        token = Token(token_type, "".join(self._value))
        self._value.clear()
        self._skip_whitespace()
        return token

    def eof(self):
        """True when no token is left on the stream."""
        return self._current is None

    def current_line(self):
        """Line number of the stream position being read."""
        return self._line

    def _check_unexpected_eof(self):
        if self.eof():
            raise UnexpectedEofError()

    def _read_word(self):
        self._store_advance()
        while _is_word_char(self._current):
            self._store_advance()
        return self._finish(TokenType.WORD)

    def _read_string(self):
        self._advance()  # opening quote
        escape_next = False
        while self._current is not None and (self._current != '"' or escape_next):
            if not escape_next and self._current == "\\":
                escape_next = True
                self._advance()
            else:
                self._store_advance()
                escape_next = False
        self._check_unexpected_eof()
        self._advance()  # closing quote
        return self._finish(TokenType.STRING)

    def _read_comment(self):
        if self._current == "{":
            self._advance()
            while self._current is not None and self._current != "}":
                self._store_advance()
            self._check_unexpected_eof()
            self._advance()
        else:
            self._advance()
            while self._current is not None and self._current not in ("\n", "\r"):
                self._store_advance()
        return self._finish(TokenType.COMMENT)

    def _read_result(self):
        self._store_advance()
        while _is_result_char(self._current):
            self._store_advance()
        return self._finish(TokenType.RESULT)

    def _read_number(self):
        self._store_advance()
        while _is_digit(self._current):
            self._store_advance()
        return self._finish(TokenType.NUMBER)

    def _read_symbol(self):
        self._store_advance()
        while self._value[0] == "." and self._current == ".":
            self._store_advance()
        return self._finish(TokenType.SYMBOL)

    def next_token(self):
        """Return the next token; raise EndOfStreamError when none is left."""
        if self.eof():
            raise EndOfStreamError()
        char = self._current
        if _is_letter(char):
            return self._read_word()
        if char == '"':
            return self._read_string()
        if char in ("{", ";"):
            return self._read_comment()
        if char == "*":
            return self._read_result()
        if _is_digit(char):
            if self._lookahead in ("-", "/"):
                return self._read_result()
            return self._read_number()
        return self._read_symbol()

    def __iter__(self):
        while not self.eof():
            yield self.next_token()