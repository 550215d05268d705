import io

import pytest

from pgnkit.errors import EndOfStreamError, UnexpectedEofError
from pgnkit.tokenizer import Token, Tokenizer, TokenType


def test_read_word_tokens():
    tokenizer = Tokenizer(io.StringIO("   Bonjour le\t    \r \n  monde \r\n\t   "))
    assert not tokenizer.eof()
    assert tokenizer.next_token() == Token(TokenType.WORD, "Bonjour")
    assert tokenizer.next_token() == Token(TokenType.WORD, "le")
    assert tokenizer.next_token() == Token(TokenType.WORD, "monde")
    assert tokenizer.eof()


def test_read_string_tokens():
    text = ' "Bonjour le monde" "Comment \\\\allez \\"vous\\"?"  '
    tokenizer = Tokenizer(io.StringIO(text))
    assert not tokenizer.eof()
    assert tokenizer.next_token() == Token(TokenType.STRING, "Bonjour le monde")
    assert tokenizer.next_token() == Token(TokenType.STRING, 'Comment \\allez "vous"?')
    assert tokenizer.eof()


def test_read_comment_tokens():
    text = " {Comment number one} \n  alloa ; Comment number two\n {Comment number three}"
    tokenizer = Tokenizer(io.StringIO(text))
    assert tokenizer.next_token() == Token(TokenType.COMMENT, "Comment number one")
    assert tokenizer.next_token() == Token(TokenType.WORD, "alloa")
    assert tokenizer.next_token() == Token(TokenType.COMMENT, " Comment number two")
    assert tokenizer.next_token() == Token(TokenType.COMMENT, "Comment number three")


def test_read_result_tokens():
    tokenizer = Tokenizer(io.StringIO("* 1-0 0-1 1/2-1/2"))
    assert [t.value for t in tokenizer] == ["*", "1-0", "0-1", "1/2-1/2"]


def test_result_token_types():
    tokens = list(Tokenizer("* 1-0 0-1 1/2-1/2"))
    assert {t.type for t in tokens} == {TokenType.RESULT}


def test_read_number_tokens():
    tokenizer = Tokenizer(io.StringIO("1 236 3"))
    assert tokenizer.next_token() == Token(TokenType.NUMBER, "1")
    assert tokenizer.next_token() == Token(TokenType.NUMBER, "236")
    assert tokenizer.next_token() == Token(TokenType.NUMBER, "3")


def test_read_symbol_tokens():
    tokenizer = Tokenizer(io.StringIO(". ... !?"))
    assert tokenizer.next_token() == Token(TokenType.SYMBOL, ".")
    assert tokenizer.next_token() == Token(TokenType.SYMBOL, "...")
    assert tokenizer.next_token() == Token(TokenType.SYMBOL, "!")
    assert tokenizer.next_token() == Token(TokenType.SYMBOL, "?")


def test_move_number_then_dot():
    tokens = list(Tokenizer("1. e4"))
    assert tokens == [
        Token(TokenType.NUMBER, "1"),
        Token(TokenType.SYMBOL, "."),
        Token(TokenType.WORD, "e4"),
    ]


def test_word_keeps_check_and_promotion_chars():
    assert list(Tokenizer("exd8=Q+")) == [Token(TokenType.WORD, "exd8=Q+")]


def test_percent_line_is_skipped():
    tokens = list(Tokenizer("% escaped line\nNf3"))
    assert tokens == [Token(TokenType.WORD, "Nf3")]


def test_end_of_stream_raises():
    tokenizer = Tokenizer("e4")
    tokenizer.next_token()
    assert tokenizer.eof()
    with pytest.raises(EndOfStreamError):
        tokenizer.next_token()


def test_empty_stream_is_eof():
    assert Tokenizer(io.StringIO("  \n\t ")).eof()


def test_unclosed_string_raises():
    tokenizer = Tokenizer('"never closed')
    with pytest.raises(UnexpectedEofError):
        tokenizer.next_token()


def test_unclosed_brace_comment_raises():
    tokenizer = Tokenizer("{never closed")
    with pytest.raises(UnexpectedEofError):
        tokenizer.next_token()


def test_line_counting():
    tokenizer = Tokenizer("a\n\nb")
    assert tokenizer.current_line() == 1
    tokenizer.next_token()
    assert tokenizer.current_line() == 3