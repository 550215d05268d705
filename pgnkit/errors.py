"""Exceptions raised while reading PGN games."""


class PgnParserError(Exception):
    """Base class for every error raised by the PGN parser.

    ``line_number`` holds the line of the source being read when the
    problem was found, or -1 when it is not known.
    """

    def __init__(self, message):
        super().__init__(message)
        self.message = message
        self.line_number = -1

    def __str__(self):
        return self.message


class EndOfStreamError(PgnParserError):
    """A token was requested after the end of the stream."""

    def __init__(self):
        super().__init__("No more data on the stream to generate a token.")


class UnexpectedEofError(PgnParserError):
    """The stream ended while more characters were expected."""

    def __init__(self):
        super().__init__("Unexpected end of stream while parsing pgn games.")


class UnexpectedTokenError(PgnParserError):
    """A token that does not fit the PGN grammar was found."""

    def __init__(self):
        super().__init__("An unexpected token was found while parsing the pgn games.")


class InvalidItemError(PgnParserError):
    """An item that may not be part of a variation was added to one."""

    def __init__(self):
        super().__init__("An invalid item was added to a PgnVariation.")


class InvalidMoveError(PgnParserError):
    """A move in standard algebraic notation could not be resolved."""

    def __init__(self):
        super().__init__("An invalid move was found while parsing the pgn games.")