"""Command line tool printing the games of a PGN file as XML or move lists."""

import argparse
import sys
from xml.sax.saxutils import escape

from .chessboard import InvalidMakeMoveError, PieceType
from .errors import PgnParserError
from .movetext import Comment, Move, Nag, Variation
from .parser import PgnParser

_PROMOTION_LETTERS = {
    PieceType.QUEEN: "Q",
    PieceType.ROOK: "R",
    PieceType.KNIGHT: "K",
    PieceType.BISHOP: "B",
}

_ATTRIBUTE_ENTITIES = {'"': "&quot;"}


def _square_name(square):
    return f"{'abcdefgh'[square % 8]}{square // 8 + 1}"


def _tags_lines(tags, indent):
    yield f"{indent}<tags>\n"
    for name, value in tags.items():
        yield (
            f'{indent}  <tag name="{escape(name, _ATTRIBUTE_ENTITIES)}" '
            f'value="{escape(value, _ATTRIBUTE_ENTITIES)}" />\n'
        )
    yield f"{indent}</tags>\n"


def _move_line(move, indent):
    line = f'{indent}<move from="{move.from_square}" to="{move.to_square}"'
    if move.promotion is not PieceType.NONE:
        line += f' promote_to="{_PROMOTION_LETTERS.get(move.promotion, "")}"'
    return line + " />\n"


def _variation_lines(variation, tag_name, indent):
    yield f"{indent}<{tag_name}>\n"
    inner = indent + "  "
    for item in variation:
        if isinstance(item, Move):
            yield _move_line(item, inner)
        elif isinstance(item, Comment):
            yield f"{inner}<comment>{escape(item.text)}</comment>\n"
        elif isinstance(item, Nag):
            yield f'{indent}<nag value="{int(item.value)}" />\n'
        elif isinstance(item, Variation):
            yield from _variation_lines(item, "variation", inner)
    yield f"{indent}</{tag_name}>\n"


def render_game_xml(game, indent=""):
    """Return the XML element describing ``game``."""
    inner = indent + "  "
    parts = [f"{indent}<game>\n"]
    parts.extend(_tags_lines(game.tags, inner))
    parts.extend(_variation_lines(game, "movetext", inner))
    parts.append(f"{indent}</game>\n")
    return "".join(parts)


def render_games_xml(games):
    """Return an XML document holding every game of ``games``."""
    body = "".join(render_game_xml(game, "  ") for game in games)
    return f"<games>\n{body}</games>\n"


def format_move_list(game):
    """Return the players' names followed by the main line as square pairs."""
    lines = [f"{game.tags['White']} - {game.tags['Black']}\n"]
    lines.extend(
        f"{_square_name(item.from_square)} - {_square_name(item.to_square)}\n"
        for item in game
        if isinstance(item, Move)
    )
    lines.append("\n")
    return "".join(lines)


def _run(stream, name, output_format, out):
    try:
        if output_format == "xml":
            out.write("<games>\n")
            for game in PgnParser(stream):
                out.write(render_game_xml(game, "  "))
            out.write("</games>\n")
        else:
            for game in PgnParser(stream):
                out.write(format_move_list(game))
    except (PgnParserError, InvalidMakeMoveError) as error:
        out.write(
            f'Unable to parse game in "{name}".\n'
            f"Position: At or around line {getattr(error, 'line_number', -1)}\n"
            f"Reason: {error}\n"
        )
        return 1
    return 0


def main(argv=None):
    """Entry point of the command; return the exit status."""
    arg_parser = argparse.ArgumentParser(
        prog="pgnkit", description="Print the games of a PGN file."
    )
    arg_parser.add_argument(
        "path", nargs="?", default="-", help="PGN file to read, '-' for standard input"
    )
    arg_parser.add_argument(
        "--format",
        choices=("xml", "moves"),
        default="xml",
        help="output as an XML document or as move lists",
    )
    args = arg_parser.parse_args(argv)
    out = sys.stdout

    if args.path == "-":
        return _run(sys.stdin, "<stdin>", args.format, out)

    try:
        handle = open(args.path, encoding="utf-8", errors="replace")
    except OSError:
        out.write(f'Unable to open the file "{args.path}".\n')
        return 2
    with handle:
        return _run(handle, args.path, args.format, out)


if __name__ == "__main__":
    sys.exit(main())