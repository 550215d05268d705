# pgnkit

pgnkit reads chess games written in PGN (Portable Game Notation). Each game
becomes a set of tags, a move text and a result. The move text holds moves,
comments, numeric annotation glyphs and nested variations. Every move in
standard algebraic notation is resolved against a board. It comes back with
its origin square, its destination square and any promotion piece.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Reading games

```python
from pgnkit.parser import parse_games
from pgnkit.movetext import Move, Nag, Comment, Variation

with open("games.pgn") as stream:
    for game in parse_games(stream):
        print(game.tags["White"], "-", game.tags["Black"], game.result)
        for item in game:
            if isinstance(item, Move):
                print(item.from_square, item.to_square, item.promotion)
```

`parse_games` and `PgnParser` take either a text stream or a string.

Squares are numbered from 0 to 63: `a1` is 0, `h1` is 7 and `h8` is 63.
Castling is stored as the king's two-square move. White castling on the
king's side, for example, goes from 4 (`e1`) to 6 (`g1`).

A `Game` is a `Variation`. It can be iterated, indexed and measured with
`len`. It also carries `first_move_number` and `first_move_white`, plus:

- `tags`: a `pgnkit.tags.Tags` mapping, iterated in sorted key order. The
  seven roster tags (Event, Site, Date, Round, White, Black, Result) are
  always present. Deleting one of them resets it to an empty string.
- `result`: a `pgnkit.parser.Result`, which is `WHITE_WIN`, `BLACK_WIN`,
  `DRAW` or `UNKNOWN`.

A variation in the move text is a nested `Variation`. The suffix annotations
`!`, `?`, `!!`, `??`, `!?` and `?!` become `Nag` items, with the values
listed in `NagValue`. `$n` glyphs become `Nag(n)`. Comments in `{...}` and
`;` comments become `Comment` items. A `Game` cannot be added to another
variation. Trying to do so raises `InvalidItemError`.

To read the games one at a time, use `PgnParser`:

```python
from pgnkit.parser import PgnParser

parser = PgnParser(stream)
while not parser.eof():
    game = parser.parse_game()
```

When the input is malformed, the parser raises a subclass of
`pgnkit.errors.PgnParserError`:

- `UnexpectedTokenError`
- `UnexpectedEofError`
- `InvalidMoveError`
- `EndOfStreamError`

The error's `line_number` gives the line the parser had reached when it
failed.

## Working with the board

```python
from pgnkit.chessboard import Chessboard
from pgnkit.san import parse_san_move

board = Chessboard()  # starting position; or Chessboard("<FEN string>")
move = parse_san_move(board, "Nf3")
board.make_move(move.from_square, move.to_square, move.promotion)
```

An invalid FEN string raises `BadFenError`. A move that cannot be played
raises `InvalidMakeMoveError`. `pgnkit.chessboard.get_pinned_pieces` returns
a bitboard of the pieces pinned against their king. `pgnkit.bitboard` has the
sliding-attack helpers that the board uses.

## Command line

```
pgnkit games.pgn
```

This prints the games as an XML document. Each `<game>` holds its `<tags>`
and a `<movetext>` with `<move>`, `<comment>`, `<nag>` and nested
`<variation>` elements.

```
pgnkit --format moves games.pgn
```

This prints both players of each game, then every main-line move in
`e2 - e4` form.

If no path is given, or the path is `-`, the games are read from standard
input. A parse error is reported with its line number, and the exit status is
1. A file that cannot be opened gives exit status 2.

## What it does not do

- Games are always parsed from the standard starting position. `SetUp` and
  `FEN` tags are kept as tags but are not used to set up the board.
- Moves are checked only as far as finding a single origin square. Checks,
  checkmates and full legality are not verified.
- There is no way to write games back out as PGN, or to turn a board into a
  FEN string.