"""Items that make up the movetext section of a PGN game."""

import copy as _copy
from dataclasses import dataclass, replace
from enum import IntEnum

from .chessboard import PieceType
from .errors import InvalidItemError


class MoveTextItem:
    """Base class of moves, comments, NAGs and variations."""

    _nestable = True

    def copy(self):
        """Return an independent copy of the item."""
        return _copy.copy(self)


@dataclass
class Move(MoveTextItem):
    """A move given by origin and destination squares (0 is a1, 63 is h8).

    Castling is stored as the two-square king move. ``promotion`` is the
    piece type a pawn promotes to, or ``PieceType.NONE``.
    """

    from_square: int
    to_square: int
    promotion: PieceType = PieceType.NONE

    def copy(self):
        return replace(self)


class NagValue(IntEnum):
    """Numeric annotation glyphs the suffix annotations map to."""

    NULL_ANNOTATION = 0
    GOOD_MOVE = 1
    POOR_MOVE = 2
    VERY_GOOD_MOVE = 3
    VERY_POOR_MOVE = 4
    SPECULATIVE_MOVE = 5
    QUESTIONABLE_MOVE = 6


@dataclass
class Nag(MoveTextItem):
    """A Numeric Annotation Glyph with a value from 0 to 255."""

    value: int

    def __post_init__(self):
        if not 0 <= int(self.value) <= 255:
            raise ValueError(f"NAG value {self.value} out of range 0-255")

    def copy(self):
        return replace(self)


@dataclass
class Comment(MoveTextItem):
    """A comment from the movetext."""

    text: str

    def copy(self):
        return replace(self)


class Variation(MoveTextItem):
    """A sequence of movetext items; may itself appear inside a variation."""

    def __init__(self, first_move_number=1, first_move_white=True):
        self.first_move_number = first_move_number
        self.first_move_white = first_move_white
        self._items = []

    @staticmethod
    def _check(item):
        if not isinstance(item, MoveTextItem) or not item._nestable:
            raise InvalidItemError()

    def append(self, item):
        """Add ``item`` at the end of the variation."""
        self._check(item)
        self._items.append(item)

    def insert(self, index, item):
        """Insert ``item`` before position ``index``."""
        self._check(item)
        self._items.insert(index, item)

    def __getitem__(self, index):
        return self._items[index]

    def __delitem__(self, index):
        del self._items[index]

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __eq__(self, other):
        if not isinstance(other, Variation):
            return NotImplemented
        return (
            self.first_move_number == other.first_move_number
            and self.first_move_white == other.first_move_white
            and self._items == other._items
        )

    __hash__ = None

    def copy(self):
        """Return a deep copy: every item is copied as well."""
        other = _copy.copy(self)
        other._items = [item.copy() for item in self._items]
        return other

    def __repr__(self):
        return (
            f"{type(self).__name__}(first_move_number={self.first_move_number}, "
            f"first_move_white={self.first_move_white}, items={self._items!r})"
        )