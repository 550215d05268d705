"""Tag pairs of a PGN game, always holding the Seven Tag Roster."""

from collections.abc import MutableMapping

SEVEN_TAG_ROSTER = frozenset(
    ("Event", "Site", "Date", "Round", "White", "Black", "Result")
)


class Tags(MutableMapping):
    """Mapping of tag names to values, iterated in sorted key order.

    The seven roster tags are always present. Deleting one of them resets
    its value to an empty string instead of removing it.
    """

    def __init__(self):
        self._tags = dict.fromkeys(SEVEN_TAG_ROSTER, "")

    def __getitem__(self, key):
        return self._tags[key]

    def __setitem__(self, key, value):
        self._tags[key] = value

    def __delitem__(self, key):
        if key in SEVEN_TAG_ROSTER:
            self._tags[key] = ""
        else:
            del self._tags[key]

    def __iter__(self):
        return iter(sorted(self._tags))

    def __len__(self):
        return len(self._tags)

    def clear(self):
        """Remove every tag except the roster tags, which become empty."""
        self._tags = dict.fromkeys(SEVEN_TAG_ROSTER, "")

    def __repr__(self):
        return f"Tags({dict(self.items())!r})"