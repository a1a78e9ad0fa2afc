"""Per-category character counts."""

from typing import NamedTuple


class CharacterTally(NamedTuple):
    """Counts of letters, digits, symbols and whitespace in a string.

    Every character lands in exactly one category, so the counts always
    add up to the string's length.
    """

    letters: int = 0
    digits: int = 0
    symbols: int = 0
    whitespace: int = 0

    @property
    def total(self) -> int:
        return self.letters + self.digits + self.symbols + self.whitespace
