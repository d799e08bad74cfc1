"""Hashed clue → suspect table.

A fixed array of buckets, each holding a singly linked chain of entries.
New entries are prepended, so a lookup always finds the most recent
association for a clue first.
"""

from collections.abc import Iterator
from dataclasses import dataclass

# Small prime, sized once for the fixed clue set.
HASH_SIZE = 53


def hash_clue(text: str, size: int = HASH_SIZE) -> int:
    """Bucket index for a clue.

    Accumulates ``h = (h * 31 + unit) % size`` over the UTF-8 bytes of the
    text rather than its codepoints. Bytes keep the established bucket for
    accented clues: "página arrancada do livro" lands in bucket 9. For
    ASCII text both are identical. Assignments are stable across runs and
    interpreters.
    """
    h = 0
    for unit in text.encode("utf-8"):
        h = (h * 31 + unit) % size
    return h


@dataclass
class AssociationEntry:
    """One link in a bucket chain."""

    clue: str
    suspect: str
    next: "AssociationEntry | None" = None


class SuspectTable:
    """Maps clue text to the suspect it implicates."""

    def __init__(self, size: int = HASH_SIZE):
        self.size = size
        self._buckets: list[AssociationEntry | None] = [None] * size
        self._count = 0

    def insert(self, clue: str, suspect: str) -> None:
        """Prepend an association to the clue's bucket. No duplicate check."""
        idx = hash_clue(clue, self.size)
        self._buckets[idx] = AssociationEntry(clue, suspect, self._buckets[idx])
        self._count += 1

    def lookup(self, clue: str) -> str | None:
        """Return the suspect for a clue, or None if it was never inserted."""
        for entry in self._chain(hash_clue(clue, self.size)):
            if entry.clue == clue:
                return entry.suspect
        return None

    def bucket(self, clue: str) -> list[tuple[str, str]]:
        """The (clue, suspect) pairs sharing a clue's bucket, head first."""
        return [
            (entry.clue, entry.suspect)
            for entry in self._chain(hash_clue(clue, self.size))
        ]

    def clear(self) -> int:
        """Drop every chain. Returns how many entries were released."""
        released = 0
        for idx in range(self.size):
            entry = self._buckets[idx]
            while entry is not None:
                following = entry.next
                entry.next = None
                released += 1
                entry = following
            self._buckets[idx] = None
        self._count = 0
        return released

    def _chain(self, idx: int) -> Iterator[AssociationEntry]:
        entry = self._buckets[idx]
        while entry is not None:
            yield entry
            entry = entry.next

    def __len__(self) -> int:
        return self._count

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.lookup(clue) is not None
