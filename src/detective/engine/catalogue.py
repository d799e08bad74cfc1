"""Catalogue of collected clues.

The catalogue is an unbalanced binary search tree keyed by clue text. It
deduplicates collection and lists clues alphabetically. The clue log keeps
the order clues were first collected, up to a fixed capacity.
"""

from collections.abc import Iterator
from dataclasses import dataclass

# Collection events past this many are dropped silently.
MAX_COLLECTED = 100


@dataclass
class ClueNode:
    """A distinct collected clue."""

    clue: str
    left: "ClueNode | None" = None
    right: "ClueNode | None" = None


def insert_clue(root: ClueNode | None, clue: str) -> tuple[ClueNode, bool]:
    """Insert a clue unless it is already present.

    Returns the (possibly new) root and whether a node was created.
    """
    if root is None:
        return ClueNode(clue), True
    if clue == root.clue:
        return root, False
    if clue < root.clue:
        root.left, inserted = insert_clue(root.left, clue)
    else:
        root.right, inserted = insert_clue(root.right, clue)
    return root, inserted


def iter_sorted(root: ClueNode | None) -> Iterator[str]:
    """Yield every clue in ascending order (in-order traversal)."""
    if root is None:
        return
    yield from iter_sorted(root.left)
    yield root.clue
    yield from iter_sorted(root.right)


def release_catalogue(root: ClueNode | None) -> int:
    """Tear the tree down children first. Returns the number of nodes freed."""
    if root is None:
        return 0
    released = release_catalogue(root.left) + release_catalogue(root.right)
    root.left = root.right = None
    return released + 1


class ClueLog:
    """Append-only record of clues in the order they were first collected."""

    def __init__(self, capacity: int = MAX_COLLECTED):
        self.capacity = capacity
        self._entries: list[str] = []

    @property
    def is_full(self) -> bool:
        return len(self._entries) >= self.capacity

    def append(self, clue: str) -> bool:
        """Record a clue. Returns False, keeping nothing, once full."""
        if self.is_full:
            return False
        self._entries.append(clue)
        return True

    def clear(self) -> int:
        released = len(self._entries)
        self._entries.clear()
        return released

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
