"""Static structures of the mansion.

Built once at startup by the loader and only read during play.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from .table import SuspectTable


@dataclass
class Room:
    """A location in the mansion, optionally holding a clue."""

    name: str
    clue: str | None = None
    left: "Room | None" = None
    right: "Room | None" = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


@dataclass
class World:
    """The complete game world: the room tree and the suspect table."""

    root: Room
    suspects: SuspectTable


def create_room(name: str, clue: str | None = None) -> Room:
    """Create a room with no paths out of it."""
    return Room(name=name, clue=clue)


def iter_rooms(root: Room | None) -> Iterator[Room]:
    """Walk the tree in pre-order."""
    if root is None:
        return
    yield root
    yield from iter_rooms(root.left)
    yield from iter_rooms(root.right)


def release_rooms(root: Room | None) -> int:
    """Tear the tree down left subtree, right subtree, then the room itself.

    Returns the number of rooms released.
    """
    if root is None:
        return 0
    released = release_rooms(root.left) + release_rooms(root.right)
    root.left = root.right = None
    root.clue = None
    return released + 1
