"""Mutable per-session game state.

Holds the player's position, the clue catalogue and the clue log. The
room tree and suspect table live in the World and are never changed here.
"""

from dataclasses import dataclass, field

from .catalogue import MAX_COLLECTED, ClueLog, ClueNode
from .world import Room, World


@dataclass
class GameState:
    """Everything that changes while the player explores."""

    current_room: Room
    clues: ClueNode | None = None
    collected: ClueLog = field(default_factory=ClueLog)
    turns: int = 0
    is_finished: bool = False


def new_game_state(world: World, capacity: int = MAX_COLLECTED) -> GameState:
    """Create a fresh state standing in the entrance room."""
    return GameState(current_room=world.root, collected=ClueLog(capacity))
