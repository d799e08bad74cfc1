"""Session layer owning one game's world and state."""

from .engine.catalogue import iter_sorted, release_catalogue
from .engine.commands import (
    end_of_input,
    get_prompt,
    handle_command,
    visit_room,
)
from .engine.loader import load_world
from .engine.state import GameState, new_game_state
from .engine.verdict import Verdict, judge
from .engine.world import World, iter_rooms, release_rooms
from .logging import get_logger

logger = get_logger(__name__)


class DetectiveSession:
    """Wraps the World + GameState of a single playthrough.

    Created once at startup and closed once at the end, whichever way the
    player left the mansion.
    """

    def __init__(self, world: World, game_state: GameState):
        self.world = world
        self.state = game_state
        self.closed = False

    @classmethod
    def start(cls, world: World | None = None) -> "DetectiveSession":
        """Build the mansion (unless given) and a fresh game."""
        if world is None:
            world = load_world()
            logger.info(
                "world_loaded",
                rooms=sum(1 for _ in iter_rooms(world.root)),
                associations=len(world.suspects),
            )
        logger.info("new_game_started", room=world.root.name)
        return cls(world, new_game_state(world))

    def visit_room(self) -> str:
        return visit_room(self.world, self.state)

    def prompt(self) -> str:
        return get_prompt(self.world, self.state)

    def process_command(self, raw_input: str) -> str:
        """Delegate to the engine and return response text."""
        return handle_command(self.world, self.state, raw_input)

    def end_of_input(self) -> str:
        return end_of_input(self.state)

    @property
    def is_finished(self) -> bool:
        return self.state.is_finished

    def sorted_clues(self) -> list[str]:
        return list(iter_sorted(self.state.clues))

    def format_clue_listing(self) -> str:
        """Collected clues in alphabetical order, one per line."""
        clues = self.sorted_clues()
        if not clues:
            return "Nenhuma pista coletada."
        return "\n".join(f"- {clue}" for clue in clues)

    def accuse(self, accused: str) -> Verdict:
        verdict = judge(self.world, self.state, accused)
        logger.info(
            "accusation_judged",
            accused=accused,
            count=verdict.count,
            accepted=verdict.accepted,
        )
        return verdict

    def close(self) -> None:
        """Release the catalogue, clue log, suspect table and room tree."""
        if self.closed:
            return
        clues = release_catalogue(self.state.clues)
        self.state.clues = None
        logged = self.state.collected.clear()
        associations = self.world.suspects.clear()
        rooms = release_rooms(self.world.root)
        self.closed = True
        logger.debug(
            "session_closed",
            clues=clues,
            logged=logged,
            associations=associations,
            rooms=rooms,
        )

    def __enter__(self) -> "DetectiveSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
