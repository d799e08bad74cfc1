"""Exploration commands and room visits.

handle_command(world, state, raw_input) -> str is the main entry point for
navigation. visit_room(world, state) -> str runs on every step the player
spends in a room and collects the clue found there. All functions mutate
state in place and return the text to show the player.
"""

from collections.abc import Callable
from enum import Enum

from ..logging import get_logger
from .catalogue import insert_clue
from .state import GameState
from .world import World

logger = get_logger(__name__)

LEFT = "e"
RIGHT = "d"
EXIT = "s"


class Collection(Enum):
    """Outcome of submitting a clue to the catalogue."""

    COLLECTED = "collected"
    DUPLICATE = "duplicate"
    DROPPED = "dropped"


def collect_clue(state: GameState, clue: str) -> Collection:
    """Add a clue to the catalogue and the clue log unless already there.

    Once the log is full further clues are dropped without touching the
    catalogue.
    """
    if state.collected.is_full:
        logger.debug("clue_log_full", clue=clue, capacity=state.collected.capacity)
        return Collection.DROPPED

    state.clues, inserted = insert_clue(state.clues, clue)
    if not inserted:
        return Collection.DUPLICATE

    state.collected.append(clue)
    logger.info("clue_collected", clue=clue, total=len(state.collected))
    return Collection.COLLECTED


def visit_room(world: World, state: GameState) -> str:
    """Describe the current room and collect its clue, if any."""
    room = state.current_room
    logger.debug("room_entered", room=room.name, turns=state.turns)

    lines = [f"Você está na sala: {room.name}"]
    if room.clue is None:
        lines.append("Nenhuma pista nesta sala.")
        return "\n".join(lines)

    lines.append(f'Há uma pista aqui: "{room.clue}"')
    outcome = collect_clue(state, room.clue)
    if outcome is Collection.COLLECTED:
        lines.append(f'Pista coletada: "{room.clue}"')
    elif outcome is Collection.DUPLICATE:
        lines.append(f'Pista já coletada anteriormente: "{room.clue}"')
    return "\n".join(lines)


def get_prompt(world: World, state: GameState) -> str:
    """Text offered before reading the next command."""
    if state.current_room.is_leaf:
        return (
            "Esta sala não tem caminhos. Digite 's' para sair "
            "ou volte para o início do programa.\n"
        )
    return "Escolha: (e) esquerda | (d) direita | (s) sair: "


def _cmd_left(world: World, state: GameState) -> str:
    if state.current_room.left is None:
        return "Não há caminho à esquerda."
    state.current_room = state.current_room.left
    return ""


def _cmd_right(world: World, state: GameState) -> str:
    if state.current_room.right is None:
        return "Não há caminho à direita."
    state.current_room = state.current_room.right
    return ""


def _cmd_exit(world: World, state: GameState) -> str:
    state.is_finished = True
    logger.info("exploration_finished", room=state.current_room.name, turns=state.turns)
    return "Saindo da exploração..."


_COMMAND_DISPATCH: dict[str, Callable[[World, GameState], str]] = {
    LEFT: _cmd_left,
    RIGHT: _cmd_right,
    EXIT: _cmd_exit,
}


def handle_command(world: World, state: GameState, raw_input: str) -> str:
    """Process one navigation token and return the notice to show.

    A successful move returns an empty string; the new room is described
    by the next visit_room call.
    """
    if state.is_finished:
        return ""
    state.turns += 1

    handler = _COMMAND_DISPATCH.get(raw_input.rstrip("\r\n"))
    if handler is None:
        logger.debug("invalid_command", command=raw_input)
        return "Comando inválido. Use 'e', 'd' ou 's'."
    return handler(world, state)


def end_of_input(state: GameState) -> str:
    """Input closed: leave the mansion the same way as the exit command."""
    if state.is_finished:
        return ""
    state.is_finished = True
    logger.info("input_closed", room=state.current_room.name, turns=state.turns)
    return ""
