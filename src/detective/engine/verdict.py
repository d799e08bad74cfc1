"""Judge an accusation against the collected clues."""

from dataclasses import dataclass

from .state import GameState
from .world import World

# Clues needed against a suspect for an accusation to stand.
ACCUSATION_THRESHOLD = 2


@dataclass(frozen=True)
class Verdict:
    accused: str
    count: int

    @property
    def accepted(self) -> bool:
        return self.count >= ACCUSATION_THRESHOLD


def tally(world: World, state: GameState, accused: str) -> int:
    """Count collected clues whose suspect is exactly the accused name."""
    count = 0
    for clue in state.collected:
        if world.suspects.lookup(clue) == accused:
            count += 1
    return count


def judge(world: World, state: GameState, accused: str) -> Verdict:
    return Verdict(accused=accused, count=tally(world, state, accused))


def format_verdict(verdict: Verdict) -> str:
    lines = [f"Pistas que apontam para {verdict.accused}: {verdict.count}"]
    if verdict.accepted:
        lines.append(
            "Acusação aceita: há evidências suficientes. Parabéns, Detetive!"
        )
    else:
        lines.append("Acusação rejeitada: não há evidências suficientes.")
    return "\n".join(lines)
