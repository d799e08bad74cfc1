"""Console front end: reads commands line by line and prints the game."""

from typing import TextIO

from .engine.verdict import Verdict, format_verdict
from .logging import get_logger
from .session import DetectiveSession

logger = get_logger(__name__)

WELCOME = (
    "Bem-vindo a Detective Quest!\n"
    "Explore a mansão e colete pistas. Ao final, acuse o suspeito.\n"
    "Comandos de navegação: 'e' = esquerda, 'd' = direita, 's' = sair\n"
    "Pressione Enter para começar...\n"
)


def _read_line(stdin: TextIO) -> str | None:
    """One line without its line ending, or None at end of input."""
    line = stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def explore(game: DetectiveSession, stdin: TextIO, stdout: TextIO) -> None:
    """Run the exploration loop until the player leaves or input ends."""
    while not game.is_finished:
        stdout.write("\n" + game.visit_room() + "\n")
        stdout.write(game.prompt())
        stdout.flush()

        command = _read_line(stdin)
        if command is None:
            notice = game.end_of_input()
        else:
            notice = game.process_command(command)
        if notice:
            stdout.write(notice + "\n")


def run_console(game: DetectiveSession, stdin: TextIO, stdout: TextIO) -> Verdict:
    """Play one full game: explore, list clues, accuse."""
    stdout.write(WELCOME)
    stdout.flush()
    _read_line(stdin)

    explore(game, stdin, stdout)

    stdout.write("\nPistas coletadas (ordenadas):\n")
    stdout.write(game.format_clue_listing() + "\n")

    stdout.write("\nQuem você acusa? Digite o nome do suspeito: ")
    stdout.flush()
    accused = _read_line(stdin) or ""

    verdict = game.accuse(accused)
    stdout.write("\n" + format_verdict(verdict) + "\n")
    stdout.flush()
    return verdict
