"""Detective Quest: explore a mansion, collect clues, accuse a suspect."""

import sys

from .app import run_console
from .config import Config
from .logging import configure_logging, get_logger
from .session import DetectiveSession

__all__ = ["main", "run_console", "Config", "DetectiveSession"]


def main() -> None:
    """Entry point for the detective game."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info("application_starting", log_level=config.log_level)

    try:
        with DetectiveSession.start() as game:
            run_console(game, sys.stdin, sys.stdout)
    except MemoryError:
        logger.critical("out_of_memory")
        print("Erro: sem memoria", file=sys.stderr)
        sys.exit(1)
