"""Shared test fixtures for Detective Quest."""

import pytest

from detective.engine.loader import load_world
from detective.engine.state import GameState, new_game_state
from detective.engine.world import World
from detective.session import DetectiveSession


@pytest.fixture
def world() -> World:
    return load_world()


@pytest.fixture
def state(world: World) -> GameState:
    return new_game_state(world)


@pytest.fixture
def game(world: World):
    with DetectiveSession.start(world) as session:
        yield session
