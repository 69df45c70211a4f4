"""
Pytest fixtures for Bug Crossing tests.
"""
import random
from typing import List, Tuple

import pytest

from bug_crossing.gameplay.session import Session


class FixedRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


class RecordingDisplay:
    """Display collaborator that records every notification."""

    def __init__(self):
        self.level_ups: List[Tuple[int, int]] = []
        self.lives_lost: List[int] = []
        self.game_ends: List[int] = []

    def on_level_up(self, level: int, score: int) -> None:
        self.level_ups.append((level, score))

    def on_life_lost(self, lives_remaining: int) -> None:
        self.lives_lost.append(lives_remaining)

    def on_game_end(self, final_score: int) -> None:
        self.game_ends.append(final_score)


class RecordingListener:
    """Stands in for the session when testing the player alone."""

    def __init__(self):
        self.level_advances = 0
        self.game_ends = 0
        self.lives_lost: List[int] = []

    def advance_level(self) -> None:
        self.level_advances += 1

    def end_game(self) -> None:
        self.game_ends += 1

    def on_life_lost(self, lives: int) -> None:
        self.lives_lost.append(lives)


class RecordingInput:
    def __init__(self):
        self.closed = 0

    def close(self) -> None:
        self.closed += 1


@pytest.fixture
def fixed_rng():
    """Factory for random sources pinned to one value."""
    return FixedRandom


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def input_channel():
    return RecordingInput()


@pytest.fixture
def session(rng, display, input_channel):
    return Session(rng=rng, display=display, input_channel=input_channel)
