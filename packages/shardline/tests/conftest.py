from __future__ import annotations

import pytest

from shardline import DEFAULT_LAYOUT


class ScriptedRandom:
    """Random source that replays a fixed sequence of draws."""

    def __init__(self, values: list[float]) -> None:
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self._values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def reds_only():
    return DEFAULT_LAYOUT.initial_presence()


@pytest.fixture
def all_present():
    return (True,) * len(DEFAULT_LAYOUT)


@pytest.fixture
def scripted():
    """Factory for ``ScriptedRandom`` sources."""
    return ScriptedRandom
