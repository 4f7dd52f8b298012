"""
Pytest fixtures for Lucy Zoomies tests.

Time and randomness are injected into the simulation, so every test runs
on a fake clock and a scripted random source.
"""
import itertools
from typing import Iterable

import pytest

from zoomies.gameplay.config import SimulationConfig
from zoomies.gameplay.entities import Player, Treat, PowerUp
from zoomies.gameplay.game import Simulation
from zoomies.gameplay.grid import Direction, Position


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, start: int = 0):
        self.current = start

    def now(self) -> int:
        return self.current

    def advance(self, ms: int) -> int:
        self.current += ms
        return self.current


class ScriptedRandom:
    """
    RandomSource that replays fixed sequences (cycled forever).
    random_int reduces the scripted value modulo n.
    """

    def __init__(self, directions: Iterable[Direction] = (Direction.UP,), ints: Iterable[int] = (0,)):
        self.direction_calls = 0
        self.script(directions=directions, ints=ints)

    def script(self, directions: Iterable[Direction] = None, ints: Iterable[int] = None) -> None:
        if directions is not None:
            self._directions = itertools.cycle(list(directions))
        if ints is not None:
            self._ints = itertools.cycle(list(ints))

    def random_int(self, n: int) -> int:
        return next(self._ints) % n

    def random_direction(self) -> Direction:
        self.direction_calls += 1
        return next(self._directions)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def make_sim(clock, rng):
    """
    Factory for a hand-laid park.

    Defaults: 10x10 grid, Lucy at (5, 5), nobody else, people that
    effectively never walk (wanderer_move_interval=1000).
    """
    def _make(
        player_at=(5, 5),
        treats=(),
        power_ups=(),
        wanderers=(),
        start=True,
        **config_overrides,
    ) -> Simulation:
        config_values = {
            "grid_width": 10,
            "grid_height": 10,
            "wanderer_move_interval": 1000,
        }
        config_values.update(config_overrides)
        config = SimulationConfig(**config_values)

        sim = Simulation(
            config,
            rng=rng,
            clock=clock,
            player=Player(Position(*player_at)),
            treats=[Treat(Position(*p)) for p in treats],
            power_ups=[PowerUp(Position(*p), kind) for p, kind in power_ups],
            wanderers=[],
        )
        for (x, y), direction in wanderers:
            sim.wanderers.append(sim.new_wanderer(Position(x, y), direction))

        if start:
            sim.start()
        return sim

    return _make
