"""
Fixed-step tick driver.
NO UI DEPENDENCIES.

Whatever calls advance() (a render loop, a timer, a test) decides the
cadence; the driver turns elapsed time into whole simulation ticks.
"""
import logging

from .game import Simulation

logger = logging.getLogger(__name__)


class TickDriver:
    """
    Feeds a Simulation one fixed-length tick at a time.

    Each tick is stamped with its scheduled time rather than the time
    advance() happened to be called, so replays are deterministic.
    """

    def __init__(self, simulation: Simulation, tick_ms: int, now: int, max_catch_up: int = 5):
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        if max_catch_up <= 0:
            raise ValueError(f"max_catch_up must be positive, got {max_catch_up}")
        self.simulation = simulation
        self.tick_ms = tick_ms
        self.max_catch_up = max_catch_up
        self._last_tick_at = now
        self.total_ticks = 0

    def reset(self, simulation: Simulation, now: int) -> None:
        """Swap in a new simulation (restart) and restart the schedule."""
        self.simulation = simulation
        self._last_tick_at = now
        logger.info("Tick driver reset with a new simulation")

    def advance(self, now: int) -> int:
        """
        Run every tick that is due by now.
        Returns how many ticks were run.
        """
        elapsed = now - self._last_tick_at
        if elapsed < self.tick_ms:
            return 0

        due = elapsed // self.tick_ms
        ticks = min(due, self.max_catch_up)
        for _ in range(ticks):
            self._last_tick_at += self.tick_ms
            self.simulation.tick(self._last_tick_at)

        if due > ticks:
            # Too far behind (window dragged, debugger...): drop the backlog
            logger.debug(f"Dropped {due - ticks} overdue ticks")
            self._last_tick_at = now

        self.total_ticks += ticks
        return ticks

    @property
    def last_tick_at(self) -> int:
        return self._last_tick_at
