"""
Main Simulation class - orchestrates all gameplay systems.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union
from enum import Enum, auto

from pydantic import ValidationError

from .grid import Grid, Direction, Position
from .entities import (
    Player, Treat, PowerUp, Wanderer, ALL_POWER_UP_KINDS,
)
from .effects import EffectKind, ActiveEffect
from .events import (
    GameEvent, EventListener, EffectEndedEvent, PhaseChangedEvent,
    GameOverEvent, GameWonEvent,
)
from .collisions import CollisionOutcome, resolve_collisions
from .movement import step_player, advance_wanderer, roll_direction_change_interval
from .config import SimulationConfig, ConfigurationError
from .sources import Clock, RandomSource, MonotonicClock, SeededRandom

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Current phase of the game."""
    NOT_STARTED = auto()  # Start screen, nothing moves
    RUNNING = auto()      # Lucy is loose in the park
    WON = auto()          # Everything eaten
    LOST = auto()         # Caught by a person


TERMINAL_PHASES = (GamePhase.WON, GamePhase.LOST)


@dataclass(frozen=True)
class SimulationSnapshot:
    """
    A read-only copy of the simulation state.
    Changing the simulation afterwards never changes a snapshot.
    """
    tick_number: int
    phase: GamePhase
    score: int
    player: Player
    active_effects: Tuple[ActiveEffect, ...]
    treats: Tuple[Treat, ...]
    power_ups: Tuple[PowerUp, ...]
    wanderers: Tuple[Wanderer, ...]
    grid_width: int
    grid_height: int

    def has_effect(self, kind: EffectKind) -> bool:
        return any(effect.kind == kind for effect in self.active_effects)

    @property
    def is_over(self) -> bool:
        return self.phase in TERMINAL_PHASES


class Simulation:
    """
    One game of Lucy in the park.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as snapshots and accepts commands as method calls.

    Usage:
        sim = create_simulation(seed_config, rng=SeededRandom(7), clock=MonotonicClock())
        sim.subscribe(print)
        while sim.phase == GamePhase.RUNNING:
            sim.handle_player_command(Direction.LEFT)
            snapshot = sim.tick()
            # UI reads the snapshot and renders
    """

    def __init__(
        self,
        config: SimulationConfig,
        rng: RandomSource,
        clock: Clock,
        player: Optional[Player] = None,
        treats: Optional[List[Treat]] = None,
        power_ups: Optional[List[PowerUp]] = None,
        wanderers: Optional[List[Wanderer]] = None,
    ):
        self.config = config
        self.grid = Grid(config.grid_width, config.grid_height)
        self._rng = rng
        self._clock = clock

        # Entities
        self.player = player if player is not None else Player(self.grid.center)
        self.treats: List[Treat] = list(treats) if treats is not None else self._spawn_treats()
        self.power_ups: List[PowerUp] = list(power_ups) if power_ups is not None else self._spawn_power_ups()
        self.wanderers: List[Wanderer] = list(wanderers) if wanderers is not None else self._spawn_wanderers()

        # Game state
        self.phase = GamePhase.NOT_STARTED
        self.tick_number = 0
        self._pending_command: Optional[Direction] = None

        # Event queue for UI notifications
        self.events: List[GameEvent] = []
        self._listeners: List[EventListener] = []

        self._effect_durations: Dict[EffectKind, int] = {
            EffectKind.INVINCIBLE: config.invincibility_ms,
            EffectKind.SPEED_BOOST: config.speed_boost_ms,
        }

    # =========================================================================
    # SPAWNING
    # =========================================================================

    def _random_position(self) -> Position:
        return Position(
            self._rng.random_int(self.grid.width),
            self._rng.random_int(self.grid.height),
        )

    def _spawn_treats(self) -> List[Treat]:
        return [Treat(self._random_position()) for _ in range(self.config.treat_count)]

    def _spawn_power_ups(self) -> List[PowerUp]:
        power_ups = []
        for _ in range(self.config.power_up_count):
            position = self._random_position()
            kind = ALL_POWER_UP_KINDS[self._rng.random_int(len(ALL_POWER_UP_KINDS))]
            power_ups.append(PowerUp(position, kind))
        return power_ups

    def _spawn_wanderers(self) -> List[Wanderer]:
        wanderers = []
        for _ in range(self.config.wanderer_count):
            position = self._random_position()
            # Don't start a game with someone standing on Lucy
            while position == self.player.position and self.grid.width * self.grid.height > 1:
                position = self._random_position()
            wanderers.append(self.new_wanderer(position))
        return wanderers

    def new_wanderer(self, position: Position, direction: Optional[Direction] = None) -> Wanderer:
        """Build a person using this simulation's pacing and random source."""
        return Wanderer(
            position=position,
            direction=direction if direction is not None else self._rng.random_direction(),
            move_interval=self.config.wanderer_move_interval,
            direction_change_interval=roll_direction_change_interval(
                self._rng, self.config.direction_change_range_ticks
            ),
        )

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        """
        Register a listener for game events.
        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> None:
        """Leave the start screen. Does nothing in any other phase."""
        if self.phase == GamePhase.NOT_STARTED:
            self._change_phase(GamePhase.RUNNING)
            self._flush_events()

    def handle_player_command(self, direction: Direction) -> None:
        """
        Record where Lucy should go next.
        The last command before a tick wins; it is applied by that tick.
        """
        if self.phase != GamePhase.RUNNING:
            return
        self._pending_command = direction

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def tick(self, now: Optional[int] = None) -> SimulationSnapshot:
        """
        Advance the game by one step.
        Outside RUNNING this does nothing and just returns the snapshot.
        """
        if self.phase != GamePhase.RUNNING:
            return self.get_snapshot()

        if now is None:
            now = self._clock.now()

        self.events = []
        self.tick_number += 1

        # Effects that ran out
        for kind in self.player.effects.tick(now):
            self.events.append(EffectEndedEvent(kind))
            logger.debug(f"Effect {kind.name} ended at {now}")

        # Lucy
        self._move_player(now)

        # People
        direction_change_range = self.config.direction_change_range_ticks
        for wanderer in self.wanderers:
            advance_wanderer(wanderer, self.grid, self._rng, direction_change_range)

        # Collisions
        result = resolve_collisions(
            self.player,
            self.treats,
            self.power_ups,
            self.wanderers,
            now,
            self._effect_durations,
        )
        self.events.extend(result.events)

        # Win/lose conditions
        if result.outcome == CollisionOutcome.CAUGHT:
            self._change_phase(GamePhase.LOST)
            self.events.append(GameOverEvent(self.player.score))
        elif result.outcome == CollisionOutcome.CLEARED:
            self._change_phase(GamePhase.WON)
            self.events.append(GameWonEvent(self.player.score))

        self._flush_events()
        return self.get_snapshot()

    def _move_player(self, now: int) -> None:
        command = self._pending_command
        self._pending_command = None
        if command is not None:
            step_player(self.player, command, self.grid)

        # The zoomies: she can't help running somewhere extra
        if self.player.effects.is_active(EffectKind.SPEED_BOOST, now):
            step_player(self.player, self._rng.random_direction(), self.grid)

    def _change_phase(self, new_phase: GamePhase) -> None:
        old_phase = self.phase
        self.phase = new_phase
        self.events.append(PhaseChangedEvent(old_phase, new_phase))
        logger.info(f"Phase {old_phase.name} -> {new_phase.name} (score {self.player.score})")

    def _flush_events(self) -> None:
        for event in self.events:
            for listener in list(self._listeners):
                listener(event)

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    @property
    def score(self) -> int:
        return self.player.score

    @property
    def pending_command(self) -> Optional[Direction]:
        return self._pending_command

    def get_snapshot(self) -> SimulationSnapshot:
        """Read-only view of the current state, without advancing."""
        player = self.player.copy()
        return SimulationSnapshot(
            tick_number=self.tick_number,
            phase=self.phase,
            score=player.score,
            player=player,
            active_effects=player.effects.active(),
            treats=tuple(self.treats),
            power_ups=tuple(self.power_ups),
            wanderers=tuple(w.copy() for w in self.wanderers),
            grid_width=self.grid.width,
            grid_height=self.grid.height,
        )

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, ticks: int, start: int = 0) -> List[GameEvent]:
        """
        Run a number of ticks at the configured tick length.
        Returns all events that occurred.
        """
        all_events = []
        for i in range(ticks):
            if self.phase != GamePhase.RUNNING:
                break
            self.tick(start + (i + 1) * self.config.tick_ms)
            all_events.extend(self.events)
        return all_events


# =============================================================================
# FUNCTIONAL API
# =============================================================================

ConfigLike = Union[SimulationConfig, Mapping[str, Any], None]


def build_config(config: ConfigLike = None) -> SimulationConfig:
    """Validate a config, raising ConfigurationError if it makes no sense."""
    if isinstance(config, SimulationConfig):
        return config
    try:
        return SimulationConfig.model_validate(dict(config or {}))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid simulation config: {exc}") from exc


def create_simulation(
    config: ConfigLike = None,
    *,
    rng: Optional[RandomSource] = None,
    clock: Optional[Clock] = None,
    start: bool = True,
) -> Simulation:
    """Lay out a fresh park and (by default) start the game."""
    config = build_config(config)
    simulation = Simulation(
        config,
        rng=rng if rng is not None else SeededRandom(),
        clock=clock if clock is not None else MonotonicClock(),
    )
    logger.info(
        f"Created simulation {simulation.grid!r} with {len(simulation.treats)} treats, "
        f"{len(simulation.power_ups)} power-ups, {len(simulation.wanderers)} people"
    )
    if start:
        simulation.start()
    return simulation


def tick(simulation: Simulation, now: Optional[int] = None) -> SimulationSnapshot:
    return simulation.tick(now)


def handle_player_command(simulation: Simulation, direction: Direction) -> None:
    simulation.handle_player_command(direction)


def get_snapshot(simulation: Simulation) -> SimulationSnapshot:
    return simulation.get_snapshot()
