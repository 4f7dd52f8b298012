"""
Gameplay core for Lucy Zoomies.
NO UI DEPENDENCIES.
"""
from .grid import Direction, Position, Grid
from .entities import Player, Treat, PowerUp, PowerUpKind, Wanderer
from .effects import EffectKind, ActiveEffect, StatusEffects
from .config import SimulationConfig, ConfigurationError
from .game import (
    GamePhase, Simulation, SimulationSnapshot,
    create_simulation, tick, handle_player_command, get_snapshot,
)
from .driver import TickDriver
from .sources import Clock, RandomSource, MonotonicClock, SeededRandom

__all__ = [
    "Direction", "Position", "Grid",
    "Player", "Treat", "PowerUp", "PowerUpKind", "Wanderer",
    "EffectKind", "ActiveEffect", "StatusEffects",
    "SimulationConfig", "ConfigurationError",
    "GamePhase", "Simulation", "SimulationSnapshot",
    "create_simulation", "tick", "handle_player_command", "get_snapshot",
    "TickDriver",
    "Clock", "RandomSource", "MonotonicClock", "SeededRandom",
]
