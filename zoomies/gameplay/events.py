"""
Events emitted by the simulation for the UI and audio to react to.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Callable, TYPE_CHECKING

from .effects import EffectKind
from .entities import Edible

if TYPE_CHECKING:
    from .game import GamePhase


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class EntityEatenEvent(GameEvent):
    """Lucy ate a treat or a power-up."""
    entity: Edible
    points: int


@dataclass
class EffectStartedEvent(GameEvent):
    """An effect was granted, or its deadline pushed back."""
    kind: EffectKind
    expires_at: int
    refreshed: bool = False


@dataclass
class EffectEndedEvent(GameEvent):
    """An effect ran out."""
    kind: EffectKind


@dataclass
class PhaseChangedEvent(GameEvent):
    """Game phase changed."""
    old_phase: 'GamePhase'
    new_phase: 'GamePhase'


@dataclass
class GameOverEvent(GameEvent):
    """Lucy got caught."""
    score: int


@dataclass
class GameWonEvent(GameEvent):
    """Every treat and power-up has been eaten."""
    score: int


EventListener = Callable[[GameEvent], None]
