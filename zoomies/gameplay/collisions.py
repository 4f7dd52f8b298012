"""
Collision and scoring rules.
NO UI DEPENDENCIES.

Collisions are exact cell equality, checked once per tick after everyone
has moved.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List
from enum import Enum, auto

from .effects import EffectKind
from .entities import Player, Treat, PowerUp, Wanderer, Edible
from .events import GameEvent, EntityEatenEvent, EffectStartedEvent

logger = logging.getLogger(__name__)


class CollisionOutcome(Enum):
    """What the tick's collisions mean for the game as a whole."""
    NONE = auto()
    CAUGHT = auto()    # A person caught Lucy
    CLEARED = auto()   # Nothing left to eat


@dataclass
class CollisionResult:
    """Result of resolving one tick's collisions."""
    points: int = 0
    eaten: List[Edible] = field(default_factory=list)
    events: List[GameEvent] = field(default_factory=list)
    outcome: CollisionOutcome = CollisionOutcome.NONE


def _take_at(items: list, player: Player) -> list:
    """Remove and return every item sitting on Lucy's cell."""
    hits = [item for item in items if item.position == player.position]
    if hits:
        items[:] = [item for item in items if item.position != player.position]
    return hits


def resolve_collisions(
    player: Player,
    treats: List[Treat],
    power_ups: List[PowerUp],
    wanderers: List[Wanderer],
    now: int,
    effect_durations: Dict[EffectKind, int],
) -> CollisionResult:
    """
    Resolve every interaction on Lucy's cell.

    treats and power_ups are edited in place: whatever Lucy eats is gone
    for good. Two things stacked on one cell are both eaten and both scored.
    """
    result = CollisionResult()

    # 1. Treats
    for treat in _take_at(treats, player):
        player.add_score(treat.points)
        result.points += treat.points
        result.eaten.append(treat)
        result.events.append(EntityEatenEvent(treat, treat.points))
        logger.debug(f"Ate treat at ({treat.position.x}, {treat.position.y})")

    # 2. Power-ups
    for power_up in _take_at(power_ups, player):
        player.add_score(power_up.points)
        result.points += power_up.points
        result.eaten.append(power_up)
        result.events.append(EntityEatenEvent(power_up, power_up.points))
        logger.debug(f"Ate {power_up.kind.name} at ({power_up.position.x}, {power_up.position.y})")

        for kind in power_up.effects:
            refreshed = player.effects.is_active(kind, now)
            effect = player.effects.activate(kind, effect_durations[kind], now)
            result.events.append(EffectStartedEvent(kind, effect.expires_at, refreshed))
            logger.debug(f"Effect {kind.name} {'refreshed' if refreshed else 'started'} until {effect.expires_at}")

    # 3. People
    if not player.effects.is_active(EffectKind.INVINCIBLE, now):
        for wanderer in wanderers:
            if wanderer.position == player.position:
                result.outcome = CollisionOutcome.CAUGHT
                return result

    # 4. Empty park
    if not treats and not power_ups:
        result.outcome = CollisionOutcome.CLEARED

    return result
