"""
Park entities: Lucy, treats, power-ups and people.
NO UI DEPENDENCIES.

Every entity is a plain data record. Behaviour lives in movement.py and
collisions.py; drawing lives in the UI layer.
"""
from dataclasses import dataclass, field
from typing import Dict, Tuple, Union
from enum import Enum, auto

from .grid import Direction, Position
from .effects import EffectKind, StatusEffects
from .constants import TREAT_POINTS, POWER_UP_POINTS


class PowerUpKind(Enum):
    """The three kinds of food that give Lucy powers."""
    PIZZA = auto()
    HAMBURGER = auto()
    HOTDOG = auto()     # The special one: invincible AND zoomies


POWER_UP_EFFECTS: Dict[PowerUpKind, Tuple[EffectKind, ...]] = {
    PowerUpKind.PIZZA: (EffectKind.INVINCIBLE,),
    PowerUpKind.HAMBURGER: (EffectKind.INVINCIBLE,),
    PowerUpKind.HOTDOG: (EffectKind.INVINCIBLE, EffectKind.SPEED_BOOST),
}

ALL_POWER_UP_KINDS: Tuple[PowerUpKind, ...] = tuple(PowerUpKind)


@dataclass
class Player:
    """Lucy."""
    position: Position
    facing: Direction = Direction.RIGHT
    score: int = 0
    effects: StatusEffects = field(default_factory=StatusEffects)

    def add_score(self, points: int) -> None:
        """Score only ever goes up."""
        if points < 0:
            raise ValueError(f"Score cannot decrease (got {points} points)")
        self.score += points

    def copy(self) -> 'Player':
        return Player(
            position=self.position,
            facing=self.facing,
            score=self.score,
            effects=self.effects.copy(),
        )


@dataclass(frozen=True)
class Treat:
    """A collectible. Eaten once, never comes back."""
    position: Position

    @property
    def points(self) -> int:
        return TREAT_POINTS


@dataclass(frozen=True)
class PowerUp:
    """Food that scores and grants timed effects."""
    position: Position
    kind: PowerUpKind

    @property
    def points(self) -> int:
        return POWER_UP_POINTS

    @property
    def effects(self) -> Tuple[EffectKind, ...]:
        return POWER_UP_EFFECTS[self.kind]


@dataclass
class Wanderer:
    """
    A person walking around the park.

    Position changes at most once every move_interval ticks. The direction
    is forced to change every direction_change_interval ticks, and also
    whenever the person walks into the edge of the park.
    """
    position: Position
    direction: Direction
    move_interval: int
    direction_change_interval: int
    move_accumulator: int = 0
    direction_change_accumulator: int = 0

    def copy(self) -> 'Wanderer':
        return Wanderer(
            position=self.position,
            direction=self.direction,
            move_interval=self.move_interval,
            direction_change_interval=self.direction_change_interval,
            move_accumulator=self.move_accumulator,
            direction_change_accumulator=self.direction_change_accumulator,
        )


Edible = Union[Treat, PowerUp]
Entity = Union[Player, Treat, PowerUp, Wanderer]
