"""
Movement rules for Lucy and the people in the park.
NO UI DEPENDENCIES.
"""
import logging
from typing import Tuple

from .grid import Direction, Grid
from .entities import Player, Wanderer
from .sources import RandomSource, random_between

logger = logging.getLogger(__name__)


def step_player(player: Player, direction: Direction, grid: Grid) -> None:
    """Move Lucy one cell. She always wraps, she is never blocked."""
    player.position = grid.wrapped_neighbor(player.position, direction)
    player.facing = direction


def roll_direction_change_interval(rng: RandomSource, range_ticks: Tuple[int, int]) -> int:
    """Pick a fresh direction-change interval so people don't walk in lockstep."""
    low, high = range_ticks
    return random_between(rng, low, high)


def advance_wanderer(
    wanderer: Wanderer,
    grid: Grid,
    rng: RandomSource,
    direction_change_range: Tuple[int, int],
) -> bool:
    """
    Advance one person by one tick.
    Returns True if their position changed.
    """
    wanderer.move_accumulator += 1
    wanderer.direction_change_accumulator += 1

    # Scheduled change of mind
    if wanderer.direction_change_accumulator >= wanderer.direction_change_interval:
        wanderer.direction = rng.random_direction()
        wanderer.direction_change_accumulator = 0
        wanderer.direction_change_interval = roll_direction_change_interval(
            rng, direction_change_range
        )

    # Speed throttle
    if wanderer.move_accumulator < wanderer.move_interval:
        return False
    wanderer.move_accumulator = 0

    target = grid.bounded_neighbor(wanderer.position, wanderer.direction)
    if target is None:
        # Walked into the fence: turn around somewhere, stay put this tick
        old_direction = wanderer.direction
        wanderer.direction = rng.random_direction()
        logger.debug(
            f"Wanderer at ({wanderer.position.x}, {wanderer.position.y}) bounced "
            f"{old_direction.name} -> {wanderer.direction.name}"
        )
        return False

    wanderer.position = target
    return True
