"""
Simulation configuration.
NO UI DEPENDENCIES.

A SimulationConfig is validated on construction, so a simulation can never
be built on a corrupt grid.
"""
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import (
    GRID_WIDTH, GRID_HEIGHT, TREAT_COUNT, POWER_UP_COUNT, WANDERER_COUNT,
    TICK_MS, INVINCIBILITY_MS, SPEED_BOOST_MS, WANDERER_MOVE_INTERVAL,
    DIRECTION_CHANGE_MIN_MS, DIRECTION_CHANGE_MAX_MS,
)


class ConfigurationError(ValueError):
    """Raised when a simulation is created from an invalid configuration."""


class SimulationConfig(BaseModel):
    """Everything needed to lay out and run one game."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Grid
    grid_width: int = Field(default=GRID_WIDTH, gt=0, description="Columns in the park")
    grid_height: int = Field(default=GRID_HEIGHT, gt=0, description="Rows in the park")

    # Population
    treat_count: int = Field(default=TREAT_COUNT, ge=0)
    power_up_count: int = Field(default=POWER_UP_COUNT, ge=0)
    wanderer_count: int = Field(default=WANDERER_COUNT, ge=0)

    # Timing
    tick_ms: int = Field(default=TICK_MS, gt=0, description="Length of one tick in milliseconds")
    invincibility_ms: int = Field(default=INVINCIBILITY_MS, ge=0)
    speed_boost_ms: int = Field(default=SPEED_BOOST_MS, ge=0)

    # Wanderers
    wanderer_move_interval: int = Field(
        default=WANDERER_MOVE_INTERVAL,
        gt=0,
        description="Ticks between two steps of a person"
    )
    direction_change_min_ms: int = Field(default=DIRECTION_CHANGE_MIN_MS, ge=0)
    direction_change_max_ms: int = Field(default=DIRECTION_CHANGE_MAX_MS, ge=0)

    @model_validator(mode="after")
    def _check_direction_change_range(self) -> "SimulationConfig":
        if self.direction_change_min_ms > self.direction_change_max_ms:
            raise ValueError(
                "direction_change_min_ms "
                f"({self.direction_change_min_ms}) must not exceed "
                f"direction_change_max_ms ({self.direction_change_max_ms})"
            )
        return self

    def ms_to_ticks(self, ms: int) -> int:
        """Whole ticks in a duration, never less than one."""
        return max(1, ms // self.tick_ms)

    @property
    def direction_change_range_ticks(self) -> Tuple[int, int]:
        """(min, max) ticks between forced direction changes."""
        return (
            self.ms_to_ticks(self.direction_change_min_ms),
            self.ms_to_ticks(self.direction_change_max_ms),
        )
