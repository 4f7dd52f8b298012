"""
Input Handler - Translates key presses to gameplay commands.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Callable

import pygame

from zoomies.gameplay.driver import TickDriver
from zoomies.gameplay.game import GamePhase
from zoomies.gameplay.grid import Direction


# Key mappings for Lucy
DIRECTION_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)
RESTART_KEYS = (pygame.K_r, pygame.K_SPACE, pygame.K_RETURN)


class InputHandler:
    """
    Handles keyboard input and translates to game commands.

    The input handler:
    - Steers Lucy while the game is running
    - Starts the game from the start screen
    - Asks for a brand new game after a win or a loss
    """

    def __init__(self, driver: TickDriver, restart: Callable[[], None]):
        self.driver = driver
        self.restart = restart

    def handle_key(self, key: int) -> bool:
        """
        Handle a single key press.
        Returns True if the game should quit.
        """
        # Quit
        if key == pygame.K_ESCAPE:
            return True

        simulation = self.driver.simulation

        # Phase-specific handling
        if simulation.phase == GamePhase.NOT_STARTED:
            if key in START_KEYS:
                simulation.start()
            return False

        if simulation.phase in (GamePhase.WON, GamePhase.LOST):
            if key in RESTART_KEYS:
                self.restart()
            return False

        if key in DIRECTION_KEYS:
            simulation.handle_player_command(DIRECTION_KEYS[key])

        return False
