#!/usr/bin/env python3
"""
Lucy Zoomies - Main Entry Point

Lucy is loose in the park. Eat every treat and every bit of dropped food
before one of the people catches her. Pizza and hamburgers make her
uncatchable for a while; a hotdog also gives her the zoomies.

Usage:
    python -m zoomies.main
    lucy-zoomies

Controls:
    Arrow keys: Move Lucy one cell
    Space/Enter: Start
    R: Restart after winning or losing
    Escape: Quit

Configuration comes from ZOOMIES_* environment variables or a .env file,
for example ZOOMIES_SEED=7 or ZOOMIES_SIMULATION__WANDERER_COUNT=8.
"""
import logging

import pygame

from zoomies.config import get_settings
from zoomies.gameplay.driver import TickDriver
from zoomies.gameplay.game import Simulation, create_simulation
from zoomies.gameplay.sources import MonotonicClock, SeededRandom
from zoomies.ui.audio import SoundBoard
from zoomies.ui.input_handler import InputHandler
from zoomies.ui.renderer import Renderer

logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    settings = get_settings()

    # Configure logging
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Lucy Zoomies - Starting...")

    sim_config = settings.simulation
    clock = MonotonicClock()
    rng = SeededRandom(settings.seed)

    pygame.init()
    pygame.display.set_caption("Lucy Zoomies")
    screen = pygame.display.set_mode((
        sim_config.grid_width * settings.cell_size,
        sim_config.grid_height * settings.cell_size,
    ))

    # Create renderer and sound board
    renderer = Renderer(settings.cell_size)
    sound_board = SoundBoard(settings.assets_dir, enabled=settings.sound_enabled)

    def new_simulation(start: bool) -> Simulation:
        simulation = create_simulation(sim_config, rng=rng, clock=clock, start=start)
        simulation.subscribe(renderer.on_event)
        simulation.subscribe(sound_board.on_event)
        return simulation

    driver = TickDriver(new_simulation(start=False), sim_config.tick_ms, clock.now())

    def restart() -> None:
        logger.info(f"Restarting (last score {driver.simulation.score})")
        renderer.reset()
        driver.reset(new_simulation(start=True), clock.now())

    input_handler = InputHandler(driver, restart)
    frame_clock = pygame.time.Clock()

    # Run game loop
    should_quit = False
    while not should_quit:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                should_quit = True
            elif event.type == pygame.KEYDOWN:
                should_quit = input_handler.handle_key(event.key)
                if should_quit:
                    break

        driver.advance(clock.now())
        renderer.render(screen, driver.simulation.get_snapshot())
        pygame.display.flip()
        frame_clock.tick(settings.fps)

    logger.info(f"Quitting after {driver.total_ticks} ticks")
    pygame.quit()


if __name__ == "__main__":
    main()
