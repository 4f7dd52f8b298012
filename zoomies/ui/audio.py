"""
Sound Board - Plays sounds in response to game events.
This is a THIN ADAPTER - no game logic here.
"""
import logging
from pathlib import Path
from typing import Dict, Optional

import pygame

from zoomies.gameplay.events import GameEvent, EntityEatenEvent, GameOverEvent, GameWonEvent

logger = logging.getLogger(__name__)

SOUND_EAT = "eat.mp3"
SOUND_GAME_OVER = "gameover.mp3"
SOUND_WIN = "win.mp3"


def sound_for(event: GameEvent) -> Optional[str]:
    """Which sound file (if any) an event should play."""
    if isinstance(event, EntityEatenEvent):
        return SOUND_EAT
    if isinstance(event, GameOverEvent):
        return SOUND_GAME_OVER
    if isinstance(event, GameWonEvent):
        return SOUND_WIN
    return None


class SoundBoard:
    """
    Subscribes to game events and plays the matching sound.

    Sounds are loaded on first use. A sound that can't be loaded is
    reported once and then stays silent; the game never stops for audio.
    """

    def __init__(self, assets_dir: str, enabled: bool = True):
        self.assets_dir = Path(assets_dir)
        self.enabled = enabled
        self._sounds: Dict[str, Optional[pygame.mixer.Sound]] = {}

        if self.enabled and not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as exc:
                logger.warning(f"Audio unavailable, running silent: {exc}")
                self.enabled = False

    def on_event(self, event: GameEvent) -> None:
        """Game event listener."""
        if not self.enabled:
            return
        name = sound_for(event)
        if name is None:
            return
        sound = self._load(name)
        if sound is not None:
            sound.play()

    def _load(self, name: str) -> Optional[pygame.mixer.Sound]:
        if name in self._sounds:
            return self._sounds[name]

        path = self.assets_dir / name
        sound = None
        if not path.exists():
            logger.warning(f"Sound {path} not found, it will stay silent")
        else:
            try:
                sound = pygame.mixer.Sound(str(path))
            except pygame.error as exc:
                logger.warning(f"Could not load sound {path}: {exc}")

        self._sounds[name] = sound
        return sound
