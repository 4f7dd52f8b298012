"""
Renderer - Turns simulation snapshots into pixels.
This is a THIN ADAPTER - no game logic here.

build_frame() is pure: snapshot in, draw instructions out. Renderer is the
only part that touches pygame.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from zoomies.gameplay.effects import EffectKind
from zoomies.gameplay.entities import Player, Treat, PowerUp, PowerUpKind, Wanderer, Entity
from zoomies.gameplay.events import GameEvent, EntityEatenEvent
from zoomies.gameplay.game import GamePhase, SimulationSnapshot


Color = Tuple[int, int, int]

# Colors
COLOR_BACKGROUND = (34, 85, 34)
COLOR_TREAT = (139, 69, 19)
COLOR_PERSON = (220, 40, 40)
COLOR_LUCY = (255, 220, 0)
COLOR_LUCY_EATING = (255, 150, 40)
COLOR_LUCY_INVINCIBLE = (255, 255, 255)
COLOR_LUCY_ZOOMIES = (120, 230, 255)
COLOR_HUD = (255, 255, 255)
COLOR_OVERLAY = (10, 10, 20)

POWER_UP_COLORS = {
    PowerUpKind.PIZZA: (60, 200, 60),
    PowerUpKind.HAMBURGER: (30, 140, 30),
    PowerUpKind.HOTDOG: (160, 255, 120),
}

# Frames Lucy stays in her eating pose after a bite
EATING_FRAMES = 8

FONT_SIZE = 20
TITLE_FONT_SIZE = 40


@dataclass(frozen=True)
class DrawInstruction:
    """One primitive for the backend to draw. Coordinates are in pixels."""
    shape: str                 # 'rect' or 'text'
    x: int
    y: int
    width: int = 0
    height: int = 0
    color: Color = COLOR_HUD
    text: Optional[str] = None
    size: int = FONT_SIZE      # font size for text
    centered: bool = False     # text: (x, y) is the center, not the top-left


def _cell_rect(x: int, y: int, cell_size: int, size: int, color: Color) -> DrawInstruction:
    """A square of `size` pixels centered in grid cell (x, y)."""
    inset = (cell_size - size) // 2
    return DrawInstruction('rect', x * cell_size + inset, y * cell_size + inset, size, size, color)


def lucy_color(snapshot: SimulationSnapshot, eating: bool = False) -> Color:
    """Eating beats invincible beats zoomies beats plain yellow."""
    if eating:
        return COLOR_LUCY_EATING
    if snapshot.has_effect(EffectKind.INVINCIBLE):
        return COLOR_LUCY_INVINCIBLE
    if snapshot.has_effect(EffectKind.SPEED_BOOST):
        return COLOR_LUCY_ZOOMIES
    return COLOR_LUCY


def entity_instructions(
    entity: Entity,
    snapshot: SimulationSnapshot,
    cell_size: int,
    eating: bool = False,
) -> List[DrawInstruction]:
    """Draw instructions for a single entity."""
    if isinstance(entity, Treat):
        # Treats are half a cell
        size, color = cell_size // 2, COLOR_TREAT
    elif isinstance(entity, PowerUp):
        size, color = cell_size, POWER_UP_COLORS[entity.kind]
    elif isinstance(entity, Wanderer):
        size, color = cell_size, COLOR_PERSON
    elif isinstance(entity, Player):
        size, color = cell_size, lucy_color(snapshot, eating)
    else:
        raise TypeError(f"Don't know how to draw {type(entity).__name__}")

    return [_cell_rect(entity.position.x, entity.position.y, cell_size, size, color)]


def _overlay(snapshot: SimulationSnapshot, width: int, height: int) -> List[DrawInstruction]:
    """Start / game over / win screens."""
    if snapshot.phase == GamePhase.RUNNING:
        return []

    title, subtitle = {
        GamePhase.NOT_STARTED: ("Lucy Zoomies", "Press SPACE to start"),
        GamePhase.LOST: ("Game Over", f"Final score: {snapshot.score} - press R to restart"),
        GamePhase.WON: ("You Win!", f"Final score: {snapshot.score} - press R to restart"),
    }[snapshot.phase]

    return [
        DrawInstruction('rect', 0, 0, width, height, COLOR_OVERLAY),
        DrawInstruction('text', width // 2, height // 2 - TITLE_FONT_SIZE, text=title,
                        size=TITLE_FONT_SIZE, centered=True),
        DrawInstruction('text', width // 2, height // 2 + FONT_SIZE, text=subtitle, centered=True),
    ]


def build_frame(snapshot: SimulationSnapshot, cell_size: int, eating: bool = False) -> List[DrawInstruction]:
    """
    Build the full draw list for a snapshot, back to front:
    background, treats, power-ups, people, Lucy, HUD, overlay.
    """
    width = snapshot.grid_width * cell_size
    height = snapshot.grid_height * cell_size

    frame = [DrawInstruction('rect', 0, 0, width, height, COLOR_BACKGROUND)]
    for treat in snapshot.treats:
        frame.extend(entity_instructions(treat, snapshot, cell_size))
    for power_up in snapshot.power_ups:
        frame.extend(entity_instructions(power_up, snapshot, cell_size))
    for wanderer in snapshot.wanderers:
        frame.extend(entity_instructions(wanderer, snapshot, cell_size))
    frame.extend(entity_instructions(snapshot.player, snapshot, cell_size, eating))

    # Score
    frame.append(DrawInstruction('text', 10, 10, text=f"Score: {snapshot.score}"))

    frame.extend(_overlay(snapshot, width, height))
    return frame


class Renderer:
    """
    Draws snapshots onto a pygame surface.

    This class reads snapshots and events but never modifies the game.
    """

    def __init__(self, cell_size: int):
        self.cell_size = cell_size
        self.eating_frames = 0
        self._fonts = {}

    def on_event(self, event: GameEvent) -> None:
        """Game event listener: start the eating pose after a bite."""
        if isinstance(event, EntityEatenEvent):
            self.eating_frames = EATING_FRAMES

    @property
    def is_eating(self) -> bool:
        return self.eating_frames > 0

    def reset(self) -> None:
        self.eating_frames = 0

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def render(self, surface: pygame.Surface, snapshot: SimulationSnapshot) -> None:
        """Render one frame."""
        for instruction in build_frame(snapshot, self.cell_size, self.is_eating):
            self._draw(surface, instruction)

        if self.eating_frames > 0:
            self.eating_frames -= 1

    def _draw(self, surface: pygame.Surface, instruction: DrawInstruction) -> None:
        if instruction.shape == 'rect':
            rect = pygame.Rect(instruction.x, instruction.y, instruction.width, instruction.height)
            pygame.draw.rect(surface, instruction.color, rect)

        elif instruction.shape == 'text':
            image = self._font(instruction.size).render(instruction.text, True, instruction.color)
            if instruction.centered:
                rect = image.get_rect(center=(instruction.x, instruction.y))
            else:
                rect = image.get_rect(topleft=(instruction.x, instruction.y))
            surface.blit(image, rect)
