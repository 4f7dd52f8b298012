"""
Tests for the draw-list builder.
Pure functions only - no window is opened.
"""
import pytest

from zoomies.gameplay.effects import EffectKind
from zoomies.gameplay.entities import PowerUpKind, Treat
from zoomies.gameplay.events import EntityEatenEvent, GameOverEvent
from zoomies.gameplay.grid import Direction, Position
from zoomies.ui.renderer import (
    build_frame, entity_instructions, lucy_color, Renderer, DrawInstruction,
    COLOR_BACKGROUND, COLOR_TREAT, COLOR_PERSON, COLOR_LUCY, COLOR_LUCY_EATING,
    COLOR_LUCY_INVINCIBLE, COLOR_LUCY_ZOOMIES, POWER_UP_COLORS, EATING_FRAMES,
)

CELL = 20


def texts(frame):
    return [i.text for i in frame if i.shape == 'text']


class TestBuildFrame:
    """Tests for build_frame."""

    def test_background_first(self, make_sim):
        """The first instruction covers the whole park."""
        frame = build_frame(make_sim(treats=[(0, 0)]).get_snapshot(), CELL)
        assert frame[0] == DrawInstruction('rect', 0, 0, 10 * CELL, 10 * CELL, COLOR_BACKGROUND)

    def test_every_entity_drawn(self, make_sim):
        """One rect per treat, power-up, person and Lucy."""
        sim = make_sim(
            treats=[(0, 0), (1, 1)],
            power_ups=[((2, 2), PowerUpKind.PIZZA)],
            wanderers=[((3, 3), Direction.UP)],
        )
        frame = build_frame(sim.get_snapshot(), CELL)

        colors = [i.color for i in frame if i.shape == 'rect']
        assert colors.count(COLOR_TREAT) == 2
        assert colors.count(POWER_UP_COLORS[PowerUpKind.PIZZA]) == 1
        assert colors.count(COLOR_PERSON) == 1
        assert colors.count(COLOR_LUCY) == 1

    def test_lucy_drawn_last_among_entities(self, make_sim):
        """Lucy is drawn over anything on her cell."""
        sim = make_sim(treats=[(0, 0)], wanderers=[((3, 3), Direction.UP)])
        rects = [i for i in build_frame(sim.get_snapshot(), CELL) if i.shape == 'rect']
        assert rects[-1].color == COLOR_LUCY
        assert (rects[-1].x, rects[-1].y) == (5 * CELL, 5 * CELL)

    def test_treat_is_half_cell_and_centered(self, make_sim):
        """Treats are half a cell, centered in their cell."""
        snapshot = make_sim(treats=[(2, 3)]).get_snapshot()
        [instruction] = entity_instructions(Treat(Position(2, 3)), snapshot, CELL)

        assert instruction.width == CELL // 2
        assert instruction.x == 2 * CELL + CELL // 4
        assert instruction.y == 3 * CELL + CELL // 4

    def test_score_hud(self, make_sim):
        """The HUD shows the score."""
        sim = make_sim(treats=[(6, 5), (0, 0)])
        sim.handle_player_command(Direction.RIGHT)
        sim.tick(16)

        assert "Score: 10" in texts(build_frame(sim.get_snapshot(), CELL))

    def test_no_overlay_while_running(self, make_sim):
        """The running game has only the HUD text."""
        frame = build_frame(make_sim(treats=[(0, 0)]).get_snapshot(), CELL)
        assert texts(frame) == ["Score: 0"]

    def test_start_screen(self, make_sim):
        """Before start there is a title screen."""
        frame = build_frame(make_sim(treats=[(0, 0)], start=False).get_snapshot(), CELL)
        assert "Lucy Zoomies" in texts(frame)

    def test_win_screen(self, make_sim):
        """Winning shows 'You Win!' and the final score."""
        sim = make_sim(treats=[(6, 5)])
        sim.handle_player_command(Direction.RIGHT)
        sim.tick(16)

        frame_texts = texts(build_frame(sim.get_snapshot(), CELL))
        assert "You Win!" in frame_texts
        assert any("Final score: 10" in t for t in frame_texts)

    def test_game_over_screen(self, make_sim):
        """Losing shows 'Game Over'."""
        sim = make_sim(treats=[(0, 0)], wanderers=[((6, 5), Direction.UP)])
        sim.handle_player_command(Direction.RIGHT)
        sim.tick(16)

        assert "Game Over" in texts(build_frame(sim.get_snapshot(), CELL))

    def test_unknown_entity(self, make_sim):
        """Only the known entity variants can be drawn."""
        with pytest.raises(TypeError):
            entity_instructions(object(), make_sim().get_snapshot(), CELL)


class TestLucyColor:
    """Lucy's tint follows her state."""

    def test_plain(self, make_sim):
        assert lucy_color(make_sim().get_snapshot()) == COLOR_LUCY

    def test_eating_wins(self, make_sim):
        sim = make_sim()
        sim.player.effects.activate(EffectKind.INVINCIBLE, 1000, 0)
        assert lucy_color(sim.get_snapshot(), eating=True) == COLOR_LUCY_EATING

    def test_invincible(self, make_sim):
        sim = make_sim()
        sim.player.effects.activate(EffectKind.INVINCIBLE, 1000, 0)
        sim.player.effects.activate(EffectKind.SPEED_BOOST, 1000, 0)
        assert lucy_color(sim.get_snapshot()) == COLOR_LUCY_INVINCIBLE

    def test_zoomies(self, make_sim):
        sim = make_sim()
        sim.player.effects.activate(EffectKind.SPEED_BOOST, 1000, 0)
        assert lucy_color(sim.get_snapshot()) == COLOR_LUCY_ZOOMIES


class TestRendererEvents:
    """The renderer's eating animation state."""

    def test_eating_animation_starts_on_bite(self):
        """An eaten event starts the eating pose."""
        renderer = Renderer(CELL)
        assert not renderer.is_eating

        renderer.on_event(EntityEatenEvent(Treat(Position(0, 0)), 10))
        assert renderer.is_eating
        assert renderer.eating_frames == EATING_FRAMES

    def test_other_events_ignored(self):
        """Only eating matters to the renderer."""
        renderer = Renderer(CELL)
        renderer.on_event(GameOverEvent(0))
        assert not renderer.is_eating

    def test_reset(self):
        """reset clears the animation (used on restart)."""
        renderer = Renderer(CELL)
        renderer.on_event(EntityEatenEvent(Treat(Position(0, 0)), 10))
        renderer.reset()
        assert not renderer.is_eating
