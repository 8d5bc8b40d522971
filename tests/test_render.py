import pygame
import pytest

from barco.constants import FONT_NAME, FONT_SIZE_LARGE, FONT_SIZE_MEDIUM
from barco.enemy import Enemy
from barco.friend import Friend
from barco.render import Renderer, SpriteBank
from barco.ui import HUD, GameOverScreen


@pytest.fixture
def renderer():
    pygame.init()
    small = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
    big = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)
    yield Renderer(SpriteBank(), HUD(small), GameOverScreen(big, small))
    pygame.quit()


def test_missing_assets_are_skipped(tmp_path):
    bank = SpriteBank()
    assert bank.load_image(str(tmp_path / "nope.png"), (10, 10), alpha=True) is None
    bank.load((800, 600))
    assert not bank.loaded
    assert bank.get("enemy") is None
    assert bank.background is None


def test_draws_without_sprites(renderer, session):
    session.enemies.append(Enemy(400, 100, 100))
    session.friends.append(Friend(500, 200, 80))
    surf = pygame.Surface((800, 600))
    renderer.draw(surf, session.snapshot(), show_hitboxes=True, show_fps=True,
                  fps=60.0, paused=True, flash_alpha=50)


def test_draws_game_over_screen(renderer, session):
    session.game_over = True
    surf = pygame.Surface((800, 600))
    renderer.draw(surf, session.snapshot())


def test_draw_does_not_touch_session(renderer, session):
    session.enemies.append(Enemy(400, 100, 100))
    before = session.snapshot()
    renderer.draw(pygame.Surface((800, 600)), before)
    assert session.snapshot() == before
