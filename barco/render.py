"""Sprite loading and frame composition.

Draws a session ``Snapshot`` onto a surface. Images are optional: a sprite
that is missing or fails to load is simply not drawn, and the background
falls back to a flat sea color.
"""

from __future__ import annotations

import os
import pygame

from barco.constants import (
    BACKGROUND_PATH, BG_COLOR, ENEMY_COLOR, ENEMY_SIZE, ENEMY_SPRITE_PATH,
    FRIEND_COLOR, FRIEND_SIZE, FRIEND_SPRITE_PATH, HITBOX_COLOR, PLAYER_COLOR,
    PLAYER_SIZE, PLAYER_SPRITE_PATH
)
from barco.session import Rect, Snapshot
from barco.ui import HUD, GameOverScreen


class SpriteBank:
    """
    Scaled images for the boat, cannonballs, driftwood and background.

    ``load`` must run after the display mode is set (``convert_alpha`` needs
    it). Anything that cannot be loaded stays ``None``.
    """

    SPRITES = {
        "player": (PLAYER_SPRITE_PATH, (PLAYER_SIZE, PLAYER_SIZE)),
        "enemy": (ENEMY_SPRITE_PATH, (ENEMY_SIZE, ENEMY_SIZE)),
        "friend": (FRIEND_SPRITE_PATH, (FRIEND_SIZE, FRIEND_SIZE)),
    }

    def __init__(self) -> None:
        self.images: dict[str, pygame.Surface | None] = {name: None for name in self.SPRITES}
        self.background: pygame.Surface | None = None

    @property
    def loaded(self) -> bool:
        return all(img is not None for img in self.images.values())

    def get(self, name: str) -> pygame.Surface | None:
        return self.images.get(name)

    def load(self, size: tuple[int, int]) -> None:
        """Load every sprite plus the background scaled to ``size``."""
        for name, (path, sprite_size) in self.SPRITES.items():
            self.images[name] = self.load_image(path, sprite_size, alpha=True)
        self.background = self.load_image(BACKGROUND_PATH, size, alpha=False)

    @staticmethod
    def load_image(path: str, size: tuple[int, int], alpha: bool) -> pygame.Surface | None:
        if not os.path.exists(path):
            print(f"Sprite not found: {path}")
            return None
        try:
            img = pygame.image.load(path)
            img = img.convert_alpha() if alpha else img.convert()
            return pygame.transform.scale(img, size)
        except pygame.error as e:
            print(f"Failed to load sprite {path}: {e}")
            return None


class Renderer:
    """Composes a frame: background -> entities -> hitboxes -> HUD -> overlays."""

    def __init__(self, sprites: SpriteBank, hud: HUD, game_over_screen: GameOverScreen) -> None:
        self.sprites = sprites
        self.hud = hud
        self.game_over_screen = game_over_screen

    def draw_background(self, surf: pygame.Surface) -> None:
        if self.sprites.background:
            surf.blit(self.sprites.background, (0, 0))
        else:
            surf.fill(BG_COLOR)

    def draw_sprite(self, surf: pygame.Surface, name: str, rect: Rect) -> None:
        img = self.sprites.get(name)
        if img is None:
            return
        surf.blit(img, (round(rect[0]), round(rect[1])))

    @staticmethod
    def draw_hitbox(surf: pygame.Surface, rect: Rect, color: tuple[int, int, int]) -> None:
        x, y, w, h = rect
        pygame.draw.rect(surf, color, pygame.Rect(round(x), round(y), round(w), round(h)), 2)

    def draw(self, surf: pygame.Surface, snap: Snapshot, show_hitboxes: bool = False,
             show_fps: bool = False, fps: float = 0.0, paused: bool = False,
             flash_alpha: int = 0) -> None:
        """
        Draw one frame. Does not flip the display.

        Parameters
        ----------
        surf : pygame.Surface
            Target surface
        snap : Snapshot
            Session state to draw
        show_hitboxes : bool
            Outline every entity rectangle
        flash_alpha : int
            Red life-loss flash strength, 0 for none
        """
        self.draw_background(surf)

        for rect in snap.friends:
            self.draw_sprite(surf, "friend", rect)
        for rect in snap.enemies:
            self.draw_sprite(surf, "enemy", rect)
        self.draw_sprite(surf, "player", snap.player)

        if show_hitboxes:
            for rect in snap.friends:
                self.draw_hitbox(surf, rect, FRIEND_COLOR)
            for rect in snap.enemies:
                self.draw_hitbox(surf, rect, ENEMY_COLOR)
            self.draw_hitbox(surf, snap.player, PLAYER_COLOR)
            self.draw_hitbox(surf, (0, 0, surf.get_width(), surf.get_height()), HITBOX_COLOR)

        self.hud.draw(surf, snap.score, snap.lives, snap.level, snap.next_level_in,
                      show_fps, fps, paused)

        if flash_alpha > 0:
            flash_surface = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
            flash_surface.fill((255, 0, 0, flash_alpha))
            surf.blit(flash_surface, (0, 0))

        if snap.game_over:
            self.game_over_screen.draw(surf, snap.score, snap.level)
