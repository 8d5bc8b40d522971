"""HUD and Game Over screen"""

import pygame

from barco.constants import FONT_NAME, FONT_SIZE_SMALL, HUD_PADDING, TEXT_COLOR


class HUD:
    """Heads-Up Display with left/right split layout."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)

    def draw(self, surf: pygame.Surface, score: int, lives: int, level: int,
             next_level_in: float, show_fps: bool = False, fps: float = 0.0,
             paused: bool = False) -> None:
        """Render score, lives and level on the left, indicators on the right."""
        current_width = surf.get_width()
        current_height = surf.get_height()

        # LEFT SIDE: Score, Lives, Level
        left_x = HUD_PADDING
        left_y = HUD_PADDING
        for line in (f"Score: {score}", f"Lives: {lives}", f"Level: {level}"):
            text_surf = self.font.render(line, True, TEXT_COLOR)
            surf.blit(text_surf, (left_x, left_y))
            left_y += text_surf.get_height() + 4

        progress_surf = self.small_font.render(f"Next level in {next_level_in:.0f}s", True, TEXT_COLOR)
        surf.blit(progress_surf, (left_x, left_y + 4))

        # RIGHT SIDE: optional indicators
        right_y = HUD_PADDING
        if show_fps:
            fps_color = (0, 255, 0) if fps >= 55 else (255, 255, 0) if fps >= 30 else (255, 0, 0)
            fps_text = self.small_font.render(f"FPS: {fps:.1f}", True, fps_color)
            surf.blit(fps_text, (current_width - fps_text.get_width() - HUD_PADDING, right_y))

        if paused:
            pause_text = self.font.render("PAUSED", True, (255, 255, 100))
            pause_y = max(80, int(current_height * 0.15))  # 15% from top, minimum 80px
            text_rect = pause_text.get_rect(center=(current_width // 2, pause_y))
            # Semi-transparent background
            bg_rect = text_rect.inflate(20, 10)
            bg_surf = pygame.Surface(bg_rect.size, pygame.SRCALPHA)
            bg_surf.fill((0, 0, 0, 128))
            surf.blit(bg_surf, bg_rect)
            surf.blit(pause_text, text_rect)


class GameOverScreen:
    """Game over screen with final stats and restart option."""
    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font):
        self.font_big = font_big
        self.font_small = font_small

    def draw(self, surf: pygame.Surface, score: int, level: int) -> None:
        """
        Draw game over screen.
        """
        current_width = surf.get_width()
        current_height = surf.get_height()

        # Semi-transparent overlay
        overlay = pygame.Surface((current_width, current_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        surf.blit(overlay, (0, 0))

        game_over_text = self.font_big.render("GAME OVER", True, (255, 100, 100))
        game_over_rect = game_over_text.get_rect(center=(current_width // 2, current_height // 2))
        surf.blit(game_over_text, game_over_rect)

        y_offset = current_height // 2 + 40
        for line in (f"Final Score: {score}", f"Level reached: {level}"):
            text_surf = self.font_small.render(line, True, TEXT_COLOR)
            text_rect = text_surf.get_rect(center=(current_width // 2, y_offset))
            surf.blit(text_surf, text_rect)
            y_offset += 30

        inst_text = self.font_small.render("Click or press R to restart, ESC to quit", True, (150, 150, 150))
        inst_rect = inst_text.get_rect(center=(current_width // 2, y_offset + 20))
        surf.blit(inst_text, inst_rect)
