"""Game entry point"""

from __future__ import annotations

import pygame

from barco.constants import (
    FONT_NAME, FONT_SIZE_LARGE, FONT_SIZE_MEDIUM, FONT_SIZE_SMALL,
    FPS, HEIGHT, LIFE_LOSS_FLASH_MS, LOG_FILE, MAX_FRAME_DT, MOVE_DOWN,
    MOVE_UP, TEXT_COLOR, WIDTH
)
from barco.input_state import InputState
from barco.logger import GameLogger
from barco.render import Renderer, SpriteBank
from barco.session import GameSession
from barco.ui import HUD, GameOverScreen

KEY_BINDINGS = {
    pygame.K_UP: MOVE_UP,
    pygame.K_w: MOVE_UP,
    pygame.K_DOWN: MOVE_DOWN,
    pygame.K_s: MOVE_DOWN,
}


class Game:
    """
    Frame driver: owns the window, feeds key events into the input state,
    calls ``GameSession.update(dt)`` once per frame and draws the result.
    """

    def __init__(self) -> None:
        """Initialize subsystems, load assets, and set initial game state."""
        pygame.init()
        pygame.display.set_caption("Barco")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.font_big = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)
        self.logger = GameLogger(LOG_FILE)
        self.input = InputState()

        self.sprites = SpriteBank()
        self.sprites.load((WIDTH, HEIGHT))
        self.hud = HUD(self.font_small)
        self.game_over_screen = GameOverScreen(self.font_big, self.font_small)
        self.renderer = Renderer(self.sprites, self.hud, self.game_over_screen)

        self.session: GameSession | None = None
        self.last_ticks = 0
        self.paused = False
        self.show_fps = False
        self.show_hitboxes = not self.sprites.loaded  # keep the game visible without art
        self.fps_samples = []
        self.life_lost_flash = 0        # Timer for life lost screen flash

    def new_session(self) -> None:
        """Discard the current session (if any) and start a fresh one."""
        self.input.clear()
        self.session = GameSession(WIDTH, HEIGHT, logger=self.logger, input_state=self.input)
        self.paused = False
        self.life_lost_flash = 0
        self.last_ticks = pygame.time.get_ticks()

    def frame_dt(self) -> float:
        """
        Seconds since the previous frame, clamped to ``MAX_FRAME_DT`` so a
        stalled window does not make entities jump across the screen.
        """
        now = pygame.time.get_ticks()
        dt = (now - self.last_ticks) / 1000
        self.last_ticks = now
        return min(dt, MAX_FRAME_DT)

    # --------------------------------- Loop -----------------------------------------

    def show_start_screen(self) -> bool:
        """
        Display the start screen with the start button and controls.

        Returns
        -------
        bool
            True if user wants to start game, False if quit
        """
        while True:
            mouse_pos = pygame.mouse.get_pos()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return False
                    if event.key == pygame.K_SPACE or event.key == pygame.K_RETURN:
                        return True
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 \
                        and self.start_button_rect().collidepoint(mouse_pos):
                    return True

            self.draw_start_screen(mouse_pos)
            self.clock.tick(FPS)

    def start_button_rect(self) -> pygame.Rect:
        return pygame.Rect(WIDTH // 2 - 100, HEIGHT // 2 + 20, 200, 50)

    def draw_start_screen(self, mouse_pos: tuple[int, int]) -> None:
        """Draw the start screen."""
        self.renderer.draw_background(self.screen)

        title_text = self.font_big.render("BARCO", True, (255, 255, 100))
        title_rect = title_text.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 80))
        self.screen.blit(title_text, title_rect)

        button_rect = self.start_button_rect()
        button_color = (100, 150, 100) if button_rect.collidepoint(mouse_pos) else (60, 80, 60)
        pygame.draw.rect(self.screen, button_color, button_rect)
        pygame.draw.rect(self.screen, TEXT_COLOR, button_rect, 2)

        start_text = self.font_small.render("START GAME", True, TEXT_COLOR)
        self.screen.blit(start_text, start_text.get_rect(center=button_rect.center))

        instructions = [
            "CONTROLS:",
            "Up / Down (or W / S) - Steer the boat",
            "Dodge cannonballs, collect driftwood for lives",
            "P - Pause/Resume   F - FPS   B - Hitboxes",
            "ESC - Quit",
        ]
        small = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)
        y_start = button_rect.bottom + 30
        for i, instruction in enumerate(instructions):
            color = (255, 255, 100) if i == 0 else (180, 180, 180)
            text = small.render(instruction, True, color)
            self.screen.blit(text, text.get_rect(center=(WIDTH // 2, y_start + i * 22)))

        pygame.display.flip()

    def run(self) -> None:
        """Main game entry point: show start screen then run game loop."""
        if not self.show_start_screen():
            pygame.quit()
            return
        self.new_session()
        self.run_game_loop()

    def run_game_loop(self) -> None:
        """Main game loop: process events, update, render; exits on quit request."""
        running = True
        while running:
            self.fps_samples.append(self.clock.get_fps())
            if len(self.fps_samples) > 10:
                self.fps_samples.pop(0)
            avg_fps = sum(self.fps_samples) / len(self.fps_samples)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in KEY_BINDINGS:
                        self.input.press(KEY_BINDINGS[event.key])
                    elif event.key == pygame.K_r and self.session.game_over:
                        self.new_session()
                    elif event.key == pygame.K_p:
                        self.toggle_pause()
                    elif event.key == pygame.K_f:
                        self.show_fps = not self.show_fps
                    elif event.key == pygame.K_b:
                        self.show_hitboxes = not self.show_hitboxes
                elif event.type == pygame.KEYUP and event.key in KEY_BINDINGS:
                    self.input.release(KEY_BINDINGS[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and self.session.game_over:
                    self.new_session()

            dt = self.frame_dt()
            if not self.paused and not self.session.game_over:
                lives_before = self.session.lives
                self.session.update(dt)
                if self.session.lives < lives_before:
                    self.life_lost_flash = LIFE_LOSS_FLASH_MS

            if self.life_lost_flash > 0:
                self.life_lost_flash = max(0, self.life_lost_flash - self.clock.get_time())

            self.draw(avg_fps)
            self.clock.tick(FPS)

        pygame.quit()

    def toggle_pause(self) -> None:
        if self.session.game_over:
            return
        self.paused = not self.paused

    # --------------------------------- Rendering ------------------------------------

    def draw(self, fps: float) -> None:
        flash_alpha = int(100 * (self.life_lost_flash / LIFE_LOSS_FLASH_MS))
        self.renderer.draw(self.screen, self.session.snapshot(),
                           show_hitboxes=self.show_hitboxes, show_fps=self.show_fps,
                           fps=fps, paused=self.paused, flash_alpha=flash_alpha)
        pygame.display.flip()


if __name__ == "__main__":
    Game().run()
