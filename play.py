"""
Игра в змейку в окне pygame.

Использование:
    python play.py                  # обычная игра
    python play.py --cell-size 32   # крупнее
    python play.py --seed 42        # воспроизводимая еда

Управление: стрелки/WASD, Enter - старт, Space/P - пауза, R - сброс, ESC - выход
"""
import argparse
import logging

import pygame

from clock import GameClock
from config import (BOARD_WIDTH, BOARD_HEIGHT, CELL_SIZE, PANEL_WIDTH, FPS, TICK_MS,
                    BACKGROUND, SNAKE, SNAKE_HEAD, FOOD, GRID, PANEL, BORDER,
                    WHITE, DIM, YELLOW, RED, GREEN, OVERLAY)
from controller import InputController, QUIT
from engine import GameEngine
from state import GamePhase

logger = logging.getLogger(__name__)


class SnakeGameApp:
    def __init__(self, cell_size=CELL_SIZE, fps=FPS, seed=None):
        pygame.init()

        self.cell_size = cell_size
        self.width = BOARD_WIDTH * cell_size
        self.height = BOARD_HEIGHT * cell_size

        self.screen = pygame.display.set_mode((self.width + PANEL_WIDTH, self.height))
        pygame.display.set_caption('Snake Game')
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('arial', 18)
        self.big_font = pygame.font.SysFont('arial', 36, bold=True)

        self.engine = GameEngine(seed=seed)
        self.controller = InputController(self.engine)
        self.game_clock = GameClock(self.engine.advance, TICK_MS)

        self.fps = fps
        self.games = 0
        self.best = 0
        self.snapshot = self.engine.snapshot()
        self.engine.subscribe(self.on_snapshot)

    def on_snapshot(self, snapshot):
        """Движок прислал новое состояние"""
        if snapshot.phase is GamePhase.OVER and self.snapshot.phase is not GamePhase.OVER:
            self.games += 1
            self.best = max(self.best, snapshot.score)
            print(f"Game {self.games}: Score {snapshot.score} ({snapshot.death_reason})")
        self.snapshot = snapshot

    # ------------------------------------------------------------------
    # Отрисовка
    # ------------------------------------------------------------------

    def cell_rect(self, cell):
        x, y = cell
        return pygame.Rect(x * self.cell_size, y * self.cell_size,
                           self.cell_size - 1, self.cell_size - 1)

    def draw_grid(self):
        for x in range(0, self.width, self.cell_size):
            pygame.draw.line(self.screen, GRID, (x, 0), (x, self.height))
        for y in range(0, self.height, self.cell_size):
            pygame.draw.line(self.screen, GRID, (0, y), (self.width, y))

        # Граница поля
        pygame.draw.rect(self.screen, BORDER, (0, 0, self.width, self.height), 3)

    def draw_snake(self):
        for i, cell in enumerate(self.snapshot.snake):
            color = SNAKE_HEAD if i == 0 else SNAKE  # Голова ярче
            pygame.draw.rect(self.screen, color, self.cell_rect(cell), border_radius=4)

    def draw_food(self):
        if self.snapshot.food is None:
            return
        rect = self.cell_rect(self.snapshot.food)
        pygame.draw.ellipse(self.screen, FOOD, rect)

    def draw_stats(self):
        panel = pygame.Rect(self.width, 0, PANEL_WIDTH, self.height)
        pygame.draw.rect(self.screen, PANEL, panel)

        phase_labels = {
            GamePhase.NOT_STARTED: "Ready",
            GamePhase.RUNNING: "Playing",
            GamePhase.PAUSED: "Paused",
            GamePhase.OVER: "Game Over",
        }

        stats = [
            f"Score: {self.snapshot.score}",
            f"Length: {self.snapshot.length}",
            f"State: {phase_labels[self.snapshot.phase]}",
            "",
            f"Games: {self.games}",
            f"Best: {self.best}",
            "",
            "Controls:",
            "Arrows/WASD Move",
            "Enter Start",
            "Space Pause",
            "R Reset",
            "ESC Quit",
        ]

        for i, text in enumerate(stats):
            color = DIM if i >= 7 else WHITE
            surf = self.font.render(text, True, color)
            self.screen.blit(surf, (self.width + 12, 20 + i * 25))

    def draw_overlay(self, title, subtitle, color):
        shade = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        shade.fill(OVERLAY)
        self.screen.blit(shade, (0, 0))

        title_surf = self.big_font.render(title, True, color)
        self.screen.blit(title_surf, title_surf.get_rect(center=(self.width // 2, self.height // 2 - 20)))

        sub_surf = self.font.render(subtitle, True, WHITE)
        self.screen.blit(sub_surf, sub_surf.get_rect(center=(self.width // 2, self.height // 2 + 20)))

    def draw(self):
        self.screen.fill(BACKGROUND)
        self.draw_grid()
        self.draw_food()
        self.draw_snake()
        self.draw_stats()

        phase = self.snapshot.phase
        if phase is GamePhase.NOT_STARTED:
            self.draw_overlay("SNAKE", "Press Enter to start", GREEN)
        elif phase is GamePhase.PAUSED:
            self.draw_overlay("PAUSED", "Press Space to resume", YELLOW)
        elif phase is GamePhase.OVER:
            self.draw_overlay("GAME OVER", f"Final score: {self.snapshot.score}  -  R to play again", RED)

        pygame.display.flip()

    # ------------------------------------------------------------------
    # Цикл
    # ------------------------------------------------------------------

    def handle_events(self):
        """False - пора выходить"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if self.controller.handle_key(event.key) == QUIT:
                    return False
        return True

    def step(self, elapsed_ms):
        """Один кадр: события, тики, отрисовка"""
        running = self.handle_events()
        if running:
            self.game_clock.update(elapsed_ms)
            self.draw()
        return running

    def play(self, max_frames=None):
        frames = 0
        try:
            with self.game_clock:
                running = True
                while running:
                    elapsed = self.clock.tick(self.fps)
                    running = self.step(elapsed)
                    frames += 1
                    if max_frames is not None and frames >= max_frames:
                        break
        finally:
            pygame.quit()

        if self.games > 0:
            print(f"\nResults: {self.games} games")
            print(f"Best: {self.best}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Snake game")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE,
                        help="Cell size in pixels")
    parser.add_argument("--fps", type=int, default=FPS,
                        help="Frame rate of the drawing loop")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    app = SnakeGameApp(cell_size=args.cell_size, fps=args.fps, seed=args.seed)
    app.play()


if __name__ == "__main__":
    main()
