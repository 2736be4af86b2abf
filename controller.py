"""
Управление: клавиши -> команды движка.
Правила (разворот, фазы) проверяет сам движок.
"""
import logging

import pygame

from config import UP, DOWN, LEFT, RIGHT
from state import GamePhase

logger = logging.getLogger(__name__)

# Команды
START = "start"
PAUSE = "pause"
RESET = "reset"
QUIT = "quit"

DIRECTION_KEYS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}

COMMAND_KEYS = {
    pygame.K_SPACE: PAUSE,
    pygame.K_p: PAUSE,
    pygame.K_RETURN: START,
    pygame.K_KP_ENTER: START,
    pygame.K_r: RESET,
    pygame.K_ESCAPE: QUIT,
}


class InputController:
    """Переводит нажатия клавиш в команды движка"""

    def __init__(self, engine):
        self.engine = engine

    def on_direction_command(self, requested):
        return self.engine.request_direction(requested)

    def on_pause_command(self):
        # До старта пауза не имеет смысла
        if self.engine.phase is GamePhase.NOT_STARTED:
            return False
        return self.engine.toggle_pause()

    def on_start_command(self):
        return self.engine.start()

    def on_reset_command(self):
        self.engine.reset()
        return True

    def handle_key(self, key):
        """
        Обработать нажатие. Возвращает имя распознанной команды
        ('up'/'down'/... для стрелок, 'start', 'pause', 'reset', 'quit') или None.
        """
        if key in DIRECTION_KEYS:
            direction = DIRECTION_KEYS[key]
            self.on_direction_command(direction)
            return direction_name(direction)

        command = COMMAND_KEYS.get(key)
        if command == PAUSE:
            self.on_pause_command()
        elif command == START:
            self.on_start_command()
        elif command == RESET:
            self.on_reset_command()
        elif command is None:
            return None

        logger.debug("Key %s -> %s", key, command)
        return command


def direction_name(direction):
    return {UP: "up", DOWN: "down", LEFT: "left", RIGHT: "right"}[direction]
