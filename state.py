"""
Состояние партии, которое движок отдаёт наружу.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from board import world_matrix, text_board


class GamePhase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


@dataclass(frozen=True)
class Snapshot:
    """
    Неизменяемый снимок партии после очередного изменения.

    snake: кортеж клеток, голова первая
    food: клетка еды (None, если поле заполнено)
    score: очки
    phase: GamePhase
    direction: направление последнего хода
    pending_direction: направление следующего хода
    ticks: сколько ходов сделано в этой партии
    death_reason: 'wall', 'self', 'board_full' или None
    """
    snake: tuple
    food: Optional[tuple]
    score: int
    phase: GamePhase
    direction: tuple
    pending_direction: tuple
    ticks: int = 0
    death_reason: Optional[str] = None

    @property
    def head(self):
        return self.snake[0]

    @property
    def length(self):
        return len(self.snake)

    def grid(self):
        return world_matrix(self.snake, self.food)

    def print_board(self):
        return text_board(self.snake, self.food)
