"""
Движок змейки: состояние партии и переходы по тикам.

Фазы:
  NOT_STARTED -> start() -> RUNNING <-> toggle_pause() <-> PAUSED
  RUNNING -> столкновение -> OVER
  любая -> reset() -> NOT_STARTED

Недопустимые команды (пауза до старта, разворот и т.п.) ничего не делают,
исключений не бросают.
"""
import logging

import numpy as np

from board import Snake, is_in_bounds
from config import (INITIAL_SNAKE, INITIAL_FOOD, INITIAL_DIRECTION,
                    SCORE_FOR_FOOD, DIRECTIONS)
from food import place_food
from state import GamePhase, Snapshot

logger = logging.getLogger(__name__)


def validate_direction(direction):
    """Только четыре единичных вектора"""
    direction = tuple(direction)
    if direction not in DIRECTIONS:
        raise ValueError(f"Invalid direction: {direction}")
    return direction


def is_reverse(a, b):
    """a - ровно противоположное направление к b?"""
    return a[0] == -b[0] and a[1] == -b[1]


def accept_direction(phase, current, requested):
    """
    Можно ли принять новое направление.
    Только во время игры и не разворот относительно текущего движения
    (голова въехала бы в сегмент прямо за ней). Повтор текущего допустим.
    """
    if phase is not GamePhase.RUNNING:
        return False
    return not is_reverse(requested, current)


class GameEngine:
    def __init__(self, rng=None, seed=None):
        # Генератор для еды (seed - для воспроизводимых партий и тестов)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._listeners = []
        self.phase = GamePhase.NOT_STARTED
        self._init_session()

    def _init_session(self):
        """Змейка, еда, очки и направление - всегда вместе"""
        self.snake = Snake(INITIAL_SNAKE)
        self.food = INITIAL_FOOD
        self.score = 0
        self.direction = INITIAL_DIRECTION
        self.pending_direction = INITIAL_DIRECTION
        self.ticks = 0
        self.death_reason = None

    # ------------------------------------------------------------------
    # Команды
    # ------------------------------------------------------------------

    def start(self):
        """Старт только из NOT_STARTED"""
        if self.phase is not GamePhase.NOT_STARTED:
            return False
        self._init_session()
        self.phase = GamePhase.RUNNING
        logger.info("Game started")
        self._emit()
        return True

    def toggle_pause(self):
        """Пауза/продолжение, только во время игры"""
        if self.phase is GamePhase.RUNNING:
            self.phase = GamePhase.PAUSED
        elif self.phase is GamePhase.PAUSED:
            self.phase = GamePhase.RUNNING
        else:
            return False
        logger.info("Game %s", "paused" if self.phase is GamePhase.PAUSED else "resumed")
        self._emit()
        return True

    def reset(self):
        """Сброс из любой фазы"""
        self._init_session()
        self.phase = GamePhase.NOT_STARTED
        logger.info("Game reset")
        self._emit()

    def request_direction(self, direction):
        """
        Запомнить направление на следующий тик.
        Разворот сверяется с направлением последнего хода, а не с ожидающим:
        два быстрых нажатия за один тик не развернут змейку.
        """
        direction = validate_direction(direction)
        if not accept_direction(self.phase, self.direction, direction):
            return False
        self.pending_direction = direction
        self._emit()
        return True

    # ------------------------------------------------------------------
    # Тик
    # ------------------------------------------------------------------

    def advance(self):
        """
        Один ход. Возвращает True, если состояние изменилось.
        """
        if self.phase is not GamePhase.RUNNING:
            return False

        dx, dy = self.pending_direction
        head_x, head_y = self.snake.head
        new_head = (head_x + dx, head_y + dy)
        self.direction = self.pending_direction

        # Стена
        if not is_in_bounds(new_head):
            self._game_over("wall")
            return True

        # Тело, включая текущий хвост (он ещё не ушёл)
        if new_head in self.snake:
            self._game_over("self")
            return True

        self.snake.grow_to(new_head)
        self.ticks += 1

        if new_head == self.food:
            self.score += SCORE_FOR_FOOD
            self.food = place_food(self.snake, self.rng)
            logger.debug("Food eaten, score %d, length %d", self.score, len(self.snake))
            if self.food is None:
                # Змейка заняла всё поле
                self._game_over("board_full")
                return True
        else:
            self.snake.pop_tail()

        self._emit()
        return True

    def _game_over(self, reason):
        self.phase = GamePhase.OVER
        self.death_reason = reason
        logger.info("Game over: %s, score %d, length %d", reason, self.score, len(self.snake))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Final board:\n%s", self.snapshot().print_board())
        self._emit()

    # ------------------------------------------------------------------
    # Наружу
    # ------------------------------------------------------------------

    def snapshot(self):
        return Snapshot(
            snake=self.snake.cells(),
            food=self.food,
            score=self.score,
            phase=self.phase,
            direction=self.direction,
            pending_direction=self.pending_direction,
            ticks=self.ticks,
            death_reason=self.death_reason,
        )

    def subscribe(self, callback):
        """
        callback(snapshot) вызывается после каждого изменения.
        Возвращает функцию отписки.
        """
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _emit(self):
        if not self._listeners:
            return
        snap = self.snapshot()
        for callback in list(self._listeners):
            callback(snap)

    @property
    def is_over(self):
        return self.phase is GamePhase.OVER

    def __repr__(self):
        return (f"<GameEngine phase={self.phase.value} score={self.score} "
                f"length={len(self.snake)}>")
