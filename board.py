"""
Поле и змейка.

Матрица мира (как в старой среде обучения):
  0 = пусто
  1 = тело змейки
  2 = еда
  7 = голова
"""
from collections import deque

import numpy as np

from config import BOARD_WIDTH, BOARD_HEIGHT

EMPTY = 0
BODY = 1
FOOD_CELL = 2
HEAD = 7


def is_in_bounds(cell):
    """Клетка внутри поля?"""
    x, y = cell
    return 0 <= x < BOARD_WIDTH and 0 <= y < BOARD_HEIGHT


def cell_count():
    """Сколько всего клеток на поле"""
    return BOARD_WIDTH * BOARD_HEIGHT


def world_matrix(snake, food):
    """Матрица мира height x width для отрисовки и отладки"""
    grid = np.zeros((BOARD_HEIGHT, BOARD_WIDTH), dtype=np.int8)

    if food is not None:
        grid[food[1], food[0]] = FOOD_CELL

    for i, (x, y) in enumerate(snake):
        grid[y, x] = HEAD if i == 0 else BODY

    return grid


def text_board(snake, food):
    """
    Текстовое поле для логов:
    . = пусто, F = еда, H = голова, S = тело
    (0,0) в левом верхнем углу, как на экране
    """
    symbols = {EMPTY: '.', BODY: 'S', FOOD_CELL: 'F', HEAD: 'H'}
    grid = world_matrix(snake, food)

    rows = []
    for y in range(BOARD_HEIGHT):
        rows.append(f"{y:2d} " + ' '.join(symbols[int(v)] for v in grid[y]))
    return "\n".join(rows)


class Snake:
    """
    Тело змейки: deque клеток (x, y), голова под индексом 0, хвост в конце.
    Уникальность клеток не проверяется здесь - за это отвечает движок.
    """

    def __init__(self, cells):
        self.body = deque(cells)

    @property
    def head(self):
        return self.body[0]

    @property
    def tail(self):
        return self.body[-1]

    def __len__(self):
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    def __contains__(self, cell):
        return cell in self.body

    def cells(self):
        """Копия тела (кортеж) - наружу отдаём только её"""
        return tuple(self.body)

    def grow_to(self, cell):
        """Новая голова"""
        self.body.appendleft(cell)

    def pop_tail(self):
        return self.body.pop()

    def __repr__(self):
        return f"<Snake len={len(self.body)} head={self.head}>"
