"""
Размещение еды: случайная свободная клетка поля.
"""
import logging

import numpy as np

from board import cell_count
from config import BOARD_WIDTH, BOARD_HEIGHT

logger = logging.getLogger(__name__)


def place_food(occupied, rng=None):
    """
    Случайная клетка, не занятая змейкой.
    Выборка с отклонением: для поля 24x24 свободных клеток почти всегда много.
    Если поле заполнено целиком - возвращаем None.
    """
    if rng is None:
        rng = np.random.default_rng()

    occupied = set(occupied)
    if len(occupied) >= cell_count():
        logger.info("No free cell left for food")
        return None

    attempts = 0
    while True:
        attempts += 1
        cell = (int(rng.integers(BOARD_WIDTH)), int(rng.integers(BOARD_HEIGHT)))
        if cell not in occupied:
            logger.debug("Food placed at %s after %d attempts", cell, attempts)
            return cell
