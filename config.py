# Настройки игры
# Поле 24x24 клетки
BOARD_SIZE = 24
BOARD_WIDTH = BOARD_SIZE
BOARD_HEIGHT = BOARD_SIZE

# Размер клетки в пикселях (можно поменять через --cell-size)
CELL_SIZE = 24
PANEL_WIDTH = 220

# Цвета
BLUE = (15, 23, 42)
GREEN = (52, 211, 153)
EMERALD = (16, 185, 129)
RED = (248, 113, 113)
YELLOW = (250, 204, 21)
GRAY = (51, 65, 85)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DIM = (148, 163, 184)
OVERLAY = (0, 0, 0, 150)

SNAKE = EMERALD
SNAKE_HEAD = GREEN
FOOD = RED
GRID = GRAY
BACKGROUND = BLUE
PANEL = (30, 41, 59)
BORDER = (100, 116, 139)
TEXT_COLOR = WHITE

# Направления
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Скорость: один ход змейки каждые 120 мс
TICK_MS = 120
MAX_CATCHUP_TICKS = 5
FPS = 60

# Начальное состояние
INITIAL_SNAKE = [(12, 12)]
INITIAL_FOOD = (18, 18)
INITIAL_DIRECTION = UP

# Очки за еду
SCORE_FOR_FOOD = 10
