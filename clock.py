"""
Игровые часы: вызывают callback каждые TICK_MS миллисекунд.

Время подаётся снаружи из цикла отрисовки (clock.tick() в pygame),
остаток переносится на следующий кадр - скорость змейки не зависит от FPS.
"""
import logging

from config import TICK_MS, MAX_CATCHUP_TICKS

logger = logging.getLogger(__name__)


class GameClock:
    def __init__(self, callback, period_ms=TICK_MS, max_catchup=MAX_CATCHUP_TICKS):
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        if max_catchup < 1:
            raise ValueError(f"max_catchup must be at least 1, got {max_catchup}")
        self.callback = callback
        self.period_ms = period_ms
        self.max_catchup = max_catchup
        self.elapsed_ms = 0.0
        self.running = False
        self.total_ticks = 0

    def start(self):
        """Запуск с нуля"""
        self.elapsed_ms = 0.0
        self.running = True
        logger.debug("Clock started, period %d ms", self.period_ms)

    def stop(self):
        """Остановка. Накопленное время сбрасывается"""
        if self.running:
            logger.debug("Clock stopped after %d ticks", self.total_ticks)
        self.running = False
        self.elapsed_ms = 0.0

    def update(self, elapsed_ms):
        """
        Добавить прошедшее время и выполнить все созревшие тики.
        Возвращает количество вызванных тиков.
        """
        if not self.running:
            return 0

        self.elapsed_ms += elapsed_ms
        fired = 0
        while self.elapsed_ms >= self.period_ms:
            if fired >= self.max_catchup:
                # Окно зависло - лишнее время выбрасываем
                logger.debug("Dropping %.0f ms of backlog", self.elapsed_ms)
                self.elapsed_ms = 0.0
                break
            self.elapsed_ms -= self.period_ms
            fired += 1
            self.total_ticks += 1
            self.callback()
            # callback мог остановить часы
            if not self.running:
                break

        return fired

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
