import os
import random
import subprocess
import sys

import pytest

import engine as engine_module
from board import Snake, is_in_bounds
from config import UP, DOWN, LEFT, RIGHT, DIRECTIONS
from engine import GameEngine
from state import GamePhase


@pytest.fixture
def engine():
    return GameEngine(seed=42)


def test_initial_state(engine):
    snap = engine.snapshot()

    assert snap.phase is GamePhase.NOT_STARTED
    assert snap.snake == ((12, 12),)
    assert snap.food == (18, 18)
    assert snap.score == 0
    assert snap.pending_direction == UP


def test_first_tick_moves_up(engine):
    engine.start()

    assert engine.advance()
    snap = engine.snapshot()

    assert snap.snake == ((12, 11),)
    assert snap.phase is GamePhase.RUNNING
    assert snap.score == 0
    assert snap.ticks == 1


def test_eating_food_grows_and_scores(engine):
    engine.start()
    engine.food = (12, 11)

    engine.advance()

    assert engine.score == 10
    assert engine.snake.cells() == ((12, 11), (12, 12))
    assert engine.food is not None
    assert engine.food not in engine.snake
    assert is_in_bounds(engine.food)


def test_plain_move_keeps_length(engine):
    engine.start()
    engine.snake = Snake([(5, 5), (5, 6), (5, 7)])

    engine.advance()

    assert engine.snake.cells() == ((5, 4), (5, 5), (5, 6))
    assert engine.score == 0


def test_wall_collision(engine):
    engine.start()
    engine.snake = Snake([(0, 5)])
    engine.request_direction(LEFT)

    engine.advance()

    assert engine.phase is GamePhase.OVER
    assert engine.death_reason == "wall"
    assert engine.snake.cells() == ((0, 5),)


def test_top_wall_collision(engine):
    engine.start()
    engine.snake = Snake([(12, 0)])

    engine.advance()

    assert engine.phase is GamePhase.OVER
    assert engine.snake.cells() == ((12, 0),)


def test_self_collision(engine):
    engine.start()
    # Голова (5,5) смотрит вниз на своё тело
    engine.snake = Snake([(5, 5), (6, 5), (6, 6), (6, 7), (5, 7), (5, 6), (4, 6)])
    engine.direction = LEFT
    engine.request_direction(DOWN)
    before = engine.snake.cells()

    engine.advance()

    assert engine.phase is GamePhase.OVER
    assert engine.death_reason == "self"
    assert engine.snake.cells() == before


def test_moving_onto_current_tail_is_fatal(engine):
    engine.start()
    engine.snake = Snake([(5, 5), (6, 5), (6, 6), (5, 6)])
    engine.direction = LEFT
    engine.request_direction(DOWN)

    engine.advance()

    assert engine.phase is GamePhase.OVER
    assert engine.death_reason == "self"


@pytest.mark.parametrize("phase", [GamePhase.NOT_STARTED, GamePhase.PAUSED, GamePhase.OVER])
def test_advance_is_noop_outside_running(engine, phase):
    engine.start()
    engine.phase = phase
    before = engine.snapshot()

    assert not engine.advance()
    assert engine.snapshot() == before


def drive_to_phase(engine, phase):
    engine.start()
    engine.advance()
    if phase is GamePhase.PAUSED:
        engine.toggle_pause()
    elif phase is GamePhase.OVER:
        engine.snake = Snake([(12, 0)])
        engine.advance()
    assert engine.phase is phase


@pytest.mark.parametrize("phase", [GamePhase.RUNNING, GamePhase.PAUSED, GamePhase.OVER])
def test_start_only_from_not_started(engine, phase):
    drive_to_phase(engine, phase)
    before = engine.snapshot()

    assert not engine.start()
    assert engine.phase is phase
    assert engine.snapshot() == before


def test_over_is_terminal_until_reset(engine):
    drive_to_phase(engine, GamePhase.OVER)

    assert not engine.start()
    assert not engine.toggle_pause()
    assert not engine.request_direction(LEFT)
    assert not engine.advance()
    assert engine.phase is GamePhase.OVER

    engine.reset()
    assert engine.start()
    assert engine.phase is GamePhase.RUNNING


def test_reset_from_paused(engine):
    drive_to_phase(engine, GamePhase.PAUSED)

    engine.reset()
    snap = engine.snapshot()

    assert snap.phase is GamePhase.NOT_STARTED
    assert snap.snake == ((12, 12),)
    assert snap.food == (18, 18)
    assert snap.score == 0
    assert snap.pending_direction == UP
    assert snap.ticks == 0


def test_pause_toggle(engine):
    assert not engine.toggle_pause()
    assert engine.phase is GamePhase.NOT_STARTED

    engine.start()
    assert engine.toggle_pause()
    assert engine.phase is GamePhase.PAUSED
    assert engine.toggle_pause()
    assert engine.phase is GamePhase.RUNNING


def test_pause_keeps_pending_direction(engine):
    engine.start()
    engine.request_direction(RIGHT)
    engine.toggle_pause()

    assert not engine.request_direction(LEFT)
    engine.toggle_pause()
    engine.advance()

    assert engine.snake.head == (13, 12)


def test_reset_from_over(engine):
    engine.start()
    engine.snake = Snake([(0, 5)])
    engine.request_direction(LEFT)
    engine.advance()
    assert engine.is_over

    engine.reset()
    snap = engine.snapshot()

    assert snap.phase is GamePhase.NOT_STARTED
    assert snap.snake == ((12, 12),)
    assert snap.food == (18, 18)
    assert snap.score == 0
    assert snap.direction == UP
    assert snap.death_reason is None


def test_invalid_direction_raises(engine):
    engine.start()
    with pytest.raises(ValueError):
        engine.request_direction((2, 0))


def test_board_full_ends_game(engine, monkeypatch):
    monkeypatch.setattr(engine_module, "place_food", lambda occupied, rng: None)
    engine.start()
    engine.food = (12, 11)

    engine.advance()

    assert engine.phase is GamePhase.OVER
    assert engine.death_reason == "board_full"
    assert engine.score == 10


def test_subscribers_receive_snapshots(engine):
    received = []
    unsubscribe = engine.subscribe(received.append)

    engine.start()
    engine.advance()
    engine.toggle_pause()
    engine.advance()  # на паузе - ничего

    assert [s.phase for s in received] == [GamePhase.RUNNING, GamePhase.RUNNING, GamePhase.PAUSED]
    assert received[1].snake == ((12, 11),)

    unsubscribe()
    engine.reset()
    assert len(received) == 3


def test_game_over_is_emitted(engine):
    received = []
    engine.subscribe(received.append)
    engine.start()
    engine.snake = Snake([(12, 0)])

    engine.advance()

    assert received[-1].phase is GamePhase.OVER
    assert received[-1].death_reason == "wall"


def test_random_play_keeps_invariants():
    engine = GameEngine(seed=2024)
    moves = random.Random(2024)
    engine.start()
    games = 0

    for _ in range(5000):
        engine.request_direction(moves.choice(DIRECTIONS))
        length_before = len(engine.snake)
        score_before = engine.score

        engine.advance()

        if engine.is_over:
            assert len(engine.snake) == length_before
            games += 1
            engine.reset()
            engine.start()
            continue

        cells = engine.snake.cells()
        assert all(is_in_bounds(c) for c in cells)
        assert len(set(cells)) == len(cells)
        assert engine.food not in engine.snake

        if engine.score > score_before:
            assert engine.score == score_before + 10
            assert len(cells) == length_before + 1
        else:
            assert len(cells) == length_before
        assert engine.score == 10 * (len(cells) - 1)

    assert games > 0


def test_accepted_direction_is_emitted(engine):
    received = []
    engine.subscribe(received.append)
    engine.start()

    assert engine.request_direction(LEFT)

    assert len(received) == 2
    assert received[-1].pending_direction == LEFT
    assert received[-1].direction == UP


def test_rejected_direction_is_not_emitted(engine):
    received = []
    engine.start()
    engine.subscribe(received.append)

    assert not engine.request_direction(DOWN)
    assert received == []


def test_full_board_snapshot_has_no_food(engine, monkeypatch):
    monkeypatch.setattr(engine_module, "place_food", lambda occupied, rng: None)
    engine.start()
    engine.food = (12, 11)

    engine.advance()
    snap = engine.snapshot()

    assert snap.food is None
    assert snap.death_reason == "board_full"
    assert "F" not in snap.print_board()


def test_engine_runs_without_pygame():
    # Движок не должен тянуть pygame (он нужен только окну и клавишам)
    root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    code = "import sys, engine; assert 'pygame' not in sys.modules"
    result = subprocess.run([sys.executable, "-c", code], cwd=root)
    assert result.returncode == 0
