import random

import pytest

from spritelab.snake import (
    CELL,
    FIELD_HEIGHT,
    GROW_ITEM,
    GamePhase,
    Heading,
    SHRINK_ITEM,
    SnakeGame,
    START_POSITION,
    level_speed,
)


def _started(seed=1):
    game = SnakeGame(random.Random(seed))
    game.start()
    return game


@pytest.mark.parametrize(
    "level, speed", [(0, 200), (1, 200), (2, 100), (3, 50), (4, 0)]
)
def test_level_speed(level, speed):
    assert level_speed(level) == speed


def test_level_speed_unknown():
    with pytest.raises(ValueError):
        level_speed(5)


def test_change_level_wraps():
    game = SnakeGame(random.Random(0))
    assert game.change_level(-1) == 4
    assert game.speed == 0
    assert game.change_level(1) == 1
    assert game.speed == 200
    assert game.change_level(-1) == 4


def test_start_sets_up_field():
    game = _started()
    assert game.phase is GamePhase.PLAY
    assert game.head == START_POSITION
    assert game.length == 0
    x, y = game.food[0]
    assert x % CELL == 0 and y % CELL == 0
    assert CELL <= x <= 22 * CELL and CELL <= y <= 22 * CELL


def test_step_moves_down_by_default():
    game = _started()
    game.food[0] = (0, 0)
    game.step()
    assert game.head == (START_POSITION[0], START_POSITION[1] + CELL)


def test_steer_left():
    game = _started()
    game.food[0] = (0, 0)
    game.steer(Heading.LEFT)
    game.step()
    assert game.head == (START_POSITION[0] - CELL, START_POSITION[1])


def test_wall_ends_game():
    game = _started()
    game.steer(Heading.UP)
    steps = int(START_POSITION[1]) // CELL
    for _ in range(steps - 1):
        game.step()
    assert game.phase is GamePhase.PLAY
    game.step()
    assert game.phase is GamePhase.END


def test_stage_spawns_item():
    game = _started()
    for _ in range(5):
        x, y = game.head
        game.food[0] = (int(x), int(y) + CELL)
        game.step()
    assert game.phase is GamePhase.PLAY
    assert game.stage == 0
    assert game.item_count == GROW_ITEM
    x, y = game.food[GROW_ITEM]
    assert x % CELL == 0 and y % CELL == 0 and x > 0 and y > 0


def test_grow_item():
    game = _started()
    game.food[0] = (0, 0)
    game.item_count = GROW_ITEM
    game.food[GROW_ITEM] = (200, 220)
    game.step()
    assert game.item_count == 0
    assert 0 <= game.length < 20


def test_shrink_item():
    game = _started()
    game.food[0] = (0, 0)
    game.length = 5
    game.food[SHRINK_ITEM] = (200, 220)
    game.step()
    assert game.length == 0


def test_self_collision():
    game = _started()
    game.food[0] = (0, 0)
    game.length = 4
    game.segments[1] = (200.0, 220.0)
    game.segments[2] = (220.0, 220.0)
    game.segments[3] = (220.0, 200.0)
    game.step()
    assert game.phase is GamePhase.END


def test_tick_waits_for_speed():
    game = _started()
    game.food[0] = (0, 0)
    game.tick(game.speed - 1)
    assert game.head == START_POSITION
    game.tick(game.speed)
    assert game.head == (START_POSITION[0], START_POSITION[1] + CELL)
    assert game.last_move == game.speed


def test_tick_ignored_outside_play():
    game = SnakeGame(random.Random(0))
    assert game.tick(10_000) is GamePhase.START
    assert game.head == (0.0, 0.0)


def test_return_to_intro_and_score_persists():
    game = _started()
    game.food[0] = (200, 220)
    game.step()
    game.steer(Heading.RIGHT)
    while game.phase is GamePhase.PLAY:
        game.step()
    assert game.return_to_intro() is GamePhase.START
    game.start()
    assert game.score == 100
    assert game.head[1] + CELL < FIELD_HEIGHT


def test_return_to_intro_only_from_end():
    game = _started()
    assert game.return_to_intro() is GamePhase.PLAY