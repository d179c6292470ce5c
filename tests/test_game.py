"""Tests for the headless game driver."""

import numpy as np
import pytest

from config import GameConfig
from game import Game, TickResult
from snake import Direction


def make_game(width=10, height=10, start_x=0, start_y=5, max_steps=100):
    config = GameConfig(grid_width=width, grid_height=height, start_x=start_x, start_y=start_y, max_steps=max_steps, seed=0)
    game = Game(config)
    # Park the food out of the way; tests place it where they need it
    game.food.position = (0, 0)
    return game


def feed(game, cell):
    game.food.position = cell
    result = game.tick()
    game.food.position = (0, 0)
    return result


class TestGameSetup:
    def test_initial_state(self):
        game = make_game()
        assert game.snake.head_position() == (2, 5)
        assert game.is_alive
        assert game.score == 0
        assert game.steps == 0

    def test_food_not_placed_on_snake(self):
        for seed in range(20):
            game = Game(GameConfig(grid_width=4, grid_height=1, start_x=0, start_y=0, seed=seed))
            assert game.food.get_position() == (3, 0)

    def test_invalid_config_rejected(self):
        with pytest.raises(ValueError):
            Game(GameConfig(grid_width=2, grid_height=5, start_x=0, start_y=0))


class TestGameDirection:
    def test_reversal_ignored(self):
        game = make_game()
        assert game.change_direction(Direction.LEFT) is False
        assert game.tick() == TickResult.MOVED
        assert game.snake.head_position() == (3, 5)
        assert game.snake.head_direction() == Direction.RIGHT

    def test_turn_applied_on_next_tick(self):
        game = make_game()
        assert game.change_direction(Direction.UP) is True
        assert game.snake.head_direction() == Direction.RIGHT
        game.tick()
        assert game.snake.head_position() == (2, 4)
        assert game.snake.head_direction() == Direction.UP
        assert game.pending_direction is None


class TestGameCollisions:
    def test_wall_collision_leaves_body_untouched(self):
        game = make_game(width=5, height=3, start_y=1)
        assert game.tick() == TickResult.MOVED
        assert game.tick() == TickResult.MOVED
        body = game.snake.get_body()
        assert game.tick() == TickResult.WALL_COLLISION
        assert not game.is_alive
        assert game.death_reason == TickResult.WALL_COLLISION
        assert game.snake.get_body() == body

    def test_self_collision(self):
        game = make_game()
        assert feed(game, (3, 5)) == TickResult.ATE_FOOD
        assert feed(game, (4, 5)) == TickResult.ATE_FOOD
        assert len(game.snake) == 5

        game.change_direction(Direction.DOWN)
        assert game.tick() == TickResult.MOVED
        game.change_direction(Direction.LEFT)
        assert game.tick() == TickResult.MOVED
        game.change_direction(Direction.UP)
        assert game.tick() == TickResult.SELF_COLLISION
        assert not game.is_alive

    def test_chasing_own_tail_is_not_a_collision(self):
        game = make_game()
        assert feed(game, (3, 5)) == TickResult.ATE_FOOD
        assert len(game.snake) == 4

        game.change_direction(Direction.DOWN)
        game.tick()
        game.change_direction(Direction.LEFT)
        game.tick()
        game.change_direction(Direction.UP)
        assert game.tick() == TickResult.MOVED
        assert game.snake.get_body() == [(2, 5), (2, 6), (3, 6), (3, 5)]

    def test_ticks_after_death_report_game_over(self):
        game = make_game(width=3, height=1, start_y=0)
        assert game.tick() == TickResult.WALL_COLLISION
        assert game.tick() == TickResult.GAME_OVER

    def test_timeout(self):
        game = make_game(max_steps=2)
        game.tick()
        game.tick()
        assert game.tick() == TickResult.TIMEOUT
        assert game.steps == 2


class TestGameGrowth:
    def test_eating_grows_and_scores(self):
        game = make_game()
        tail_before = game.snake.get_body()[-1]
        assert feed(game, (3, 5)) == TickResult.ATE_FOOD
        assert game.score == 1
        assert len(game.snake) == 4
        assert game.snake.get_body()[-1] == tail_before

    def test_food_relocated_off_snake(self):
        game = make_game()
        game.food.position = (3, 5)
        game.tick()
        assert game.food.get_position() not in game.snake

    def test_full_board_food_not_in_snake(self):
        game = Game(GameConfig(grid_width=3, grid_height=1, start_x=0, start_y=0, seed=0))
        assert game.food.get_position() is None
        assert game.food.get_position() not in game.snake

    def test_occupancy_matches_body(self):
        game = make_game()
        feed(game, (3, 5))
        grid = game.occupancy()
        assert grid.shape == (10, 10)
        assert int(np.sum(grid)) == len(game.snake)
        for x, y in game.snake.get_body():
            assert grid[y, x] == 1
