"""Headless game driver.

Plays the game-loop side of the snake's contract: it filters out direct
reversals, checks walls and self-collision on the predicted head before
moving, and restores the tail in the same tick the snake eats.
"""

import logging
from enum import Enum

import numpy as np

from config import GameConfig
from food import Food, occupancy_grid
from snake import Snake

logger = logging.getLogger(__name__)


class TickResult(Enum):
    MOVED = "moved"
    ATE_FOOD = "ate_food"
    WALL_COLLISION = "wall_collision"
    SELF_COLLISION = "self_collision"
    TIMEOUT = "timeout"
    GAME_OVER = "game_over"


class Game:
    def __init__(self, config=None, rng=None):
        self.config = (config or GameConfig()).validate()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.snake = Snake(self.config.start_x, self.config.start_y)
        self.food = Food(self.config.grid_width, self.config.grid_height, rng=self.rng)
        self.food.randomize_position(self.snake.get_body())

        self.pending_direction = None
        self.score = 0
        self.steps = 0
        self.is_alive = True
        self.death_reason = None

    def change_direction(self, new_direction):
        # Prevent snake from reversing directly into its neck
        if new_direction == self.snake.head_direction().opposite():
            logger.debug("ignoring reversal to %s", new_direction.name)
            return False
        self.pending_direction = new_direction
        return True

    def in_bounds(self, x, y):
        return 0 <= x < self.config.grid_width and 0 <= y < self.config.grid_height

    def tick(self):
        if not self.is_alive:
            return TickResult.GAME_OVER

        if self.steps >= self.config.max_steps:
            return self._end(TickResult.TIMEOUT)

        next_x, next_y = self.snake.next_head(self.pending_direction)
        if not self.in_bounds(next_x, next_y):
            return self._end(TickResult.WALL_COLLISION)
        if self.snake.overlap_tail(next_x, next_y):
            return self._end(TickResult.SELF_COLLISION)

        self.snake.advance(self.pending_direction)
        self.pending_direction = None
        self.steps += 1

        if self.snake.head_position() == self.food.get_position():
            self.snake.restore_tail()
            self.score += 1
            self.food.randomize_position(self.snake.get_body())
            return TickResult.ATE_FOOD
        return TickResult.MOVED

    def occupancy(self):
        return occupancy_grid(self.snake, self.config.grid_width, self.config.grid_height)

    def _end(self, reason):
        self.is_alive = False
        self.death_reason = reason
        logger.debug("game over: %s after %d steps, score %d", reason.value, self.steps, self.score)
        return reason
