import logging

import numpy as np

from config import GRID_HEIGHT, GRID_WIDTH

logger = logging.getLogger(__name__)


def occupancy_grid(cells, grid_width, grid_height):
    # grid[y, x] == 1 where a cell is occupied; cells off the board are ignored
    grid = np.zeros((grid_height, grid_width), dtype=np.int8)
    for x, y in cells:
        if 0 <= x < grid_width and 0 <= y < grid_height:
            grid[y, x] = 1
    return grid


class Food:
    def __init__(self, grid_width=GRID_WIDTH, grid_height=GRID_HEIGHT, rng=None):
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position = self.randomize_position([])

    def randomize_position(self, occupied):
        free = np.argwhere(occupancy_grid(occupied, self.grid_width, self.grid_height) == 0)
        if len(free) == 0:
            logger.debug("no free cell left for food")
            self.position = None
            return None
        y, x = free[self.rng.integers(len(free))]
        self.position = (int(x), int(y))
        return self.position

    def get_position(self):
        return self.position
