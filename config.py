from dataclasses import dataclass
from typing import Optional

from snake import INITIAL_LENGTH

# Grid dimensions (a 600x400 board of 20px cells)
GRID_WIDTH = 30
GRID_HEIGHT = 20

# Snake start: tail cell, head ends up at START_X + 2
START_X = 2
START_Y = GRID_HEIGHT // 2

# Random policy: chance of turning on any given tick
TURN_PROBABILITY = 0.2

# Episode limits
EPISODES = 10
MAX_STEPS = GRID_WIDTH * GRID_HEIGHT * 4


@dataclass
class GameConfig:
    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    start_x: int = START_X
    start_y: int = START_Y
    max_steps: int = MAX_STEPS
    seed: Optional[int] = None

    def validate(self):
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(f"grid must be positive, got {self.grid_width}x{self.grid_height}")
        if not (0 <= self.start_x and self.start_x + INITIAL_LENGTH - 1 < self.grid_width):
            raise ValueError(f"start_x={self.start_x} does not fit a {INITIAL_LENGTH}-cell snake in width {self.grid_width}")
        if not 0 <= self.start_y < self.grid_height:
            raise ValueError(f"start_y={self.start_y} is outside height {self.grid_height}")
        if self.max_steps <= 0:
            raise ValueError(f"max_steps must be positive, got {self.max_steps}")
        return self

    @classmethod
    def from_args(cls, args):
        start_y = args.start_y if args.start_y is not None else args.height // 2
        return cls(
            grid_width=args.width,
            grid_height=args.height,
            start_x=args.start_x,
            start_y=start_y,
            max_steps=args.max_steps,
            seed=args.seed,
        ).validate()
