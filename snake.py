import logging
from collections import deque, namedtuple
from enum import Enum
from itertools import islice

logger = logging.getLogger(__name__)

# Initial body length laid out to the left of the head
INITIAL_LENGTH = 3


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self):
        return _OPPOSITES[self]

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


Block = namedtuple("Block", ["x", "y"])


class SnakeStateError(RuntimeError):
    """Raised when the snake is used out of protocol order (empty body, restore before advance)."""


class Snake:
    """Ordered body of grid cells, head first, plus the current heading.

    The snake never rejects a 180 degree turn on its own: callers filter
    ``head_direction().opposite()`` before calling ``advance``.
    ``restore_tail`` must be called in the same tick as the ``advance`` that
    made the snake eat; every ``advance`` overwrites the remembered tail.
    """

    def __init__(self, x, y):
        self.direction = Direction.RIGHT
        self.body = deque(Block(x + i, y) for i in reversed(range(INITIAL_LENGTH)))
        self.last_removed_tail = None

    def __len__(self):
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    def __contains__(self, cell):
        return cell in self.body

    def __repr__(self):
        head = tuple(self.body[0]) if self.body else None
        return f"Snake(head={head}, direction={self.direction.name}, length={len(self.body)})"

    def head_position(self):
        if not self.body:
            raise SnakeStateError("snake body is empty")
        head = self.body[0]
        return (head.x, head.y)

    def head_direction(self):
        return self.direction

    def next_head(self, direction=None):
        # Where the head would land, without moving
        head_x, head_y = self.head_position()
        moving = direction if direction is not None else self.direction
        return (head_x + moving.dx, head_y + moving.dy)

    def advance(self, direction=None):
        if direction is not None:
            if direction != self.direction:
                logger.debug("heading %s -> %s", self.direction.name, direction.name)
            self.direction = direction

        new_head = Block(*self.next_head())
        self.body.appendleft(new_head)
        self.last_removed_tail = self.body.pop()

    # Same transition under its game-loop name
    move_forward = advance

    def restore_tail(self):
        if self.last_removed_tail is None:
            raise SnakeStateError("restore_tail called before any tail was removed")
        self.body.append(self.last_removed_tail)
        logger.debug("tail restored at %s, length now %d", tuple(self.last_removed_tail), len(self.body))

    def overlap_tail(self, x, y):
        # The last cell is skipped: it is vacated on the next advance
        cell = Block(x, y)
        return any(block == cell for block in islice(self.body, max(len(self.body) - 1, 0)))

    def get_body(self):
        return [tuple(block) for block in self.body]
