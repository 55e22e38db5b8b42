"""
Snake manager: body segments, heading, movement and the boundary reset.
"""
import logging
from collections import deque

from .config import CELL_SIZE
from .grid import Direction, Node, next_direction

logger = logging.getLogger(__name__)

ORIGIN = Node(0, 0)


class Snake:
    """
    Attributes:
        segments: deque of Nodes, head at index 0, tail at the end
        direction: current heading
    """

    def __init__(self, segments=None, direction=Direction.RIGHT):
        self.segments = deque(Node(*s) for s in (segments or [ORIGIN]))
        self.direction = direction

    def __len__(self):
        return len(self.segments)

    @property
    def head(self):
        return self.segments[0]

    def turn(self, requested):
        """Change heading, ignoring a request to reverse."""
        self.direction = next_direction(self.direction, requested)

    def advance(self, had_food, bound_width, bound_height):
        """Move one cell. The tail stays put when food was eaten (growth)."""
        self.segments.appendleft(self.head.shifted(self.direction))
        if not had_food:
            self.segments.pop()

        if self.out_of_bounds(bound_width, bound_height):
            logger.info("Snake left the board at %s (length %d), resetting",
                        tuple(self.head), len(self.segments))
            self.reset()

    def out_of_bounds(self, bound_width, bound_height):
        # Strict comparisons: a segment scaled exactly onto the bound is still in.
        for node in self.segments:
            px, py = node.x * CELL_SIZE, node.y * CELL_SIZE
            if px > bound_width or py > bound_height or px < 0 or py < 0:
                return True
        return False

    def reset(self):
        self.segments = deque([ORIGIN])
        self.direction = Direction.RIGHT
