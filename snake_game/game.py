"""
Game orchestrator: owns the snake, the food and the last known viewport.
"""
import logging
from typing import NamedTuple, Tuple

from .config import CELL_SIZE, FOOD, SNAKE, WINDOW_H, WINDOW_W
from .food import Food
from .snake import Snake

logger = logging.getLogger(__name__)


class Drawable(NamedTuple):
    """A filled square for the renderer, already scaled to display units."""
    x: int
    y: int
    size: int
    color: Tuple[int, ...]


def to_drawable(node, color):
    return Drawable(node.x * CELL_SIZE, node.y * CELL_SIZE, CELL_SIZE, color)


class Game:
    """
    Reacts to three kinds of event, one at a time:

    - update(): a fixed-rate tick that moves the game forward
    - resize(): a render frame reporting the current viewport size
    - press(): a directional key press
    """

    def __init__(self, snake=None, food=None, width=WINDOW_W, height=WINDOW_H, seed=None):
        self.snake = snake if snake is not None else Snake()
        self.food = food if food is not None else Food(seed)
        self.width = width
        self.height = height

    def update(self):
        # Food first: eating is judged on the pre-move body, and the snake
        # needs the answer before deciding whether to drop its tail.
        had_food = self.food.consume_and_maybe_spawn(self.snake.segments)
        self.snake.advance(had_food, self.width, self.height)
        return had_food

    def resize(self, width, height):
        if (width, height) != (self.width, self.height):
            logger.debug("Viewport %dx%d -> %dx%d", self.width, self.height, width, height)
        self.width = width
        self.height = height

    def press(self, direction):
        self.snake.turn(direction)

    def drawables(self):
        """Snapshot of what to draw this frame: snake first, then food."""
        shapes = [to_drawable(node, SNAKE) for node in self.snake.segments]
        shapes += [to_drawable(node, FOOD) for node in self.food]
        return shapes
