"""
Grid snake: a snake that wanders a fixed grid, grows on food and
starts over when it leaves the board.
"""
from .food import Food
from .game import Drawable, Game
from .grid import Direction, Node, next_direction
from .snake import Snake

__all__ = [
    'Direction', 'Node', 'next_direction',
    'Food',
    'Snake',
    'Game', 'Drawable',
]
