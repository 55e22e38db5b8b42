"""
Grid coordinates and headings shared by the snake and the food.
"""
from enum import Enum
from typing import NamedTuple


class Node(NamedTuple):
    """One grid cell. Not scaled to pixels."""
    x: int
    y: int

    def shifted(self, direction):
        dx, dy = direction.delta
        return Node(self.x + dx, self.y + dy)


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self):
        return self.value

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))


def next_direction(current, requested):
    """Accept `requested` unless it would reverse the snake into its neck."""
    if requested is current.opposite:
        return current
    return requested
