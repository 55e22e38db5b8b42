"""
Food manager: eaten items are removed, new ones appear at random.
"""
import logging
import random

from .config import SPAWN_H, SPAWN_ODDS, SPAWN_TRIGGER, SPAWN_W
from .grid import Node

logger = logging.getLogger(__name__)


class Food:
    """
    The food items on the board.

    Spawning is stochastic: each tick rolls once and adds an item roughly
    every SPAWN_ODDS ticks. Nothing stops two items landing on the same cell.

    Args:
        rng: a random.Random instance, or a seed for a new one
        nodes: initial food positions
    """

    def __init__(self, rng=None, nodes=()):
        if not isinstance(rng, random.Random):
            rng = random.Random(rng)
        self.rng = rng
        self.nodes = [Node(*n) for n in nodes]

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def consume_and_maybe_spawn(self, snake_segments):
        """Remove food under any snake segment, then roll for a spawn.

        Returns True if anything was eaten.
        """
        had_food = False
        for segment in snake_segments:
            kept = [node for node in self.nodes if node != segment]
            if len(kept) != len(self.nodes):
                had_food = True
                logger.debug("Food eaten at %s", tuple(segment))
                self.nodes = kept

        # Spawn after removal so a new item is never eaten on the tick it appears.
        if self.rng.randrange(SPAWN_ODDS) == SPAWN_TRIGGER:
            node = Node(self.rng.randrange(SPAWN_W), self.rng.randrange(SPAWN_H))
            self.nodes.insert(0, node)
            logger.debug("Food spawned at %s", tuple(node))

        return had_food
