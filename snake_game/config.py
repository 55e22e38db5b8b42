"""
Game settings. Tweak here rather than in the game modules.
"""
from dataclasses import dataclass
from typing import Optional

# ---------- Grid ----------
CELL_SIZE = 20                # display units per grid cell
SPAWN_W, SPAWN_H = 30, 20     # food spawns with x in [0, 30), y in [0, 20)
SPAWN_ODDS = 30               # one roll in [0, SPAWN_ODDS) per tick...
SPAWN_TRIGGER = 3             # ...spawns food when it lands on this value

# ---------- Window & timing ----------
TITLE = "rustysnake"
WINDOW_W, WINDOW_H = 600, 400
UPS = 10                      # game updates per second
FPS = 60                      # render cap; logic is driven by the update timer
MAX_UPS = 1000                # the update timer has millisecond resolution

# Colors (R, G, B[, A])
BG    = (0, 0, 0)
SNAKE = (255, 255, 255)
FOOD  = (255, 153, 255, 204)


@dataclass
class GameConfig:
    width: int = WINDOW_W
    height: int = WINDOW_H
    ups: int = UPS
    fps: int = FPS
    seed: Optional[int] = None
