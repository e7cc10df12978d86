from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Colors -----
BG        = (10, 10, 10)
BODY      = (50, 200, 50)
HEAD      = (0, 120, 255)
FOOD      = (220, 40, 40)
TEXT      = (255, 255, 255)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Occupancy grid codes -----
EMPTY, BODY_CELL, FOOD_CELL, HEAD_CELL = 0, 1, 2, 7

INITIAL_LENGTH = 3
MIN_GRID_W = 4    # centred snake reaches two cells left of centre

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    grid_w: int = 40
    grid_h: int = 30
    tile_size: int = 16
    base_tick_speed: int = 8      # frames per move (lower = faster)
    speed_up_every: int = 5       # speed up every N food eaten
    speed_delta: int = 1
    min_tick_speed: int = 2
    fps: int = 60
    seed: Optional[int] = None
    max_food_attempts: int = 64   # random draws before enumerating free cells

    def __post_init__(self):
        if self.grid_w < MIN_GRID_W or self.grid_h < 1:
            raise ValueError(
                f"grid must be at least {MIN_GRID_W}x1, got {self.grid_w}x{self.grid_h}"
            )
        for name in ("tile_size", "base_tick_speed", "speed_up_every",
                     "speed_delta", "min_tick_speed", "fps", "max_food_attempts"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.min_tick_speed > self.base_tick_speed:
            raise ValueError(
                f"min_tick_speed ({self.min_tick_speed}) exceeds "
                f"base_tick_speed ({self.base_tick_speed})"
            )

    @property
    def cells(self) -> int:
        return self.grid_w * self.grid_h

    @property
    def screen_size(self) -> Tuple[int, int]:
        return self.grid_w * self.tile_size, self.grid_h * self.tile_size


CFG = Config()
