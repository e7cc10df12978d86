# game.py
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Iterable, Optional, Set, Tuple
import logging
import random

import numpy as np  # type: ignore

from .config import (
    Config, CFG, INITIAL_LENGTH,
    UP, DOWN, LEFT, RIGHT,
    EMPTY, BODY_CELL, FOOD_CELL, HEAD_CELL,
)

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class GridFullError(RuntimeError):
    """Raised when food is requested but the snake covers every cell."""


class Intent(Enum):
    UP = UP
    DOWN = DOWN
    LEFT = LEFT
    RIGHT = RIGHT
    RESTART = "restart"


# ---------- Helpers ----------
def is_opposite(a: Cell, b: Cell) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def occupancy_grid(snake: Iterable[Cell], food: Optional[Cell], grid_w: int, grid_h: int) -> np.ndarray:
    """
    Grid indexed [y, x]: EMPTY, BODY_CELL, FOOD_CELL or HEAD_CELL.
    The head is written last so it wins over food on a filled board.
    """
    grid = np.full((grid_h, grid_w), EMPTY, dtype=np.int8)
    if food is not None:
        grid[food[1], food[0]] = FOOD_CELL
    cells = list(snake)
    for x, y in cells[1:]:
        grid[y, x] = BODY_CELL
    if cells:
        hx, hy = cells[0]
        grid[hy, hx] = HEAD_CELL
    return grid


# ---------- Snapshot ----------
@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head at index 0
    head_index: int
    food: Cell
    score: int
    tick_speed: int
    game_over: bool
    grid_w: int
    grid_h: int

    @property
    def head(self) -> Cell:
        return self.snake[self.head_index]

    def grid(self) -> np.ndarray:
        return occupancy_grid(self.snake, self.food, self.grid_w, self.grid_h)


# ---------- State ----------
class GameState:
    """
    Snake simulation advanced once per frame.

    Movement is throttled by a frame counter: the snake only steps every
    `tick_speed` calls to tick(). Direction changes are buffered in
    `next_direction` and committed at the next step. The rng is owned by the
    instance; anything with a `randrange(n)` method will do.
    """

    def __init__(self, cfg: Optional[Config] = None, rng: Optional[random.Random] = None):
        self.cfg = cfg or CFG
        self.rng = rng if rng is not None else random.Random(self.cfg.seed)
        self._snake: Deque[Cell] = deque()
        self._occupied: Set[Cell] = set()
        self.reset()

    # ----- read-only views -----
    @property
    def snake(self) -> Tuple[Cell, ...]:
        return tuple(self._snake)

    @property
    def food(self) -> Cell:
        return self._food

    @property
    def score(self) -> int:
        return self._score

    @property
    def tick_speed(self) -> int:
        return self._tick_speed

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def direction(self) -> Cell:
        return self._dir

    @property
    def next_direction(self) -> Cell:
        return self._next_dir

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self._snake),
            head_index=0,
            food=self._food,
            score=self._score,
            tick_speed=self._tick_speed,
            game_over=self._game_over,
            grid_w=self.cfg.grid_w,
            grid_h=self.cfg.grid_h,
        )

    def occupancy_grid(self) -> np.ndarray:
        return occupancy_grid(self._snake, self._food, self.cfg.grid_w, self.cfg.grid_h)

    # ----- lifecycle -----
    def reset(self) -> None:
        cx, cy = self.cfg.grid_w // 2, self.cfg.grid_h // 2
        self._set_snake([(cx - i, cy) for i in range(INITIAL_LENGTH)])
        self._dir = RIGHT
        self._next_dir = RIGHT
        self._score = 0
        self._frame_count = 0
        self._tick_speed = self.cfg.base_tick_speed
        self._game_over = False
        self.place_food()
        logger.info("new game on %dx%d grid, food at %s",
                    self.cfg.grid_w, self.cfg.grid_h, self._food)

    def _set_snake(self, cells: Iterable[Cell]) -> None:
        self._snake = deque(cells)
        self._occupied = set(self._snake)

    def place_food(self) -> Cell:
        """Put food on a uniformly random free cell and return it."""
        free = self.cfg.cells - len(self._occupied)
        if free <= 0:
            raise GridFullError(f"no free cell left on a {self.cfg.grid_w}x{self.cfg.grid_h} grid")

        # Rejection sampling is fine while the board is mostly empty
        if free > self.cfg.cells // 4:
            for _ in range(self.cfg.max_food_attempts):
                cell = (self.rng.randrange(self.cfg.grid_w), self.rng.randrange(self.cfg.grid_h))
                if cell not in self._occupied:
                    self._food = cell
                    return cell

        logger.debug("enumerating %d free cells for food", free)
        grid = occupancy_grid(self._snake, None, self.cfg.grid_w, self.cfg.grid_h)
        ys, xs = np.nonzero(grid == EMPTY)
        i = self.rng.randrange(len(xs))
        self._food = (int(xs[i]), int(ys[i]))
        return self._food

    # ----- input -----
    def set_direction(self, direction: Cell) -> bool:
        """Buffer a turn for the next step; 180° turns against the moving direction are refused."""
        if is_opposite(direction, self._dir):
            return False
        self._next_dir = direction
        return True

    def update(self, intents: Iterable[Intent] = ()) -> Snapshot:
        intents = list(intents)
        if Intent.RESTART in intents and self._game_over:
            self.reset()
            return self.snapshot()

        for intent in intents:
            if intent is not Intent.RESTART:
                self.set_direction(intent.value)

        self.tick()
        return self.snapshot()

    # ----- simulation -----
    def tick(self) -> bool:
        """Advance one frame. Returns True if the snake moved."""
        if self._game_over:
            return False

        self._frame_count += 1
        if self._frame_count < self._tick_speed:
            return False
        self._frame_count = 0

        # Commit direction once per step
        self._dir = self._next_dir

        hx, hy = self._snake[0]
        dx, dy = self._dir
        new_head = (hx + dx, hy + dy)

        if not (0 <= new_head[0] < self.cfg.grid_w and 0 <= new_head[1] < self.cfg.grid_h):
            self._end("wall")
            return False

        # The tail has not moved yet, so stepping onto it is fatal too
        if new_head in self._occupied:
            self._end("self")
            return False

        self._snake.appendleft(new_head)
        self._occupied.add(new_head)

        if new_head == self._food:
            self._eat()
        else:
            self._occupied.discard(self._snake.pop())
        return True

    def _eat(self) -> None:
        self._score += 1
        logger.debug("food eaten at %s, score %d", self._food, self._score)

        if self._score % self.cfg.speed_up_every == 0 and self._tick_speed > self.cfg.min_tick_speed:
            self._tick_speed = max(self.cfg.min_tick_speed, self._tick_speed - self.cfg.speed_delta)
            logger.info("speed up: %d frames/move", self._tick_speed)

        if len(self._occupied) >= self.cfg.cells:
            self._end("board filled")
            return
        self.place_food()

    def _end(self, reason: str) -> None:
        self._game_over = True
        logger.info("game over (%s), score %d, length %d", reason, self._score, len(self._snake))
