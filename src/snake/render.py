# render.py
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .config import Config, CFG, BG, BODY, HEAD, FOOD, TEXT
from .game import Snapshot

Color = Tuple[int, int, int]

CONTROLS_HINT = "Controls: Arrow keys or WASD. R = restart (on game over)"
GAME_OVER_TEXT = "GAME OVER! Press R to restart."

# ---------- Draw commands ----------
@dataclass(frozen=True)
class Fill:
    color: Color

@dataclass(frozen=True)
class Tile:
    x: int          # grid coordinates
    y: int
    color: Color

@dataclass(frozen=True)
class Text:
    text: str
    x: int          # pixel coordinates
    y: int
    color: Color = TEXT

DrawCommand = Union[Fill, Tile, Text]


def render(snapshot: Snapshot, cfg: Optional[Config] = None) -> List[DrawCommand]:
    """Translate a snapshot into draw commands, back to front."""
    cfg = cfg or CFG
    commands: List[DrawCommand] = [Fill(BG)]

    fx, fy = snapshot.food
    commands.append(Tile(fx, fy, FOOD))

    for i, (x, y) in enumerate(snapshot.snake):
        commands.append(Tile(x, y, HEAD if i == snapshot.head_index else BODY))

    # HUD
    commands.append(Text(f"Score: {snapshot.score}", 4, 4))
    commands.append(Text(f"Speed (frames/move): {snapshot.tick_speed}", 4, 20))
    commands.append(Text(CONTROLS_HINT, 4, 36))

    if snapshot.game_over:
        width, height = cfg.screen_size
        commands.append(Text(GAME_OVER_TEXT, width // 2 - 120, height // 2))

    return commands
