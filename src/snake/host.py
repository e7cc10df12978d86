# host.py
from typing import List, Optional, Sequence

import pygame # type: ignore

from .config import Config, CFG
from .game import Intent
from .render import DrawCommand, Fill, Tile, Text

# Checked in this order each frame; a later direction overrides an earlier one
KEYMAP = (
    (Intent.UP,      (pygame.K_UP, pygame.K_w)),
    (Intent.DOWN,    (pygame.K_DOWN, pygame.K_s)),
    (Intent.LEFT,    (pygame.K_LEFT, pygame.K_a)),
    (Intent.RIGHT,   (pygame.K_RIGHT, pygame.K_d)),
    (Intent.RESTART, (pygame.K_r,)),
)


def intents_from_pressed(pressed: Sequence[bool]) -> List[Intent]:
    """Map held keys (anything indexable by key code) to intents."""
    return [intent for intent, keys in KEYMAP if any(pressed[k] for k in keys)]

def poll_input() -> Optional[List[Intent]]:
    """Drain the event queue; None means the window was closed."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return None
    return intents_from_pressed(pygame.key.get_pressed())

def draw(screen: pygame.Surface, font: pygame.font.Font,
         commands: Sequence[DrawCommand], cfg: Optional[Config] = None) -> None:
    cfg = cfg or CFG
    size = cfg.tile_size
    for cmd in commands:
        if isinstance(cmd, Fill):
            screen.fill(cmd.color)
        elif isinstance(cmd, Tile):
            pygame.draw.rect(screen, cmd.color, pygame.Rect(cmd.x * size, cmd.y * size, size, size))
        elif isinstance(cmd, Text):
            screen.blit(font.render(cmd.text, True, cmd.color), (cmd.x, cmd.y))
        else:
            raise TypeError(f"unknown draw command: {cmd!r}")
