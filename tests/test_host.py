from collections import defaultdict

import pygame

from snake.game import GameState, Intent
from snake.host import intents_from_pressed


def pressed(*keys):
    state = defaultdict(bool)
    for key in keys:
        state[key] = True
    return state


def test_no_keys_no_intents() -> None:
    assert intents_from_pressed(pressed()) == []


def test_arrows_and_wasd_map_to_same_intents() -> None:
    assert intents_from_pressed(pressed(pygame.K_UP)) == [Intent.UP]
    assert intents_from_pressed(pressed(pygame.K_w)) == [Intent.UP]
    assert intents_from_pressed(pressed(pygame.K_a)) == [Intent.LEFT]
    assert intents_from_pressed(pressed(pygame.K_DOWN, pygame.K_s)) == [Intent.DOWN]


def test_intents_come_out_in_fixed_order() -> None:
    keys = pressed(pygame.K_r, pygame.K_RIGHT, pygame.K_w)
    assert intents_from_pressed(keys) == [Intent.UP, Intent.RIGHT, Intent.RESTART]


def test_held_keys_drive_the_game() -> None:
    state = GameState()
    # Right is checked after Up, so it wins for this frame
    state.update(intents_from_pressed(pressed(pygame.K_UP, pygame.K_RIGHT)))
    assert state.next_direction == Intent.RIGHT.value

    state.update(intents_from_pressed(pressed(pygame.K_DOWN)))
    assert state.next_direction == Intent.DOWN.value
