# controls.py
import logging

import pygame # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .world import GridWorld

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}

def apply_key(world: GridWorld, key: int) -> bool:
    """Apply one key press to the world. Return False to quit."""
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_SPACE:
        world.toggle_running()
    elif key in KEY_DIRECTIONS:
        world.set_direction(KEY_DIRECTIONS[key])
    return True

def handle_input(world: GridWorld) -> bool:
    """Drain the event queue into the world. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            logger.info("Window closed")
            return False
        if event.type == pygame.KEYDOWN and not apply_key(world, event.key):
            logger.info("Escape pressed")
            return False
    return True
