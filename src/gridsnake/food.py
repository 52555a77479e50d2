# food.py
from __future__ import annotations
from typing import Optional
import logging

from .world import Cell, GridWorld

logger = logging.getLogger(__name__)


class GridFullError(RuntimeError):
    """No free cell is left on the grid to place food on."""


# ---------- Helpers ----------
def random_cell(world: GridWorld) -> Cell:
    return (world.rng.randrange(world.row_count), world.rng.randrange(world.col_count))

def free_cells(world: GridWorld):
    return [
        (r, c)
        for r in range(world.row_count)
        for c in range(world.col_count)
        if (r, c) not in world.snake
    ]

def spawn_food(world: GridWorld, max_attempts: int = 1000) -> Cell:
    """
    Uniform re-roll until the cell is not on the snake. After max_attempts
    misses, pick uniformly among the remaining free cells instead.
    Raises GridFullError when the snake covers the whole grid.
    """
    for _ in range(max_attempts):
        cell = random_cell(world)
        if cell not in world.snake:
            return cell

    logger.debug("No free cell after %d rolls, scanning the grid", max_attempts)
    free = free_cells(world)
    if not free:
        raise GridFullError(
            f"Snake of length {len(world.snake)} fills the "
            f"{world.row_count}x{world.col_count} grid"
        )
    return world.rng.choice(free)


# ---------- Food ----------
class FoodManager:
    """Owns the food cell and grows the snake when its head reaches it."""

    def __init__(self, max_attempts: int = 1000):
        self.max_attempts = max_attempts
        self.food: Optional[Cell] = None

    def place_initial(self, world: GridWorld) -> Cell:
        # Starting food may land on the snake; only relocations exclude it
        self.food = random_cell(world)
        return self.food

    def check_and_grow(self, world: GridWorld) -> bool:
        """
        Run after a (possible) step. Returns True if the snake ate.

        Growth duplicates the tail cell (index 0), not the head: the next
        step() shifts the body over it, so the duplicate lives for one tick
        and the snake ends up exactly one cell longer.
        """
        if self.food is None or world.head != self.food:
            return False

        world.snake.insert(0, world.snake[0])
        self.food = spawn_food(world, self.max_attempts)
        logger.debug("Ate at %s, length %d, next food %s", world.head, len(world.snake), self.food)
        return True
