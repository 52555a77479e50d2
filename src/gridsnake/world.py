# world.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging
import random

from .config import DIRECTIONS, LEFT

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


@dataclass
class GridWorld:
    """
    Snake on a fixed toroidal grid.

    The snake is a list of (row, col) cells ordered tail -> head, so the
    head is the *last* element. The grid itself is only a pair of bounds;
    occupancy is whatever the snake list says.
    """
    row_count: int
    col_count: int
    seed: Optional[int] = None
    snake: List[Cell] = field(init=False)
    direction: Tuple[int, int] = field(init=False)
    running: bool = field(init=False)

    def __post_init__(self):
        if self.row_count <= 0 or self.col_count <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.row_count}x{self.col_count}"
            )
        # Single long-lived generator, used for food placement only
        self.rng = random.Random(self.seed)
        self.direction = LEFT
        self.running = True
        # Three cells along row 0, head at (0, 2); narrow grids fold them into bounds
        self.snake = [(0, c % self.col_count) for c in range(3)]

    @property
    def head(self) -> Cell:
        return self.snake[-1]

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.row_count and 0 <= col < self.col_count

    def contains(self, cell: Cell) -> bool:
        return cell in self.snake

    def set_direction(self, direction: Tuple[int, int]) -> None:
        """Set the heading. Reversing into the body is not rejected."""
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {direction}")
        self.direction = direction

    def toggle_running(self) -> None:
        self.running = not self.running
        logger.info("Game %s", "resumed" if self.running else "paused")

    def step(self) -> None:
        """
        Advance one tick: the body follows the head, then the head moves one
        cell in the current direction, wrapping around the grid edges.
        Does nothing while paused.
        """
        if not self.running:
            logger.debug("Paused, snake body = %s", self.snake)
            return

        hr, hc = self.snake[-1]

        # Body follows: cell i takes the value of cell i + 1
        for i in range(len(self.snake) - 1):
            self.snake[i] = self.snake[i + 1]

        dr, dc = self.direction
        self.snake[-1] = ((hr + dr) % self.row_count, (hc + dc) % self.col_count)
