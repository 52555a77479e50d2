# render.py
from typing import Tuple

import numpy as np  # type: ignore
import pygame # type: ignore

from .config import Config, EMPTY, SNAKE, FOOD, BORDER, TEXT
from .game import GameState

# ---------- Helpers ----------
def cell_rect(row: int, col: int, cell_size: int) -> pygame.Rect:
    return pygame.Rect(col * cell_size, row * cell_size, cell_size, cell_size)

def draw_cell(screen: pygame.Surface, row: int, col: int, cell_size: int, color: Tuple[int, int, int]) -> None:
    rect = cell_rect(row, col, cell_size)
    pygame.draw.rect(screen, color, rect)
    pygame.draw.rect(screen, BORDER, rect, width=1)

def cell_color(state: GameState, row: int, col: int) -> Tuple[int, int, int]:
    if state.world.contains((row, col)):
        return SNAKE
    if state.food.food == (row, col):
        return FOOD
    return EMPTY

# ---------- Draw ----------
def draw_world(screen: pygame.Surface, state: GameState, cfg: Config) -> None:
    screen.fill(EMPTY)
    world = state.world
    for row in range(world.row_count):
        for col in range(world.col_count):
            draw_cell(screen, row, col, cfg.cell_size, cell_color(state, row, col))

def _draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines) -> None:
    width, height = screen.get_size()
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    for i, line in enumerate(lines):
        txt = font.render(line, True, TEXT)
        screen.blit(txt, txt.get_rect(center=(width // 2, height // 2 - 16 + 32 * i)))

def draw_paused(screen: pygame.Surface, font: pygame.font.Font) -> None:
    _draw_overlay(screen, font, ["PAUSED", "Press SPACE to resume"])

def draw_grid_full(screen: pygame.Surface, font: pygame.font.Font) -> None:
    _draw_overlay(screen, font, ["GRID FULL", "Press R to restart"])

def frame_array(screen: pygame.Surface) -> np.ndarray:
    """
    Copy of the surface pixels as a (width, height, 3) uint8 array.
    Frame capture for inspecting what was drawn, e.g. in headless runs.
    """
    return np.asarray(pygame.surfarray.array3d(screen), dtype=np.uint8)
