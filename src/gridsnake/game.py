# game.py
from __future__ import annotations
from dataclasses import dataclass
import logging
import time

from .config import Config
from .food import FoodManager, GridFullError
from .ticker import Ticker
from .world import GridWorld

logger = logging.getLogger(__name__)


# ---------- State ----------
@dataclass
class GameState:
    world: GridWorld
    food: FoodManager
    ticker: Ticker

def new_game_state(cfg: Config, now_ms: int = 0) -> GameState:
    world = GridWorld(cfg.row_count, cfg.col_count, seed=cfg.seed)
    food = FoodManager(max_attempts=cfg.max_food_attempts)
    food.place_initial(world)
    logger.info(
        "New game on %dx%d grid, %d ticks/s, food at %s",
        world.row_count, world.col_count, cfg.ticks_per_second, food.food,
    )
    return GameState(world=world, food=food, ticker=Ticker(cfg.tick_ms, last_tick=now_ms))


# ---------- Update ----------
def update(state: GameState, now_ms: int) -> bool:
    """
    One poll iteration: step the world if a tick is due, then check food
    against the (post-step) head. Returns False once the grid is full.
    """
    if state.ticker.due(now_ms):
        started = time.perf_counter()
        state.world.step()
        logger.debug("Step took: %.3fms", (time.perf_counter() - started) * 1000)

    try:
        state.food.check_and_grow(state.world)
    except GridFullError as e:
        logger.warning("Grid full: %s", e)
        return False
    return True
