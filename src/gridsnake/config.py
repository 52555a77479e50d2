from dataclasses import dataclass
from typing import Optional

# ----- Colors -----
EMPTY  = (200, 200, 200)
SNAKE  = (200, 0, 0)
FOOD   = (0, 200, 0)
BORDER = (0, 160, 0)
TEXT   = (240, 240, 250)

# ----- Directions (drow, dcol) -----
UP, DOWN, LEFT, RIGHT = (-1, 0), (1, 0), (0, -1), (0, 1)
DIRECTIONS = (UP, LEFT, DOWN, RIGHT)

# ----- Runtime settings (passed to the presentation layer at startup) -----
@dataclass
class Config:
    title: str = "Grid Snake"
    width: int = 640
    height: int = 480
    cell_size: int = 10
    ticks_per_second: int = 60
    fps: int = 60
    seed: Optional[int] = None
    max_food_attempts: int = 1000
    debug: bool = False

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.width < self.cell_size or self.height < self.cell_size:
            raise ValueError(
                f"window {self.width}x{self.height} is smaller than one cell "
                f"({self.cell_size}px)"
            )
        if self.ticks_per_second <= 0:
            raise ValueError(f"ticks_per_second must be positive, got {self.ticks_per_second}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.max_food_attempts < 1:
            raise ValueError(f"max_food_attempts must be >= 1, got {self.max_food_attempts}")

    @property
    def row_count(self) -> int:
        return self.height // self.cell_size

    @property
    def col_count(self) -> int:
        return self.width // self.cell_size

    @property
    def tick_ms(self) -> float:
        return 1000 / self.ticks_per_second
