# ticker.py
from dataclasses import dataclass


@dataclass
class Ticker:
    """Fixed-rate gate: fires once more than tick_ms has elapsed since the last tick."""
    tick_ms: float
    last_tick: int = 0   # ms timestamp of last tick

    def due(self, now_ms: int) -> bool:
        if now_ms - self.last_tick <= self.tick_ms:
            return False  # not time to step yet
        self.last_tick = now_ms
        return True
