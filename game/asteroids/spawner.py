"""
Asteroid spawner
"""

import random
from typing import List, Optional

from .config import ASTEROID_RADIUS_RANGE, SPAWN_HEIGHT_OFFSET, SPAWN_MARGIN
from .entities import Asteroid


class Spawner:
    """
    Emits a batch of asteroids once per elapsed spawn interval.

    If a slow tick covers several intervals only one batch is emitted
    (no catch-up spawning).
    """

    def __init__(self, field_width: float, field_height: float,
                 rng: Optional[random.Random] = None):
        self.field_width = field_width
        self.field_height = field_height
        self.rng = rng if rng is not None else random.Random()
        self.last_spawn_ms = 0.0

    def reset(self, now_ms: float):
        self.last_spawn_ms = now_ms

    def update(self, now_ms: float, interval_ms: float, count: int,
               speed: float) -> List[Asteroid]:
        if now_ms - self.last_spawn_ms <= interval_ms:
            return []
        self.last_spawn_ms = now_ms
        return [self.spawn(speed) for _ in range(count)]

    def spawn(self, speed: float) -> Asteroid:
        x = self.rng.uniform(SPAWN_MARGIN, self.field_width - SPAWN_MARGIN)
        y = self.field_height + SPAWN_HEIGHT_OFFSET
        radius = self.rng.uniform(*ASTEROID_RADIUS_RANGE)
        color = (self.rng.random(), self.rng.random(), self.rng.random())
        return Asteroid(x=x, y=y, radius=radius, speed=speed, color=color)
